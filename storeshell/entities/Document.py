"""
Document domain entity: a size-bounded JSON object backed by one file.
"""

import json
from collections.abc import Iterator, Mapping
from typing import Any

from storeshell.exceptions import (
    DocumentCorruptError,
    DocumentTooLargeError,
    DocumentWriteError,
)


class Document(Mapping[str, Any]):
    """
    String-keyed mapping with a capacity invariant on its serialized form.

    The capacity is checked when the raw bytes are loaded and again when the
    document is serialized, so an oversized document is never written.
    """

    def __init__(self, path: str, fields: dict[str, Any], max_bytes: int):
        """
        Initialize the Document entity.

        Args:
            path: Store path the document was loaded from
            fields: Parsed top-level JSON object
            max_bytes: Maximum size of the serialized representation
        """
        self.path = path
        self.max_bytes = max_bytes
        self._fields: dict[str, Any] = dict(fields)

    @classmethod
    def load(cls, path: str, raw: bytes, max_bytes: int) -> "Document":
        """
        Parse raw file content into a Document.

        Raises:
            DocumentTooLargeError: If raw exceeds max_bytes
            DocumentCorruptError: If raw is not a JSON object
        """
        if len(raw) > max_bytes:
            raise DocumentTooLargeError(path, len(raw), max_bytes)
        try:
            parsed = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise DocumentCorruptError(path, f"invalid UTF-8: {e.reason}")
        except json.JSONDecodeError as e:
            raise DocumentCorruptError(path, str(e))
        except RecursionError:
            raise DocumentCorruptError(path, "nesting too deep")
        if not isinstance(parsed, dict):
            raise DocumentCorruptError(
                path, f"expected a JSON object, got {type(parsed).__name__}"
            )
        return cls(path, parsed, max_bytes)

    def set_field(self, key: str, value: str) -> None:
        """Insert or overwrite key with a string value."""
        self._fields[key] = str(value)

    def serialize(self) -> bytes:
        """
        Serialize with stable, human-readable formatting.

        Raises:
            DocumentWriteError: If the content cannot be serialized
            DocumentTooLargeError: If the result exceeds max_bytes
        """
        try:
            data = json.dumps(self._fields, indent=2, ensure_ascii=False).encode(
                "utf-8"
            )
        except (TypeError, ValueError) as e:
            raise DocumentWriteError(f"Failed to serialize JSON for {self.path}: {e}")
        if len(data) > self.max_bytes:
            raise DocumentTooLargeError(self.path, len(data), self.max_bytes)
        return data

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Document(path='{self.path}', fields={len(self._fields)})"
