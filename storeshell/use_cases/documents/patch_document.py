"""
Use case for setting one field of a JSON document stored in the file store.
"""

import logging
import uuid
from typing import Optional

from storeshell.entities.Document import Document
from storeshell.exceptions import (
    DocumentNotFoundError,
    DocumentWriteError,
    FileStoreError,
    PatchError,
)
from storeshell.ports.files.file_store_port import FileStorePort

TEMP_SUFFIX = ".tmp"


class DocumentPatcher:
    """Loads a document, sets one field and writes it back."""

    def __init__(
        self,
        file_store: FileStorePort,
        max_bytes: int,
        atomic_writes: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_store: Store holding the documents
            max_bytes: Ceiling for the serialized document size
            atomic_writes: Write to a temporary file and rename it over the
                original instead of overwriting in place
            logger: Logger instance to use for logging
        """
        self._file_store = file_store
        self._max_bytes = max_bytes
        self._atomic_writes = atomic_writes
        self._logger = logger or logging.getLogger(__name__)

    def load(self, path: str) -> Document:
        """
        Load and parse the document at path.

        Raises:
            DocumentNotFoundError: If the file cannot be opened
            DocumentTooLargeError: If the file exceeds the size ceiling
            DocumentCorruptError: If the file is not a JSON object
        """
        try:
            with self._file_store.open(path, "rb") as fh:
                # One extra byte is enough to detect an oversized file
                raw = fh.read(self._max_bytes + 1)
        except (FileStoreError, OSError) as e:
            raise DocumentNotFoundError(f"Failed to open JSON file {path}: {e}")
        return Document.load(path, raw, self._max_bytes)

    def set_field(self, path: str, key: str, value: str) -> Document:
        """
        Set key to value in the document at path, creating the key if absent.

        Args:
            path: Absolute store path of the document
            key: Top-level key to set
            value: New value, always stored as a string

        Returns:
            The updated Document, after it has been written

        Raises:
            PatchError: On any load, parse, size, serialize or write failure
        """
        self._logger.info(f"Updating field '{key}' in {path}")
        try:
            document = self.load(path)
            document.set_field(key, value)
            data = document.serialize()
            self._write(path, data)
        except PatchError as e:
            self._logger.error(f"Error patching {path}: {e}")
            raise
        self._logger.info(f"Field '{key}' in {path} updated ({len(data)} bytes)")
        return document

    def _temp_path(self, path: str) -> str:
        """Sibling path for an atomic write that does not name an existing file."""
        while True:
            candidate = f"{path}.{uuid.uuid4().hex[:8]}{TEMP_SUFFIX}"
            if not self._file_store.exists(candidate):
                return candidate

    def _write(self, path: str, data: bytes) -> None:
        target = self._temp_path(path) if self._atomic_writes else path
        try:
            with self._file_store.open(target, "wb") as fh:
                fh.write(data)
        except (FileStoreError, OSError) as e:
            raise DocumentWriteError(f"Failed to write JSON file {target}: {e}")

        if self._atomic_writes and not self._file_store.rename(target, path):
            if not self._file_store.remove(target):
                self._logger.warning(f"Could not remove temporary file {target}")
            raise DocumentWriteError(f"Failed to replace {path} with {target}")
