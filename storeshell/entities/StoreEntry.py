"""
Store entry domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StoreEntry:
    """A file or directory inside the file store, as reported by a listing."""

    name: str
    size: int
    is_dir: bool

    def format_line(self) -> str:
        """Render the entry the way directory listings print it."""
        if self.is_dir:
            return f"     <dir>  {self.name}"
        return f"{self.size:10d}  {self.name}"


@dataclass(frozen=True)
class DirectoryListing:
    """Entries of one directory together with the store usage counters."""

    path: str
    entries: list[StoreEntry]
    used_bytes: int
    total_bytes: int

    @property
    def free_bytes(self) -> int:
        return max(self.total_bytes - self.used_bytes, 0)
