"""
File store port interface defining the contract for store operations.
"""

from abc import ABC, abstractmethod
from typing import IO

from storeshell.entities.StoreEntry import StoreEntry


class FileStorePort(ABC):
    """Port interface for hierarchical file store operations.

    All paths are absolute, '/'-separated store paths.
    """

    @abstractmethod
    def open(self, path: str, mode: str = "rb") -> IO:
        """
        Open a file in the store.

        Args:
            path: Store path of the file
            mode: Python file mode ("rb", "wb", ...)

        Returns:
            A file object usable as a context manager

        Raises:
            FileStoreError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        pass

    @abstractmethod
    def list(self, path: str) -> list[StoreEntry]:
        """
        List the entries of a directory.

        Raises:
            FileStoreError: If path is missing or not a directory
        """
        pass

    @abstractmethod
    def remove(self, path: str) -> bool:
        pass

    @abstractmethod
    def rename(self, source: str, target: str) -> bool:
        pass

    @abstractmethod
    def mkdir(self, path: str) -> bool:
        pass

    @abstractmethod
    def rmdir(self, path: str) -> bool:
        """Remove an empty directory; False if it is missing or not empty."""
        pass

    @abstractmethod
    def used_bytes(self) -> int:
        pass

    @abstractmethod
    def total_bytes(self) -> int:
        pass

    @abstractmethod
    def format(self) -> bool:
        """Erase every file and directory in the store."""
        pass
