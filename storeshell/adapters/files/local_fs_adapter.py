"""
Local file system adapter backing the file store with a host directory.
"""

import logging
import os
import shutil
from typing import IO, Optional

from typing_extensions import override

from storeshell.entities.StoreEntry import StoreEntry
from storeshell.exceptions import FileStoreError
from storeshell.ports.files.file_store_port import FileStorePort
from storeshell.utils.workspace import normalize_root, to_host_path


class LocalFileStoreAdapter(FileStorePort):
    """Local file system implementation of the file store port."""

    def __init__(
        self,
        root: str,
        capacity_bytes: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter.

        Args:
            root: Host directory that holds the store; created if missing
            capacity_bytes: Reported store size. Defaults to the size of the host disk.
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._root = normalize_root(root)
        self._capacity_bytes = capacity_bytes
        try:
            os.makedirs(self._root, exist_ok=True)
        except OSError as e:
            raise FileStoreError(f"Cannot create store root {self._root}: {e}")

    @property
    def root(self) -> str:
        return self._root

    def _host_path(self, path: str) -> str:
        """
        Translate a store path into a host path.

        Raises:
            FileStoreError: If the path escapes the store root or contains NUL
        """
        if "\x00" in path:
            raise FileStoreError(f"Path contains a NUL character: {path!r}")
        ok, host = to_host_path(self._root, path)
        if not ok:
            raise FileStoreError(f"Path is outside of the store root: {path}")
        return host

    def _mutable_host_path(self, path: str) -> Optional[str]:
        """Host path for a mutating call, or None for the root or escaping paths."""
        try:
            host = self._host_path(path)
        except FileStoreError as e:
            self._logger.warning(str(e))
            return None
        if host == self._root:
            self._logger.warning("Refusing to modify the store root")
            return None
        return host

    def _validate_directory(self, path: str, host: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Raises:
            FileStoreError: If directory does not exist or is not a directory
        """
        if not os.path.exists(host):
            raise FileStoreError(f"Directory does not exist: {path}")

        if not os.path.isdir(host):
            raise FileStoreError(f"Path is not a directory: {path}")

    @override
    def open(self, path: str, mode: str = "rb") -> IO:
        host = self._host_path(path)
        try:
            return open(host, mode)
        except OSError as e:
            raise FileStoreError(f"Cannot open {path}: {e.strerror or e}")

    @override
    def exists(self, path: str) -> bool:
        try:
            return os.path.exists(self._host_path(path))
        except FileStoreError:
            return False

    @override
    def is_directory(self, path: str) -> bool:
        try:
            return os.path.isdir(self._host_path(path))
        except FileStoreError:
            return False

    @override
    def list(self, path: str) -> list[StoreEntry]:
        host = self._host_path(path)
        try:
            self._validate_directory(path, host)

            entries: list[StoreEntry] = []
            for name in sorted(os.listdir(host)):
                item = os.path.join(host, name)
                is_dir = os.path.isdir(item)
                size = 0 if is_dir else os.path.getsize(item)
                entries.append(StoreEntry(name=name, size=size, is_dir=is_dir))
            return entries

        except FileStoreError:
            raise
        except OSError as e:
            raise FileStoreError(f"Failed to list {path}: {str(e)}")

    @override
    def remove(self, path: str) -> bool:
        host = self._mutable_host_path(path)
        if host is None or not os.path.isfile(host):
            return False
        try:
            os.remove(host)
            return True
        except OSError as e:
            self._logger.warning(f"Could not remove {path}: {e}")
            return False

    @override
    def rename(self, source: str, target: str) -> bool:
        src = self._mutable_host_path(source)
        dst = self._mutable_host_path(target)
        if src is None or dst is None or not os.path.exists(src):
            return False
        try:
            os.replace(src, dst)
            return True
        except OSError as e:
            self._logger.warning(f"Could not rename {source} to {target}: {e}")
            return False

    @override
    def mkdir(self, path: str) -> bool:
        host = self._mutable_host_path(path)
        if host is None:
            return False
        try:
            os.mkdir(host)
            return True
        except OSError as e:
            self._logger.warning(f"Could not create directory {path}: {e}")
            return False

    @override
    def rmdir(self, path: str) -> bool:
        host = self._mutable_host_path(path)
        if host is None:
            return False
        try:
            os.rmdir(host)
            return True
        except OSError as e:
            self._logger.warning(f"Could not remove directory {path}: {e}")
            return False

    @override
    def used_bytes(self) -> int:
        total = 0
        for dirpath, _dirnames, filenames in os.walk(self._root):
            for name in filenames:
                try:
                    total += os.path.getsize(os.path.join(dirpath, name))
                except OSError:
                    # File vanished between walk and stat
                    continue
        return total

    @override
    def total_bytes(self) -> int:
        if self._capacity_bytes is not None:
            return self._capacity_bytes
        return int(shutil.disk_usage(self._root).total)

    @override
    def format(self) -> bool:
        self._logger.warning(f"Formatting store at {self._root}")
        try:
            for name in os.listdir(self._root):
                item = os.path.join(self._root, name)
                if os.path.isdir(item) and not os.path.islink(item):
                    shutil.rmtree(item)
                else:
                    os.remove(item)
            return True
        except OSError as e:
            self._logger.error(f"Format failed: {e}")
            return False
