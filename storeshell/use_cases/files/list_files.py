"""
Use case for listing files in a store directory.
"""

import logging
from typing import Optional

from storeshell.entities.StoreEntry import DirectoryListing
from storeshell.exceptions import FileStoreError
from storeshell.ports.files.file_store_port import FileStorePort


class ListFilesUseCase:
    """Use case for listing files in a directory together with store usage."""

    def __init__(
        self,
        file_store: FileStorePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_store: Store for file operations
            logger: Logger instance to use for logging
        """
        self._file_store = file_store
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str) -> DirectoryListing:
        """
        List all entries in a directory.

        Args:
            directory: Absolute store path of the directory

        Returns:
            DirectoryListing with entries and usage counters

        Raises:
            FileStoreError: If listing fails
        """
        try:
            self._logger.info(f"Listing files in directory: {directory}")
            entries = self._file_store.list(directory)
            self._logger.info(f"Found {len(entries)} entries")
            return DirectoryListing(
                path=directory,
                entries=entries,
                used_bytes=self._file_store.used_bytes(),
                total_bytes=self._file_store.total_bytes(),
            )
        except FileStoreError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing files: {e}")
            raise FileStoreError(f"Failed to list files in {directory}: {str(e)}")
