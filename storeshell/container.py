"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from storeshell.adapters.environment.local_environment_adapter import (
    LocalEnvironmentAdapter,
)
from storeshell.adapters.files.local_fs_adapter import LocalFileStoreAdapter
from storeshell.config.settings import Settings
from storeshell.ports.environment.environment_info_port import EnvironmentInfoPort
from storeshell.ports.files.file_store_port import FileStorePort
from storeshell.use_cases.documents.patch_document import DocumentPatcher
from storeshell.use_cases.files.list_files import ListFilesUseCase
from storeshell.use_cases.shell.dispatcher import CommandDispatcher
from storeshell.use_cases.shell.state import ShellState


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self._settings = settings
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_file_store(self) -> FileStorePort:
        """
        Get file store adapter instance.

        Returns:
            FileStorePort implementation
        """
        if "file_store" not in self._instances:
            settings = self.get_settings()
            self._instances["file_store"] = LocalFileStoreAdapter(
                settings.root, settings.capacity_bytes, self._logger
            )
        return self._instances["file_store"]

    def get_environment(self) -> EnvironmentInfoPort:
        """
        Get environment information adapter instance.

        Returns:
            EnvironmentInfoPort implementation
        """
        if "environment" not in self._instances:
            self._instances["environment"] = LocalEnvironmentAdapter(self._logger)
        return self._instances["environment"]

    def get_shell_state(self) -> ShellState:
        if "shell_state" not in self._instances:
            self._instances["shell_state"] = ShellState(self._logger)
        return self._instances["shell_state"]

    def get_document_patcher(self) -> DocumentPatcher:
        """
        Get document patcher use case with injected dependencies.

        Returns:
            Configured DocumentPatcher
        """
        if "document_patcher" not in self._instances:
            settings = self.get_settings()
            self._instances["document_patcher"] = DocumentPatcher(
                self.get_file_store(),
                settings.max_document_bytes,
                settings.atomic_writes,
                self._logger,
            )
        return self._instances["document_patcher"]

    def get_list_files_use_case(self) -> ListFilesUseCase:
        """
        Get list files use case with injected dependencies.

        Returns:
            Configured ListFilesUseCase
        """
        if "list_files_use_case" not in self._instances:
            self._instances["list_files_use_case"] = ListFilesUseCase(
                self.get_file_store(), self._logger
            )
        return self._instances["list_files_use_case"]

    def get_dispatcher(self) -> CommandDispatcher:
        """
        Get the command dispatcher wired to the store, environment and use cases.

        Returns:
            Configured CommandDispatcher
        """
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = CommandDispatcher(
                file_store=self.get_file_store(),
                environment=self.get_environment(),
                document_patcher=self.get_document_patcher(),
                list_files_uc=self.get_list_files_use_case(),
                state=self.get_shell_state(),
                confirm_tokens=self.get_settings().confirm_tokens,
                logger=self._logger,
            )
        return self._instances["dispatcher"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
