"""
Session state of the shell: working directory and pending confirmation.
"""

import logging
from typing import Optional

from storeshell.exceptions import InvalidTargetError
from storeshell.ports.files.file_store_port import FileStorePort
from storeshell.use_cases.shell.path_resolver import ROOT, PathResolver

PARENT = ".."


class ShellState:
    """
    Owns the working directory and the two-state confirmation machine
    (idle -> awaiting confirmation -> idle) used by destructive commands.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.cwd: str = ROOT
        self.pending_confirmation: bool = False
        self._logger = logger or logging.getLogger(__name__)

    def navigate(self, target: str, file_store: FileStorePort) -> str:
        """
        Change the working directory.

        Args:
            target: '/', '..', or a path absolute or relative to cwd
            file_store: Store used to check that the target is a directory

        Returns:
            The new working directory

        Raises:
            InvalidTargetError: If the target is missing or not a directory;
                the working directory is left unchanged
        """
        target = target.strip()
        if target == ROOT:
            self.cwd = ROOT
        elif target == PARENT:
            self.cwd = PathResolver.parent(self.cwd)
        else:
            resolved = PathResolver.resolve(target, self.cwd, expect_directory=True)
            if not file_store.is_directory(resolved):
                raise InvalidTargetError(f"Directory not found: {resolved}")
            self.cwd = resolved
        self._logger.info(f"Working directory is now {self.cwd}")
        return self.cwd

    def request_confirmation(self) -> None:
        """Arm the confirmation; a request while one is pending replaces it."""
        self.pending_confirmation = True

    def consume_confirmation(self) -> bool:
        """Clear the pending flag and report whether one was pending."""
        was_pending = self.pending_confirmation
        self.pending_confirmation = False
        return was_pending

    def reset(self) -> None:
        self.cwd = ROOT
        self.pending_confirmation = False
