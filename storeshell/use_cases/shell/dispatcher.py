"""
Command dispatcher: the single entry point that turns input lines into results.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from storeshell import __version__
from storeshell.entities.Command import Command, CommandName
from storeshell.exceptions import BaseAppError, FileStoreError
from storeshell.ports.environment.environment_info_port import EnvironmentInfoPort
from storeshell.ports.files.file_store_port import FileStorePort
from storeshell.use_cases.documents.patch_document import DocumentPatcher
from storeshell.use_cases.files.list_files import ListFilesUseCase
from storeshell.use_cases.shell.path_resolver import ROOT, PathResolver
from storeshell.use_cases.shell.state import ShellState
from storeshell.use_cases.shell.tokenizer import (
    ALIASES,
    COMMAND_SPECS,
    CommandTokenizer,
)

UNRECOGNIZED_MESSAGE = "Unrecognized command. Type HELP for a list of commands."
FORMAT_WARNING = "WARNING: FORMAT will erase every file in the store."

CommandCallback = Callable[[str], str]


@dataclass(frozen=True)
class CommandResult:
    """Text produced by one input line."""

    output: str = ""
    ok: bool = True
    clear_screen: bool = False


class CommandDispatcher:
    """Maps tokenized commands to store operations and renders their results."""

    def __init__(
        self,
        file_store: FileStorePort,
        environment: EnvironmentInfoPort,
        document_patcher: DocumentPatcher,
        list_files_uc: ListFilesUseCase,
        state: Optional[ShellState] = None,
        confirm_tokens: frozenset[str] = frozenset({"Y", "YES"}),
        tokenizer: Optional[CommandTokenizer] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            file_store: Backing store for file commands
            environment: Source of UPTIME/FREE/CHIPINFO text
            document_patcher: Use case behind JSONSET
            list_files_uc: Use case behind DIR
            state: Session state; a fresh one starting at '/' if omitted
            confirm_tokens: Uppercase answers accepted to confirm FORMAT
            tokenizer: Line tokenizer
            logger: Logger instance to use for logging
        """
        self._file_store = file_store
        self._environment = environment
        self._document_patcher = document_patcher
        self._list_files_uc = list_files_uc
        self._state = state or ShellState()
        self._confirm_tokens = frozenset(t.upper() for t in confirm_tokens)
        self._tokenizer = tokenizer or CommandTokenizer()
        self._logger = logger or logging.getLogger(__name__)
        self._custom_commands: dict[str, tuple[CommandCallback, str]] = {}

        self._handlers: dict[CommandName, Callable[[Command], CommandResult]] = {
            CommandName.NOOP: lambda _command: CommandResult(),
            CommandName.UNKNOWN: self._handle_unknown,
            CommandName.LIST: self._handle_list,
            CommandName.READ: self._handle_read,
            CommandName.DELETE: self._handle_delete,
            CommandName.RENAME: self._handle_rename,
            CommandName.MOVE: self._handle_move,
            CommandName.MKDIR: self._handle_mkdir,
            CommandName.RMDIR: self._handle_rmdir,
            CommandName.CD: self._handle_cd,
            CommandName.JSONSET: self._handle_jsonset,
            CommandName.FORMAT: self._handle_format,
            CommandName.CLEAR: lambda _command: CommandResult(clear_screen=True),
            CommandName.HELP: self._handle_help,
            CommandName.VERSION: lambda _command: CommandResult(
                f"storeshell v{__version__}"
            ),
            CommandName.UPTIME: lambda _command: CommandResult(
                self._environment.uptime()
            ),
            CommandName.FREE: lambda _command: CommandResult(
                self._environment.free_memory()
            ),
            CommandName.CHIPINFO: lambda _command: CommandResult(
                self._environment.chip_info()
            ),
        }

    @property
    def state(self) -> ShellState:
        return self._state

    def register_command(
        self, name: str, callback: CommandCallback, description: str = ""
    ) -> None:
        """
        Register a custom command.

        Args:
            name: Command word, matched case-insensitively
            callback: Receives the raw argument text and returns output text
            description: Line shown by HELP

        Raises:
            ValueError: If name is empty, contains whitespace or shadows a built-in
        """
        word = name.strip().upper()
        if not word or len(word.split()) != 1:
            raise ValueError(f"Invalid command name: {name!r}")
        if word in ALIASES:
            raise ValueError(f"Cannot override built-in command: {word}")
        self._custom_commands[word] = (callback, description)
        self._logger.info(f"Registered custom command {word}")

    def handle_line(self, line: str) -> CommandResult:
        """
        Process one input line to completion. Never raises for command errors.

        Args:
            line: Raw input line

        Returns:
            CommandResult to print
        """
        if self._state.pending_confirmation:
            return self._resolve_confirmation(line)
        try:
            command = self._tokenizer.tokenize(line)
            return self.dispatch(command)
        except BaseAppError as e:
            self._logger.info(f"Command failed: {e}")
            return CommandResult(str(e), ok=False)

    def dispatch(self, command: Command) -> CommandResult:
        """
        Run a tokenized command.

        Raises:
            BaseAppError: If the operation fails
        """
        self._logger.debug(f"Dispatching {command.name.value} {list(command.args)}")
        return self._handlers[command.name](command)

    # ------------------------- internal helpers -------------------------
    def _resolve(self, path: str, expect_directory: bool = False) -> str:
        return PathResolver.resolve(path, self._state.cwd, expect_directory)

    def _resolve_confirmation(self, line: str) -> CommandResult:
        self._state.consume_confirmation()
        answer = line.strip().upper()
        if ALIASES.get(answer) is CommandName.FORMAT:
            return self._handle_format(Command(CommandName.FORMAT, word=answer))
        if answer not in self._confirm_tokens:
            return CommandResult("Format cancelled.")

        self._logger.warning("Format confirmed")
        if not self._file_store.format():
            return CommandResult("Failed to format the file system.", ok=False)
        self._state.reset()
        return CommandResult("File system formatted.")

    def _handle_unknown(self, command: Command) -> CommandResult:
        custom = self._custom_commands.get(command.word)
        if custom is None:
            return CommandResult(UNRECOGNIZED_MESSAGE, ok=False)
        callback, _description = custom
        try:
            output = callback(command.args[0] if command.args else "")
        except Exception as e:
            self._logger.error(f"Custom command {command.word} failed: {e}")
            return CommandResult(f"Command {command.word} failed: {e}", ok=False)
        return CommandResult(output)

    def _handle_list(self, command: Command) -> CommandResult:
        directory = (
            self._resolve(command.args[0], expect_directory=True)
            if command.args
            else self._state.cwd
        )
        try:
            listing = self._list_files_uc.execute(directory)
        except FileStoreError as e:
            self._logger.info(str(e))
            return CommandResult("Unable to open directory.", ok=False)

        lines = [entry.format_line() for entry in listing.entries]
        if not lines:
            lines.append("(No files in the file system)")
        lines += [
            "",
            f"Used space: {listing.used_bytes} bytes",
            f"Free space: {listing.free_bytes} bytes",
            f"Total space: {listing.total_bytes} bytes",
        ]
        return CommandResult("\n".join(lines))

    def _handle_read(self, command: Command) -> CommandResult:
        path = self._resolve(command.args[0])
        header = f"Opening file: [{path}]"
        try:
            with self._file_store.open(path, "rb") as fh:
                content = fh.read()
        except (FileStoreError, OSError) as e:
            self._logger.info(f"Could not read {path}: {e}")
            return CommandResult(f"{header}\nFile not found.", ok=False)
        return CommandResult(f"{header}\n{content.decode('utf-8', errors='replace')}")

    def _handle_delete(self, command: Command) -> CommandResult:
        if self._file_store.remove(self._resolve(command.args[0])):
            return CommandResult("File deleted.")
        return CommandResult("Failed to delete file.", ok=False)

    def _handle_rename(self, command: Command) -> CommandResult:
        source = self._resolve(command.args[0])
        target = self._resolve(command.args[1])
        if self._file_store.rename(source, target):
            return CommandResult("File renamed successfully.")
        return CommandResult("Failed to rename file.", ok=False)

    def _handle_move(self, command: Command) -> CommandResult:
        source = self._resolve(command.args[0])
        target = self._resolve(command.args[1])
        if target.endswith(ROOT) or self._file_store.is_directory(target):
            file_name = source.rsplit(ROOT, 1)[-1]
            if not target.endswith(ROOT):
                target += ROOT
            target += file_name
        if self._file_store.rename(source, target):
            return CommandResult("File moved successfully.")
        return CommandResult("Failed to move file.", ok=False)

    def _handle_mkdir(self, command: Command) -> CommandResult:
        if self._file_store.mkdir(self._resolve(command.args[0])):
            return CommandResult("Directory created successfully.")
        return CommandResult("Failed to create directory.", ok=False)

    def _handle_rmdir(self, command: Command) -> CommandResult:
        if self._file_store.rmdir(self._resolve(command.args[0])):
            return CommandResult("Directory removed successfully.")
        return CommandResult("Failed to remove directory (must be empty).", ok=False)

    def _handle_cd(self, command: Command) -> CommandResult:
        cwd = self._state.navigate(command.args[0], self._file_store)
        return CommandResult(f"Current directory: {cwd}")

    def _handle_jsonset(self, command: Command) -> CommandResult:
        path = self._resolve(command.args[0])
        key, value = command.args[1], command.args[2]
        self._document_patcher.set_field(path, key, value)
        return CommandResult(
            f"Field '{key}' updated to: '{value}'\nJSON file successfully updated."
        )

    def _handle_format(self, _command: Command) -> CommandResult:
        self._state.request_confirmation()
        tokens = " or ".join(sorted(self._confirm_tokens))
        return CommandResult(
            f"{FORMAT_WARNING}\nType {tokens} to confirm, anything else to cancel."
        )

    def _handle_help(self, _command: Command) -> CommandResult:
        width = max(len(spec.usage) for spec in COMMAND_SPECS)
        lines = ["Available commands:"]
        for spec in COMMAND_SPECS:
            lines.append(f"  {spec.usage.ljust(width)}  {spec.description}")
        for word, (_callback, description) in sorted(self._custom_commands.items()):
            lines.append(f"  {word.ljust(width)}  {description}")
        return CommandResult("\n".join(lines))
