"""
Tokenizer turning one input line into a structured Command.
"""

from dataclasses import dataclass
from enum import Enum

from storeshell.entities.Command import Command, CommandName
from storeshell.exceptions import InvalidArgumentError


class Arity(Enum):
    """Argument layout a command expects after its name."""

    NONE = "none"
    OPTIONAL_PATH = "optional_path"
    PATH = "path"
    TWO_PATHS = "two_paths"
    PATH_KEY_VALUE = "path_key_value"


@dataclass(frozen=True)
class CommandSpec:
    name: CommandName
    arity: Arity
    usage: str
    description: str


COMMAND_SPECS: tuple[CommandSpec, ...] = (
    CommandSpec(
        CommandName.LIST,
        Arity.OPTIONAL_PATH,
        "DIR | LS [path]",
        "List files and store usage",
    ),
    CommandSpec(CommandName.READ, Arity.PATH, "TYPE | CAT <path>", "Print a file"),
    CommandSpec(CommandName.DELETE, Arity.PATH, "DEL | RM <path>", "Delete a file"),
    CommandSpec(
        CommandName.RENAME, Arity.TWO_PATHS, "REN <old> <new>", "Rename a file"
    ),
    CommandSpec(
        CommandName.MOVE,
        Arity.TWO_PATHS,
        "MV <src> <dst>",
        "Move a file, into dst if it is a directory",
    ),
    CommandSpec(CommandName.MKDIR, Arity.PATH, "MKDIR <path>", "Create a directory"),
    CommandSpec(
        CommandName.RMDIR, Arity.PATH, "RMDIR <path>", "Remove an empty directory"
    ),
    CommandSpec(
        CommandName.CD,
        Arity.PATH,
        "CD <path | .. | />",
        "Change the working directory",
    ),
    CommandSpec(
        CommandName.JSONSET,
        Arity.PATH_KEY_VALUE,
        'JSONSET <path> <key> "<value>"',
        "Set a field in a JSON file",
    ),
    CommandSpec(
        CommandName.FORMAT,
        Arity.NONE,
        "FORMAT",
        "Erase the whole store (asks for confirmation)",
    ),
    CommandSpec(CommandName.CLEAR, Arity.NONE, "CLS | CLEAR", "Clear the screen"),
    CommandSpec(CommandName.HELP, Arity.NONE, "HELP | MAN", "Show this help"),
    CommandSpec(CommandName.VERSION, Arity.NONE, "VERSION", "Show the shell version"),
    CommandSpec(
        CommandName.UPTIME,
        Arity.NONE,
        "UPTIME",
        "Show how long the shell has been running",
    ),
    CommandSpec(CommandName.FREE, Arity.NONE, "FREE", "Show free memory"),
    CommandSpec(CommandName.CHIPINFO, Arity.NONE, "CHIPINFO", "Show host information"),
)

ALIASES: dict[str, CommandName] = {
    "DIR": CommandName.LIST,
    "LS": CommandName.LIST,
    "TYPE": CommandName.READ,
    "CAT": CommandName.READ,
    "DEL": CommandName.DELETE,
    "RM": CommandName.DELETE,
    "REN": CommandName.RENAME,
    "MV": CommandName.MOVE,
    "MKDIR": CommandName.MKDIR,
    "RMDIR": CommandName.RMDIR,
    "CD": CommandName.CD,
    "JSONSET": CommandName.JSONSET,
    "FORMAT": CommandName.FORMAT,
    "CLS": CommandName.CLEAR,
    "CLEAR": CommandName.CLEAR,
    "HELP": CommandName.HELP,
    "MAN": CommandName.HELP,
    "VERSION": CommandName.VERSION,
    "UPTIME": CommandName.UPTIME,
    "FREE": CommandName.FREE,
    "CHIPINFO": CommandName.CHIPINFO,
}

_SPECS_BY_NAME = {spec.name: spec for spec in COMMAND_SPECS}


def unquote(value: str) -> str:
    """Strip one pair of double quotes spanning the whole value, if present."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def _split_first(text: str) -> tuple[str, str]:
    """Split on the first whitespace run; the remainder keeps its inner spaces."""
    parts = text.split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


class CommandTokenizer:
    """Splits input lines into commands, matching names case-insensitively."""

    def tokenize(self, line: str) -> Command:
        """
        Tokenize one input line.

        Args:
            line: Raw line as received from the transport

        Returns:
            The parsed Command (NOOP for blank lines, UNKNOWN for unrecognized words)

        Raises:
            InvalidArgumentError: If a known command has the wrong number of arguments
        """
        text = line.strip()
        if not text:
            return Command(CommandName.NOOP)

        word, rest = _split_first(text)
        upper_word = word.upper()
        name = ALIASES.get(upper_word)
        if name is None:
            return Command(CommandName.UNKNOWN, (rest,) if rest else (), upper_word)

        spec = _SPECS_BY_NAME[name]
        return Command(name, self._split_args(spec, rest), upper_word)

    def _split_args(self, spec: CommandSpec, rest: str) -> tuple[str, ...]:
        if spec.arity is Arity.NONE:
            if rest:
                raise self._usage_error(spec)
            return ()

        if spec.arity is Arity.OPTIONAL_PATH:
            return (rest,) if rest else ()

        if spec.arity is Arity.PATH:
            if not rest:
                raise self._usage_error(spec)
            return (rest,)

        if spec.arity is Arity.TWO_PATHS:
            first, second = _split_first(rest)
            if not first or not second:
                raise self._usage_error(spec)
            return (first, second)

        path, remainder = _split_first(rest)
        key, value = _split_first(remainder)
        if not path or not key or not value:
            raise self._usage_error(spec)
        return (path, key, unquote(value))

    @staticmethod
    def _usage_error(spec: CommandSpec) -> InvalidArgumentError:
        return InvalidArgumentError(f"Invalid arguments. Usage: {spec.usage}")
