"""
Command domain entity produced by the tokenizer for every input line.
"""

from dataclasses import dataclass
from enum import Enum


class CommandName(str, Enum):
    """Canonical command names; aliases are folded onto these by the tokenizer."""

    NOOP = "NOOP"
    UNKNOWN = "UNKNOWN"
    LIST = "DIR"
    READ = "TYPE"
    DELETE = "DEL"
    RENAME = "REN"
    MOVE = "MV"
    MKDIR = "MKDIR"
    RMDIR = "RMDIR"
    CD = "CD"
    JSONSET = "JSONSET"
    FORMAT = "FORMAT"
    CLEAR = "CLS"
    HELP = "HELP"
    VERSION = "VERSION"
    UPTIME = "UPTIME"
    FREE = "FREE"
    CHIPINFO = "CHIPINFO"


@dataclass(frozen=True)
class Command:
    """One tokenized input line.

    Attributes:
        name: Canonical command name
        args: Positional arguments, taken from the original-case line
        word: The command word as typed, uppercased (useful for UNKNOWN)
    """

    name: CommandName
    args: tuple[str, ...] = ()
    word: str = ""

    def is_noop(self) -> bool:
        return self.name is CommandName.NOOP

    def is_unknown(self) -> bool:
        return self.name is CommandName.UNKNOWN
