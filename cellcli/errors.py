"""Results of matching an input line against a command.

A :class:`CommandError` records what went wrong, or that nothing did, along
with the command and argument involved and the offending input word.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .argument import Argument

__all__ = ["CommandErrorType", "CommandError"]


class CommandErrorType(IntEnum):
    """Kinds of parse outcome, ordered from least to most specific."""

    NULL_POINTER = -2
    EMPTY_LINE = -1
    PARSE_SUCCESSFUL = 0
    COMMAND_NOT_FOUND = 1
    UNKNOWN_ARGUMENT = 2
    MISSING_ARGUMENT = 3
    MISSING_ARGUMENT_VALUE = 4
    UNCLOSED_QUOTE = 5


_MESSAGES = {
    CommandErrorType.NULL_POINTER: "NULL Pointer",
    CommandErrorType.EMPTY_LINE: "Empty input",
    CommandErrorType.PARSE_SUCCESSFUL: "No error",
    CommandErrorType.COMMAND_NOT_FOUND: "Command not found",
    CommandErrorType.UNKNOWN_ARGUMENT: "Unknown argument",
    CommandErrorType.MISSING_ARGUMENT: "Missing argument",
    CommandErrorType.MISSING_ARGUMENT_VALUE: "Missing argument value",
    CommandErrorType.UNCLOSED_QUOTE: "Unclosed quote",
}


@dataclass(frozen=True, eq=False)
class CommandError:
    """Outcome of parsing one line; false when parsing succeeded."""

    type: CommandErrorType
    command: Any = None
    argument: Argument | None = None
    data: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", CommandErrorType(self.type))
        if not self.data:
            object.__setattr__(self, "data", None)

    @classmethod
    def null_pointer(cls, command: Any = None) -> CommandError:
        return cls(CommandErrorType.NULL_POINTER, command)

    @classmethod
    def empty_line(cls, command: Any = None) -> CommandError:
        return cls(CommandErrorType.EMPTY_LINE, command)

    @classmethod
    def parse_success(cls, command: Any = None) -> CommandError:
        return cls(CommandErrorType.PARSE_SUCCESSFUL, command)

    @classmethod
    def not_found(cls, command: Any = None, word: str | None = None) -> CommandError:
        return cls(CommandErrorType.COMMAND_NOT_FOUND, command, None, word)

    @classmethod
    def unknown_argument(cls, command: Any = None, word: str | None = None) -> CommandError:
        return cls(CommandErrorType.UNKNOWN_ARGUMENT, command, None, word)

    @classmethod
    def missing_argument(cls, command: Any = None, argument: Argument | None = None) -> CommandError:
        return cls(CommandErrorType.MISSING_ARGUMENT, command, argument)

    @classmethod
    def unclosed_quote(
        cls, command: Any = None, argument: Argument | None = None, word: str | None = None
    ) -> CommandError:
        return cls(CommandErrorType.UNCLOSED_QUOTE, command, argument, word)

    @property
    def has_command(self) -> bool:
        return self.command is not None

    @property
    def has_argument(self) -> bool:
        return self.argument is not None

    @property
    def has_data(self) -> bool:
        return self.data is not None

    @property
    def message(self) -> str:
        return _MESSAGES[self.type]

    def __bool__(self) -> bool:
        return self.type is not CommandErrorType.PARSE_SUCCESSFUL

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, CommandError):
            return NotImplemented
        return (
            self.type == other.type
            and self.command is other.command
            and self.argument is other.argument
            and self.data == other.data
        )

    def __hash__(self) -> int:
        return hash((self.type, id(self.command), id(self.argument), self.data))

    def __lt__(self, other: CommandError) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return self.type < other.type

    def __le__(self, other: CommandError) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return self.type <= other.type

    def __gt__(self, other: CommandError) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return self.type > other.type

    def __ge__(self, other: CommandError) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return self.type >= other.type

    def __str__(self) -> str:
        parts = [self.message]
        if self.has_command:
            parts.append(f" at command '{self.command.name}'")
        if self.has_argument:
            parts.append(f" at argument '{self.argument}'")
        if self.has_data:
            parts.append(f" at '{self.data}'")
        return "".join(parts)