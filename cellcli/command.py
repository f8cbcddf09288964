"""Commands: a name template, its arguments and the parser that fills them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union

from .argument import Argument, ArgumentType, UnclosedQuoteError
from .comparator import compare
from .errors import CommandError
from .parser import Line

__all__ = ["CommandType", "Command"]


class CommandType(Enum):
    """How a command treats the words that follow its name."""

    NORMAL = 0
    BOUNDLESS = 1
    SINGLE = 2


Callback = Callable[["Command"], None]


def _set_quietly(argument: Argument, raw: Optional[str]) -> None:
    """Set a value where a malformed quote is not reported as an error."""
    try:
        argument.set_value(raw)
    except UnclosedQuoteError:
        pass


@dataclass(eq=False)
class Command:
    """A console command and, after parsing, the values given to it."""

    name: str
    type: CommandType = CommandType.NORMAL
    callback: Optional[Callback] = None
    description: Optional[str] = None
    case_sensitive: bool = False
    arguments: list[Argument] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.name is None:
            raise ValueError("a command needs a name")
        self.type = CommandType(self.type)
        if self.type is CommandType.SINGLE and not self.arguments:
            self.arguments.append(self._anonymous(required=False))

    @staticmethod
    def _anonymous(required: bool) -> Argument:
        return Argument(name=None, type=ArgumentType.POSITIONAL, required=required)

    @property
    def has_description(self) -> bool:
        return self.description is not None

    def _add(self, argument: Argument) -> Argument:
        if self.type is not CommandType.NORMAL:
            raise ValueError(
                f"arguments can only be added to normal commands, not {self.type.name.lower()} ones"
            )
        self.arguments.append(argument)
        return argument

    def add_argument(self, name: str, default: Optional[str] = None) -> Argument:
        """Add a ``-name value`` argument; required unless *default* is given."""
        return self._add(
            Argument(name=name, default=default, type=ArgumentType.NORMAL, required=default is None)
        )

    def add_positional_argument(self, name: str, default: Optional[str] = None) -> Argument:
        """Add a positional argument; required unless *default* is given."""
        return self._add(
            Argument(name=name, default=default, type=ArgumentType.POSITIONAL, required=default is None)
        )

    def add_flag_argument(self, name: str, default: str = "") -> Argument:
        """Add an optional ``-name`` flag that takes no value."""
        return self._add(Argument(name=name, default=default, type=ArgumentType.FLAG, required=False))

    def get_argument(self, key: Union[int, str, Argument, None] = 0) -> Optional[Argument]:
        """Look up an argument by position, by name or by another argument's name."""
        if isinstance(key, Argument):
            key = key.name
        if key is None:
            return None
        if isinstance(key, int):
            if 0 <= key < len(self.arguments):
                return self.arguments[key]
            return None
        return next(
            (arg for arg in self.arguments if arg.matches(key, self.case_sensitive)),
            None,
        )

    def matches(self, name: Union[str, Command, None]) -> bool:
        """Return True when *name* (or another command's name) fits this command."""
        if isinstance(name, Command):
            if name is self:
                return True
            name = name.name
        if name is None:
            return False
        return compare(name, self.name, self.case_sensitive)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Command, str)):
            return self.matches(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def parse(self, line: Line) -> CommandError:
        """Match *line* against this command, filling in argument values."""
        words = line.words
        if not words:
            return CommandError.empty_line(self)

        if not compare(words[0], self.name, self.case_sensitive):
            return CommandError.not_found(self, words[0])

        if self.type is CommandType.BOUNDLESS:
            self.arguments = []
            for word in words[1:]:
                argument = self._anonymous(required=True)
                _set_quietly(argument, word)
                self.arguments.append(argument)
            return CommandError.parse_success(self)

        if self.type is CommandType.SINGLE:
            if not self.arguments:
                self.arguments.append(self._anonymous(required=False))
            if len(words) > 1:
                _set_quietly(self.arguments[0], line.rest)
            return CommandError.parse_success(self)

        i = 1
        while i < len(words):
            word = words[i]
            dashed = word.startswith("-")
            target = next(
                (
                    arg
                    for arg in self.arguments
                    if not arg.is_set
                    and (
                        (not dashed and arg.type is ArgumentType.POSITIONAL)
                        or (dashed and compare(word[1:], arg.name, self.case_sensitive))
                    )
                ),
                None,
            )
            if target is None:
                return CommandError.unknown_argument(self, word)

            if target.type is ArgumentType.FLAG:
                target.set_value(None)
            elif target.type is ArgumentType.POSITIONAL and not dashed:
                _set_quietly(target, word)
            else:
                if i + 1 >= len(words):
                    return CommandError.missing_argument(self, target)
                value = words[i + 1]
                try:
                    target.set_value(value)
                except UnclosedQuoteError:
                    return CommandError.unclosed_quote(self, target, value)
                i += 1
            i += 1

        missing = next((arg for arg in self.arguments if arg.required and not arg.is_set), None)
        if missing is not None:
            return CommandError.missing_argument(self, missing)

        return CommandError.parse_success(self)

    def reset(self) -> None:
        """Forget everything a previous parse filled in."""
        if self.type is CommandType.BOUNDLESS:
            self.arguments = []
        else:
            for argument in self.arguments:
                argument.reset()

    def copy(self) -> Command:
        """Return an independent copy, parsed values included."""
        return Command(
            name=self.name,
            type=self.type,
            callback=self.callback,
            description=self.description,
            case_sensitive=self.case_sensitive,
            arguments=[arg.copy() for arg in self.arguments],
        )

    def run(self) -> None:
        """Call the callback, if there is one, with this command."""
        if self.callback is not None:
            self.callback(self)

    def to_string(self, description: bool = True) -> str:
        """Render a usage line, followed by the description if asked for."""
        parts = [self.name]
        if self.type is CommandType.BOUNDLESS:
            parts.append(" <value> <value> ...")
        elif self.type is CommandType.SINGLE:
            parts.append(" <...>")
        else:
            parts.extend(f" {arg}" for arg in self.arguments)
        if description and self.has_description:
            parts.append("\r\n" + self.description)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()