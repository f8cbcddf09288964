"""Command arguments: named options, positional values and flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .comparator import compare

__all__ = ["ArgumentType", "UnclosedQuoteError", "Argument"]


class ArgumentType(Enum):
    """How an argument takes its value on the command line."""

    NORMAL = 0
    POSITIONAL = 1
    FLAG = 2


class UnclosedQuoteError(ValueError):
    """Raised when a value opens a double quote that it never closes."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"unclosed quote in {raw!r}")
        self.raw = raw


def _unquote(raw: str) -> str:
    """Drop unescaped quotes and escaping backslashes from *raw*."""
    out: list[str] = []
    escaped = False
    in_quote = False
    for ch in raw:
        if ch == "\\" and not escaped:
            escaped = True
        elif ch == '"' and not escaped:
            in_quote = not in_quote
        else:
            out.append(ch)
            escaped = False
    if in_quote:
        raise UnclosedQuoteError(raw)
    return "".join(out)


@dataclass(eq=False)
class Argument:
    """One argument of a command, with its parsed value if any."""

    name: str | None
    default: str | None = None
    type: ArgumentType = ArgumentType.NORMAL
    required: bool = False
    is_set: bool = False
    _value: str | None = field(default=None, repr=False)

    @property
    def optional(self) -> bool:
        return not self.required

    @property
    def has_default_value(self) -> bool:
        return self.optional

    @property
    def value(self) -> str:
        """The parsed value, else the default, else an empty string."""
        if self._value is not None:
            return self._value
        if self.default is not None:
            return self.default
        return ""

    def set_value(self, raw: str | None) -> None:
        """Mark the argument as given, taking *raw* as its value if non-empty.

        Quotes and backslash escapes are removed from *raw*. An unclosed
        quote resets the argument and raises :class:`UnclosedQuoteError`.
        """
        if raw:
            if self.is_set:
                self.reset()
            self._value = _unquote(raw)
        self.is_set = True

    def reset(self) -> None:
        """Forget any parsed value."""
        self._value = None
        self.is_set = False

    def copy(self) -> Argument:
        """Return an independent copy, parsed value included."""
        return Argument(
            name=self.name,
            default=self.default,
            type=self.type,
            required=self.required,
            is_set=self.is_set or self._value is not None,
            _value=self._value,
        )

    def matches(self, name: str | None, case_sensitive: bool = False) -> bool:
        """Return True when *name* matches this argument's name template."""
        if name is None:
            return False
        return compare(name, self.name, case_sensitive)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, Argument):
            return other.name is not None and self.matches(other.name)
        if isinstance(other, str):
            return self.matches(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        name = self.name or ""
        if self.type is ArgumentType.FLAG:
            body = f"-{name}"
        else:
            body = f"-{name} <{self.value or 'value'}>"
        return f"[{body}]" if self.optional else body