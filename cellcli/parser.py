"""Splitting of console input into lines and words.

Lines end at carriage returns, line feeds and unescaped ``;;`` outside double
quotes. Words are separated by spaces that are neither quoted nor escaped;
they are returned raw, with quotes and backslashes still in place.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Line", "parse_words", "parse_lines"]


@dataclass(frozen=True)
class Line:
    """One input line with its words and where each word starts in it."""

    text: str
    words: tuple[str, ...]
    offsets: tuple[int, ...]

    @property
    def rest(self) -> str:
        """Everything from the second word onwards, as one raw string."""
        if len(self.words) < 2:
            return ""
        start = self.offsets[1]
        length = len(self.text) - len(self.words[0]) - 1
        return self.text[start:start + length]


def _split_words(text: str) -> list[tuple[int, str]]:
    words: list[tuple[int, str]] = []
    if not text:
        return words

    start = 0
    escaped = False
    ignore_space = False
    end = len(text)

    for i in range(end + 1):
        ch = text[i] if i < end else ""
        if ch == "\\" and not escaped:
            escaped = True
        elif ch == '"' and not escaped:
            ignore_space = not ignore_space
        elif i == end or (ch == " " and not ignore_space and not escaped):
            if i > start:
                words.append((start, text[start:i]))
            start = i + 1
        elif escaped:
            escaped = False

    return words


def parse_words(text: str) -> list[str]:
    """Split *text* into raw words."""
    return [word for _, word in _split_words(text)]


def _make_line(text: str) -> Line:
    pairs = _split_words(text)
    return Line(
        text=text,
        words=tuple(word for _, word in pairs),
        offsets=tuple(offset for offset, _ in pairs),
    )


def parse_lines(text: str) -> list[Line]:
    """Split *text* into non-empty lines, each already split into words."""
    lines: list[Line] = []
    if not text:
        return lines

    end = len(text)

    def at(index: int) -> str:
        return text[index] if 0 <= index < end else ""

    start = 0
    in_quote = False
    i = 0
    while i <= end:
        ch = at(i)
        if ch == '"' and (i == 0 or at(i - 1) != "\\"):
            in_quote = not in_quote

        delimiter = (
            ch == ";"
            and at(i + 1) == ";"
            and not in_quote
            and (i == 0 or at(i - 1) != "\\")
        )
        linebreak = ch in ("\r", "\n") and not in_quote

        if linebreak or delimiter or i == end:
            if i > start:
                lines.append(_make_line(text[start:i]))
            if delimiter:
                i += 1
            start = i + 1
        i += 1

    return lines