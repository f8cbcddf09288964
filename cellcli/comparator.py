"""Command and argument name matching with abbreviation templates.

A template such as ``"r/elay"`` accepts either the short form before the
slash (``"r"``) or the full name with the slash removed (``"relay"``).
Commas separate alternative names, as in ``"ls,list"``.
"""

from __future__ import annotations

__all__ = ["compare"]


def _lower(ch: str) -> str:
    """Lower-case ASCII letters only, leaving every other character as is."""
    if "A" <= ch <= "Z":
        return chr(ord(ch) + 32)
    return ch


def _same(a: str, b: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return a == b
    return _lower(a) == _lower(b)


def compare(user_text: str | None, template: str | None, case_sensitive: bool) -> bool:
    """Return True when *user_text* matches the name *template*."""
    if user_text is None and template is None:
        return True
    if user_text is None or template is None:
        return False

    str_len = len(user_text)
    key_len = len(template)

    if str_len == key_len:
        return all(_same(u, t, case_sensitive) for u, t in zip(user_text, template))

    if str_len > key_len:
        return False

    def at(index: int) -> str:
        # Past the end of the template behaves like a terminating NUL.
        return template[index] if index < key_len else ""

    terminators = (",", "/", "")
    a = 0
    b = 0
    res = True

    while a < str_len and b < key_len:
        if template[b] == "/":
            b += 1
        elif template[b] == ",":
            b += 1
            a = 0

        if not _same(user_text[a], at(b), case_sensitive):
            res = False

        if not res or (a == str_len - 1 and at(b + 1) not in terminators):
            while b < key_len and template[b] != ",":
                b += 1
            res = True
        else:
            a += 1
            b += 1

    return res and a == str_len and at(b) in terminators