"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a
one-character string. Only the ASCII ranges are recognised, whatever
the current locale.
"""

from __future__ import annotations

import operator

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code for *c*, which is an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_digit(c: int | str) -> bool:
    """True for the decimal digits '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alpha(c: int | str) -> bool:
    """True for the ASCII letters 'a' to 'z' and 'A' to 'Z'."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Map 'A'-'Z' to 'a'-'z'; anything else is returned unchanged.

    The result has the same kind (int or str) as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map 'a'-'z' to 'A'-'Z'; anything else is returned unchanged.

    The result has the same kind (int or str) as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code