"""String helpers shared by the shell: number parsing, splitting and trimming."""

from __future__ import annotations

import re

_LLONG_MAX = 2**63 - 1
_LLONG_MIN = -(2**63)

_SPACE = "\t\n\v\f\r "
_SEPARATORS = frozenset(_SPACE)
_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_NUMERIC = re.compile(r"[\t\n\v\f\r ]*[+-]?[0-9]+[\t\n\v\f\r ]*")


def _leading_number(text: str) -> tuple[int, str]:
    """Return the sign and the digit run that start ``text``."""
    match = _LEADING_NUMBER.match(text)
    sign = -1 if match.group(1) == "-" else 1
    return sign, match.group(2)


def atoi(text: str) -> int:
    """Parse a leading integer, ignoring anything after the digits.

    Leading whitespace and one sign are accepted; text without digits gives 0.
    """
    sign, digits = _leading_number(text)
    return sign * int(digits) if digits else 0


def atoll(text: str) -> int:
    """Parse a leading integer that must fit in a signed 64-bit value.

    Raises OverflowError when the value falls outside that range.
    """
    sign, digits = _leading_number(text)
    limit = _LLONG_MAX if sign > 0 else -_LLONG_MIN
    value = 0
    for digit in digits:
        value = value * 10 + int(digit)
        if value > limit:
            raise OverflowError(f"{text!r} does not fit in 64 bits")
    return sign * value


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` is a single optionally signed decimal integer."""
    return _NUMERIC.fullmatch(text) is not None


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` and on whitespace, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch == sep or ch in _SEPARATORS:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return words


def trim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def _is_ascii_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def is_valid_identifier(key: str) -> bool:
    """Tell whether ``key`` is a valid shell variable name."""
    if not key:
        return False
    first, rest = key[0], key[1:]
    if not (_is_ascii_alpha(first) or first == "_"):
        return False
    return all(_is_ascii_alpha(ch) or "0" <= ch <= "9" or ch == "_" for ch in rest)