"""Spelling out numbers with the words of a number dictionary."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from numwords.dictionary import DictError, NumberDictionary

_DIGITS = frozenset("0123456789")
_UINT_LIMIT = 2**32
_UINT_MAX = _UINT_LIMIT - 1


class Style(enum.Enum):
    """How numbers are composed from dictionary words.

    STANDARD joins tens and units with a hyphen, keeps a separate word for
    11 to 19, always names the hundreds digit and introduces each trailing
    group with ", and ". COMPACT names the hundreds digit only when it is
    above one and joins every part with a single space.
    """

    STANDARD = "standard"
    COMPACT = "compact"


class InvalidNumberError(ValueError):
    """Raised when a number argument is not a usable unsigned number."""


def parse_argument(text: str) -> int:
    """Parse a command-line number argument.

    Only ASCII digits are accepted; an empty argument means zero. The
    largest unsigned 32-bit value is refused, as is anything beyond 2**32,
    while 2**32 itself wraps round to zero.
    """
    if any(char not in _DIGITS for char in text):
        raise InvalidNumberError(f"not a number: {text!r}")
    value = 0
    for char in text:
        value = value * 10 + int(char)
        if value > _UINT_LIMIT:
            raise InvalidNumberError(f"number too large: {text!r}")
    value %= _UINT_LIMIT
    if value == _UINT_MAX:
        raise InvalidNumberError(f"number too large: {text!r}")
    return value


def digit_count(number: int) -> int:
    """Return the count of decimal digits in ``number``; zero has none."""
    return len(str(number)) if number > 0 else 0


def _group_base(number: int) -> int:
    """Return the power of a thousand that leads ``number`` (at least 1000)."""
    return 1000 ** (digit_count(number // 10) // 3)


def _first3_keys(number: int, style: Style) -> Iterator[int]:
    if number >= 100:
        if style is Style.STANDARD or number // 100 > 1:
            yield number // 100
        yield 100
        number %= 100
    if number >= 10:
        if style is Style.STANDARD and 10 < number < 20:
            yield number
        yield number - number % 10
        number %= 10
    if number:
        yield number


def _required_keys(number: int, style: Style) -> Iterator[int]:
    if number == 0:
        yield 0
    if number < 1000:
        yield from _first3_keys(number, style)
        return
    base = _group_base(number)
    yield from _first3_keys(number // base, style)
    yield base
    yield from _required_keys(number % base, style)


def can_spell(number: int, dictionary: NumberDictionary, style: Style = Style.STANDARD) -> bool:
    """Tell whether ``dictionary`` holds every entry needed to spell ``number``."""
    return all(key in dictionary for key in _required_keys(number, style))


def _first3_standard(number: int, dictionary: NumberDictionary) -> str:
    out = ""
    if number >= 100:
        out += f"{dictionary.lookup(number // 100)} {dictionary.lookup(100)} "
        number %= 100
    if number >= 10:
        if 10 < number < 20:
            return out + dictionary.lookup(number)
        out += dictionary.lookup(number - number % 10)
        if number % 10:
            out += "-"
        number %= 10
    if number:
        out += dictionary.lookup(number)
    return out


def _first3_compact(number: int, dictionary: NumberDictionary) -> str:
    out = ""
    if number >= 100:
        if number // 100 > 1:
            out += dictionary.lookup(number // 100) + " "
        out += dictionary.lookup(100) + " "
        number %= 100
    if number >= 10:
        out += dictionary.lookup(number - number % 10) + " "
        number %= 10
    if number:
        out += dictionary.lookup(number)
    return out


def _spell_standard(number: int, dictionary: NumberDictionary, depth: int) -> str:
    out = ""
    if depth == 0 and number == 0:
        out += dictionary.lookup(0)
    if depth > 0 and number:
        out += ", "
    if number < 1000:
        if depth > 0 and number:
            out += "and "
        return out + _first3_standard(number, dictionary)
    base = _group_base(number)
    out += f"{_first3_standard(number // base, dictionary)} {dictionary.lookup(base)}"
    return out + _spell_standard(number % base, dictionary, depth + 1)


def _spell_compact(number: int, dictionary: NumberDictionary, depth: int) -> str:
    out = ""
    if depth == 0 and number == 0:
        out += dictionary.lookup(0)
    if number < 1000:
        return out + _first3_compact(number, dictionary)
    base = _group_base(number)
    out += f"{_first3_compact(number // base, dictionary)} {dictionary.lookup(base)} "
    return out + _spell_compact(number % base, dictionary, depth + 1)


def spell(number: int, dictionary: NumberDictionary, style: Style = Style.STANDARD) -> str:
    """Spell ``number`` in words; raises DictError if an entry is missing."""
    if number < 0:
        raise InvalidNumberError(f"negative number: {number}")
    if style is Style.STANDARD:
        return _spell_standard(number, dictionary, 0)
    return _spell_compact(number, dictionary, 0)


__all__ = [
    "DictError",
    "InvalidNumberError",
    "Style",
    "can_spell",
    "digit_count",
    "parse_argument",
    "spell",
]