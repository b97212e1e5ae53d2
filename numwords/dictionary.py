"""Loading and querying number dictionaries.

A dictionary file holds one entry per line in the form ``<digits> : <words>``.
Blank lines are allowed. Only newline-terminated lines are read: text after
the final newline is ignored.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping

_DIGITS = frozenset("0123456789")
_UINT_LIMIT = 2**32


class DictError(Exception):
    """Raised when a dictionary is missing, malformed or lacks an entry."""


def parse_leading_number(text: str) -> int | None:
    """Parse the digits at the start of ``text`` after any leading spaces.

    Returns 0 when no digits follow, and None when the number does not fit
    in an unsigned 32-bit integer.
    """
    rest = text.lstrip(" ")
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
        if value >= _UINT_LIMIT:
            return None
    return value


def is_valid_line(line: str) -> bool:
    """Tell whether ``line`` is an acceptable dictionary line.

    An empty line is accepted. Otherwise the line must start with digits,
    optionally followed by spaces, then a colon, optional spaces, and a
    non-empty value made only of printable ASCII characters.
    """
    if not line:
        return True
    if line[0] not in _DIGITS:
        return False
    rest = line.lstrip("0123456789").lstrip(" ")
    if not rest.startswith(":"):
        return False
    value = rest[1:].lstrip(" ")
    if not value:
        return False
    return all(32 <= ord(char) < 127 for char in value)


def normalize_value(line: str) -> str:
    """Return the value part of an entry line with runs of spaces collapsed."""
    key, colon, value = line.partition(":")
    if not colon:
        raise ValueError(f"no ':' separator in {line!r}")
    return " ".join(word for word in value.split(" ") if word)


class NumberDictionary(Mapping[int, str]):
    """A read-only mapping from numbers to their spelled-out words."""

    def __init__(self, entries: Mapping[int, str] | Iterable[tuple[int, str]]):
        items = entries.items() if isinstance(entries, Mapping) else entries
        self._entries: dict[int, str] = {}
        for number, words in items:
            self._entries.setdefault(number, words)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> NumberDictionary:
        """Build a dictionary from entry lines, validating every one.

        The first entry for a number wins. Entries whose number does not fit
        in 32 bits are kept out, since no such number can be looked up.
        """
        entries: dict[int, str] = {}
        for lineno, raw in enumerate(lines, start=1):
            line = raw.rstrip("\n")
            if not is_valid_line(line):
                raise DictError(f"invalid dictionary line {lineno}: {line!r}")
            if not line:
                continue
            number = parse_leading_number(line)
            if number is None:
                continue
            entries.setdefault(number, normalize_value(line))
        return cls(entries)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> NumberDictionary:
        """Read and validate a dictionary file."""
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise DictError(f"cannot read dictionary {os.fspath(path)!r}: {exc}") from exc
        *lines, _unterminated = data.decode("latin-1").split("\n")
        return cls.from_lines(lines)

    def lookup(self, number: int) -> str:
        """Return the words for ``number``, raising DictError if absent."""
        try:
            return self._entries[number]
        except KeyError:
            raise DictError(f"no dictionary entry for {number}") from None

    def __contains__(self, number: object) -> bool:
        return number in self._entries

    def __getitem__(self, number: int) -> str:
        return self._entries[number]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"