"""Command line: spell a number using a number dictionary."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from numwords.dictionary import DictError, NumberDictionary
from numwords.speller import InvalidNumberError, Style, can_spell, parse_argument, spell

DEFAULT_DICTIONARY = "numbers.dict"
_COMPACT_FLAG = "--compact"


def run(
    number_text: str,
    dict_path: str | os.PathLike[str] = DEFAULT_DICTIONARY,
    style: Style = Style.STANDARD,
) -> str:
    """Validate the number and dictionary, then return the number in words.

    Raises InvalidNumberError for a bad number and DictError for a missing,
    malformed or incomplete dictionary.
    """
    number = parse_argument(number_text)
    dictionary = NumberDictionary.load(dict_path)
    if not can_spell(number, dictionary, style):
        raise DictError(f"dictionary cannot spell {number}")
    return spell(number, dictionary, style)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: ``[--compact] [DICTIONARY] NUMBER``."""
    args = list(sys.argv[1:] if argv is None else argv)
    style = Style.STANDARD
    if _COMPACT_FLAG in args:
        args.remove(_COMPACT_FLAG)
        style = Style.COMPACT

    if not args:
        for _ in sys.stdin:
            pass
        return 0
    if len(args) == 1:
        dict_path, number_text = DEFAULT_DICTIONARY, args[0]
    elif len(args) == 2:
        dict_path, number_text = args
    else:
        return 0

    try:
        words = run(number_text, dict_path, style)
    except InvalidNumberError:
        sys.stdout.write("Error\n")
        return 1
    except DictError:
        sys.stdout.write("Dict Error\n")
        return 1
    sys.stdout.write(words)
    return 0


if __name__ == "__main__":
    sys.exit(main())