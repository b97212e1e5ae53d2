# numwords

Turn a whole number into words, using a dictionary file that maps numbers to
their names.

## Installing

    pip install .

## The dictionary

A dictionary is a text file with one entry per line, in the form
`number: name`:

    0: zero
    1: one
    2: two
    ...
    11: eleven
    ...
    20: twenty
    100: hundred
    1000: thousand
    1000000: million
    1000000000: billion

The rules for a line:

- A blank line is allowed.
- Otherwise the line starts with digits, then optional spaces, a colon,
  optional spaces and a name.
- The name must not be empty and may hold only printable ASCII characters.
- Runs of spaces inside a name are reduced to one.

Only lines that end with a newline are read. Text after the last newline is
ignored. When a number appears twice, the first entry wins. Entries whose
number does not fit in an unsigned 32-bit value are accepted but never used.
Any other line makes the whole dictionary invalid.

## Command line

    numwords 42
    numwords path/to/numbers.dict 1234
    numwords --compact path/to/numbers.dict 1234

When only a number is given, the dictionary is read from `numbers.dict` in the
current directory. The words are written to standard output with no trailing
newline, and the exit status is 0.

The number argument may hold nothing but ASCII digits. An empty argument counts
as zero. The value 4294967295 and anything above 4294967296 are refused, while
4294967296 itself wraps round to zero. For a refused argument the command
prints `Error`.

If the dictionary cannot be read, has an invalid line, or lacks a name that
the number needs, it prints `Dict Error`. Both error messages go to standard
output, and the exit status is then 1.

With no arguments at all, the command reads standard input until it ends and
then exits with status 0, printing nothing. With more than two arguments
(not counting `--compact`) it does nothing and exits with status 0.

## Styles

`--compact` on the command line, or `Style.COMPACT` from Python, picks the
compact style. `Style.STANDARD` is the default.

- **Standard:** the hundreds digit is always named ("one hundred"). Numbers
  from 11 to 19 use their own entry. Tens and units are joined with a hyphen
  ("thirty-four"). Each trailing group is introduced with a comma, and a last
  group under a thousand with ", and": 1234 becomes
  "one thousand, and two hundred thirty-four".
- **Compact:** the hundreds digit is named only when it is above one
  ("hundred", "two hundred"). Tens and units are always separate entries
  ("ten five" for 15). Every part is joined with a single space.

## From Python

```python
from numwords.dictionary import NumberDictionary
from numwords.speller import Style, can_spell, spell

words = NumberDictionary.load("numbers.dict")
if can_spell(1234, words, Style.STANDARD):
    print(spell(1234, words, Style.STANDARD))
```

`numwords.dictionary` provides:

- `NumberDictionary`, a read-only mapping from numbers to names.
  - `NumberDictionary.load(path)` reads a file.
  - `NumberDictionary.from_lines(lines)` builds a dictionary from lines that
    are already in memory.
  - `lookup(number)` returns the name for a number.
- `DictError`, raised by `load`, `from_lines` and `lookup` when a dictionary is
  unreadable, invalid or missing an entry.
- The line helpers `is_valid_line`, `normalize_value` and
  `parse_leading_number`.

`numwords.speller` provides:

- `spell(number, dictionary, style)`, which raises `DictError` if an entry is
  missing.
- `can_spell(number, dictionary, style)`, which checks that every needed entry
  is present.
- `parse_argument(text)`, which applies the command's argument rules and raises
  `InvalidNumberError`.
- `digit_count(number)`.

`numwords.cli.run(number_text, dict_path, style)` does the same job as the
command and returns the spelled text. It raises `InvalidNumberError` or
`DictError` instead of printing a message.

## What it does not do

Only whole numbers below 4294967295 are handled. There are no negative
numbers, fractions or ordinals. No dictionary is shipped with the package: you
supply your own file.