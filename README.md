# clasp

Data types for describing a program's command-line flags and options. The
package also has the small string routines those descriptions rely on.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Describing arguments (`clasp.specs`)

A program's arguments are described as a list of `Specification` values.
Each one has these fields:

- `type`, an `ArgType`: `FLAG`, `OPTION`, `VALUE`, `GAP`, `TACIT` or `INVALID`.
- `name`, the short form such as `-v`.
- `mapped_argument`, the long form such as `--verbose`.
- `help`, the help text.
- `value_set`, the set of values an option accepts.

A mapped argument may carry a value after `=` or `:`, for example
`--level=3`. You can read its two parts back:

- `Specification.long_name()` returns the part before the separator
  (`--level`).
- `Specification.default_value()` returns the part after it (`3`), or
  `None` when there is no separator.

Functions:

- `long_name_length(s)` returns the length of `s` up to the first `=` or `:`.
- `is_valid_specification_type(arg_type)` is true for `FLAG`, `OPTION` and
  `VALUE`.
- `count_types(specifications, arg_type)` counts the entries of a given type.
  It stops at the first `INVALID` entry, which works as a terminator.
- `find_matching_primary(specifications, alias)` takes several entries that
  share a long name and returns the index of the one treated as primary. It
  tries these rules in order and returns the first entry that satisfies one:
  1. the only match;
  2. no attached value, help text and no short name;
  3. no attached value and help text;
  4. help text and no short name;
  5. help text;
  6. otherwise, the first match.

  It raises `ValueError` in two cases: when the alias is not a flag, option
  or value, and when nothing matches.

Two frozen dataclasses describe a program for display:

- `Version(major, minor, revision=-1, build=-1)` holds a version number.
- `UsageInfo` holds the display details: `summary`, `version`, `tool_name`,
  `copyright`, `description`, `usage`, `width`, `assumed_tab_width` and
  `blanks_between_items`.

## String helpers (`clasp.strings`)

- `find_name_value_separator(s)` returns the index of the first `=` or `:`,
  or `None` if there is neither.
- `count_char(s, c)` counts the occurrences of character `c` in `s`.
- `count_char_n(s, n, c)` does the same within the first `n` characters, and
  stops at an embedded NUL.
- `rfind_char_n(s, n, c)` returns the index of the last `c` in `s[:n]`, or
  `None`.
- `rfind_not_char_n(s, n, c)` returns the index of the last character in
  `s[:n]` that is not `c`, or `None`.
- `tokenize(s, delimiters)` yields the non-empty pieces of `s` between any of
  the delimiter characters.
- `tokenize_with_blanks(s, delimiters)` does the same but keeps empty pieces.

The counting and searching functions raise `ValueError` in two cases: when
`c` is not a single non-NUL character, and when `n` is negative.

## What the package does not do

The package only describes arguments. It does not do any of the following:

- parse a command line;
- print version, header or usage text from a `UsageInfo`;
- provide diagnostic logging.

Any program that uses it has to do those things itself.