"""Argument specifications and the usage information that describes a program."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from clasp.strings import find_name_value_separator


class ArgType(Enum):
    """The kind of entry in a specifications list."""

    INVALID = "invalid"
    FLAG = "flag"
    OPTION = "option"
    VALUE = "value"
    GAP = "gap"
    TACIT = "tacit"


_VALID_TYPES = frozenset({ArgType.FLAG, ArgType.OPTION, ArgType.VALUE})


def long_name_length(s: str) -> int:
    """Return the length of the name part of *s*, up to any '=' or ':'."""
    index = find_name_value_separator(s)
    return len(s) if index is None else index


def is_valid_specification_type(arg_type: ArgType) -> bool:
    """Return True for flags, options and values."""
    return arg_type in _VALID_TYPES


@dataclass(frozen=True)
class Specification:
    """One flag, option, value, gap or tacit entry of a specifications list.

    ``mapped_argument`` is the long name the entry stands for; an alias of an
    option that also carries a value is written as ``--name=value``.
    """

    type: ArgType
    name: str | None = None
    mapped_argument: str | None = None
    help: str | None = None
    value_set: str | None = None

    def long_name(self) -> str | None:
        """The mapped argument without any attached value."""
        if self.mapped_argument is None:
            return None
        return self.mapped_argument[: long_name_length(self.mapped_argument)]

    def default_value(self) -> str | None:
        """The value attached to the mapped argument, or None if there is none."""
        if self.mapped_argument is None:
            return None
        index = find_name_value_separator(self.mapped_argument)
        if index is None:
            return None
        return self.mapped_argument[index + 1 :]


@dataclass(frozen=True)
class Version:
    """A program version; a negative revision or build is left out when shown."""

    major: int
    minor: int
    revision: int = -1
    build: int = -1


@dataclass(frozen=True)
class UsageInfo:
    """What is shown in a program's version, header and usage text.

    ``width`` of less than 1 disables wrapping of help text;
    ``assumed_tab_width`` of less than 1 indents with that many spaces
    instead of tab characters.
    """

    summary: str = ""
    version: Version = field(default_factory=lambda: Version(0, 0))
    tool_name: str | None = None
    copyright: str | None = None
    description: str | None = None
    usage: str | None = None
    width: int = 0
    assumed_tab_width: int = 4
    blanks_between_items: int = 1


def _active(specifications: Iterable[Specification] | None) -> list[Specification]:
    """The entries before any INVALID terminator."""
    result: list[Specification] = []
    if specifications is None:
        return result
    for spec in specifications:
        if spec.type is ArgType.INVALID:
            break
        result.append(spec)
    return result


def count_types(
    specifications: Iterable[Specification] | None, arg_type: ArgType
) -> int:
    """Count the entries of the given type, stopping at an INVALID terminator."""
    return sum(1 for spec in _active(specifications) if spec.type is arg_type)


def _same_long_name(a: Specification, b: Specification) -> bool:
    if a.mapped_argument is None or b.mapped_argument is None:
        return False
    return a.long_name() == b.long_name()


def _has_text(s: str | None) -> bool:
    return bool(s)


def find_matching_primary(
    specifications: Sequence[Specification], alias: Specification
) -> int:
    """Return the index of the entry that is the primary for *alias*.

    Among the valid entries whose long name matches the alias's, the first
    one to satisfy these rules, tried in order, is chosen:

    1. the only match;
    2. no attached value, with help text and no short name;
    3. no attached value, with help text;
    4. with help text and no short name;
    5. with help text;
    6. the first match.
    """
    if not is_valid_specification_type(alias.type):
        raise ValueError(f"alias of type {alias.type.name} has no primary")

    matches = [
        index
        for index, spec in enumerate(_active(specifications))
        if is_valid_specification_type(spec.type) and _same_long_name(alias, spec)
    ]
    if not matches:
        raise ValueError(f"no specification matches {alias.mapped_argument!r}")
    if len(matches) == 1:
        return matches[0]

    def plain(spec: Specification) -> bool:
        return spec.default_value() is None

    def helped(spec: Specification) -> bool:
        return _has_text(spec.help)

    def unnamed(spec: Specification) -> bool:
        return not _has_text(spec.name)

    rules = (
        lambda s: plain(s) and helped(s) and unnamed(s),
        lambda s: plain(s) and helped(s),
        lambda s: helped(s) and unnamed(s),
        helped,
    )
    for rule in rules:
        for index in matches:
            if rule(specifications[index]):
                return index
    return matches[0]