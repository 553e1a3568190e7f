"""Mapping specification parser for monoalphabetic substitution.

A mapping specification is plain text, one rule per line:

    # comment
    a = x
    b=y

Blank lines and lines starting with '#' are skipped. Only the first
character of each side of a rule is used, unless strict mode is on.
"""

from types import MappingProxyType
from typing import Dict, Iterator, NamedTuple, Optional, Tuple

MISSING_SEPARATOR = "missing separator"
EMPTY_KEY = "empty key"
EMPTY_VALUE = "empty value"
DUPLICATE_KEY = "duplicate key"
DUPLICATE_VALUE = "duplicate value"
MULTI_CHAR = "multi-character side"


class FormatError(ValueError):
    """A mapping specification line that cannot be used."""

    def __init__(self, line_number: int, category: str, line: str):
        self.line_number = line_number
        self.category = category
        self.line = line
        super().__init__(f"line {line_number}: {category} in '{line}'")


class SubstitutionTable:
    """Forward and inverse character tables, built together and read-only."""

    def __init__(self, forward: Dict[str, str], inverse: Optional[Dict[str, str]] = None):
        derived = {v: k for k, v in forward.items()}
        if len(derived) != len(forward):
            raise ValueError("substitution table maps two characters to the same value")
        if inverse is not None and dict(inverse) != derived:
            raise ValueError("inverse table does not match the forward table")
        self._forward = MappingProxyType(dict(forward))
        self._inverse = MappingProxyType(derived)

    @property
    def forward(self):
        return self._forward

    @property
    def inverse(self):
        return self._inverse

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, ch) -> bool:
        return ch in self._forward

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._forward.items())

    def __eq__(self, other) -> bool:
        if not isinstance(other, SubstitutionTable):
            return NotImplemented
        return dict(self._forward) == dict(other._forward)

    def __repr__(self) -> str:
        return f"SubstitutionTable({dict(self._forward)!r})"


class ParseResult(NamedTuple):
    """Outcome of a parse: exactly one of table / error is set."""
    table: Optional[SubstitutionTable] = None
    error: Optional[FormatError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _fail(line_number: int, category: str, line: str) -> ParseResult:
    return ParseResult(error=FormatError(line_number, category, line))


def parse_mapping_result(text: str, strict: bool = False) -> ParseResult:
    """
    Parse a mapping specification without raising.
    Stops at the first bad line; nothing is returned for a partial table.
    """
    forward: Dict[str, str] = {}
    inverse: Dict[str, str] = {}

    for line_number, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        key_part, sep, value_part = line.partition("=")
        if not sep:
            return _fail(line_number, MISSING_SEPARATOR, line)
        key_part = key_part.strip()
        value_part = value_part.strip()

        if not key_part:
            return _fail(line_number, EMPTY_KEY, line)
        if not value_part:
            return _fail(line_number, EMPTY_VALUE, line)
        if strict and (len(key_part) > 1 or len(value_part) > 1):
            return _fail(line_number, MULTI_CHAR, line)

        plain, subst = key_part[0], value_part[0]
        if plain in forward:
            return _fail(line_number, DUPLICATE_KEY, plain)
        if subst in inverse:
            return _fail(line_number, DUPLICATE_VALUE, subst)

        forward[plain] = subst
        inverse[subst] = plain

    return ParseResult(table=SubstitutionTable(forward, inverse))


def parse_mapping(text: str, strict: bool = False) -> SubstitutionTable:
    """Parse a mapping specification, raising FormatError on the first bad line."""
    result = parse_mapping_result(text, strict=strict)
    if not result.ok:
        raise result.error
    return result.table


def load_mapping_file(path: str, strict: bool = False) -> SubstitutionTable:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ValueError(f"mapping file {path} is not valid UTF-8 ({e.reason} at byte {e.start})") from e
    return parse_mapping(text, strict=strict)


def format_mapping(table: SubstitutionTable) -> str:
    """Serialise a table back into specification text (one 'k = v' per line)."""
    for k, v in table:
        # '#' opens a comment and '=' is the separator, so neither can be a key
        if k in "#=" or k.isspace() or v.isspace():
            raise ValueError(f"pair {k!r} -> {v!r} cannot be written as a mapping rule")
    return "".join(f"{k} = {v}\n" for k, v in table)
