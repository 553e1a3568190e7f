"""Monoalphabetic substitution cipher with user-defined alphabets."""

from .cipher import Cipher
from .mapping import (
    FormatError,
    ParseResult,
    SubstitutionTable,
    load_mapping_file,
    parse_mapping,
    parse_mapping_result,
)

__version__ = "0.1.0"
