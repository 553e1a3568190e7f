import string

from Crypto.Random import random as crandom

from .mapping import SubstitutionTable

ALPHABET = string.ascii_uppercase


def _check_charset(charset: str) -> None:
    if not charset:
        raise ValueError("Character set must not be empty.")
    if len(set(charset)) != len(charset):
        raise ValueError("Character set must not contain repeated characters.")


def _table(plain: str, cipher: str) -> SubstitutionTable:
    return SubstitutionTable(dict(zip(plain, cipher)))


def _in_charset(ch: str, charset: str) -> str:
    """Return `ch` in the case the charset uses, or '' if the charset lacks it."""
    for candidate in (ch, ch.upper(), ch.lower()):
        if len(candidate) == 1 and candidate in charset:
            return candidate
    return ""


def random_mapping(charset: str = ALPHABET) -> SubstitutionTable:
    """
    Generate a random substitution over `charset`.
    Each character maps to a unique character of the same set (random permutation).
    """
    _check_charset(charset)
    shuffled = list(charset)
    crandom.shuffle(shuffled)
    return _table(charset, "".join(shuffled))


def keyword_mapping(keyword: str, charset: str = ALPHABET) -> SubstitutionTable:
    """
    Keyword cipher alphabet: the keyword (matched against the charset ignoring
    case, characters outside it dropped, duplicates removed) followed by the
    unused characters.
    """
    _check_charset(charset)
    keyword = "".join(_in_charset(ch, charset) for ch in keyword)
    keyword = "".join(dict.fromkeys(keyword))
    if not keyword:
        raise ValueError("Keyword must contain at least one character from the character set.")
    rest = "".join(ch for ch in charset if ch not in keyword)
    return _table(charset, keyword + rest)


def mapping_table(table: SubstitutionTable) -> str:
    """
    Render a mapping as a two-row table:
      - Top row: plain characters
      - Bottom row: corresponding cipher characters
    """
    pairs = list(table)
    if not pairs:
        return ""
    col_width = 2
    plain_row = " " + " ".join(k.center(col_width) for k, _ in pairs) + " "
    border = " " + "+".join(["-" * col_width] * len(pairs)) + " "
    cipher_row = " " + " ".join(v.center(col_width) for _, v in pairs) + " "
    return "\n".join([plain_row, border, cipher_row])
