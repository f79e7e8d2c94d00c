"""Input normalization for the code field."""

import re

from .config import CODE_LENGTH

_DISALLOWED = re.compile(r"[^A-Z0-9]")


def normalize(raw: str) -> str:
    """Uppercase raw text, strip everything outside A-Z/0-9, truncate.

    Never fails: any string maps to a code of length 0..CODE_LENGTH.
    Uppercasing happens first so lowercase letters survive. Full Unicode
    case mapping applies, so "ß" becomes "SS" while other non-ASCII
    letters are dropped.
    """
    return _DISALLOWED.sub("", raw.upper())[:CODE_LENGTH]
