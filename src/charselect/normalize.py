from __future__ import annotations
from typing import Optional

_HEX = frozenset("0123456789abcdefABCDEF")

# Characters after which a match counts as a word-boundary hit
_SEPARATORS = frozenset(" _-:/.,+()")


def codepoints(glyph: str) -> str:
    """Render each scalar value as U+<HEX>, space separated, e.g. 'U+1F44D U+1F3FD'."""
    return " ".join(f"U+{ord(ch):X}" for ch in glyph)


def is_hex_query(query: str) -> bool:
    return bool(query) and all(ch in _HEX for ch in query)


def numeric_query(query: str) -> Optional[str]:
    """
    /* ~~~ Normalized 'U+<HEX>' form of a query that looks like a code point,
           or None when the query should only be matched against names.
           Hex digits are uppercased so '1f600' and '1F600' behave the same. ~~~ */
    """
    if is_hex_query(query):
        return "U+" + query.upper()
    if query.startswith("U+"):
        return "U+" + query[2:].upper()
    return None


def is_smart_case_sensitive(pattern: str) -> bool:
    """An uppercase letter anywhere in the pattern switches matching to case-sensitive."""
    return any(ch.isupper() for ch in pattern)


def fold(text: str) -> str:
    """Lowercase char by char, keeping index alignment with the original text."""
    return "".join(lo if len(lo) == 1 else ch for ch, lo in ((ch, ch.lower()) for ch in text))


def is_boundary(prev: str) -> bool:
    return prev in _SEPARATORS or prev.isspace()


def is_camel_hump(prev: str, ch: str) -> bool:
    return (prev.islower() and ch.isupper()) or (not prev.isdigit() and ch.isdigit())
