from __future__ import annotations
import unicodedata
from typing import Iterable, Tuple

from ..models import CharSelectGroup
from .. import config as CFG


def unicode_name_rows(max_codepoint: int | None = None) -> Iterable[Tuple[str, int, CharSelectGroup]]:
    """Yield (lowercased name, code point, UNICODE_NAMES) for every named scalar value."""
    end = CFG.UNICODE_MAX_CODEPOINT if max_codepoint is None else max_codepoint
    skip = CFG.UNICODE_SKIP_PREFIXES
    for cp in range(0, end + 1):
        # Skip surrogates; these are not real scalar values
        if 0xD800 <= cp <= 0xDFFF:
            continue
        name = unicodedata.name(chr(cp), None)
        if not name or name.startswith(skip):
            continue
        yield name.lower(), cp, CharSelectGroup.UNICODE_NAMES
