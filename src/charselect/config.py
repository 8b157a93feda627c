from __future__ import annotations
from .models import CharSelectGroup

# /* ~~~ group shown when a session starts with no explicit group ~~~ */
DEFAULT_GROUP: CharSelectGroup = CharSelectGroup.SMILEYS_AND_EMOTION

# Rows a host shows when it does not supply its own viewport height
DEFAULT_VIEWPORT_HEIGHT: int = 10

# Result cap for the stateless web/CLI adapters
TOP_K: int = 25

# Unicode names scan
UNICODE_MAX_CODEPOINT: int = 0x10FFFF

# /* ~~~ algorithmically derived names: tens of thousands of rows that only
#        differ by the hex suffix, so they are left out of the catalog ~~~ */
UNICODE_SKIP_PREFIXES: tuple[str, ...] = (
    "CJK UNIFIED IDEOGRAPH-",
    "CJK COMPATIBILITY IDEOGRAPH-",
    "HANGUL SYLLABLE ",
    "TANGUT IDEOGRAPH-",
    "TANGUT COMPONENT-",
    "KHITAN SMALL SCRIPT CHARACTER-",
    "NUSHU CHARACTER-",
)

# Scorer weights (per matched character)
SCORE_MATCH: int = 16
BONUS_BOUNDARY: int = 8
BONUS_CAMEL: int = 7
BONUS_CONSECUTIVE: int = 4
BONUS_FIRST_CHAR_MULTIPLIER: int = 2

# Gap penalties (negative): first skipped char, then each further one
PENALTY_GAP_START: int = -3
PENALTY_GAP_EXTENSION: int = -1
