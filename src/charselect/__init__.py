"""
Character Selector Engine

Incremental fuzzy search and paginated selection over a static catalog of
named symbols: emoji (CLDR names and shortcodes), Unicode character names
and Nerd Font glyphs.

The package is split along the same seams as the picker it powers:
- Catalog: immutable, index-addressed table built once from the sources
- Search: fuzzy subsequence ranking plus the U+<hex> code point path
- SelectionState: query/group input, memoized result, cursor and viewport
- Engine: owns one catalog and hands out sessions

Main Functions:
    build_catalog(): merge the compiled-in source tables
    rank(query, group, catalog): ordered catalog indices for a query

Example Usage:
    from charselect import build_catalog, SelectionState, CharSelectGroup

    catalog = build_catalog()
    state = SelectionState(catalog, CharSelectGroup.SMILEYS_AND_EMOTION)
    for ch in "thumbs":
        state.append_char(ch)
    if state.current_result():
        print(catalog.glyph(state.confirm()))
"""

# src/charselect/__init__.py
from .models import CatalogEntry, CharSelectGroup, RankedMatch  # re-export
from .catalog import Catalog, CatalogError, build_catalog
from .search import MAX_SCORE, fuzzy_score, rank, rank_matches
from .selection import EmptySelectionError, SelectionState
from .engine import Engine

__version__ = "1.0.0"
__all__ = [
    "Catalog", "CatalogEntry", "CatalogError", "CharSelectGroup", "EmptySelectionError",
    "Engine", "MAX_SCORE", "RankedMatch", "SelectionState",
    "build_catalog", "fuzzy_score", "rank", "rank_matches",
]
