# src/charselect/models.py
"""
Data models for the character selector.

- CharSelectGroup: the fixed, ordered set of browse categories.
- CatalogEntry: one selectable row (name, glyph, group).
- RankedMatch: a catalog index paired with its relevance score.

These classes carry no ranking or paging logic; the catalog, search and
selection modules operate on them.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .normalize import codepoints


class CharSelectGroup(enum.Enum):
    """Browse categories, in the order cycle_group() walks them."""

    SMILEYS_AND_EMOTION = "smileys_and_emotion"
    PEOPLE_AND_BODY = "people_and_body"
    ANIMALS_AND_NATURE = "animals_and_nature"
    FOOD_AND_DRINK = "food_and_drink"
    TRAVEL_AND_PLACES = "travel_and_places"
    ACTIVITIES = "activities"
    OBJECTS = "objects"
    SYMBOLS = "symbols"
    FLAGS = "flags"
    NERD_FONTS = "nerd_fonts"
    UNICODE_NAMES = "unicode_names"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def next(self) -> "CharSelectGroup":
        members = list(CharSelectGroup)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> "CharSelectGroup":
        members = list(CharSelectGroup)
        return members[(members.index(self) - 1) % len(members)]

    @classmethod
    def parse(cls, text: str) -> "CharSelectGroup":
        """Accept a member name, value or label (case-insensitive)."""
        key = text.strip().casefold()
        for g in cls:
            if key in (g.name.casefold(), g.value, g.label.casefold()):
                return g
        raise ValueError(f"unknown group: {text!r}")


_LABELS = {
    CharSelectGroup.SMILEYS_AND_EMOTION: "Smileys & Emotion",
    CharSelectGroup.PEOPLE_AND_BODY: "People & Body",
    CharSelectGroup.ANIMALS_AND_NATURE: "Animals & Nature",
    CharSelectGroup.FOOD_AND_DRINK: "Food & Drink",
    CharSelectGroup.TRAVEL_AND_PLACES: "Travel & Places",
    CharSelectGroup.ACTIVITIES: "Activities",
    CharSelectGroup.OBJECTS: "Objects",
    CharSelectGroup.SYMBOLS: "Symbols",
    CharSelectGroup.FLAGS: "Flags",
    CharSelectGroup.NERD_FONTS: "Nerd Fonts",
    CharSelectGroup.UNICODE_NAMES: "Unicode Names",
}


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """
    One catalog row.

    Attributes
    ----------
    name : str
        Display name. Not unique: an emoji's CLDR name and its shortcode are
        two entries pointing at the same glyph.
    glyph : str
        One or more scalar values (emoji may be ZWJ / modifier sequences).
    group : CharSelectGroup
        Browse category.
    """
    name: str
    glyph: str
    group: CharSelectGroup

    @property
    def codepoint_string(self) -> str:
        """'U+1F600' style tokens, space separated, uppercase, no zero padding."""
        return codepoints(self.glyph)


@dataclass(frozen=True, slots=True)
class RankedMatch:
    entry_index: int
    score: int   # only meaningful relative to other matches of the same query
