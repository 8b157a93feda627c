from __future__ import annotations
import logging
from typing import Iterable, Tuple

import emoji

from ..models import CharSelectGroup as G

log = logging.getLogger(__name__)

# /* ~~~ EMOJI_DATA carries names, aliases and qualification status but no
#        CLDR group, so the group is recovered from the leading code point.
#        First matching range wins; anything unlisted lands in OBJECTS. ~~~ */
_GROUP_RANGES: tuple[tuple[int, int, G], ...] = (
    # flags that are not regional-indicator pairs
    (0x1F38C, 0x1F38C, G.FLAGS),
    (0x1F3C1, 0x1F3C1, G.FLAGS),
    (0x1F3F3, 0x1F3F4, G.FLAGS),
    (0x1F6A9, 0x1F6A9, G.FLAGS),
    # faces, hearts, emotion
    (0x1F479, 0x1F47D, G.SMILEYS_AND_EMOTION),
    (0x1F47F, 0x1F480, G.SMILEYS_AND_EMOTION),
    (0x1F48B, 0x1F48C, G.SMILEYS_AND_EMOTION),
    (0x1F493, 0x1F49F, G.SMILEYS_AND_EMOTION),
    (0x1F4A2, 0x1F4A6, G.SMILEYS_AND_EMOTION),
    (0x1F4A8, 0x1F4A9, G.SMILEYS_AND_EMOTION),
    (0x1F4AB, 0x1F4AF, G.SMILEYS_AND_EMOTION),
    (0x1F573, 0x1F573, G.SMILEYS_AND_EMOTION),
    (0x1F5A4, 0x1F5A4, G.SMILEYS_AND_EMOTION),
    (0x1F5E8, 0x1F5E8, G.SMILEYS_AND_EMOTION),
    (0x1F5EF, 0x1F5EF, G.SMILEYS_AND_EMOTION),
    (0x1F600, 0x1F644, G.SMILEYS_AND_EMOTION),
    (0x1F648, 0x1F64A, G.SMILEYS_AND_EMOTION),
    (0x1F90D, 0x1F90E, G.SMILEYS_AND_EMOTION),
    (0x1F910, 0x1F917, G.SMILEYS_AND_EMOTION),
    (0x1F920, 0x1F925, G.SMILEYS_AND_EMOTION),
    (0x1F927, 0x1F92F, G.SMILEYS_AND_EMOTION),
    (0x1F970, 0x1F976, G.SMILEYS_AND_EMOTION),
    (0x1F978, 0x1F97A, G.SMILEYS_AND_EMOTION),
    (0x1F9D0, 0x1F9D0, G.SMILEYS_AND_EMOTION),
    (0x1F9E1, 0x1F9E1, G.SMILEYS_AND_EMOTION),
    (0x1FA75, 0x1FA77, G.SMILEYS_AND_EMOTION),
    (0x1FAE0, 0x1FAEF, G.SMILEYS_AND_EMOTION),
    (0x2620, 0x2620, G.SMILEYS_AND_EMOTION),
    (0x2639, 0x263A, G.SMILEYS_AND_EMOTION),
    (0x2763, 0x2764, G.SMILEYS_AND_EMOTION),
    # hands, body parts, people
    (0x1F3C2, 0x1F3C4, G.PEOPLE_AND_BODY),
    (0x1F3C7, 0x1F3C7, G.PEOPLE_AND_BODY),
    (0x1F3CA, 0x1F3CC, G.PEOPLE_AND_BODY),
    (0x1F440, 0x1F450, G.PEOPLE_AND_BODY),
    (0x1F463, 0x1F478, G.PEOPLE_AND_BODY),
    (0x1F47C, 0x1F47C, G.PEOPLE_AND_BODY),
    (0x1F481, 0x1F483, G.PEOPLE_AND_BODY),
    (0x1F485, 0x1F487, G.PEOPLE_AND_BODY),
    (0x1F48F, 0x1F48F, G.PEOPLE_AND_BODY),
    (0x1F491, 0x1F491, G.PEOPLE_AND_BODY),
    (0x1F4AA, 0x1F4AA, G.PEOPLE_AND_BODY),
    (0x1F574, 0x1F575, G.PEOPLE_AND_BODY),
    (0x1F57A, 0x1F57A, G.PEOPLE_AND_BODY),
    (0x1F590, 0x1F596, G.PEOPLE_AND_BODY),
    (0x1F5E3, 0x1F5E3, G.PEOPLE_AND_BODY),
    (0x1F645, 0x1F64F, G.PEOPLE_AND_BODY),
    (0x1F6A3, 0x1F6A3, G.PEOPLE_AND_BODY),
    (0x1F6B4, 0x1F6B6, G.PEOPLE_AND_BODY),
    (0x1F6C0, 0x1F6C0, G.PEOPLE_AND_BODY),
    (0x1F6CC, 0x1F6CC, G.PEOPLE_AND_BODY),
    (0x1F90C, 0x1F90C, G.PEOPLE_AND_BODY),
    (0x1F90F, 0x1F90F, G.PEOPLE_AND_BODY),
    (0x1F918, 0x1F91F, G.PEOPLE_AND_BODY),
    (0x1F926, 0x1F926, G.PEOPLE_AND_BODY),
    (0x1F930, 0x1F93E, G.PEOPLE_AND_BODY),
    (0x1F977, 0x1F977, G.PEOPLE_AND_BODY),
    (0x1F9B5, 0x1F9BB, G.PEOPLE_AND_BODY),
    (0x1F9BE, 0x1F9BF, G.PEOPLE_AND_BODY),
    (0x1F9CD, 0x1F9CF, G.PEOPLE_AND_BODY),
    (0x1F9D1, 0x1F9DF, G.PEOPLE_AND_BODY),
    (0x1FAC0, 0x1FAC5, G.PEOPLE_AND_BODY),
    (0x1FAF0, 0x1FAF8, G.PEOPLE_AND_BODY),
    (0x261D, 0x261D, G.PEOPLE_AND_BODY),
    (0x26F7, 0x26F7, G.PEOPLE_AND_BODY),
    (0x26F9, 0x26F9, G.PEOPLE_AND_BODY),
    (0x270A, 0x270D, G.PEOPLE_AND_BODY),
    # animals and plants
    (0x1F331, 0x1F335, G.ANIMALS_AND_NATURE),
    (0x1F337, 0x1F33C, G.ANIMALS_AND_NATURE),
    (0x1F33E, 0x1F343, G.ANIMALS_AND_NATURE),
    (0x1F3F5, 0x1F3F5, G.ANIMALS_AND_NATURE),
    (0x1F400, 0x1F43F, G.ANIMALS_AND_NATURE),
    (0x1F490, 0x1F490, G.ANIMALS_AND_NATURE),
    (0x1F4AE, 0x1F4AE, G.ANIMALS_AND_NATURE),
    (0x1F54A, 0x1F54A, G.ANIMALS_AND_NATURE),
    (0x1F577, 0x1F578, G.ANIMALS_AND_NATURE),
    (0x1F940, 0x1F940, G.ANIMALS_AND_NATURE),
    (0x1F980, 0x1F9AE, G.ANIMALS_AND_NATURE),
    (0x1FAB0, 0x1FABF, G.ANIMALS_AND_NATURE),
    (0x2618, 0x2618, G.ANIMALS_AND_NATURE),
    # food and drink
    (0x1F32D, 0x1F330, G.FOOD_AND_DRINK),
    (0x1F336, 0x1F336, G.FOOD_AND_DRINK),
    (0x1F33D, 0x1F33D, G.FOOD_AND_DRINK),
    (0x1F344, 0x1F37F, G.FOOD_AND_DRINK),
    (0x1F942, 0x1F944, G.FOOD_AND_DRINK),
    (0x1F950, 0x1F96F, G.FOOD_AND_DRINK),
    (0x1F9C0, 0x1F9CB, G.FOOD_AND_DRINK),
    (0x1FAD0, 0x1FADB, G.FOOD_AND_DRINK),
    (0x2615, 0x2615, G.FOOD_AND_DRINK),
    # activities, events, games
    (0x1F004, 0x1F004, G.ACTIVITIES),
    (0x1F0CF, 0x1F0CF, G.ACTIVITIES),
    (0x1F380, 0x1F391, G.ACTIVITIES),
    (0x1F396, 0x1F397, G.ACTIVITIES),
    (0x1F39F, 0x1F39F, G.ACTIVITIES),
    (0x1F3A3, 0x1F3A3, G.ACTIVITIES),
    (0x1F3A8, 0x1F3A8, G.ACTIVITIES),
    (0x1F3AB, 0x1F3AB, G.ACTIVITIES),
    (0x1F3AD, 0x1F3B4, G.ACTIVITIES),
    (0x1F3BD, 0x1F3C0, G.ACTIVITIES),
    (0x1F3C5, 0x1F3C6, G.ACTIVITIES),
    (0x1F3C8, 0x1F3C9, G.ACTIVITIES),
    (0x1F3CF, 0x1F3D3, G.ACTIVITIES),
    (0x1F945, 0x1F94F, G.ACTIVITIES),
    (0x1F9E7, 0x1F9E9, G.ACTIVITIES),
    (0x1FA80, 0x1FA8F, G.ACTIVITIES),
    (0x265F, 0x2666, G.ACTIVITIES),
    (0x26BD, 0x26BE, G.ACTIVITIES),
    (0x26F3, 0x26F3, G.ACTIVITIES),
    (0x26F8, 0x26F8, G.ACTIVITIES),
    (0x2728, 0x2728, G.ACTIVITIES),
    # places, transport, sky and weather, time
    (0x1F300, 0x1F32C, G.TRAVEL_AND_PLACES),
    (0x1F3A0, 0x1F3A2, G.TRAVEL_AND_PLACES),
    (0x1F3AA, 0x1F3AA, G.TRAVEL_AND_PLACES),
    (0x1F3CD, 0x1F3CE, G.TRAVEL_AND_PLACES),
    (0x1F3D4, 0x1F3F0, G.TRAVEL_AND_PLACES),
    (0x1F488, 0x1F488, G.TRAVEL_AND_PLACES),
    (0x1F492, 0x1F492, G.TRAVEL_AND_PLACES),
    (0x1F54B, 0x1F54E, G.TRAVEL_AND_PLACES),
    (0x1F550, 0x1F567, G.TRAVEL_AND_PLACES),
    (0x1F5FA, 0x1F5FF, G.TRAVEL_AND_PLACES),
    (0x1F680, 0x1F6A2, G.TRAVEL_AND_PLACES),
    (0x1F6A4, 0x1F6AA, G.TRAVEL_AND_PLACES),
    (0x1F6B2, 0x1F6B2, G.TRAVEL_AND_PLACES),
    (0x1F6C1, 0x1F6C1, G.TRAVEL_AND_PLACES),
    (0x1F6D1, 0x1F6FF, G.TRAVEL_AND_PLACES),
    (0x1F9BC, 0x1F9BD, G.TRAVEL_AND_PLACES),
    (0x1F9F1, 0x1F9F1, G.TRAVEL_AND_PLACES),
    (0x1FA90, 0x1FA90, G.TRAVEL_AND_PLACES),
    (0x231A, 0x231B, G.TRAVEL_AND_PLACES),
    (0x23F0, 0x23F3, G.TRAVEL_AND_PLACES),
    (0x2600, 0x2604, G.TRAVEL_AND_PLACES),
    (0x2614, 0x2614, G.TRAVEL_AND_PLACES),
    (0x26A1, 0x26A1, G.TRAVEL_AND_PLACES),
    (0x26C4, 0x26C8, G.TRAVEL_AND_PLACES),
    (0x26E9, 0x26FA, G.TRAVEL_AND_PLACES),
    (0x2708, 0x2708, G.TRAVEL_AND_PLACES),
    (0x2744, 0x2744, G.TRAVEL_AND_PLACES),
    (0x2B50, 0x2B50, G.TRAVEL_AND_PLACES),
    # signs, arrows, geometric shapes, alphanumerics
    (0x0023, 0x0039, G.SYMBOLS),
    (0x00A9, 0x00AE, G.SYMBOLS),
    (0x1F170, 0x1F251, G.SYMBOLS),
    (0x1F3A6, 0x1F3A6, G.SYMBOLS),
    (0x1F4A0, 0x1F4A0, G.SYMBOLS),
    (0x1F4B1, 0x1F4B2, G.SYMBOLS),
    (0x1F4F3, 0x1F4F6, G.SYMBOLS),
    (0x1F500, 0x1F53D, G.SYMBOLS),
    (0x1F549, 0x1F549, G.SYMBOLS),
    (0x1F6AB, 0x1F6B1, G.SYMBOLS),
    (0x1F6B7, 0x1F6BF, G.SYMBOLS),
    (0x1F6D0, 0x1F6D0, G.SYMBOLS),
    (0x1F7E0, 0x1F7F0, G.SYMBOLS),
    (0x203C, 0x2049, G.SYMBOLS),
    (0x2122, 0x2139, G.SYMBOLS),
    (0x2194, 0x21AA, G.SYMBOLS),
    (0x23E9, 0x23EF, G.SYMBOLS),
    (0x23F8, 0x24C2, G.SYMBOLS),
    (0x25AA, 0x25FE, G.SYMBOLS),
    (0x2611, 0x2611, G.SYMBOLS),
    (0x2622, 0x2653, G.SYMBOLS),
    (0x267B, 0x267F, G.SYMBOLS),
    (0x2695, 0x26A0, G.SYMBOLS),
    (0x26A7, 0x26AB, G.SYMBOLS),
    (0x26CE, 0x26CE, G.SYMBOLS),
    (0x26D4, 0x26D4, G.SYMBOLS),
    (0x2705, 0x2705, G.SYMBOLS),
    (0x2714, 0x2721, G.SYMBOLS),
    (0x2733, 0x2734, G.SYMBOLS),
    (0x2747, 0x2757, G.SYMBOLS),
    (0x2795, 0x27BF, G.SYMBOLS),
    (0x2934, 0x2935, G.SYMBOLS),
    (0x2B05, 0x2B1C, G.SYMBOLS),
    (0x2B55, 0x2B55, G.SYMBOLS),
    (0x3030, 0x303D, G.SYMBOLS),
    (0x3297, 0x3299, G.SYMBOLS),
)

# man, woman, person, boy, girl, baby: ZWJ sequences built on these are people
_PERSON_BASES = frozenset((0x1F466, 0x1F467, 0x1F468, 0x1F469, 0x1F476, 0x1F9D1))
_ZWJ = 0x200D
_KEYCAP = 0x20E3


def emoji_group(cps: tuple[int, ...]) -> G:
    if any(0x1F1E6 <= c <= 0x1F1FF or 0xE0020 <= c <= 0xE007F for c in cps):
        return G.FLAGS
    if _KEYCAP in cps:
        return G.SYMBOLS
    if any(0x1F3FB <= c <= 0x1F3FF for c in cps):
        return G.PEOPLE_AND_BODY
    if _ZWJ in cps and any(c in _PERSON_BASES for c in cps):
        return G.PEOPLE_AND_BODY
    first = cps[0]
    for lo, hi, group in _GROUP_RANGES:
        if lo <= first <= hi:
            return group
    return G.OBJECTS


def _clean_name(text: str) -> str:
    return text.strip(":").replace("_", " ")


def emoji_rows() -> Iterable[Tuple[str, tuple[int, ...], G]]:
    """
    Yield the CLDR name row for every fully-qualified emoji, followed by one
    row per alias shortcode that differs from that name.
    """
    fully_qualified = emoji.STATUS["fully_qualified"]
    for glyph, info in emoji.EMOJI_DATA.items():
        if info.get("status") != fully_qualified:
            continue
        name = _clean_name(info.get("en") or "")
        if not name:
            continue
        cps = tuple(ord(ch) for ch in glyph)
        group = emoji_group(cps)
        yield name, cps, group
        seen = {name}
        for alias in info.get("alias") or []:
            short = alias.strip(":")
            if short and short not in seen:
                seen.add(short)
                yield short, cps, group
