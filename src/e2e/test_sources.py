import pytest

from charselect.models import CharSelectGroup as G
from charselect.sources import emoji_rows, nerd_font_rows, unicode_name_rows
from charselect.sources.emoji_source import emoji_group


@pytest.mark.parametrize("cps,group", [
    ((0x1F600,), G.SMILEYS_AND_EMOTION),
    ((0x2764, 0xFE0F), G.SMILEYS_AND_EMOTION),
    ((0x1F44D, 0x1F3FD), G.PEOPLE_AND_BODY),
    ((0x1F468, 0x200D, 0x1F4BB), G.PEOPLE_AND_BODY),
    ((0x1F436,), G.ANIMALS_AND_NATURE),
    ((0x1F355,), G.FOOD_AND_DRINK),
    ((0x1F680,), G.TRAVEL_AND_PLACES),
    ((0x26BD,), G.ACTIVITIES),
    ((0x1F4BB,), G.OBJECTS),
    ((0x0031, 0xFE0F, 0x20E3), G.SYMBOLS),
    ((0x1F1EF, 0x1F1F5), G.FLAGS),
    ((0x1F3F4, 0xE0067, 0xE0062, 0xE0065, 0xE006E, 0xE0067, 0xE007F), G.FLAGS),
])
def test_emoji_group(cps, group):
    assert emoji_group(cps) is group


def test_emoji_rows_have_names_and_shortcodes():
    rows = list(emoji_rows())
    assert rows
    assert all(name and not name.startswith(":") for name, _, _ in rows)
    assert ("grinning face", (0x1F600,), G.SMILEYS_AND_EMOTION) in rows
    # alias shortcode follows its CLDR row
    i = rows.index(("grinning face", (0x1F600,), G.SMILEYS_AND_EMOTION))
    assert rows[i + 1] == ("grinning", (0x1F600,), G.SMILEYS_AND_EMOTION)


def test_emoji_rows_skip_unqualified():
    glyphs = {cps for _, cps, _ in emoji_rows()}
    # U+263A without VS16 is only "unqualified"
    assert (0x263A,) not in glyphs
    assert (0x263A, 0xFE0F) in glyphs


def test_unicode_name_rows_ascii():
    rows = list(unicode_name_rows(0x7F))
    assert ("latin small letter a", 0x61, G.UNICODE_NAMES) in rows
    assert ("space", 0x20, G.UNICODE_NAMES) in rows
    # control characters have no name
    assert all(cp >= 0x20 for _, cp, _ in rows)


def test_unicode_name_rows_skip_surrogates_and_derived():
    rows = list(unicode_name_rows(0xE000))
    assert not any(0xD800 <= cp <= 0xDFFF for _, cp, _ in rows)
    assert not any(name.startswith("hangul syllable ") for name, _, _ in rows)
    assert not any(cp == 0x4E00 for _, cp, _ in rows)


def test_nerd_font_rows():
    rows = list(nerd_font_rows())
    assert ("dev_git", 0xE702, G.NERD_FONTS) in rows
    assert len({name for name, _, _ in rows}) == len(rows)
    assert len(rows) > 10000
    assert ("md_github", 0xF02A4, G.NERD_FONTS) in rows
    assert ("iec_power", 0x23FB, G.NERD_FONTS) in rows
    assert all(0 < cp <= 0x10FFFF and not 0xD800 <= cp <= 0xDFFF for _, cp, _ in rows)
