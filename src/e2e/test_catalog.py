import pytest

from charselect.catalog import Catalog, CatalogError, build_catalog
from charselect.models import CatalogEntry, CharSelectGroup as G


def test_sources_are_merged_in_order_and_duplicates_kept(glyph_catalog):
    names = [e.name for e in glyph_catalog]
    assert names[:3] == ["grinning face", "grinning", "grinning squinting face"]
    # same name + glyph from two sources stays two entries
    assert names.count("grinning face") == 2
    assert glyph_catalog.group(0) is G.SMILEYS_AND_EMOTION
    assert glyph_catalog.group(6) is G.UNICODE_NAMES


def test_build_is_reproducible():
    def rows():
        yield "b", 0x62, G.SYMBOLS
        yield "a", (0x61, 0x301), G.SYMBOLS
    assert list(build_catalog([rows])) == list(build_catalog([rows]))


def test_codepoint_string_single_and_sequence(glyph_catalog):
    assert glyph_catalog.codepoint_string(0) == "U+1F600"
    assert glyph_catalog.codepoint_string(4) == "U+1F44D U+1F3FD"
    # no zero padding, uppercase hex
    assert glyph_catalog.codepoint_string(7) == "U+61"
    assert glyph_catalog.codepoint_string(8) == "U+E702"
    assert glyph_catalog.lookup(4).codepoint_string == "U+1F44D U+1F3FD"


def test_accessors_and_display_row(glyph_catalog):
    assert glyph_catalog.name(3) == "thumbs up"
    assert glyph_catalog.glyph(3) == "\U0001F44D"
    assert glyph_catalog.display_row(5) == "\U0001F1EF\U0001F1F5 flag: Japan (U+1F1EF U+1F1F5)"


def test_indices_in_group_follow_catalog_order(glyph_catalog):
    assert glyph_catalog.indices_in_group(G.SMILEYS_AND_EMOTION) == (0, 1, 2)
    assert glyph_catalog.indices_in_group(G.UNICODE_NAMES) == (6, 7)
    assert glyph_catalog.indices_in_group(G.OBJECTS) == ()


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_lookup_out_of_range_is_an_error(tiny_catalog, index):
    with pytest.raises(IndexError):
        tiny_catalog.lookup(index)


@pytest.mark.parametrize("value", [0xD800, 0x110000, -5, (), (0x61, 0xDFFF)])
def test_malformed_source_row_aborts_build(value):
    def bad_rows():
        yield "ok", 0x61, G.UNICODE_NAMES
        yield "broken", value, G.UNICODE_NAMES
    with pytest.raises(CatalogError):
        build_catalog([bad_rows])


def test_unknown_group_aborts_build():
    def bad_rows():
        yield "x", 0x78, "symbols"
    with pytest.raises(CatalogError):
        build_catalog([bad_rows])


def test_catalog_error_is_a_value_error():
    assert issubclass(CatalogError, ValueError)


def test_empty_catalog():
    cat = Catalog()
    assert len(cat) == 0
    assert cat.indices_in_group(G.SMILEYS_AND_EMOTION) == ()
    with pytest.raises(IndexError):
        cat.lookup(0)


def test_entries_are_immutable():
    e = CatalogEntry(name="a", glyph="a", group=G.SYMBOLS)
    with pytest.raises(AttributeError):
        e.name = "b"  # type: ignore[misc]
