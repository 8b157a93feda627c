import pytest

from charselect.models import CharSelectGroup as G
from charselect.normalize import codepoints, fold, is_hex_query, numeric_query
from charselect.search import MAX_SCORE, rank, rank_matches


@pytest.mark.parametrize("query", ["1F600", "1f600", "U+1F600", "U+1f600"])
def test_exact_codepoint_query_hits_every_entry_with_that_glyph(glyph_catalog, query):
    matches = rank_matches(query, G.FLAGS, glyph_catalog)
    # three entries share U+1F600; ties keep catalog order
    assert [m.entry_index for m in matches] == [0, 1, 6]
    assert all(m.score == MAX_SCORE for m in matches)


def test_partial_codepoint_is_fuzzy(glyph_catalog):
    matches = rank_matches("1F60", G.FLAGS, glyph_catalog)
    assert [m.entry_index for m in matches] == [0, 1, 2, 6]
    assert all(m.score < MAX_SCORE for m in matches)


def test_sequence_codepoints_match_on_any_token(glyph_catalog):
    assert rank("1F3FD", G.FLAGS, glyph_catalog) == [4]
    # exact string equality covers the whole sequence, not one token
    assert rank_matches("1F3FD", G.FLAGS, glyph_catalog)[0].score < MAX_SCORE


def test_private_use_codepoint(glyph_catalog):
    assert rank("e702", G.FLAGS, glyph_catalog) == [8]


def test_non_hex_query_skips_codepoint_path(glyph_catalog):
    # trailing non-hex char: names only, and no name contains it
    assert rank("1F600x", G.FLAGS, glyph_catalog) == []


@pytest.mark.parametrize("query,expected", [
    ("1F600", "U+1F600"),
    ("1f600", "U+1F600"),
    ("U+1F600", "U+1F600"),
    ("U+1f600", "U+1F600"),
    ("a", "U+A"),
    ("face", "U+FACE"),
    ("grin", None),
    ("", None),
    ("u+1f600", None),
    ("1F600 ", None),
])
def test_numeric_query(query, expected):
    assert numeric_query(query) == expected


def test_is_hex_query():
    assert is_hex_query("deadBEEF")
    assert not is_hex_query("")
    assert not is_hex_query("0x1F")


def test_codepoints_rendering():
    assert codepoints("a") == "U+61"
    assert codepoints("\U0001F44D\U0001F3FD") == "U+1F44D U+1F3FD"
    assert codepoints("é") == "U+E9"


def test_fold_keeps_length():
    # "İ".lower() is two code points; fold leaves it alone
    assert len(fold("İstanbul")) == len("İstanbul")
    assert fold("Grinning FACE") == "grinning face"
