import pytest

from charselect.catalog import build_catalog
from charselect.models import CharSelectGroup as G
from charselect.search import MAX_SCORE, fuzzy_score, rank, rank_matches


def _catalog(*names, group=G.SYMBOLS):
    def rows():
        for i, n in enumerate(names):
            yield n, 0x2190 + i, group
    return build_catalog([rows])


def test_empty_query_browses_group_in_catalog_order(tiny_catalog):
    assert rank("", G.SMILEYS_AND_EMOTION, tiny_catalog) == [0, 1]
    assert rank("", G.PEOPLE_AND_BODY, tiny_catalog) == [2]
    assert rank("", G.FLAGS, tiny_catalog) == []
    assert all(m.score == 0 for m in rank_matches("", G.SMILEYS_AND_EMOTION, tiny_catalog))


def test_exact_name_ranks_first(tiny_catalog):
    matches = rank_matches("grin", G.SMILEYS_AND_EMOTION, tiny_catalog)
    assert [m.entry_index for m in matches] == [1, 0]
    assert matches[0].score == MAX_SCORE
    assert matches[1].score < MAX_SCORE


def test_exact_name_beats_longer_prefix_match():
    cat = _catalog("abc", "ab")
    assert rank("ab", G.SYMBOLS, cat) == [1, 0]


def test_ties_keep_catalog_order():
    cat = _catalog("alpha one", "alpha two", "alpha three")
    matches = rank_matches("alpha", G.SYMBOLS, cat)
    assert [m.entry_index for m in matches] == [0, 1, 2]
    assert len({m.score for m in matches}) == 1


def test_word_start_run_beats_scattered_match():
    cat = _catalog("coat", "cat face")
    matches = rank_matches("cat", G.SYMBOLS, cat)
    assert [m.entry_index for m in matches] == [1, 0]
    assert [m.score for m in matches] == [80, 65]


def test_non_empty_query_ignores_group(tiny_catalog):
    assert rank("frown", G.FLAGS, tiny_catalog) == [2]
    assert rank("n", G.FLAGS, tiny_catalog) == [0, 1, 2]


def test_no_match_is_empty(tiny_catalog):
    assert rank("zzz", G.SMILEYS_AND_EMOTION, tiny_catalog) == []


def test_smart_case():
    cat = _catalog("Grinning Face", "grinning face")
    assert rank("face", G.SYMBOLS, cat) == [0, 1]
    assert rank("Face", G.SYMBOLS, cat) == [0]
    assert rank("FACE", G.SYMBOLS, cat) == []


def test_hex_looking_word_still_matches_names(glyph_catalog):
    # "face" is also valid hex (U+FACE) but no code point string contains it
    assert rank("face", G.SMILEYS_AND_EMOTION, glyph_catalog) == [0, 2, 6]


def test_regex_metacharacters_are_literal():
    cat = _catalog("a.b", "axb", "a+b (plus)")
    assert rank("a.b", G.SYMBOLS, cat) == [0]
    assert rank("(plus)", G.SYMBOLS, cat) == [2]


def test_ranking_is_deterministic(glyph_catalog):
    first = rank_matches("gri", G.FLAGS, glyph_catalog)
    assert rank_matches("gri", G.FLAGS, glyph_catalog) == first


@pytest.mark.parametrize("text,pattern", [
    ("abc", ""),
    ("", "a"),
    ("abc", "ca"),
    ("abc", "abcd"),
    ("abc", "B"),
])
def test_fuzzy_score_rejects(text, pattern):
    assert fuzzy_score(text, pattern) is None


def test_fuzzy_score_prefers_boundaries():
    assert fuzzy_score("grinning face", "gf") > fuzzy_score("grinning zface", "gf")
    assert fuzzy_score("pl_branch", "br") > fuzzy_score("plbranch", "br")


def test_fuzzy_score_camel_hump_bonus():
    assert fuzzy_score("fooBar", "fB") > fuzzy_score("foozar", "fz")


def test_fuzzy_score_tightens_window():
    # both pick the tight "ab" at the end; the leading junk is outside the window
    assert fuzzy_score("a--ab", "ab") == fuzzy_score("ab", "ab")


@pytest.mark.parametrize("query", ["g", "gri", "face", "up", "U+1F", "1f60", "e", "Fa", "t: J"])
def test_ranked_scores_agree_with_per_entry_scoring(glyph_catalog, query):
    from charselect.normalize import numeric_query
    from charselect.search import score_entry

    matches = rank_matches(query, G.FLAGS, glyph_catalog)
    numeric = numeric_query(query)
    expected = {i: score_entry(i, query, glyph_catalog, numeric) for i in range(len(glyph_catalog))}
    assert {m.entry_index: m.score for m in matches} == {i: s for i, s in expected.items() if s is not None}
    assert rank(query, G.FLAGS, glyph_catalog) == [m.entry_index for m in matches]


def test_matches_never_span_rows():
    # "ab" only appears across the boundary between two names
    cat = _catalog("xa", "bx")
    assert rank("ab", G.SYMBOLS, cat) == []
    assert rank("a", G.SYMBOLS, cat) == [0]


def test_names_with_newlines_are_rejected():
    from charselect.catalog import CatalogError

    def rows():
        yield "two\nlines", 0x61, G.SYMBOLS
    with pytest.raises(CatalogError):
        build_catalog([rows])


def test_query_with_newline_matches_nothing(tiny_catalog):
    assert rank("g\nr", G.SMILEYS_AND_EMOTION, tiny_catalog) == []
