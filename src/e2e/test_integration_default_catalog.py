import time

import pytest

from charselect.catalog import build_catalog
from charselect.models import CharSelectGroup as G
from charselect.search import MAX_SCORE, rank, rank_matches
from charselect.selection import SelectionState


@pytest.fixture(scope="module")
def catalog():
    return build_catalog()


@pytest.mark.e2e
def test_all_sources_are_merged(catalog):
    assert len(catalog) > 30000
    groups = {e.group for e in catalog}
    assert G.SMILEYS_AND_EMOTION in groups
    assert G.FLAGS in groups
    assert G.NERD_FONTS in groups
    assert G.UNICODE_NAMES in groups


@pytest.mark.e2e
def test_emoji_come_first_then_unicode_then_nerd_fonts(catalog):
    assert catalog.group(0) is not G.UNICODE_NAMES
    assert catalog.group(len(catalog) - 1) is G.NERD_FONTS
    first_unicode = catalog.indices_in_group(G.UNICODE_NAMES)[0]
    assert all(catalog.group(i) is not G.UNICODE_NAMES for i in range(first_unicode))


@pytest.mark.e2e
def test_grinning_face_by_name(catalog):
    matches = rank_matches("grinning face", G.FLAGS, catalog)
    top = catalog.lookup(matches[0].entry_index)
    assert top.name == "grinning face"
    assert top.glyph == "\U0001F600"
    assert top.group is G.SMILEYS_AND_EMOTION
    assert matches[0].score == MAX_SCORE


@pytest.mark.e2e
def test_grinning_face_by_codepoint(catalog):
    idx = rank("U+1F600", G.FLAGS, catalog)[0]
    assert catalog.glyph(idx) == "\U0001F600"
    assert rank_matches("U+1F600", G.FLAGS, catalog)[0].score == MAX_SCORE
    assert rank("1f600", G.FLAGS, catalog)[0] == idx


@pytest.mark.e2e
def test_unicode_names_are_lowercase_and_skip_derived(catalog):
    names = [catalog.name(i) for i in catalog.indices_in_group(G.UNICODE_NAMES)]
    assert "latin small letter a" in names
    assert all(n == n.lower() for n in names)
    assert not any(n.startswith("cjk unified ideograph-") for n in names)
    assert not any(n.startswith("hangul syllable ") for n in names)


@pytest.mark.e2e
def test_regional_indicator_pairs_are_flags(catalog):
    japan = [e for e in catalog if e.glyph == "\U0001F1EF\U0001F1F5"]
    assert japan
    assert all(e.group is G.FLAGS for e in japan)


@pytest.mark.e2e
def test_nerd_font_glyph(catalog):
    idx = rank("dev_git", G.SMILEYS_AND_EMOTION, catalog)[0]
    assert catalog.glyph(idx) == "\ue702"
    assert catalog.codepoint_string(idx) == "U+E702"


@pytest.mark.e2e
def test_session_browse_and_type(catalog):
    state = SelectionState(catalog, G.SMILEYS_AND_EMOTION)
    browse = state.current_result()
    assert browse and all(catalog.group(i) is G.SMILEYS_AND_EMOTION for i in browse)
    for ch in "thumbs up":
        state.append_char(ch)
    assert catalog.name(state.confirm()) == "thumbs up"


def _best_of(fn, runs=3):
    best = float("inf")
    for _ in range(runs):
        t0 = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - t0)
    return best


@pytest.mark.e2e
@pytest.mark.parametrize("query", ["a", "e", "1", "smile", "thumbs up", "1F600"])
def test_keystroke_ranking_latency(catalog, query):
    took = _best_of(lambda: rank(query, G.SMILEYS_AND_EMOTION, catalog))
    limit = 0.15 if len(query) == 1 else 0.05
    assert took < limit, f"{query!r} took {took * 1000:.0f} ms"


@pytest.mark.e2e
def test_typing_session_latency(catalog):
    state = SelectionState(catalog, G.SMILEYS_AND_EMOTION)
    slowest = 0.0
    for ch in "grinning face":
        t0 = time.perf_counter()
        state.append_char(ch)
        state.visible_rows()
        slowest = max(slowest, time.perf_counter() - t0)
    assert catalog.name(state.confirm()) == "grinning face"
    assert slowest < 0.15
