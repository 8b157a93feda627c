import os

import pytest

from charselect import Engine, MAX_SCORE
from charselect.models import CharSelectGroup as G


def _rows():
    yield "grinning", 0x1F600, G.SMILEYS_AND_EMOTION
    yield "grin", 0x1F601, G.SMILEYS_AND_EMOTION
    yield "frown", 0x2639, G.PEOPLE_AND_BODY


@pytest.fixture
def engine():
    eng = Engine()
    eng.build(sources=[_rows])
    yield eng
    eng.shutdown()


def test_engine_requires_build():
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.search("grin")
    with pytest.raises(RuntimeError):
        eng.new_session()
    with pytest.raises(RuntimeError):
        eng.glyph(0)


def test_search_row_schema(engine):
    rows = engine.search("grin")
    assert rows[0] == {
        "index": 1,
        "name": "grin",
        "glyph": "\U0001F601",
        "codepoints": "U+1F601",
        "group": "smileys_and_emotion",
        "score": MAX_SCORE,
    }
    assert [r["index"] for r in rows] == [1, 0]


def test_search_empty_query_uses_default_group(engine):
    assert [r["index"] for r in engine.search("")] == [0, 1]
    assert [r["index"] for r in engine.search("", G.PEOPLE_AND_BODY)] == [2]


@pytest.mark.parametrize("limit,expected", [(None, 2), (1, 1), (0, 0), (-3, 0), (99, 2)])
def test_search_limit(engine, limit, expected):
    assert len(engine.search("gri", limit=limit)) == expected


def test_new_session_and_confirm(engine):
    state = engine.new_session(G.PEOPLE_AND_BODY, viewport_height=4)
    assert state.group is G.PEOPLE_AND_BODY
    assert state.viewport_height == 4
    assert engine.glyph(state.confirm()) == "\u2639"


def test_new_session_default_group(engine):
    assert engine.new_session().group is G.SMILEYS_AND_EMOTION


def test_shutdown_drops_catalog():
    eng = Engine()
    eng.build(sources=[_rows])
    assert len(eng.catalog) == 3
    eng.shutdown()
    assert eng.catalog is None
    with pytest.raises(RuntimeError):
        eng.search("")


def test_verbose_build_sets_env(monkeypatch):
    monkeypatch.setenv("CHARSELECT_VERBOSE", "0")
    eng = Engine()
    eng.build(sources=[_rows], verbose=True)
    assert os.environ["CHARSELECT_VERBOSE"] == "1"
    eng.shutdown()


def test_build_logs_entry_count(caplog):
    caplog.set_level("INFO", logger="charselect")
    Engine().build(sources=[_rows])
    assert "3 catalog entries" in caplog.text
