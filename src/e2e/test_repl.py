import pytest

import charselect.catalog as catalog_mod
from charselect.__main__ import CONFIRM, CONTINUE, QUIT, handle_line, main, render
from charselect.models import CharSelectGroup as G
from charselect.selection import SelectionState


def _rows():
    yield "grinning", 0x1F600, G.SMILEYS_AND_EMOTION
    yield "grin", 0x1F601, G.SMILEYS_AND_EMOTION
    yield "frown", 0x2639, G.PEOPLE_AND_BODY


@pytest.fixture
def small_sources(monkeypatch):
    monkeypatch.setattr(catalog_mod, "DEFAULT_SOURCES", (_rows,))
    monkeypatch.setenv("NO_COLOR", "1")


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


def test_handle_line_maps_commands(tiny_catalog):
    state = SelectionState(tiny_catalog, G.SMILEYS_AND_EMOTION)
    assert handle_line(state, "gr") == CONTINUE
    assert state.query == "gr"
    assert handle_line(state, ":back") == CONTINUE
    assert state.query == "g"
    assert handle_line(state, ":clear") == CONTINUE
    assert state.query == ""
    handle_line(state, ":down")
    assert state.cursor == 1
    handle_line(state, ":up")
    assert state.cursor == 0
    handle_line(state, ":group")
    assert state.group is G.PEOPLE_AND_BODY
    handle_line(state, ":group-")
    assert state.group is G.SMILEYS_AND_EMOTION
    assert handle_line(state, "") == CONFIRM
    assert handle_line(state, ":q") == QUIT
    assert handle_line(state, ":QUIT") == QUIT


def test_handle_line_types_spaces(tiny_catalog):
    state = SelectionState(tiny_catalog)
    handle_line(state, "a b")
    assert state.query == "a b"


def test_render_marks_cursor_row(tiny_catalog, monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    state = SelectionState(tiny_catalog, G.SMILEYS_AND_EMOTION)
    state.move_down()
    lines = render(state, tiny_catalog).splitlines()
    assert lines[0].startswith("Select: _")
    assert "[Smileys & Emotion] 2 matches" in lines[0]
    assert lines[1] == "  \U0001F600 grinning (U+1F600)"
    assert lines[2] == "> \U0001F601 grin (U+1F601)"


def test_render_no_matches(tiny_catalog, monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    state = SelectionState(tiny_catalog)
    state.set_query("zzz")
    assert "(no matches)" in render(state, tiny_catalog)


def test_main_prints_confirmed_glyph(small_sources, monkeypatch, capsys):
    _feed(monkeypatch, ["fro", ""])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().splitlines()[-1] == "\u2639"


def test_main_moves_then_confirms(small_sources, monkeypatch, capsys):
    _feed(monkeypatch, [":down", ""])
    main(["--rows", "1"])
    assert capsys.readouterr().out.rstrip().splitlines()[-1] == "\U0001F601"


def test_main_ignores_enter_on_empty_result(small_sources, monkeypatch, capsys):
    _feed(monkeypatch, ["zzz", "", ":clear", "grin", ""])
    main([])
    assert capsys.readouterr().out.rstrip().splitlines()[-1] == "\U0001F601"


def test_main_quit_prints_nothing_selected(small_sources, monkeypatch, capsys):
    _feed(monkeypatch, [":quit"])
    assert main(["--group", "people_and_body"]) == 0
    out = capsys.readouterr().out
    assert "[People & Body]" in out
    assert "\u2639" in out  # listed, not selected
    assert not out.rstrip().endswith("\u2639")


def test_main_eof_exits_cleanly(small_sources, monkeypatch):
    _feed(monkeypatch, [])
    assert main([]) == 0


def test_main_rejects_unknown_group(small_sources):
    with pytest.raises(SystemExit):
        main(["--group", "nope"])
