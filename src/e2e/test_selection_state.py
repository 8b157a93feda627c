import pytest

from charselect.catalog import Catalog
from charselect.models import CharSelectGroup as G
from charselect.selection import EmptySelectionError, SelectionState


def test_result_is_memoized_on_query_and_group(tiny_catalog, counting_ranker):
    state = SelectionState(tiny_catalog, G.SMILEYS_AND_EMOTION, ranker=counting_ranker)
    assert state.current_result() == (0, 1)
    state.current_result()
    state.move_down()
    state.visible_rows()
    assert counting_ranker.calls == 1

    # same text again: input changed, key did not
    state.set_query("")
    state.current_result()
    assert counting_ranker.calls == 1

    state.append_char("g")
    assert state.current_result() == (0, 1)
    assert counting_ranker.calls == 2

    state.backspace()
    state.append_char("g")
    state.current_result()
    assert counting_ranker.calls == 2


def test_group_change_recomputes(tiny_catalog, counting_ranker):
    state = SelectionState(tiny_catalog, G.SMILEYS_AND_EMOTION, ranker=counting_ranker)
    state.current_result()
    state.cycle_group()
    assert state.group is G.PEOPLE_AND_BODY
    assert state.current_result() == (2,)
    assert counting_ranker.calls == 2


def test_mutators_are_lazy(tiny_catalog, counting_ranker):
    state = SelectionState(tiny_catalog, ranker=counting_ranker)
    for ch in "grin":
        state.append_char(ch)
    state.backspace()
    state.clear_query()
    state.set_query("frown")
    assert counting_ranker.calls == 0
    assert state.current_result() == (2,)
    assert counting_ranker.calls == 1


@pytest.mark.parametrize("mutate", [
    lambda s: s.append_char("i"),
    lambda s: s.backspace(),
    lambda s: s.clear_query(),
    lambda s: s.set_query("item"),
    lambda s: s.cycle_group(),
])
def test_input_mutators_rewind_cursor(make_catalog, mutate):
    state = SelectionState(make_catalog(30), G.SYMBOLS, viewport_height=5)
    state.set_query("item")
    for _ in range(12):
        state.move_down()
    assert state.cursor == 12 and state.viewport_offset == 8
    mutate(state)
    assert state.cursor == 0
    assert state.viewport_offset == 0


def test_cycle_group_clears_query_and_wraps(tiny_catalog):
    state = SelectionState(tiny_catalog, G.UNICODE_NAMES)
    state.set_query("grin")
    state.cycle_group()
    assert state.group is G.SMILEYS_AND_EMOTION
    assert state.query == ""
    state.cycle_group(reverse=True)
    assert state.group is G.UNICODE_NAMES


def test_cycle_group_visits_every_group_once(tiny_catalog):
    state = SelectionState(tiny_catalog, G.SMILEYS_AND_EMOTION)
    seen = []
    for _ in range(len(G)):
        seen.append(state.group)
        state.cycle_group()
    assert seen == list(G)
    assert state.group is G.SMILEYS_AND_EMOTION


def test_backspace_on_empty_query(tiny_catalog):
    state = SelectionState(tiny_catalog)
    state.backspace()
    assert state.query == ""
    assert state.current_result() == (0, 1)


def test_query_editing(tiny_catalog):
    state = SelectionState(tiny_catalog)
    for ch in "frX":
        state.append_char(ch)
    state.backspace()
    assert state.query == "fr"
    assert state.current_result() == (2,)
    state.clear_query()
    assert state.query == ""


def test_confirm_returns_entry_under_cursor(tiny_catalog):
    state = SelectionState(tiny_catalog, G.SMILEYS_AND_EMOTION)
    assert state.confirm() == 0
    state.move_down()
    assert state.confirm() == 1
    assert tiny_catalog.glyph(state.confirm()) == "\U0001F601"


def test_confirm_on_empty_result_raises(tiny_catalog):
    state = SelectionState(tiny_catalog)
    state.set_query("zzz")
    assert state.current_result() == ()
    with pytest.raises(EmptySelectionError):
        state.confirm()
    # still an IndexError for callers that only know that
    with pytest.raises(IndexError):
        state.confirm()


def test_reset_restores_initial_state(tiny_catalog, counting_ranker):
    state = SelectionState(tiny_catalog, G.PEOPLE_AND_BODY, ranker=counting_ranker)
    state.current_result()
    state.set_query("grin")
    state.cycle_group()
    state.reset()
    assert (state.query, state.group, state.cursor, state.viewport_offset) == (
        "", G.PEOPLE_AND_BODY, 0, 0)
    assert state.current_result() == (2,)
    assert counting_ranker.calls == 1


def test_empty_catalog_never_raises_from_navigation():
    state = SelectionState(Catalog(), G.SMILEYS_AND_EMOTION, viewport_height=3)
    assert state.current_result() == ()
    state.move_down()
    state.move_up()
    state.append_char("x")
    state.cycle_group()
    assert state.current_result() == ()
    assert state.visible_rows() == []
    assert (state.cursor, state.viewport_offset) == (0, 0)
    with pytest.raises(EmptySelectionError):
        state.confirm()
