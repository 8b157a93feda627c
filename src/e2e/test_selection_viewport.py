import random

import pytest

from charselect.models import CharSelectGroup as G
from charselect.selection import SelectionState


def _state(make_catalog, n=20, height=5):
    return SelectionState(make_catalog(n), G.SYMBOLS, viewport_height=height)


def test_viewport_scrolls_with_cursor(make_catalog):
    state = _state(make_catalog)
    for _ in range(4):
        state.move_down()
    assert (state.cursor, state.viewport_offset) == (4, 0)
    for _ in range(3):
        state.move_down()
    assert (state.cursor, state.viewport_offset) == (7, 3)
    for _ in range(4):
        state.move_up()
    assert (state.cursor, state.viewport_offset) == (3, 3)
    state.move_up()
    assert (state.cursor, state.viewport_offset) == (2, 2)


def test_cursor_saturates_at_both_ends(make_catalog):
    state = _state(make_catalog)
    state.move_up()
    assert (state.cursor, state.viewport_offset) == (0, 0)
    for _ in range(50):
        state.move_down()
    assert (state.cursor, state.viewport_offset) == (19, 15)
    state.move_down()
    assert state.cursor == 19


def test_visible_rows_follow_viewport(make_catalog):
    state = _state(make_catalog)
    for _ in range(7):
        state.move_down()
    assert state.visible_rows() == [(3, 3), (4, 4), (5, 5), (6, 6), (7, 7)]


def test_visible_rows_short_result(make_catalog):
    state = _state(make_catalog, n=3, height=5)
    assert state.visible_rows() == [(0, 0), (1, 1), (2, 2)]


def test_shrinking_viewport_pulls_offset_to_cursor(make_catalog):
    state = _state(make_catalog, height=10)
    for _ in range(9):
        state.move_down()
    assert (state.cursor, state.viewport_offset) == (9, 0)
    state.viewport_height = 3
    state.current_result()
    assert (state.cursor, state.viewport_offset) == (9, 7)


def test_viewport_height_is_at_least_one(make_catalog):
    state = _state(make_catalog, height=0)
    assert state.viewport_height == 1
    state.move_down()
    assert (state.cursor, state.viewport_offset) == (1, 1)
    state.viewport_height = -4
    assert state.viewport_height == 1


def test_query_and_group_only_change_through_mutators(make_catalog):
    state = _state(make_catalog)
    state.set_query("item")
    for _ in range(10):
        state.move_down()
    with pytest.raises(AttributeError):
        state.query = "item 003"
    with pytest.raises(AttributeError):
        state.group = G.FLAGS
    assert (state.query, state.group, state.cursor) == ("item", G.SYMBOLS, 10)

    state.set_query("item 003")
    assert state.current_result() == (3,)
    assert (state.cursor, state.viewport_offset) == (0, 0)


def test_random_walk_keeps_viewport_invariants(make_catalog):
    rnd = random.Random(1234)
    state = _state(make_catalog, n=40, height=6)
    ops = ["up", "down", "down", "char", "back", "height", "group"]
    for _ in range(2000):
        op = rnd.choice(ops)
        if op == "up":
            state.move_up()
        elif op == "down":
            state.move_down()
        elif op == "char":
            state.append_char(rnd.choice("item 0123"))
        elif op == "back":
            state.backspace()
        elif op == "height":
            state.viewport_height = rnd.randint(1, 12)
        else:
            state.cycle_group(reverse=rnd.random() < 0.5)
        n = len(state.current_result())
        h = state.viewport_height
        assert 0 <= state.cursor < max(1, n)
        assert state.viewport_offset <= state.cursor < state.viewport_offset + h
        assert len(state.visible_rows()) == min(h, n - state.viewport_offset)
