from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from . import config as CFG
from .catalog import Catalog
from .models import CharSelectGroup
from .search import rank

log = logging.getLogger(__name__)

Ranker = Callable[[str, CharSelectGroup, Catalog], Sequence[int]]


class EmptySelectionError(IndexError):
    """confirm() was called while the current result is empty."""


@dataclass(frozen=True)
class _MatchCache:
    query: str
    group: CharSelectGroup
    result: tuple[int, ...]


class SelectionState:
    """
    One interactive selection session over a Catalog.

    Mutators (set_query, append_char, backspace, clear_query, cycle_group)
    only edit the input and rewind the cursor; ranking is pulled lazily by
    current_result() and memoized on the (query, group) pair it was built for.

    Invariants after current_result():
      0 <= cursor < max(1, len(result))
      viewport_offset <= cursor < viewport_offset + viewport_height
    """

    def __init__(
        self,
        catalog: Catalog,
        initial_group: CharSelectGroup = CFG.DEFAULT_GROUP,
        *,
        viewport_height: int = CFG.DEFAULT_VIEWPORT_HEIGHT,
        ranker: Ranker = rank,
    ) -> None:
        self._catalog = catalog
        self._ranker = ranker
        self._initial_group = initial_group
        self._viewport_height = max(1, int(viewport_height))
        self._query = ""
        self._group = initial_group
        self._cache: Optional[_MatchCache] = None
        self._cursor = 0
        self._viewport_offset = 0

    # ------------- input -------------

    @property
    def query(self) -> str:
        return self._query

    @property
    def group(self) -> CharSelectGroup:
        return self._group

    def set_query(self, text: str) -> None:
        self._query = text
        self._updated_input()

    def append_char(self, ch: str) -> None:
        self._query += ch
        self._updated_input()

    def backspace(self) -> None:
        self._query = self._query[:-1]
        self._updated_input()

    def clear_query(self) -> None:
        self._query = ""
        self._updated_input()

    def cycle_group(self, *, reverse: bool = False) -> None:
        """Step to the next (or previous) group and start browsing it from an empty query."""
        self._group = self._group.previous() if reverse else self._group.next()
        self._query = ""
        self._updated_input()

    def reset(self) -> None:
        self._query = ""
        self._group = self._initial_group
        self._updated_input()

    def _updated_input(self) -> None:
        self._cursor = 0
        self._viewport_offset = 0

    # ------------- viewport -------------

    @property
    def viewport_height(self) -> int:
        return self._viewport_height

    @viewport_height.setter
    def viewport_height(self, rows: int) -> None:
        # Supplied by the host on every render; never below one row.
        self._viewport_height = max(1, int(rows))

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def viewport_offset(self) -> int:
        return self._viewport_offset

    # ------------- results -------------

    def current_result(self) -> tuple[int, ...]:
        """Ranked catalog indices for the current input (recomputed only when it changed)."""
        cache = self._cache
        if cache is None or cache.query != self._query or cache.group != self._group:
            cache = _MatchCache(self._query, self._group,
                                tuple(self._ranker(self._query, self._group, self._catalog)))
            self._cache = cache
        self._clamp(len(cache.result))
        return cache.result

    def _clamp(self, n: int) -> None:
        self._cursor = min(self._cursor, max(0, n - 1))
        if self._cursor < self._viewport_offset:
            self._viewport_offset = self._cursor
        elif self._cursor >= self._viewport_offset + self._viewport_height:
            self._viewport_offset = self._cursor - self._viewport_height + 1

    def visible_rows(self) -> List[tuple[int, int]]:
        """(display_index, catalog_index) for each row inside the viewport."""
        result = self.current_result()
        top = self._viewport_offset
        return [(top + i, idx) for i, idx in enumerate(result[top:top + self._viewport_height])]

    # ------------- cursor -------------

    def move_up(self) -> None:
        self.current_result()
        self._cursor = max(0, self._cursor - 1)
        if self._cursor < self._viewport_offset:
            self._viewport_offset = self._cursor
        log.debug("selected_row=%d top_row=%d", self._cursor, self._viewport_offset)

    def move_down(self) -> None:
        limit = max(0, len(self.current_result()) - 1)
        self._cursor = min(self._cursor + 1, limit)
        if self._cursor >= self._viewport_offset + self._viewport_height:
            self._viewport_offset = max(0, self._cursor - self._viewport_height + 1)
        log.debug("selected_row=%d top_row=%d", self._cursor, self._viewport_offset)

    def confirm(self) -> int:
        """
        Catalog index under the cursor.

        Callers must check that current_result() is non-empty first; an empty
        result raises EmptySelectionError.
        """
        result = self.current_result()
        if not result:
            raise EmptySelectionError("confirm() called on an empty result")
        idx = result[self._cursor]
        log.debug("selected: %s", self._catalog.glyph(idx))
        return idx
