# charselect/engine.py
from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from . import config as CFG
from .catalog import Catalog, build_catalog
from .models import CharSelectGroup
from .search import rank_matches
from .selection import SelectionState
from .sources import Source

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the catalog (built once from the static sources),
      - selection sessions (SelectionState, one per interactive picker),
      - the ranking pipeline (search.rank_matches) for stateless callers.

    Public API (used by the REPL and Flask):
      * build(...):        merge sources -> catalog
      * new_session(group): fresh SelectionState over the catalog
      * search(query, group, limit): ranked rows as plain dicts
      * glyph(index):      the text to commit for a confirmed entry
      * shutdown():        drop the catalog
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.catalog: Optional[Catalog] = None

    # /* ~~~ Build the catalog from the source tables ~~~ */
    def build(self, *, sources: Optional[Iterable[Source]] = None, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["CHARSELECT_VERBOSE"] = "1"

        log.info("Building catalog")
        self.catalog = build_catalog(sources)
        log.info("Engine build() complete: entries=%d", len(self.catalog))

    # ------------- query -------------

    def _require_catalog(self) -> Catalog:
        if self.catalog is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.catalog

    # /* ~~~ Start an interactive session over the catalog ~~~ */
    def new_session(
        self,
        group: Optional[CharSelectGroup] = None,
        *,
        viewport_height: int = CFG.DEFAULT_VIEWPORT_HEIGHT,
    ) -> SelectionState:
        return SelectionState(
            self._require_catalog(),
            group or CFG.DEFAULT_GROUP,
            viewport_height=viewport_height,
        )

    # /* ~~~ One-shot ranked lookup for hosts that keep no session ~~~ */
    def search(
        self,
        query: str,
        group: Optional[CharSelectGroup] = None,
        *,
        limit: Optional[int] = None,
    ) -> list[dict]:
        catalog = self._require_catalog()
        matches = rank_matches(query, group or CFG.DEFAULT_GROUP, catalog)
        if limit is not None:
            matches = matches[:max(0, limit)]
        rows = []
        for m in matches:
            e = catalog.lookup(m.entry_index)
            rows.append({
                "index": m.entry_index,
                "name": e.name,
                "glyph": e.glyph,
                "codepoints": catalog.codepoint_string(m.entry_index),
                "group": e.group.value,
                "score": m.score,
            })
        return rows

    def glyph(self, index: int) -> str:
        return self._require_catalog().glyph(index)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.catalog = None
        log.info("Engine shutdown complete")
