"""Public API for hosts that keep one process-wide catalog."""
from __future__ import annotations
import time
from typing import Iterable, Optional

from charselect import config as CFG
from charselect.engine import Engine
from charselect.models import CharSelectGroup
from charselect.sources import Source

_engine: Engine | None = None


def initialize(sources: Optional[Iterable[Source]] = None, verbose: bool = False) -> Engine:
    """Build the shared engine once; later calls return the same instance."""
    global _engine
    if _engine is not None and _engine.catalog is not None:
        return _engine
    t0 = time.perf_counter()
    eng = Engine()
    eng.build(sources=sources, verbose=verbose)
    _engine = eng
    if verbose:
        print(f"[ready] init complete in {time.perf_counter() - t0:.2f}s")
    return eng


def search(query: str, group: Optional[CharSelectGroup] = None, k: int = CFG.TOP_K) -> list[dict]:
    """Return the top-k ranked rows for query (see Engine.search)."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.search(query, group, limit=k)
