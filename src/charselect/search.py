from __future__ import annotations
import logging
import re
import sys
import time
from functools import lru_cache
from typing import Dict, Iterator, List, Optional, Tuple

from . import config as CFG
from .catalog import Catalog, Haystack
from .models import CharSelectGroup, RankedMatch
from .normalize import fold, is_boundary, is_camel_hump, is_smart_case_sensitive, numeric_query

log = logging.getLogger(__name__)

# Exact name / exact code point hits sort above any fuzzy score
MAX_SCORE: int = sys.maxsize


@lru_cache(maxsize=None)
def _bonus(prev: Optional[str], ch: str) -> int:
    """Bonus for matching `ch` given the character before it (None = start of text)."""
    if prev is None:
        return CFG.BONUS_BOUNDARY
    if is_boundary(prev) and not is_boundary(ch):
        return CFG.BONUS_BOUNDARY
    if is_camel_hump(prev, ch):
        return CFG.BONUS_CAMEL
    return 0


def _window_score(text: str, hay: str, pat: str, lo: int, end: int) -> int:
    """
    /* ~~~ Score the match of `pat` that ends at hay[end - 1].
           `lo` is where the row starts inside `hay` (no char before it counts).

           1) backward scan from end finds the tightest start
           2) the window is scored: per-char base + boundary/camel bonuses,
              consecutive runs keep the bonus of the run's first char,
              gaps cost PENALTY_GAP_START then PENALTY_GAP_EXTENSION ~~~ */
    """
    start = end - 1
    for ch in pat[-2::-1]:
        start = hay.rfind(ch, lo, start)

    score = 0
    pos = start
    first_bonus = 0
    for i, ch in enumerate(pat):
        idx = start if i == 0 else hay.find(ch, pos + 1, end)
        bonus = _bonus(text[idx - 1] if idx > lo else None, text[idx])
        if i and idx == pos + 1:
            if bonus >= CFG.BONUS_BOUNDARY and bonus > first_bonus:
                first_bonus = bonus
            bonus = max(bonus, first_bonus, CFG.BONUS_CONSECUTIVE)
        else:
            if i:
                score += CFG.PENALTY_GAP_START + (idx - pos - 2) * CFG.PENALTY_GAP_EXTENSION
            first_bonus = bonus
        score += CFG.SCORE_MATCH + (bonus * CFG.BONUS_FIRST_CHAR_MULTIPLIER if i == 0 else bonus)
        pos = idx
    return score


def fuzzy_score(text: str, pattern: str, *, folded: Optional[str] = None) -> Optional[int]:
    """
    Subsequence score of `pattern` in `text`, or None if not all pattern chars
    appear in order. Smart case: lowercase patterns ignore case.

    The forward scan finds the leftmost position where the match completes;
    _window_score tightens and scores that window.
    `folded` may carry a precomputed fold(text) to save work on hot paths.
    """
    if not pattern or not text:
        return None

    if is_smart_case_sensitive(pattern):
        hay, pat = text, pattern
    else:
        hay = folded if folded is not None else fold(text)
        pat = fold(pattern)

    end = -1
    for ch in pat:
        end = hay.find(ch, end + 1)
        if end < 0:
            return None
    return _window_score(text, hay, pat, 0, end + 1)


@lru_cache(maxsize=256)
def _row_re(pattern: str) -> re.Pattern:
    # "abc" -> "(a[^\nb]*b[^\nc]*c)[^\n]*": leftmost match per row, rest of the
    # row consumed so finditer yields each row at most once
    parts = [re.escape(pattern[0])]
    parts += [f"[^\\n{re.escape(ch)}]*{re.escape(ch)}" for ch in pattern[1:]]
    return re.compile("(" + "".join(parts) + ")[^\\n]*")


def _scan(pat: str, hay: Haystack, text: Haystack) -> Iterator[Tuple[int, int]]:
    """Yield (row, score) for every row of `hay` that holds `pat` as a subsequence."""
    if not pat or "\n" in pat:
        return
    starts = hay.starts
    for m in _row_re(pat).finditer(hay.text):
        row = hay.row_at(m.start())
        yield row, _window_score(text.text, hay.text, pat, starts[row], m.end(1))


def score_entry(index: int, query: str, catalog: Catalog, numeric: Optional[str] = None) -> Optional[int]:
    """
    Final score of one entry: max of the name path and (for hex / U+ queries)
    the code point path; None when neither path matches.
    """
    name = catalog.names[index]
    if name == query:
        return MAX_SCORE
    best = fuzzy_score(name, query, folded=catalog.folded_names[index])
    if numeric is not None:
        cps = catalog.codepoint_strings[index]
        if cps == numeric:
            return MAX_SCORE
        num = fuzzy_score(cps, numeric)
        if num is not None and (best is None or num > best):
            best = num
    return best


def _scores(query: str, catalog: Catalog) -> Dict[int, int]:
    """score_entry for every matching row, computed column-wise over the haystacks."""
    t0 = time.perf_counter()
    sensitive = is_smart_case_sensitive(query)
    names = catalog.names
    hits: Dict[int, int] = {}
    for row, sc in _scan(query if sensitive else fold(query),
                         catalog.name_haystack if sensitive else catalog.folded_haystack,
                         catalog.name_haystack):
        hits[row] = MAX_SCORE if names[row] == query else sc

    numeric = numeric_query(query)
    if numeric is not None:
        cps_all = catalog.codepoint_strings
        cps_hay = catalog.codepoint_haystack
        for row, sc in _scan(numeric, cps_hay, cps_hay):
            if cps_all[row] == numeric:
                sc = MAX_SCORE
            prev = hits.get(row)
            if prev is None or sc > prev:
                hits[row] = sc
        # code-point-only rows were appended after the name rows
        hits = {row: hits[row] for row in sorted(hits)}
    log.debug("matching %r took %.4fs (%d hits)", query, time.perf_counter() - t0, len(hits))
    return hits


def rank_matches(query: str, group: CharSelectGroup, catalog: Catalog) -> List[RankedMatch]:
    """
    Rank the catalog for `query`.

    Empty query: every entry of `group`, in catalog order, score 0.
    Otherwise the group is ignored and the whole catalog is searched; results
    are sorted by descending score, ties keep catalog order.
    """
    if not query:
        return [RankedMatch(i, 0) for i in catalog.indices_in_group(group)]

    hits = _scores(query, catalog)
    # sorted() is stable, also with reverse=True
    return [RankedMatch(i, hits[i]) for i in sorted(hits, key=hits.__getitem__, reverse=True)]


def rank(query: str, group: CharSelectGroup, catalog: Catalog) -> List[int]:
    """Ordered catalog indices for `query` (see rank_matches)."""
    if not query:
        return list(catalog.indices_in_group(group))
    hits = _scores(query, catalog)
    return sorted(hits, key=hits.__getitem__, reverse=True)
