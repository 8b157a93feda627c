# src/charselect/catalog.py
from __future__ import annotations

import logging
import time
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from .models import CatalogEntry, CharSelectGroup
from .normalize import codepoints, fold
from .sources import DEFAULT_SOURCES, Source, SourceValue

log = logging.getLogger(__name__)

_MAX_SCALAR = 0x10FFFF


class CatalogError(ValueError):
    """A compiled-in source row could not be turned into a catalog entry."""


def _materialize(name: str, value: SourceValue) -> str:
    """Turn a single code point or a code point sequence into a glyph string."""
    if "\n" in name:
        raise CatalogError(f"{name!r}: names must be a single line")
    cps = (value,) if isinstance(value, int) else tuple(value)
    if not cps:
        raise CatalogError(f"{name!r}: empty code point sequence")
    for cp in cps:
        if not isinstance(cp, int) or cp < 0 or cp > _MAX_SCALAR or 0xD800 <= cp <= 0xDFFF:
            raise CatalogError(f"{name!r}: invalid code point {cp!r}")
    return "".join(chr(cp) for cp in cps)


@dataclass(frozen=True)
class Haystack:
    """
    One text column of the catalog (names, folded names or code point strings)
    joined by newlines, so a single compiled regex can scan every row in C.

    starts[i] is the offset of row i inside `text`.
    """
    text: str
    starts: tuple[int, ...]

    @classmethod
    def join(cls, rows: Sequence[str]) -> "Haystack":
        starts: List[int] = []
        pos = 0
        for row in rows:
            starts.append(pos)
            pos += len(row) + 1
        return cls("\n".join(rows), tuple(starts))

    def row_at(self, offset: int) -> int:
        return bisect_right(self.starts, offset) - 1


class Catalog:
    """
    Immutable, index-addressed table of selectable entries.

    Entries keep the order in which they were appended at construction; that
    order is what empty-query browsing returns and what breaks score ties.
    """

    __slots__ = ("_entries", "_names", "_folded", "_cps", "_by_group",
                 "_name_hay", "_folded_hay", "_cps_hay")

    def __init__(self, entries: Iterable[CatalogEntry] = ()) -> None:
        self._entries: tuple[CatalogEntry, ...] = tuple(entries)
        self._names: tuple[str, ...] = tuple(e.name for e in self._entries)
        # Lowercased names, aligned char-for-char with the originals (search pre-filter)
        self._folded: tuple[str, ...] = tuple(fold(e.name) for e in self._entries)
        self._cps: tuple[str, ...] = tuple(codepoints(e.glyph) for e in self._entries)
        self._name_hay = Haystack.join(self._names)
        self._folded_hay = Haystack.join(self._folded)
        self._cps_hay = Haystack.join(self._cps)
        by_group: dict[CharSelectGroup, List[int]] = {g: [] for g in CharSelectGroup}
        for i, e in enumerate(self._entries):
            by_group[e.group].append(i)
        self._by_group = {g: tuple(ids) for g, ids in by_group.items()}

    @classmethod
    def from_entries(cls, entries: Iterable[CatalogEntry]) -> "Catalog":
        return cls(entries)

    # ---- size / iteration ----
    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    # ---- lookup ----
    def lookup(self, index: int) -> CatalogEntry:
        # Negative indices would silently wrap; they are a caller bug here.
        if not 0 <= index < len(self._entries):
            raise IndexError(f"catalog index {index} out of range [0, {len(self._entries)})")
        return self._entries[index]

    def name(self, index: int) -> str:
        return self.lookup(index).name

    def glyph(self, index: int) -> str:
        return self.lookup(index).glyph

    def group(self, index: int) -> CharSelectGroup:
        return self.lookup(index).group

    def codepoint_string(self, index: int) -> str:
        self.lookup(index)
        return self._cps[index]

    @property
    def entries(self) -> Sequence[CatalogEntry]:
        return self._entries

    @property
    def names(self) -> Sequence[str]:
        return self._names

    @property
    def folded_names(self) -> Sequence[str]:
        return self._folded

    @property
    def codepoint_strings(self) -> Sequence[str]:
        return self._cps

    @property
    def name_haystack(self) -> Haystack:
        return self._name_hay

    @property
    def folded_haystack(self) -> Haystack:
        return self._folded_hay

    @property
    def codepoint_haystack(self) -> Haystack:
        return self._cps_hay

    def indices_in_group(self, group: CharSelectGroup) -> tuple[int, ...]:
        return self._by_group[group]

    def display_row(self, index: int) -> str:
        """'<glyph> <name> (<codepoints>)', the per-row text hosts show."""
        e = self.lookup(index)
        return f"{e.glyph} {e.name} ({self._cps[index]})"


def build_catalog(sources: Optional[Iterable[Source]] = None) -> Catalog:
    """
    /* ~~~ Merge the source tables into one flat catalog.
           Sources are consumed in order and rows are appended as-is:
           duplicates (e.g. a CLDR name and a shortcode for the same emoji)
           stay distinct entries. Raises CatalogError on a malformed row. ~~~ */
    """
    t0 = time.perf_counter()
    entries: List[CatalogEntry] = []
    for source in (DEFAULT_SOURCES if sources is None else sources):
        for name, value, group in source():
            if not isinstance(group, CharSelectGroup):
                raise CatalogError(f"{name!r}: invalid group {group!r}")
            entries.append(CatalogEntry(name=name, glyph=_materialize(name, value), group=group))
    catalog = Catalog(entries)
    log.info("Took %.3fs to build %d catalog entries", time.perf_counter() - t0, len(catalog))
    return catalog
