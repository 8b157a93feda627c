# src/e2e/conftest.py
import pytest

from charselect.catalog import Catalog, build_catalog
from charselect.models import CatalogEntry, CharSelectGroup as G
from charselect.search import rank


def tiny_rows():
    yield "grinning", 0x1F600, G.SMILEYS_AND_EMOTION
    yield "grin", 0x1F601, G.SMILEYS_AND_EMOTION
    yield "frown", 0x2639, G.PEOPLE_AND_BODY


def glyph_rows():
    # emoji-like rows: names, shortcodes, sequences
    yield "grinning face", (0x1F600,), G.SMILEYS_AND_EMOTION
    yield "grinning", (0x1F600,), G.SMILEYS_AND_EMOTION
    yield "grinning squinting face", (0x1F606,), G.SMILEYS_AND_EMOTION
    yield "thumbs up", (0x1F44D,), G.PEOPLE_AND_BODY
    yield "thumbs up: medium skin tone", (0x1F44D, 0x1F3FD), G.PEOPLE_AND_BODY
    yield "flag: Japan", (0x1F1EF, 0x1F1F5), G.FLAGS
    # unicode-name rows
    yield "grinning face", 0x1F600, G.UNICODE_NAMES
    yield "latin small letter a", 0x61, G.UNICODE_NAMES
    # nerd font rows
    yield "dev_git", 0xE702, G.NERD_FONTS


@pytest.fixture
def tiny_catalog() -> Catalog:
    return build_catalog([tiny_rows])


@pytest.fixture
def glyph_catalog() -> Catalog:
    return build_catalog([glyph_rows])


@pytest.fixture
def make_catalog():
    """Factory: n entries 'item 000'.. in SYMBOLS, for paging tests."""
    def _make(n: int) -> Catalog:
        return Catalog.from_entries(
            CatalogEntry(name=f"item {i:03d}", glyph=chr(0x2190 + i), group=G.SYMBOLS)
            for i in range(n)
        )
    return _make


class CountingRanker:
    """Wraps search.rank and records how often it ran."""
    def __init__(self):
        self.calls = 0

    def __call__(self, query, group, catalog):
        self.calls += 1
        return rank(query, group, catalog)


@pytest.fixture
def counting_ranker() -> CountingRanker:
    return CountingRanker()
