"""
Static source tables merged into the catalog.

Each source is a zero-argument callable yielding ``(name, value, group)`` rows
where ``value`` is either a single code point (int) or a sequence of code
points (an emoji sequence). The catalog validates and materializes both into
a glyph string, so nothing downstream needs to tell them apart.
"""
from __future__ import annotations
from typing import Callable, Iterable, Sequence, Tuple, Union

from ..models import CharSelectGroup
from .emoji_source import emoji_rows
from .unicode_names import unicode_name_rows
from .nerdfonts import nerd_font_rows

SourceValue = Union[int, Sequence[int]]
SourceRow = Tuple[str, SourceValue, CharSelectGroup]
Source = Callable[[], Iterable[SourceRow]]

# Merge order is part of the contract: browse order follows it.
DEFAULT_SOURCES: tuple[Source, ...] = (emoji_rows, unicode_name_rows, nerd_font_rows)

__all__ = ["DEFAULT_SOURCES", "Source", "SourceRow", "SourceValue",
           "emoji_rows", "unicode_name_rows", "nerd_font_rows"]
