"""
segmentation — strony → instrumenty (ustawy) → chunki paragrafów (§).

Publiczne API:
  aggregate(pages, extra_metadata)      → list[Instrument]
  SectionSegmenter(config)              segmentacja jednego / wielu instrumentów
  SegmenterConfig                       progi scalania i cięcia
  classify_line(line)                   → ChapterLine | SectionLine | BodyLine
"""

from .aggregator import aggregate
from .lines      import BodyLine, ChapterLine, ClassifiedLine, SectionLine, classify_line
from .segmenter  import (
    MAX_SECTION_CHARS,
    MAX_SUBCHUNKS,
    MIN_SECTION_CHARS,
    SectionSegmenter,
    SegmenterConfig,
)

__all__ = [
    "aggregate",
    "SectionSegmenter",
    "SegmenterConfig",
    "MIN_SECTION_CHARS",
    "MAX_SECTION_CHARS",
    "MAX_SUBCHUNKS",
    "classify_line",
    "ClassifiedLine",
    "ChapterLine",
    "SectionLine",
    "BodyLine",
]
