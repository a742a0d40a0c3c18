"""
data_model — struktury danych potoku ingestii zbioru ustaw.

Użycie:
  from data_model import PageText, Instrument, Chunk, SegmentType

Moduły:
  documents — PageText, Instrument, Chunk, SegmentType, klucze metadanych

Przepływ danych:
  strona PDF → PageText → Instrument (ustawa) → Chunk (paragraf §)
"""

from .documents import (
    CHAPTER_NO,
    CHAPTER_TITLE,
    LAW_CODE,
    LAW_NAME,
    MERGED_FROM,
    SECTION_NO,
    SEGMENT_TYPE,
    SOURCE,
    SUBCHUNK_INDEX,
    SUBCHUNK_TOTAL,
    Chunk,
    ChunkList,
    Instrument,
    PageText,
    SegmentType,
)

__all__ = [
    # typy
    "PageText",
    "Instrument",
    "Chunk",
    "ChunkList",
    "SegmentType",
    # klucze metadanych
    "SEGMENT_TYPE",
    "LAW_CODE",
    "LAW_NAME",
    "CHAPTER_NO",
    "CHAPTER_TITLE",
    "SECTION_NO",
    "MERGED_FROM",
    "SUBCHUNK_INDEX",
    "SUBCHUNK_TOTAL",
    "SOURCE",
]
