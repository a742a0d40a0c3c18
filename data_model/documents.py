"""
data_model/documents.py — model tekstów stron, instrumentów i chunków.

PageText   — znormalizowany tekst jednej strony + wykryty kod/nazwa ustawy.
Instrument — pełny tekst jednej ustawy sklejony ze stron o tym samym kodzie.
Chunk      — jednostka wydawana dalej (do indeksu): tekst + metadane struktury.

Metadane Instrumentu i Chunka to zwykły słownik: warstwy zewnętrzne mogą
dopisywać własne klucze (np. char_count, source), a rdzeń je przenosi dalej.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# ---------------------------------------------------------------------------
# Klucze metadanych
# ---------------------------------------------------------------------------

SEGMENT_TYPE = "segment_type"
LAW_CODE = "law_code"
LAW_NAME = "law_name"
CHAPTER_NO = "chapter_no"
CHAPTER_TITLE = "chapter_title"
SECTION_NO = "section_no"
MERGED_FROM = "merged_from_sections"
SUBCHUNK_INDEX = "subchunk_index"
SUBCHUNK_TOTAL = "subchunk_total"
SOURCE = "source"


class SegmentType(StrEnum):
    INSTRUMENT = "INSTRUMENT"
    SECTION = "SECTION"


@dataclass(frozen=True, slots=True)
class PageText:
    text: str
    law_code: str = ""   # "" gdy na stronie nie wykryto nagłówka
    law_name: str = ""


@dataclass(slots=True)
class Instrument:
    text: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def law_code(self) -> str:
        return self.metadata.get(LAW_CODE, "")

    @property
    def law_name(self) -> str:
        return self.metadata.get(LAW_NAME, "")


@dataclass(frozen=True, slots=True)
class Chunk:
    text: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "metadata": dict(self.metadata)}


# Kolekcja chunków w kolejności dokumentu.
type ChunkList = list[Chunk]
