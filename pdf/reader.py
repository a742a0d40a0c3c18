"""
pdf/reader.py — pełny odczyt zbioru ustaw: PDF → chunki paragrafów.

  extract_pages() → aggregate() → SectionSegmenter.segment_all()

Źródło jest otwierane raz i zamykane po ekstrakcji wszystkich stron;
dalsze kroki działają już tylko na tekście.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from data_model.documents import SOURCE, Chunk
from pdf.layout import DEFAULT_LAYOUT, PageLayout
from pdf.page_extractor import PdfSource, extract_pages
from segmentation.aggregator import aggregate
from segmentation.segmenter import SectionSegmenter, SegmenterConfig


@dataclass(frozen=True, slots=True)
class IngestionReport:
    pages_read: int
    instruments: int
    chunks: int
    chunks_lt50: int
    chunks_lt200: int
    chunks_lt500: int


@dataclass(frozen=True, slots=True)
class CompendiumResult:
    chunks: list[Chunk]
    report: IngestionReport


def read_compendium(
    source: PdfSource,
    *,
    layout: PageLayout = DEFAULT_LAYOUT,
    config: SegmenterConfig | None = None,
    source_name: str | None = None,
    on_page: Callable[[int, int], None] | None = None,
) -> CompendiumResult:
    """
    Czyta cały zbiór i zwraca chunki w kolejności dokumentu + raport.

    Args:
        source:      Ścieżka, bajty albo strumień PDF.
        layout:      Geometria stron.
        config:      Progi scalania/cięcia paragrafów.
        source_name: Wartość klucza "source" w metadanych każdego chunka.
        on_page:     Callback postępu (strony_gotowe, strony_razem).

    Raises:
        SourceReadError: nieczytelne źródło (bez wyniku częściowego).
    """
    pages = extract_pages(source, layout, on_page=on_page)

    extra = {SOURCE: source_name} if source_name else None
    instruments = aggregate(pages, extra_metadata=extra)

    chunks = SectionSegmenter(config).segment_all(instruments)

    return CompendiumResult(
        chunks=chunks,
        report=build_report(len(pages), len(instruments), chunks),
    )


def build_report(pages_read: int, instruments: int, chunks: list[Chunk]) -> IngestionReport:
    lengths = [len(c.text) for c in chunks]
    return IngestionReport(
        pages_read=pages_read,
        instruments=instruments,
        chunks=len(chunks),
        chunks_lt50=sum(1 for n in lengths if n < 50),
        chunks_lt200=sum(1 for n in lengths if n < 200),
        chunks_lt500=sum(1 for n in lengths if n < 500),
    )
