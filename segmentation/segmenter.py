"""
segmentation/segmenter.py — podział instrumentu (ustawy) na paragrafy §.

Architektura:
  Instrument.text → classify_text() → ChapterLine | SectionLine | BodyLine
  → _SectionBuilder (jeden na paragraf) → _Section
  → merge_short_sections()  (krótki § doklejany NA POCZĄTEK następnego)
  → split_body()            (zbyt długi § cięty na subchunki)
  → list[Chunk]

Treść przed pierwszym nagłówkiem § jest pomijana; dokument bez żadnego
nagłówka § daje pustą listę.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from data_model.documents import (
    CHAPTER_NO,
    CHAPTER_TITLE,
    MERGED_FROM,
    SECTION_NO,
    SEGMENT_TYPE,
    SUBCHUNK_INDEX,
    SUBCHUNK_TOTAL,
    Chunk,
    Instrument,
    SegmentType,
)
from segmentation.lines import BodyLine, ChapterLine, SectionLine, classify_text

# ---------------------------------------------------------------------------
# Konfiguracja
# ---------------------------------------------------------------------------

MIN_SECTION_CHARS = 250      # krótszy § doklejamy do następnego
MAX_SECTION_CHARS = 12000    # dłuższy § tniemy na subchunki
MAX_SUBCHUNKS = 8


@dataclass(frozen=True, slots=True)
class SegmenterConfig:
    min_section_chars: int = MIN_SECTION_CHARS
    max_section_chars: int = MAX_SECTION_CHARS
    max_subchunks: int = MAX_SUBCHUNKS
    merge_short_sections: bool = True

    def __post_init__(self) -> None:
        if self.min_section_chars < 0:
            raise ValueError(f"min_section_chars musi być >= 0, jest {self.min_section_chars}")
        if self.max_section_chars < 1:
            raise ValueError(f"max_section_chars musi być >= 1, jest {self.max_section_chars}")
        if self.max_subchunks < 1:
            raise ValueError(f"max_subchunks musi być >= 1, jest {self.max_subchunks}")


# ---------------------------------------------------------------------------
# Typy wewnętrzne
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class _Section:
    chapter_no: str
    chapter_title: str
    section_no: str
    body: str
    merged_from: tuple[str, ...] = ()


class _SectionBuilder:
    """Bufor treści jednego paragrafu; build() wołamy dokładnie raz."""

    __slots__ = ("chapter_no", "chapter_title", "section_no", "_lines")

    def __init__(self, chapter_no: str, chapter_title: str, section_no: str) -> None:
        self.chapter_no = chapter_no
        self.chapter_title = chapter_title
        self.section_no = section_no
        self._lines: list[str] = []

    def append_line(self, line: str) -> None:
        if not line.strip():
            # najwyżej jedna pusta linia z rzędu
            if self._lines and self._lines[-1] == "":
                return
            self._lines.append("")
            return
        self._lines.append(line)

    def text(self) -> str:
        return "\n".join(self._lines).strip()

    def build(self) -> _Section | None:
        body = self.text()
        if not body:
            return None
        return _Section(
            chapter_no=self.chapter_no,
            chapter_title=self.chapter_title,
            section_no=self.section_no,
            body=body,
        )


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

class SectionSegmenter:
    def __init__(self, config: SegmenterConfig | None = None) -> None:
        self.config = config or SegmenterConfig()

    def segment(self, instrument: Instrument) -> list[Chunk]:
        """
        Dzieli jeden instrument na chunki paragrafów (§).

        Śledzi bieżący rozdział (kap.) i dopisuje go do metadanych każdego §.
        Metadane instrumentu (także obce klucze, np. "source") przechodzą
        do każdego chunka.
        """
        text = instrument.text or ""
        if not text.strip():
            return []

        sections = split_sections(text)

        if self.config.merge_short_sections:
            sections = merge_short_sections(sections, self.config.min_section_chars)

        chunks: list[Chunk] = []
        for section in sections:
            chunks.extend(self._materialize(section, instrument.metadata))
        return chunks

    def segment_all(self, instruments: Iterable[Instrument]) -> list[Chunk]:
        chunks: list[Chunk] = []
        for instrument in instruments:
            chunks.extend(self.segment(instrument))
        return chunks

    def _materialize(self, section: _Section, base: dict[str, Any]) -> list[Chunk]:
        md = dict(base)
        md[SEGMENT_TYPE] = SegmentType.SECTION.value
        md[CHAPTER_NO] = section.chapter_no
        md[CHAPTER_TITLE] = section.chapter_title
        md[SECTION_NO] = section.section_no
        if section.merged_from:
            md[MERGED_FROM] = ",".join(section.merged_from)

        if len(section.body) <= self.config.max_section_chars:
            return [Chunk(text=section.body, metadata=md)]

        pieces = split_body(
            section.body,
            self.config.max_section_chars,
            self.config.max_subchunks,
        )
        if len(pieces) == 1:
            return [Chunk(text=pieces[0], metadata=md)]

        total = len(pieces)
        return [
            Chunk(text=piece, metadata={**md, SUBCHUNK_INDEX: idx, SUBCHUNK_TOTAL: total})
            for idx, piece in enumerate(pieces)
        ]


def split_sections(text: str) -> list[_Section]:
    """Jeden przebieg maszyny stanów: rozdział / paragraf / zwykła linia."""
    chapter_no = ""
    chapter_title = ""
    sections: list[_Section] = []
    current: _SectionBuilder | None = None

    def _flush() -> None:
        if current is None:
            return
        built = current.build()
        if built is not None:
            sections.append(built)

    for line in classify_text(text):
        match line:
            case ChapterLine(no=no, title=title):
                # nagłówek rozdziału trafia tylko do metadanych
                chapter_no, chapter_title = no, title
            case SectionLine(no=no):
                _flush()
                current = _SectionBuilder(chapter_no, chapter_title, no)
                current.append_line(line.header())
            case BodyLine(text=body):
                if current is not None:
                    current.append_line(body)

    _flush()
    return sections


def merge_short_sections(sections: list[_Section], min_chars: int) -> list[_Section]:
    """
    Paragraf krótszy niż min_chars doklejamy na początek NASTĘPNEGO,
    a jego numer dopisujemy do merged_from następnego. Ostatni paragraf
    nigdy nie znika, nawet gdy jest krótki.

    Łańcuch krótkich A, B przed C daje jeden paragraf C z treścią
    A + B + C i merged_from = (A, B). Długość sprawdzamy dla treści już
    powiększonej o doklejone wcześniej paragrafy.
    """
    out: list[_Section] = []
    pending_bodies: list[str] = []
    pending_nos: list[str] = []

    for idx, section in enumerate(sections):
        body = "\n".join([*pending_bodies, section.body])
        merged = (*pending_nos, *section.merged_from)
        is_last = idx == len(sections) - 1

        if len(body) < min_chars and not is_last:
            pending_bodies = [body]
            pending_nos = [*merged, section.section_no]
            continue

        out.append(replace(section, body=body, merged_from=merged))
        pending_bodies = []
        pending_nos = []

    return out


def split_body(body: str, max_chars: int, max_pieces: int) -> list[str]:
    """
    Tnie tekst na kawałki o długości do max_chars.

    Punkt cięcia cofamy do najbliższego wcześniejszego "\\n", o ile leży on
    nie bliżej niż max_chars // 2 od początku reszty; inaczej tniemy twardo.
    Ostatni dozwolony kawałek (max_pieces) bierze całą resztę tekstu.
    """
    pieces: list[str] = []
    n = len(body)
    start = 0

    while start < n:
        if len(pieces) == max_pieces - 1:
            end = n
        else:
            end = min(n, start + max_chars)
            if end < n:
                nl = body.rfind("\n", start, end + 1)
                if nl > start and nl >= start + max_chars // 2:
                    end = nl

        part = body[start:end].strip()
        if part:
            pieces.append(part)
        start = end

    return pieces
