"""
pdf/page_extractor.py — ekstrakcja tekstu stron dwukolumnowego zbioru ustaw.

Architektura:
  źródło (ścieżka / bajty / strumień) → fitz.open() → strony
  → _classify_page() → (HEADING | NORMAL) na podstawie pustej próbki
  → tekst lewej i prawej kolumny z prostokątów clip
  → kod i nazwa ustawy (tytuł strony tytułowej albo pagina)
  → normalize() → PageText

Kluczowe funkcje publiczne:
  extract_pages(source, layout) -> list[PageText]
  extract_page(page, layout)    -> PageText
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import BinaryIO, Callable, Literal

import fitz  # PyMuPDF

from data_model.documents import PageText
from pdf.heading_patterns import HEADING_PAGE_TITLE, RUNNING_HEADER
from pdf.layout import DEFAULT_LAYOUT, PageLayout, RectTuple
from pdf.text_cleaner import normalize

type PdfSource = str | Path | bytes | BinaryIO

_PageKind = Literal["HEADING", "NORMAL"]


class SourceReadError(RuntimeError):
    """Nie da się otworzyć źródła albo odczytać którejś strony. Błąd krytyczny."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Nie można odczytać PDF {source}: {reason}")
        self.source = source
        self.reason = reason


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def extract_pages(
    source: PdfSource,
    layout: PageLayout = DEFAULT_LAYOUT,
    on_page: Callable[[int, int], None] | None = None,
) -> list[PageText]:
    """
    Otwiera PDF i zwraca PageText dla każdej strony, w kolejności stron.

    Args:
        source:  Ścieżka, surowe bajty albo strumień binarny PDF.
        layout:  Geometria kolumn i próbek.
        on_page: Opcjonalny callback (strony_gotowe, strony_razem).

    Raises:
        SourceReadError: źródło nieczytelne lub strona nie do sparsowania;
                         nie zwracamy wtedy wyników częściowych.
    """
    label = _describe(source)
    doc = _open(source, label)
    try:
        total = doc.page_count
        pages: list[PageText] = []
        for page in doc:
            try:
                pages.append(extract_page(page, layout))
            except RuntimeError as e:
                raise SourceReadError(label, f"strona {page.number + 1}: {e}") from e
            if on_page is not None:
                on_page(page.number + 1, total)
        return pages
    finally:
        doc.close()


def extract_page(page: fitz.Page, layout: PageLayout = DEFAULT_LAYOUT) -> PageText:
    """Ekstrakcja jednej strony: kolumny + kod/nazwa ustawy + normalizacja."""
    subheader = _text_in(page, layout.subheader_probe)
    probe = _text_in(page, layout.heading_probe)

    kind = classify_page(probe)
    columns = layout.heading_columns if kind == "HEADING" else layout.normal_columns

    left = _text_in(page, columns.left)
    right = _text_in(page, columns.right)

    if kind == "HEADING":
        law_code, law_name = parse_heading_title(left)
    else:
        law_code, law_name = parse_running_header(subheader)

    return PageText(
        text=normalize(merge_columns(left, right)),
        law_code=law_code,
        law_name=law_name,
    )


def classify_page(heading_probe_text: str | None) -> _PageKind:
    """Pusta próbka → strona tytułowa ustawy; w przeciwnym razie zwykła."""
    if heading_probe_text is None or not heading_probe_text.strip():
        return "HEADING"
    return "NORMAL"


def merge_columns(left: str | None, right: str | None) -> str:
    """Lewa kolumna, pusta linia, prawa kolumna. Pusta strona nic nie wnosi."""
    parts = [col.strip() for col in (left, right) if col and col.strip()]
    return "\n\n".join(parts)


def parse_heading_title(left_text: str | None) -> tuple[str, str]:
    """
    Odczytuje kod i nazwę ustawy z początku lewej kolumny strony tytułowej:

      "N 1 Landskapslag (2011:95) om radio- och\\ntelevisionsverksamhet\\n1 kap. ..."
      → ("N 1", "Landskapslag (2011:95) om radio- och televisionsverksamhet")

    Brak dopasowania → ("", "").
    """
    if not left_text:
        return "", ""
    m = HEADING_PAGE_TITLE.search(left_text.replace("\r\n", "\n").replace("\r", "\n"))
    if not m:
        return "", ""
    return _clean_code(m.group("code")), _single_line(m.group("name"))


def parse_running_header(subheader: str | None) -> tuple[str, str]:
    """Odczytuje kod i nazwę ustawy z paginy zwykłej strony. Brak → ("", "")."""
    if not subheader:
        return "", ""
    m = RUNNING_HEADER.match(subheader)
    if not m:
        return "", ""
    return _clean_code(m.group("code")), m.group("name").strip()


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _open(source: PdfSource, label: str) -> fitz.Document:
    try:
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.is_file():
                raise SourceReadError(label, "plik nie istnieje")
            doc = fitz.open(str(path), filetype="pdf")
        else:
            data = source if isinstance(source, bytes) else source.read()
            if not data:
                raise SourceReadError(label, "pusty strumień")
            doc = fitz.open(stream=data, filetype="pdf")
    except SourceReadError:
        raise
    except (OSError, RuntimeError, ValueError) as e:
        raise SourceReadError(label, str(e)) from e

    if not doc.is_pdf:
        doc.close()
        raise SourceReadError(label, "to nie jest dokument PDF")
    if doc.page_count == 0:
        doc.close()
        raise SourceReadError(label, "dokument nie ma stron")
    return doc


def _text_in(page: fitz.Page, rect: RectTuple) -> str:
    return page.get_text("text", clip=fitz.Rect(rect), sort=True)


def _clean_code(code: str) -> str:
    return re.sub(r"\s+", " ", code).strip()


def _single_line(text: str) -> str:
    text = re.sub(r"-\s*\n\s*(?=[^\W\d_])", "", text)
    return re.sub(r"\s*\n\s*", " ", text).strip()


def _describe(source: PdfSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    if isinstance(source, bytes):
        return f"<{len(source)} bajtów>"
    return str(getattr(source, "name", None) or "<strumień>")
