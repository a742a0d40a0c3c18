"""
pdf/layout.py — geometria dwukolumnowej strony zbioru ustaw.

Prostokąty w punktach PDF (x0, y0, x1, y1), początek układu w lewym górnym
rogu strony, tak jak w PyMuPDF.

Typ strony rozpoznajemy próbką: na stronie tytułowej ustawy pas
HEADING_PROBE jest pusty (tam stoi tylko blok tytułu wyżej/niżej), na
zwykłej stronie biegnie w nim tekst kolumn.
"""

from __future__ import annotations

from dataclasses import dataclass

type RectTuple = tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class ColumnPair:
    left: RectTuple
    right: RectTuple


@dataclass(frozen=True, slots=True)
class PageLayout:
    heading_columns: ColumnPair   # strona tytułowa: kolumny zaczynają się niżej
    normal_columns: ColumnPair
    subheader_probe: RectTuple    # pagina z kodem i nazwą ustawy
    heading_probe: RectTuple      # pusty → strona tytułowa


def _rect(x: float, y: float, width: float, height: float) -> RectTuple:
    return (x, y, x + width, y + height)


DEFAULT_LAYOUT = PageLayout(
    heading_columns=ColumnPair(
        left=_rect(30, 180, 210, 480),
        right=_rect(240, 180, 210, 480),
    ),
    normal_columns=ColumnPair(
        left=_rect(30, 50, 210, 610),
        right=_rect(240, 50, 210, 610),
    ),
    subheader_probe=_rect(1, 35, 480, 10),
    heading_probe=_rect(1, 130, 480, 30),
)
