"""Wspólne dane testowe: przykładowa ustawa i generator dwukolumnowych PDF."""

from __future__ import annotations

from collections.abc import Sequence

import fitz  # PyMuPDF
import pytest

from pdf.layout import ColumnPair, PageLayout

SAMPLE_LAW_TEXT = "\n".join([
    "N 1 Landskapslag (2011:95) om radio- och televisionsverksamhet",
    "1 kap. Inledande bestämmelser",
    "1 §. Lagens innehåll (2020/119)",
    "I denna lag finns bestämmelser om de villkor som gäller för beställ-tv, "
    "radio- och televisionssändningar och mottagande av sådana på Åland, "
    "om de villkor som gäller för sändningar genom ledning eller någon "
    "annan fast förbindelse som når fler än 200 bostäder, om de avgifter "
    "som ska betalas för tillstånd att utöva verksamhet som innefattar "
    "radio- och televisionssändning samt om de myndigheter som beslutar "
    "i de frågor som hör till lagens tillämpningsområde. (2019/104)",
    "I 5 kap. finns särskilda bestämmelser om videodel-",
    "ningsplattformstjänster. (2020/119)",
    "I landskapslagen (2019:103) om medieavgift finns särskilda bestämmelser "
    "om det särskilda uppdrag Ålands Radio och Tv Ab har att tillhandahålla "
    "allmännyttig radio- och televisionsverksamhet. (2019/104)",
    "1a §. (2020/119) Lagens tillämpningsområde",
    "Lagen tillämpas på radiosändningar som kan tas emot på Åland då "
    "leverantören är etablerad på Åland. Lagen tillämpas på "
    "televisionssändningar och beställ-tv, som kan tas emot på Åland "
    "och där leverantören av den audiovisuella medietjänsten är etablerad "
    "på Åland enligt definitionen i artikel 2.3 i Europaparlamentets och "
    "rådets direktiv 2010/13/EU om samordning av vissa bestämmelser som "
    "fastställts i medlemsstaternas lagar och andra författningar om "
    "tillhandahållandet av audiovisuella medietjänster, nedan benämnt AV-direktivet.",
    "Om leverantören av den audiovisuella medietjänsten inte är etablerad "
    "på Åland eller i en stat som är bunden av avtalet om Europeiska "
    "ekonomiska samarbetsområdet (EES-stat) ska lagen gälla om den som "
    "sänder på Åland använder sig av en satellitupplänk som är belägen på Åland.",
    "",
])

# Szeroki układ testowy: tekst stoi daleko od krawędzi prostokątów clip.
#   0–40    pagina (kod i nazwa ustawy)
#   40–100  próbka: pusta tylko na stronie tytułowej
#   100–    kolumny strony tytułowej
TEST_LAYOUT = PageLayout(
    heading_columns=ColumnPair(left=(0, 100, 300, 800), right=(300, 100, 600, 800)),
    normal_columns=ColumnPair(left=(0, 40, 300, 800), right=(300, 40, 600, 800)),
    subheader_probe=(0, 0, 600, 40),
    heading_probe=(0, 40, 600, 100),
)

_LINE_STEP = 14
_FONT_SIZE = 9


def _add_page(
    doc: fitz.Document,
    *,
    left: Sequence[str] = (),
    right: Sequence[str] = (),
    running_header: str | None = None,
    heading: bool = False,
) -> None:
    """Dopisuje stronę w układzie TEST_LAYOUT."""
    page = doc.new_page(width=600, height=800)
    if running_header:
        page.insert_text((20, 25), running_header, fontsize=_FONT_SIZE)
    top = 130 if heading else 60
    for col_x, lines in ((20, left), (320, right)):
        for i, line in enumerate(lines):
            page.insert_text((col_x, top + i * _LINE_STEP), line, fontsize=_FONT_SIZE)


@pytest.fixture(name="add_page")
def add_page_fixture():
    return _add_page


@pytest.fixture
def sample_law_text() -> str:
    return SAMPLE_LAW_TEXT


@pytest.fixture
def wide_layout() -> PageLayout:
    return TEST_LAYOUT


@pytest.fixture
def compendium_pdf() -> bytes:
    """Trzy strony: dwie ustawy N 1 (tytułowa + zwykła) i E 2 (tytułowa)."""
    doc = fitz.open()
    _add_page(
        doc,
        heading=True,
        left=[
            "N 1 Landskapslag (2011:95) om radio- och",
            "televisionsverksamhet",
            "1 kap. Inledande bestämmelser",
            "1 §. Lagens innehåll",
            "Denna lag gäller radio.",
        ],
        right=[
            "2 §. Definitioner",
            "I denna lag avses sändning.",
        ],
    )
    _add_page(
        doc,
        running_header="N 1 Landskapslag om radio- och televisionsverksamhet",
        left=[
            "3 §. Tillstånd",
            "Tillstånd krävs för sändning.",
        ],
        right=[
            "2 kap. Avgifter",
            "4 §. Avgift",
            "Avgift ska betalas årligen.",
        ],
    )
    _add_page(
        doc,
        heading=True,
        left=[
            "E 2 Kommunallag (1997:73) för",
            "landskapet Åland",
            "1 kap. Allmänna bestämmelser",
            "1 §. Kommunerna",
            "Åland indelas i kommuner.",
        ],
    )
    data = doc.tobytes()
    doc.close()
    return data
