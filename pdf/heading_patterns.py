"""
pdf/heading_patterns.py — wzorce regex nagłówków zbioru ustaw (lagsamling).

Trzy poziomy struktury:
  - nagłówek ustawy:   "E 1 Kommunallag (1997:73) för landskapet Åland"
  - nagłówek rozdziału: "1 kap. Allmänna bestämmelser"
  - nagłówek paragrafu: "1 §.", "7a §", "12 § Tillämpningsområde"

Odwołania w treści ("Se 8 och 9 kap. ...") nie są nagłówkami, bo nie
zaczynają się od numeru na początku linii.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

HeadingKind = Literal["LAW", "CHAPTER", "SECTION"]


@dataclass(frozen=True, slots=True)
class HeadingPattern:
    kind: HeadingKind
    regex: re.Pattern[str]


def _p(pattern: str, flags: int = 0) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE | re.UNICODE | flags)


# ---------------------------------------------------------------------------
# Nagłówki na poziomie linii (normalizacja kontynuacji)
# ---------------------------------------------------------------------------

# E 1 Kommunallag (1997:73) för landskapet
LAW_HEADING_CORE = _p(r"^\s*[A-ZÅÄÖ]\s*\d+\s+.+\(\s*\d{4}\s*:\s*\d+\s*\)\s*.*$")

CHAPTER_HEADING = _p(r"^\s*\d+\s*kap\..*$")

SECTION_HEADING = _p(r"^\s*\d+[a-z]?\s*§\.?\s*.*$")

# Początek nowej jednostki struktury (rozdział albo paragraf).
NEW_STRUCTURE = _p(r"^\s*(?:\d+\s*kap\.|\d+[a-z]?\s*§)")

# Punkt wyliczenia wewnątrz paragrafu: "1) ..."
LIST_ITEM = _p(r"^\s*\d+\)\s+.*$")

HEADING_PATTERNS: list[HeadingPattern] = [
    HeadingPattern(kind="LAW", regex=LAW_HEADING_CORE),
    HeadingPattern(kind="CHAPTER", regex=CHAPTER_HEADING),
    HeadingPattern(kind="SECTION", regex=SECTION_HEADING),
]


def heading_kind(line: str) -> HeadingKind | None:
    """Zwraca rodzaj nagłówka dla linii albo None. Pierwszy pasujący wygrywa."""
    for pat in HEADING_PATTERNS:
        if pat.regex.match(line):
            return pat.kind
    return None


# ---------------------------------------------------------------------------
# Wzorce z grupami (segmentacja)
# ---------------------------------------------------------------------------

CHAPTER_LINE = _p(r"^\s*(?P<no>\d+)\s*kap\.\s*(?P<title>.*?)\s*$")

SECTION_LINE = _p(r"^\s*(?P<no>\d+[a-z]?)\s*§\.?\s*(?P<rest>.*?)\s*$")


# ---------------------------------------------------------------------------
# Wzorce stron (kod i nazwa ustawy)
# ---------------------------------------------------------------------------

# Strona tytułowa ustawy: kod + nazwa z cytowaniem (rok:numer), aż do
# pierwszej linii "1 kap." albo "1 §".
HEADING_PAGE_TITLE = _p(
    r"\A\s*(?P<code>[^\W\d_]\s*\d{1,2})\b\s*"
    r"(?P<name>.*?\(\s*\d{4}\s*:\s*\d+\s*\).*?)"
    r"(?=\n\s*1\s*(?:kap\.?|§))",
    re.DOTALL,
)

# Pagina zwykłej strony: "N 1 Landskapslag om radio- och televisionsverksamhet"
RUNNING_HEADER = re.compile(r"^\s*(?P<code>[A-ZÅÄÖ]+\s[0-9]+)(?P<name>.+)")
