"""
segmentation/lines.py — klasyfikacja linii tekstu ustawy.

Każda linia dostaje dokładnie jeden typ, w kolejności priorytetu:
  1. ChapterLine — "1 kap. Inledande bestämmelser"
  2. SectionLine — "1a §. (2020/119) Lagens tillämpningsområde"
  3. BodyLine    — wszystko inne, także linia pusta
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pdf.heading_patterns import CHAPTER_LINE, SECTION_LINE

_WS_RE = re.compile(r"\s+")
_HSPACE_RE = re.compile(r"[\t ]{2,}")


@dataclass(frozen=True, slots=True)
class ChapterLine:
    no: str
    title: str


@dataclass(frozen=True, slots=True)
class SectionLine:
    no: str
    rest: str

    def header(self) -> str:
        """Odtworzona linia nagłówka: "<no> §" albo "<no> §. <rest>"."""
        return f"{self.no} §. {self.rest}" if self.rest else f"{self.no} §"


@dataclass(frozen=True, slots=True)
class BodyLine:
    text: str

    @property
    def blank(self) -> bool:
        return not self.text


type ClassifiedLine = ChapterLine | SectionLine | BodyLine


def classify_line(line: str) -> ClassifiedLine:
    if m := CHAPTER_LINE.match(line):
        return ChapterLine(no=m.group("no").strip(), title=_spaces(m.group("title")))
    if m := SECTION_LINE.match(line):
        return SectionLine(no=m.group("no").strip(), rest=_spaces(m.group("rest")))
    return BodyLine(text=line.strip())


def split_lines(text: str) -> list[str]:
    """Dzieli tekst na przycięte linie; serie spacji zwija do jednej."""
    t = text.replace("\r\n", "\n").replace("\r", "\n")
    t = _HSPACE_RE.sub(" ", t)
    return [s.strip() for s in t.split("\n")]


def classify_text(text: str) -> list[ClassifiedLine]:
    return [classify_line(line) for line in split_lines(text)]


def _spaces(s: str | None) -> str:
    return _WS_RE.sub(" ", s).strip() if s else ""
