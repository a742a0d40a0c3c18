"""
pdf/text_cleaner.py — normalizacja tekstu wyciągniętego z kolumn PDF.

Co robimy (w tej kolejności):
  - Ujednolicamy końce linii do \n
  - Usuwamy znaki sterujące (poza \n i \t)
  - Usuwamy łamanie wyrazów z myślnikiem ("tillämp-\nning" → "tillämpning")
  - Zwijamy serie spacji/tabulatorów do jednej spacji
  - Zwijamy ≥3 kolejne \n do \n\n (najwyżej jedna pusta linia)
  - Doklejamy kontynuacje nagłówków (ustawa / kap. / §) złamane przez skład

normalize() jest idempotentne: normalize(normalize(t)) == normalize(t).
"""

from __future__ import annotations

import re

from pdf.heading_patterns import LIST_ITEM, NEW_STRUCTURE, heading_kind

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

# Znaki sterujące C0/C1 bez \t i \n (\r znika wcześniej).
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")

# Myślnik na końcu linii, po którym następuje litera w kolejnej linii.
_HYPHEN_BREAK_RE = re.compile(r"-\s*\n\s*(?=[^\W\d_])")

_MULTI_SPACE_RE = re.compile(r"[\t ]{2,}")

# Każdy biały znak poza \n, także NBSP i U+3000: linia z samych spacji staje się pusta.
_TRAILING_SPACE_RE = re.compile(r"[^\S\n]+$", re.MULTILINE)

_BLANK_RUN_RE = re.compile(r"\n{3,}")

# Kontynuacja dłuższa niż to jest zwykłym akapitem, nie częścią tytułu.
_CONTINUATION_MAX_LEN = 90
_SINGLE_WORD_MAX_LEN = 25


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def normalize(text: str | None) -> str:
    """Pełna normalizacja tekstu strony lub dokumentu."""
    if not text or not text.strip():
        return ""

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    normalized = _CONTROL_RE.sub("", normalized)
    normalized = _HYPHEN_BREAK_RE.sub("", normalized)
    normalized = _MULTI_SPACE_RE.sub(" ", normalized)
    normalized = _TRAILING_SPACE_RE.sub("", normalized)
    normalized = _BLANK_RUN_RE.sub("\n\n", normalized)
    normalized = normalize_headings(normalized)

    return normalized.strip()


def normalize_headings(text: str) -> str:
    """
    Dokleja do linii nagłówka kolejne linie, które wyglądają na jego
    kontynuację, np.:

      "4 §. Förhållandet mellan landskapet och"
      "kommunerna"
      → "4 §. Förhållandet mellan landskapet och kommunerna"

    Doklejanie powtarzamy, dopóki następna linia jest kontynuacją, więc
    ponowne wywołanie niczego już nie zmienia.
    """
    if not text or not text.strip():
        return ""

    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    out: list[str] = []

    i = 0
    while i < len(lines):
        line = lines[i].rstrip()
        i += 1
        if not line.strip():
            out.append("")
            continue

        if heading_kind(line) is not None:
            while i < len(lines) and is_heading_continuation(lines[i].strip()):
                line = _join(line, lines[i])
                i += 1

        out.append(line)

    return "\n".join(out)


def is_heading_continuation(candidate: str) -> bool:
    """Czy linia (już przycięta) może być dalszym ciągiem tytułu nagłówka."""
    if not candidate:
        return False
    if NEW_STRUCTURE.match(candidate) or LIST_ITEM.match(candidate):
        return False
    if len(candidate) > _CONTINUATION_MAX_LEN:
        return False

    first = candidate[0]
    starts_lower = first.isalpha() and first.islower()
    short_single_word = len(candidate) <= _SINGLE_WORD_MAX_LEN and " " not in candidate
    return starts_lower or short_single_word


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _join(head: str, tail: str) -> str:
    head = head.strip()
    tail = tail.strip()
    if head.endswith("-"):
        return head[:-1] + tail
    return f"{head} {tail}"
