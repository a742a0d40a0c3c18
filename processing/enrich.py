"""
processing/enrich.py — końcowe przetwarzanie chunków przed indeksowaniem.

Dla każdego chunka:
  - normalizacja tekstu (ta sama co dla stron, razem z nagłówkami)
  - char_count, word_count
  - preview (pierwsze 100 znaków, "..." gdy tekst dłuższy)
  - processed_at (ISO-8601, UTC)
Chunki krótsze niż MIN_CONTENT_LENGTH po normalizacji są odrzucane.
Istniejące klucze metadanych zostają.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from data_model.documents import Chunk
from pdf.text_cleaner import normalize

MIN_CONTENT_LENGTH = 50
MAX_PREVIEW_LENGTH = 100


def process(chunks: Iterable[Chunk], *, now: datetime | None = None) -> list[Chunk]:
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    out: list[Chunk] = []
    for chunk in chunks:
        text = normalize(chunk.text)
        if len(text) < MIN_CONTENT_LENGTH:
            continue
        md = dict(chunk.metadata)
        md["char_count"] = len(text)
        md["word_count"] = count_words(text)
        md["preview"] = (
            text[:MAX_PREVIEW_LENGTH] + "..." if len(text) > MAX_PREVIEW_LENGTH else text
        )
        md["processed_at"] = stamp
        out.append(Chunk(text=text, metadata=md))
    return out


def count_words(text: str) -> int:
    return len(text.split())
