"""
segmentation/aggregator.py — grupowanie stron w instrumenty (całe ustawy).

Strony o tym samym law_code sklejamy w kolejności stron, separatorem "\n".
Kolejność instrumentów = kolejność pierwszego wystąpienia kodu.

Strony bez wykrytego kodu ("") trafiają razem do jednego instrumentu
"niezidentyfikowanego" z law_code "".
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from data_model.documents import (
    LAW_CODE,
    LAW_NAME,
    SEGMENT_TYPE,
    Instrument,
    PageText,
    SegmentType,
)


def aggregate(
    pages: Iterable[PageText],
    extra_metadata: Mapping[str, Any] | None = None,
) -> list[Instrument]:
    """
    Zwraca po jednym Instrument na każdy odrębny law_code.

    law_name bierzemy z pierwszej strony danego kodu; nazwy z kolejnych
    stron (nawet sprzeczne) są pomijane.

    extra_metadata (np. {"source": ...}) kopiujemy do każdego instrumentu.
    """
    texts: dict[str, list[str]] = {}
    names: dict[str, str] = {}

    for page in pages:
        if page.law_code not in texts:
            texts[page.law_code] = []
            names[page.law_code] = page.law_name
        texts[page.law_code].append(page.text)

    instruments: list[Instrument] = []
    for code, parts in texts.items():
        metadata: dict[str, Any] = dict(extra_metadata or {})
        metadata[LAW_CODE] = code
        metadata[LAW_NAME] = names[code]
        metadata[SEGMENT_TYPE] = SegmentType.INSTRUMENT.value
        instruments.append(Instrument(text="\n".join(parts), metadata=metadata))

    return instruments
