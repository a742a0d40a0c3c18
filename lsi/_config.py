"""Konfiguracja segmentacji — przez zmienne środowiskowe, nadpisywana flagami CLI."""

from __future__ import annotations

import argparse
import os

from segmentation.segmenter import (
    MAX_SECTION_CHARS,
    MAX_SUBCHUNKS,
    MIN_SECTION_CHARS,
    SegmenterConfig,
)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def load_segmenter_config() -> SegmenterConfig:
    return SegmenterConfig(
        min_section_chars = _env_int("LSI_MIN_SECTION_CHARS", MIN_SECTION_CHARS),
        max_section_chars = _env_int("LSI_MAX_SECTION_CHARS", MAX_SECTION_CHARS),
        max_subchunks     = _env_int("LSI_MAX_SUBCHUNKS",     MAX_SUBCHUNKS),
        merge_short_sections = _env_bool("LSI_MERGE_SHORT_SECTIONS", True),
    )


def config_from_args(args: argparse.Namespace) -> SegmenterConfig:
    """Zmienne środowiskowe + flagi CLI (flagi wygrywają)."""
    base = load_segmenter_config()
    return SegmenterConfig(
        min_section_chars = args.min_chars if args.min_chars is not None else base.min_section_chars,
        max_section_chars = args.max_chars if args.max_chars is not None else base.max_section_chars,
        max_subchunks     = args.max_subchunks if args.max_subchunks is not None else base.max_subchunks,
        merge_short_sections = base.merge_short_sections and not args.no_merge,
    )


def add_segmenter_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--min-chars",
        type=int,
        metavar="N",
        default=None,
        help=f"Paragraf krótszy niż N znaków jest doklejany do następnego (domyślnie: {MIN_SECTION_CHARS}).",
    )
    p.add_argument(
        "--max-chars",
        type=int,
        metavar="N",
        default=None,
        help=f"Paragraf dłuższy niż N znaków jest cięty na subchunki (domyślnie: {MAX_SECTION_CHARS}).",
    )
    p.add_argument(
        "--max-subchunks",
        type=int,
        metavar="N",
        default=None,
        help=f"Maksymalna liczba subchunków jednego paragrafu (domyślnie: {MAX_SUBCHUNKS}).",
    )
    p.add_argument(
        "--no-merge",
        action="store_true",
        help="Nie scalaj krótkich paragrafów.",
    )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name}: oczekiwano liczby całkowitej, otrzymano {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name}: oczekiwano 0/1/true/false/yes/no, otrzymano {raw!r}")
