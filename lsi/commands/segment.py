"""Komenda: lsi segment — plik tekstowy jednej ustawy → chunki paragrafów."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from data_model.documents import LAW_CODE, LAW_NAME, SEGMENT_TYPE, SOURCE, Instrument, SegmentType
from lsi._config import add_segmenter_arguments, config_from_args
from lsi.commands.ingest import _postprocess, _show_table, _write_json, add_output_arguments
from pdf.text_cleaner import normalize
from segmentation.segmenter import SectionSegmenter

console = Console()


def run(args: argparse.Namespace) -> None:
    txt_path = Path(args.txt_file)
    if not txt_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {txt_path}")
        raise SystemExit(1)

    try:
        config = config_from_args(args)
    except ValueError as e:
        console.print(f"[red]Błędna konfiguracja:[/red] {e}")
        raise SystemExit(1)

    try:
        raw = txt_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu pliku:[/red] {e}")
        raise SystemExit(1)

    instrument = Instrument(
        text=normalize(raw),
        metadata={
            LAW_CODE: args.law_code,
            LAW_NAME: args.law_name,
            SEGMENT_TYPE: SegmentType.INSTRUMENT.value,
            SOURCE: txt_path.name,
        },
    )

    chunks = SectionSegmenter(config).segment(instrument)
    console.print(f"Znaleziono [bold]{len(chunks)}[/bold] chunków.")

    chunks = _postprocess(chunks, args)

    if args.out == "json":
        _write_json(chunks, txt_path.with_name(f"{txt_path.stem}.chunks.json"))

    if args.show:
        _show_table(chunks)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "segment",
        help="Dzieli plik tekstowy jednej ustawy na chunki paragrafów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Traktuje plik tekstowy (UTF-8) jako jedną ustawę: normalizuje tekst
i dzieli go na chunki paragrafów (§). Treść przed pierwszym § jest pomijana.

Przykłady:
  lsi segment kommunallag.txt --law-code "E 1" --law-name "Kommunallag (1997:73)" --show
  lsi segment lag.txt --out none --show --min-chars 0
        """,
    )
    p.add_argument(
        "txt_file",
        metavar="PLIK.txt",
        help="Ścieżka do pliku tekstowego.",
    )
    p.add_argument(
        "--law-code",
        metavar="KOD",
        default="",
        help='Kod ustawy w metadanych, np. "E 1".',
    )
    p.add_argument(
        "--law-name",
        metavar="NAZWA",
        default="",
        help="Nazwa ustawy w metadanych.",
    )
    add_output_arguments(p)
    add_segmenter_arguments(p)
    p.set_defaults(func=run)
