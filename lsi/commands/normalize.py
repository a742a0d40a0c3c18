"""Komenda: lsi normalize — wypisuje znormalizowany tekst pliku."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from pdf.text_cleaner import normalize

console = Console()


def run(args: argparse.Namespace) -> None:
    txt_path = Path(args.txt_file)
    if not txt_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {txt_path}")
        raise SystemExit(1)

    try:
        raw = txt_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu pliku:[/red] {e}")
        raise SystemExit(1)

    # surowy tekst, bez znaczników rich
    print(normalize(raw))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "normalize",
        help="Wypisuje znormalizowany tekst pliku (myślniki, spacje, nagłówki).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Normalizuje tekst jak przy ekstrakcji stron: końce linii, znaki sterujące,
łamanie wyrazów, nadmiarowe spacje i puste linie, kontynuacje nagłówków.

Przykłady:
  lsi normalize strona.txt
  lsi normalize strona.txt > strona.norm.txt
        """,
    )
    p.add_argument(
        "txt_file",
        metavar="PLIK.txt",
        help="Ścieżka do pliku tekstowego.",
    )
    p.set_defaults(func=run)
