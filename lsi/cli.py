"""
lsi — narzędzie CLI do ingestii zbioru ustaw (lagsamling).

Użycie:
  lsi <komenda> [opcje]

Komendy:
  ingest      Czyta PDF zbioru ustaw i zapisuje chunki paragrafów do JSON.
  segment     Dzieli plik tekstowy jednej ustawy na chunki paragrafów.
  normalize   Wypisuje znormalizowany tekst pliku.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby znaki
# "§", "å", "ä", "ö" były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from lsi.commands import ingest as cmd_ingest
from lsi.commands import segment as cmd_segment
from lsi.commands import normalize as cmd_normalize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lsi",
        description="lsi — ingestia zbioru ustaw do chunków paragrafów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="lsi 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_ingest.add_parser(subparsers)
    cmd_segment.add_parser(subparsers)
    cmd_normalize.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
