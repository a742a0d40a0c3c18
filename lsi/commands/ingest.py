"""Komenda: lsi ingest — PDF zbioru ustaw → chunki paragrafów (§)."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table
from rich import box

from data_model.documents import (
    CHAPTER_NO,
    LAW_CODE,
    MERGED_FROM,
    SECTION_NO,
    SUBCHUNK_INDEX,
    SUBCHUNK_TOTAL,
    ChunkList,
)
from lsi._config import add_segmenter_arguments, config_from_args

console = Console()


# ---------------------------------------------------------------------------
# Zapis do JSON
# ---------------------------------------------------------------------------

def _write_json(chunks: ChunkList, json_path: Path) -> None:
    data = [c.to_dict() for c in chunks]
    json_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(f"[green]JSON:[/green] {json_path}  ({len(chunks)} chunków)")


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(chunks: ChunkList) -> None:
    if not chunks:
        console.print("[yellow]Brak chunków.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("USTAWA", no_wrap=True, style="bold cyan")
    table.add_column("KAP",    justify="right", no_wrap=True)
    table.add_column("§",      no_wrap=True, style="bold")
    table.add_column("SCALONE", no_wrap=True, style="dim")
    table.add_column("PART",   justify="center", no_wrap=True)
    table.add_column("LEN",    justify="right", no_wrap=True)
    table.add_column("POCZĄTEK", no_wrap=False, max_width=50)

    for chunk in chunks:
        md = chunk.metadata
        part = (
            f"{md[SUBCHUNK_INDEX] + 1}/{md[SUBCHUNK_TOTAL]}"
            if SUBCHUNK_TOTAL in md
            else "-"
        )
        table.add_row(
            md.get(LAW_CODE) or "?",
            md.get(CHAPTER_NO) or "-",
            md.get(SECTION_NO) or "-",
            md.get(MERGED_FROM) or "-",
            part,
            str(len(chunk.text)),
            chunk.text.split("\n", 1)[0][:80],
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(chunks)} chunków[/dim]\n")


def _show_report(report) -> None:
    console.print(
        f"Stron: [bold]{report.pages_read}[/bold]  "
        f"ustaw: [bold]{report.instruments}[/bold]  "
        f"chunków: [bold]{report.chunks}[/bold]"
    )
    console.print(
        f"  [dim]< 50 zn.: {report.chunks_lt50}   "
        f"< 200 zn.: {report.chunks_lt200}   "
        f"< 500 zn.: {report.chunks_lt500}[/dim]"
    )


def _postprocess(chunks: ChunkList, args: argparse.Namespace) -> ChunkList:
    if args.enrich:
        from processing.enrich import process
        chunks = process(chunks)
    if args.with_header:
        from processing.header import with_header
        chunks = [with_header(c, args.url) for c in chunks]
    return chunks


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    pdf_path = Path(args.pdf_file)
    if not pdf_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {pdf_path}")
        raise SystemExit(1)
    if pdf_path.suffix.lower() != ".pdf":
        console.print(f"[red]Oczekiwano pliku .pdf, otrzymano:[/red] {pdf_path.suffix}")
        raise SystemExit(1)

    try:
        config = config_from_args(args)
    except ValueError as e:
        console.print(f"[red]Błędna konfiguracja:[/red] {e}")
        raise SystemExit(1)

    source_name: str = args.source or pdf_path.name

    console.print(f"Parsowanie [bold]{pdf_path}[/bold] (source=[cyan]{source_name}[/cyan]) …")

    from pdf.page_extractor import SourceReadError
    from pdf.reader import read_compendium

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Strony", total=None)

        def _on_page(done: int, total: int) -> None:
            progress.update(task, completed=done, total=total)

        try:
            result = read_compendium(
                pdf_path,
                config=config,
                source_name=source_name,
                on_page=_on_page,
            )
        except SourceReadError as e:
            console.print(f"[red]Błąd odczytu PDF:[/red] {e}")
            raise SystemExit(1)

    _show_report(result.report)

    chunks = _postprocess(result.chunks, args)

    if args.out == "json":
        json_path = pdf_path.with_name(f"{pdf_path.stem}.chunks.json")
        _write_json(chunks, json_path)

    if args.show:
        _show_table(chunks)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_output_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--out",
        choices=["json", "none"],
        default="json",
        help="Cel zapisu: json albo none (domyślnie: json).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę chunków w terminalu.",
    )
    p.add_argument(
        "--enrich",
        action="store_true",
        help="Dopisz char_count, word_count, preview, processed_at; odrzuć chunki < 50 znaków.",
    )
    p.add_argument(
        "--with-header",
        action="store_true",
        help="Poprzedź tekst każdego chunka linią [law=... | ... | kap ... | § ... | url=...].",
    )
    p.add_argument(
        "--url",
        metavar="URL",
        default=None,
        help="Wartość url w nagłówku chunka (z --with-header).",
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "ingest",
        help="Czyta PDF zbioru ustaw i zapisuje chunki paragrafów do JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Czyta dwukolumnowy PDF zbioru ustaw, skleja strony tej samej ustawy
i dzieli każdą ustawę na chunki paragrafów (§) z metadanymi
law_code / law_name / chapter_no / chapter_title / section_no.

Wynik trafia do PLIK.chunks.json obok pliku PDF.

Przykłady:
  lsi ingest lagsamling.pdf --show
  lsi ingest lagsamling.pdf --out none --show --no-merge
  lsi ingest lagsamling.pdf --enrich --with-header --url https://example.org/lag
  lsi ingest lagsamling.pdf --max-chars 8000 --max-subchunks 4
        """,
    )
    p.add_argument(
        "pdf_file",
        metavar="PLIK.pdf",
        help="Ścieżka do pliku PDF.",
    )
    p.add_argument(
        "--source",
        metavar="NAZWA",
        default=None,
        help="Wartość klucza source w metadanych (domyślnie: nazwa pliku).",
    )
    add_output_arguments(p)
    add_segmenter_arguments(p)
    p.set_defaults(func=run)
