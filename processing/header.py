"""processing/header.py — nagłówek kontekstu doklejany przed tekst chunka."""

from __future__ import annotations

from data_model.documents import CHAPTER_NO, LAW_CODE, LAW_NAME, SECTION_NO, Chunk


def render_header(metadata: dict, url: str | None = None) -> str:
    """[law=<kod> | <nazwa> | kap <nr> | § <nr> | url=<url>]"""
    return (
        f"[law={metadata.get(LAW_CODE)}"
        f" | {metadata.get(LAW_NAME)}"
        f" | kap {metadata.get(CHAPTER_NO)}"
        f" | § {metadata.get(SECTION_NO)}"
        f" | url={url if url is not None else metadata.get('url')}]"
    )


def with_header(chunk: Chunk, url: str | None = None) -> Chunk:
    """Nowy Chunk: nagłówek + "\\n" + tekst. Metadane bez zmian."""
    return Chunk(
        text=f"{render_header(chunk.metadata, url)}\n{chunk.text}",
        metadata=dict(chunk.metadata),
    )
