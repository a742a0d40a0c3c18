"""
processing — opcjonalne kroki po segmentacji.

Publiczne API:
  with_header(chunk, url)   → Chunk z linią [law=... | ... | url=...]
  process(chunks)           → chunki z char_count / word_count / preview / processed_at
"""

from .enrich import process
from .header import render_header, with_header

__all__ = [
    "process",
    "render_header",
    "with_header",
]
