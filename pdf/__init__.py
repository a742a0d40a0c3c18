"""
pdf — odczyt dwukolumnowego PDF zbioru ustaw.

Moduły:
  layout           — geometria kolumn i próbek typu strony
  heading_patterns — wzorce nagłówków ustawy / kap. / §
  text_cleaner     — normalize(), normalize_headings()
  page_extractor   — extract_pages(), SourceReadError
  reader           — read_compendium(): strony → instrumenty → chunki
"""
