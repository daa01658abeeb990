"""Quote formatting module.

Exports ``QuoteFormatter`` and the citation helpers.
"""
from __future__ import annotations

from mdinclude.quote.formatter import QUOTE_MARKER, QuoteFormatter, source_link, word_column

__all__ = ["QUOTE_MARKER", "QuoteFormatter", "source_link", "word_column"]
