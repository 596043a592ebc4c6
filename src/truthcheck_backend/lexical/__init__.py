"""Lexical utilities (normalization, stop words, inverted index)."""

from .inverted_index import InvertedIndex
from .normalize import extract_significant_words, normalize_text
from .stopwords import STOP_WORDS

__all__ = ["InvertedIndex", "extract_significant_words", "normalize_text", "STOP_WORDS"]
