"""Reference corpus loading."""

from .loader import load_corpus, parse_corpus

__all__ = ["load_corpus", "parse_corpus"]
