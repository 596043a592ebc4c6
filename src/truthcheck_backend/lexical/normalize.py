"""Text canonicalisation for OCR output and corpus content.

Both sides of a comparison go through :func:`normalize_text` so that OCR
noise (case, punctuation, links, a handful of glyph confusions) does not
dominate the similarity score.

The glyph substitutions are blind: every ``0`` becomes ``o`` and every ``1``
becomes ``l``, including digits that were genuinely digits (dates, counts).
Both the corpus and the query are rewritten identically, so genuine digits
still line up with each other.
"""

from __future__ import annotations

import re
from typing import AbstractSet, FrozenSet, Optional

from .stopwords import STOP_WORDS

# Characters tesseract commonly confuses, mapped to the letter they usually are.
OCR_CONFUSIONS = str.maketrans({"|": "i", "0": "o", "1": "l"})

URL_RE = re.compile(r"https?://\S+")
NON_WORD_RE = re.compile(r"[^\w\s]")
WHITESPACE_RE = re.compile(r"\s+")

MIN_WORD_LENGTH = 4


def normalize_text(text: Optional[str]) -> str:
    """Return the canonical comparison form of ``text``.

    Lowercases, applies the OCR glyph substitutions, drops URLs, turns
    punctuation into spaces and collapses whitespace. Never raises.
    """
    if not text:
        return ""
    lowered = text.lower().translate(OCR_CONFUSIONS)
    without_urls = URL_RE.sub("", lowered)
    spaced = NON_WORD_RE.sub(" ", without_urls)
    return WHITESPACE_RE.sub(" ", spaced).strip()


def extract_significant_words(
    normalized_text: str,
    *,
    min_length: int = MIN_WORD_LENGTH,
    stop_words: AbstractSet[str] = STOP_WORDS,
) -> FrozenSet[str]:
    """Return the set of indexable words in already-normalized text.

    An empty set means nothing in the text can be matched.
    """
    return frozenset(
        word
        for word in normalized_text.split(" ")
        if len(word) >= min_length and word not in stop_words
    )


__all__ = ["normalize_text", "extract_significant_words", "MIN_WORD_LENGTH", "OCR_CONFUSIONS"]
