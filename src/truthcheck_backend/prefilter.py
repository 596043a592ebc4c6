"""Cheap literal check run before the full verification pipeline.

Screenshots of real posts carry the author's handle or signature, so text
without any of them can skip OCR matching entirely. Matching is
case-insensitive.
"""

from __future__ import annotations

from typing import Iterable, Optional

TRUMP_POST_MARKERS = (
    "@realdonaldtrump",
    "donald j. trump",
    "donald j trump",
)


def looks_like_trump_post(text: Optional[str], markers: Iterable[str] = TRUMP_POST_MARKERS) -> bool:
    """Return ``True`` when ``text`` mentions one of the lowercase ``markers``."""
    if not text:
        return False
    lowered = text.lower()
    return any(marker in lowered for marker in markers)


__all__ = ["looks_like_trump_post", "TRUMP_POST_MARKERS"]
