"""Logging configuration helpers and log-safe text rendering."""

from __future__ import annotations

import logging
import re
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

EMAIL_RE = re.compile(r"[\w.+-]+@[\w.-]+\.[a-zA-Z]{2,}")
DIGIT_RE = re.compile(r"\b\d{4,}\b")
WHITESPACE_RE = re.compile(r"\s+")


def sanitize_text(value: Optional[str]) -> str:
    """Mask common PII patterns (emails, long numbers) for logging."""

    if not value:
        return ""
    masked = EMAIL_RE.sub("<email>", value)
    masked = DIGIT_RE.sub("<num>", masked)
    return masked


def preview_text(value: Optional[str], *, limit: int = 80) -> str:
    """Return a sanitized single-line excerpt of OCR text for log messages."""

    flattened = WHITESPACE_RE.sub(" ", sanitize_text(value)).strip()
    if len(flattened) <= limit:
        return flattened
    return flattened[: max(0, limit - 3)] + "..."


def setup_logging(level: Optional[str] = None) -> None:
    """Set the root logger level, installing a handler only when none exists.

    Unknown level names fall back to INFO.
    """

    desired_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    root_logger = logging.getLogger()

    if root_logger.handlers:
        root_logger.setLevel(desired_level)
        return

    logging.basicConfig(level=desired_level, format=_DEFAULT_FORMAT)
