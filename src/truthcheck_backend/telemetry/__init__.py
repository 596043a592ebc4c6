"""Telemetry utilities (logging + metrics helpers)."""

from .logger import setup_logging, sanitize_text, preview_text
from .metrics import metrics

__all__ = ["setup_logging", "sanitize_text", "preview_text", "metrics"]
