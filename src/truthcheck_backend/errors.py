"""Exceptions raised by the verification core."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class VerifierError(RuntimeError):
    """Base class for verification failures."""


class CorpusLoadError(VerifierError):
    """The reference corpus could not be read or parsed."""

    def __init__(self, message: str, *, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class VerifierNotLoadedError(VerifierError):
    """A match was requested before the corpus was loaded."""

    def __init__(self, message: str = "TruthVerifier not loaded. Call load() first.") -> None:
        super().__init__(message)


__all__ = ["VerifierError", "CorpusLoadError", "VerifierNotLoadedError"]
