"""Reads the JSON dump of reference posts into validated models."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from ..errors import CorpusLoadError
from ..models import TruthPost


logger = logging.getLogger(__name__)

_CORPUS_ADAPTER = TypeAdapter(List[TruthPost])


def parse_corpus(raw: Union[str, bytes], *, source: Optional[Union[str, Path]] = None) -> List[TruthPost]:
    """Decode a JSON array of posts, all or nothing."""
    try:
        return _CORPUS_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        label = source or "<memory>"
        logger.error("Corpus %s is malformed: %d error(s)", label, exc.error_count())
        raise CorpusLoadError(f"Malformed corpus {label}: {exc}", path=source) from exc


def load_corpus(path: Union[str, Path]) -> List[TruthPost]:
    corpus_path = Path(path).expanduser()
    try:
        raw = corpus_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read corpus from %s: %s", corpus_path, exc)
        raise CorpusLoadError(f"Cannot read corpus {corpus_path}: {exc}", path=corpus_path) from exc
    posts = parse_corpus(raw, source=corpus_path)
    logger.debug("Read %d posts from %s", len(posts), corpus_path)
    return posts
