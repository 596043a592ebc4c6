"""Verifies OCR text from screenshots against the reference post corpus.

Matching runs in two phases: an inverted word index shortlists posts that
share significant words with the OCR text, then a character-bigram Dice
score picks the closest post from that shortlist.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from threading import Lock
from typing import Iterable, List, Optional, Sequence, Union

from .config import DEFAULT_CORPUS_PATH, Settings
from .config import settings as default_settings
from .corpus import load_corpus
from .errors import CorpusLoadError, VerifierNotLoadedError
from .lexical import InvertedIndex, extract_significant_words, normalize_text
from .lexical.inverted_index import DEFAULT_MAX_CANDIDATES
from .lexical.normalize import MIN_WORD_LENGTH
from .models import TruthPost, VerificationResult
from .scoring import compare_two_strings
from .telemetry import metrics, preview_text, setup_logging


logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.7


class TruthVerifier:
    """Owns the loaded corpus and answers ``find_match`` queries.

    The verifier starts unloaded. ``load`` reads and indexes the corpus
    exactly once; concurrent callers block until that single load finishes
    and share its outcome, success or failure.
    After loading, all state is read-only and ``find_match`` may be called
    from any number of threads without locking.
    """

    def __init__(
        self,
        corpus_path: Optional[Union[str, Path]] = None,
        *,
        similarity_threshold: float = SIMILARITY_THRESHOLD,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
        min_word_length: int = MIN_WORD_LENGTH,
        records: Optional[Iterable[TruthPost]] = None,
    ) -> None:
        """
        Args:
            corpus_path: JSON dump to read on ``load``; defaults to the standard dump location.
            similarity_threshold: Minimum Dice score for a verified match.
            max_candidates: Shortlist size taken from the inverted index.
            min_word_length: Shortest word considered significant.
            records: In-memory corpus indexed on ``load`` instead of reading a file.
        """
        if not 0.0 <= similarity_threshold <= 1.0:
            raise ValueError("similarity_threshold must be within [0, 1]")
        self.corpus_path = Path(corpus_path or DEFAULT_CORPUS_PATH)
        self.similarity_threshold = similarity_threshold
        self.max_candidates = max(1, max_candidates)
        self._min_word_length = max(1, min_word_length)
        self._records = tuple(records) if records is not None else None
        self._posts: Sequence[TruthPost] = ()
        self._index = InvertedIndex(min_word_length=self._min_word_length)
        self._loaded = False
        self._failed_loads = 0
        self._load_error: Optional[CorpusLoadError] = None
        self._lock = Lock()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def posts(self) -> Sequence[TruthPost]:
        return self._posts

    @property
    def corpus_size(self) -> int:
        return len(self._posts)

    @property
    def index(self) -> InvertedIndex:
        return self._index

    def load(self) -> None:
        """Read and index the corpus; later calls are no-ops.

        Raises:
            CorpusLoadError: the corpus could not be read or parsed. The
                verifier stays unloaded. Callers that were waiting on the failed
                attempt get the same error; a call made afterwards retries.
        """
        if self._loaded:
            return

        failures_seen = self._failed_loads
        with self._lock:
            if self._loaded:
                return
            # A load that failed while this caller waited decides its outcome.
            if self._failed_loads != failures_seen and self._load_error is not None:
                raise self._load_error

            try:
                with metrics.timer("verifier.load"):
                    if self._records is not None:
                        posts: List[TruthPost] = list(self._records)
                    else:
                        posts = load_corpus(self.corpus_path)

                    index = InvertedIndex(min_word_length=self._min_word_length)
                    index.build(posts)
            except CorpusLoadError as exc:
                self._load_error = exc
                self._failed_loads += 1
                metrics.increment("verifier.load.failed")
                raise

            self._posts = tuple(posts)
            self._index = index
            self._load_error = None
            self._loaded = True

        metrics.gauge("verifier.load.posts", len(self._posts))
        logger.info(
            "TruthVerifier loaded %d posts, %d unique words indexed",
            len(self._posts),
            index.vocabulary_size,
        )

    async def aload(self) -> None:
        """Load without blocking the running event loop."""
        if self._loaded:
            return
        await asyncio.to_thread(self.load)

    def find_match(self, ocr_text: str) -> VerificationResult:
        """Return the verdict for ``ocr_text`` against the loaded corpus.

        A miss is never an error: it comes back as ``verified=False``. When
        no post reaches the threshold, the closest post and its score are
        still reported so callers can see how near the text came.
        """
        if not self._loaded:
            raise VerifierNotLoadedError()

        normalized = normalize_text(ocr_text)
        words = extract_significant_words(normalized, min_length=self._min_word_length)
        if not words:
            metrics.increment("verifier.match.empty", reason="no_words")
            return VerificationResult.empty(ocr_text)

        candidates = self._index.rank_candidates(words, limit=self.max_candidates)
        if not candidates:
            metrics.increment("verifier.match.empty", reason="no_candidates")
            return VerificationResult.empty(ocr_text)

        best_index = -1
        best_similarity = -1.0
        for candidate in candidates:
            similarity = compare_two_strings(
                normalized, self._index.post(candidate.index).normalized_content
            )
            # Strict comparison keeps the higher-ranked candidate on ties.
            if similarity > best_similarity:
                best_index = candidate.index
                best_similarity = similarity

        best_post = self._posts[best_index]
        verified = best_similarity >= self.similarity_threshold
        metrics.increment("verifier.match.verified" if verified else "verifier.match.rejected")
        logger.debug(
            "OCR text '%s' best match %s (similarity %.3f, %d candidates, verified=%s)",
            preview_text(ocr_text),
            best_post.id,
            best_similarity,
            len(candidates),
            verified,
        )
        return VerificationResult(
            verified=verified,
            post=best_post,
            similarity=best_similarity,
            ocr_text=ocr_text,
        )


def build_verifier(
    settings: Optional[Settings] = None,
    *,
    configure_telemetry: bool = True,
) -> TruthVerifier:
    """Construct and load a verifier from configuration.

    The caller owns the returned instance and passes it to whatever needs it.
    With ``configure_telemetry`` the root logger and metrics emitter are set
    up from the same configuration first.
    """
    settings = settings or default_settings
    if configure_telemetry:
        setup_logging(settings.effective_log_level)
        metrics.configure(enabled=settings.app_config.telemetry.metrics_enabled)

    logger.info(
        "Building verifier from corpus %s (app config %s)",
        settings.corpus_path,
        settings.resolved_app_config_path(),
    )
    verification = settings.verification
    verifier = TruthVerifier(
        settings.corpus_path,
        similarity_threshold=verification.similarity_threshold,
        max_candidates=verification.max_candidates,
        min_word_length=verification.min_word_length,
    )
    verifier.load()
    return verifier


async def abuild_verifier(
    settings: Optional[Settings] = None,
    *,
    configure_telemetry: bool = True,
) -> TruthVerifier:
    """Async counterpart of :func:`build_verifier` for event-loop startup hooks."""
    return await asyncio.to_thread(build_verifier, settings, configure_telemetry=configure_telemetry)
