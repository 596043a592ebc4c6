"""Word-level inverted index over the reference corpus."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import AbstractSet, Dict, Iterable, List, Sequence, Tuple

from ..models import Candidate, IndexedPost, TruthPost
from .normalize import MIN_WORD_LENGTH, extract_significant_words, normalize_text


logger = logging.getLogger(__name__)

DEFAULT_MAX_CANDIDATES = 50


class InvertedIndex:
    """Maps significant words to the corpus positions that contain them.

    Built once from an ordered corpus and read-only afterwards, so lookups
    need no locking.
    """

    def __init__(self, *, min_word_length: int = MIN_WORD_LENGTH) -> None:
        self._min_word_length = max(1, min_word_length)
        self._posts: Tuple[IndexedPost, ...] = ()
        self._postings: Dict[str, Tuple[int, ...]] = {}

    def build(self, records: Iterable[TruthPost]) -> None:
        indexed: List[IndexedPost] = []
        postings: Dict[str, List[int]] = defaultdict(list)

        for position, record in enumerate(records):
            normalized = normalize_text(record.content)
            words = extract_significant_words(normalized, min_length=self._min_word_length)
            indexed.append(IndexedPost(index=position, normalized_content=normalized, words=words))
            # Each word appears once per record, so a position is never listed twice.
            for word in words:
                postings[word].append(position)

        self._posts = tuple(indexed)
        self._postings = {word: tuple(positions) for word, positions in postings.items()}
        logger.debug(
            "Inverted index built with %d posts, %d unique words",
            len(self._posts),
            len(self._postings),
        )

    def postings(self, word: str) -> Tuple[int, ...]:
        return self._postings.get(word, ())

    def post(self, position: int) -> IndexedPost:
        return self._posts[position]

    def find_candidates(self, words: AbstractSet[str]) -> Dict[int, int]:
        """Count, per corpus position, how many of ``words`` it contains."""
        shared: Dict[int, int] = {}
        for word in words:
            for position in self._postings.get(word, ()):
                shared[position] = shared.get(position, 0) + 1
        return shared

    def rank_candidates(
        self,
        words: AbstractSet[str],
        *,
        limit: int = DEFAULT_MAX_CANDIDATES,
    ) -> List[Candidate]:
        """Return up to ``limit`` candidates, most shared words first.

        Ties on the shared-word count go to the earlier corpus position.
        """
        if not words:
            return []
        shared = self.find_candidates(words)
        ranked = sorted(shared.items(), key=lambda item: (-item[1], item[0]))
        return [Candidate(index=position, shared_words=count) for position, count in ranked[:limit]]

    @property
    def posts(self) -> Sequence[IndexedPost]:
        return self._posts

    @property
    def corpus_size(self) -> int:
        return len(self._posts)

    @property
    def vocabulary_size(self) -> int:
        return len(self._postings)
