"""Fixed English stop-word list used when extracting significant words."""

from __future__ import annotations

STOP_WORDS = frozenset(
    {
        # articles, conjunctions, prepositions
        "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "if", "into", "through", "during",
        "before", "after", "above", "below", "between", "under", "again",
        "further", "then", "once", "here", "there", "about", "against",
        "because", "until", "while", "since", "over", "out", "up", "down", "off",
        # auxiliaries and modals
        "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "do", "does", "did", "will", "would", "could", "should", "may", "might",
        "must", "shall", "can", "am",
        # pronouns and determiners
        "this", "that", "these", "those", "i", "you", "he", "she", "it", "we",
        "they", "what", "which", "who", "whom", "whose", "where", "when", "why",
        "how", "all", "each", "every", "both", "few", "more", "most", "other",
        "some", "such", "any", "our", "own", "my", "your", "his", "her", "its",
        "their", "me", "him", "us", "them",
        # fillers
        "no", "not", "only", "same", "so", "than", "too", "very", "just",
        "also", "even", "get", "got", "go", "going", "make", "made", "now",
        "well", "way", "back", "still",
    }
)

__all__ = ["STOP_WORDS"]
