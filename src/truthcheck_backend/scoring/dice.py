"""Character-bigram Dice coefficient between two strings."""

from __future__ import annotations

from collections import Counter


def bigrams(text: str) -> Counter[str]:
    """Multiset of the overlapping two-character windows of ``text``."""
    return Counter(text[i : i + 2] for i in range(len(text) - 1))


def compare_two_strings(first: str, second: str) -> float:
    """Return ``2 * shared / (total_first + total_second)`` over bigrams.

    Shared bigrams are counted with multiplicity (minimum count per bigram).
    Strings too short to have any bigram score 0.0; identical strings of two
    or more characters score 1.0.
    """
    first_bigrams = bigrams(first)
    second_bigrams = bigrams(second)
    total = sum(first_bigrams.values()) + sum(second_bigrams.values())
    if total == 0:
        return 0.0
    shared = sum((first_bigrams & second_bigrams).values())
    return 2.0 * shared / total
