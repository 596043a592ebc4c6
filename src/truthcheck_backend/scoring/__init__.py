"""String similarity scoring."""

from .dice import bigrams, compare_two_strings

__all__ = ["bigrams", "compare_two_strings"]
