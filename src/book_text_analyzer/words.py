from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Sequence


def distinct_words(words: Iterable[str]) -> List[str]:
    """Return each word once, in the order it was first seen."""
    return list(dict.fromkeys(words))


def longest_words(words: Sequence[str], top_n: int = 10) -> List[str]:
    """Select the longest distinct words; equal lengths keep first-seen order."""
    return sorted(distinct_words(words), key=len, reverse=True)[:top_n]


def word_frequencies(words: Sequence[str], top_n: int = 10) -> Dict[str, int]:
    """Count every occurrence and keep the ``top_n`` most frequent words.

    ``Counter.most_common`` orders equal counts by first occurrence, which
    gives the stable tie-break the report relies on.
    """
    counts: Counter[str] = Counter(words)
    return dict(counts.most_common(top_n))
