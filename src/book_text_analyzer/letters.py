from __future__ import annotations

from collections import Counter
from typing import List, Tuple


def letter_frequencies(text: str, top_n: int = 10) -> List[Tuple[str, int]]:
    """Count letters case-insensitively and return the ``top_n`` most common."""
    counts: Counter[str] = Counter(ch.lower() for ch in text if ch.isalpha())
    return counts.most_common(top_n)
