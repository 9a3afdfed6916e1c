from __future__ import annotations

import re
from typing import Iterable, List, Tuple

EDGE_NON_WORD = re.compile(r"^\W+|\W+$")


def normalize_sentence(sentence: str) -> str:
    """Strip leading/trailing non-word characters and lowercase for comparison."""
    return EDGE_NON_WORD.sub("", sentence).lower()


def is_valid_sentence(sentence: str) -> bool:
    """A sentence has several words, or is one word ending in ``!`` or ``?``."""
    words = sentence.split()
    if len(words) > 1:
        return True
    return len(words) == 1 and sentence.endswith(("!", "?"))


def deduplicate_sentences(candidates: Iterable[str]) -> List[str]:
    """Keep the first valid candidate of each normalized key, in encounter order.

    The key is claimed by its first occurrence even when that occurrence is
    invalid, so a later spelling of the same sentence is never promoted.
    """
    seen: set[str] = set()
    unique: List[str] = []
    for sentence in candidates:
        key = normalize_sentence(sentence)
        if key in seen:
            continue
        seen.add(key)
        if is_valid_sentence(sentence):
            unique.append(sentence)
    return unique


def top_longest_sentences(sentences: List[str], top_n: int = 10) -> List[str]:
    """Order by character length descending; ties keep their original order."""
    return sorted(sentences, key=len, reverse=True)[:top_n]


def top_shortest_sentences(sentences: List[str], top_n: int = 10) -> List[str]:
    """Order valid sentences by word count, then character length."""
    valid = [sentence for sentence in sentences if is_valid_sentence(sentence)]
    return sorted(valid, key=lambda s: (len(s.split()), len(s)))[:top_n]


def rank_sentences(
    candidates: Iterable[str], top_n: int = 10
) -> Tuple[List[str], List[str]]:
    """Return ``(longest, shortest)`` selections over the deduplicated candidates."""
    unique = deduplicate_sentences(candidates)
    # Only the shortest view re-applies the validity check.
    return top_longest_sentences(unique, top_n), top_shortest_sentences(unique, top_n)
