from __future__ import annotations

import re
from typing import List

WORD_PATTERN = re.compile(r"\b[A-Za-z']+\b")
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z])")
TITLE_PATTERN = re.compile(r"Title:(.*)")
SENTENCE_COUNT_DELIMITERS = re.compile(r"[.!?*]")
WORD_COUNT_DELIMITERS = re.compile(r"[ \n\r\t]")

# Compared against the whole candidate, case-insensitively.
ABBREVIATIONS = frozenset({"mr", "mrs", "dr", "prof", "rev", "ms", "jr", "sr", "st"})


def split_words(text: str) -> List[str]:
    """Return every whole-word run of letters and apostrophes, lowercased."""
    return [match.group().lower() for match in WORD_PATTERN.finditer(text)]


def split_sentences(text: str) -> List[str]:
    """Split text into sentence candidates of at least two tokens.

    A boundary is terminal punctuation followed by whitespace and an uppercase
    letter. Blank pieces, bare abbreviations and single-token pieces are
    dropped, as are exact repeats of an earlier candidate.
    """
    candidates: dict[str, None] = {}
    for piece in SENTENCE_BOUNDARY.split(text):
        if not piece.strip():
            continue
        if piece.strip().lower() in ABBREVIATIONS:
            continue
        if len(piece.split()) < 2:
            continue
        candidates.setdefault(piece, None)
    return list(candidates)


def extract_title(text: str) -> str:
    """Return the text after the first ``Title:`` marker, or an empty string."""
    match = TITLE_PATTERN.search(text)
    if match is None:
        return ""
    return match.group(1).strip()


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens for progress reporting."""
    return sum(1 for part in WORD_COUNT_DELIMITERS.split(text) if part)


def count_sentences(text: str) -> int:
    """Count pieces between ``.``, ``!``, ``?`` and ``*`` for progress reporting."""
    return sum(1 for part in SENTENCE_COUNT_DELIMITERS.split(text) if part)
