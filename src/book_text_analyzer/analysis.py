from __future__ import annotations

import logging

from .letters import letter_frequencies
from .models import AnalysisResult, Document, DocumentStats
from .sentences import rank_sentences
from .tokenization import count_sentences, count_words, split_sentences, split_words
from .words import longest_words, word_frequencies

LOGGER = logging.getLogger(__name__)

DEFAULT_TOP_N = 10


def analyze_text(text: str, top_n: int = DEFAULT_TOP_N) -> AnalysisResult:
    """Run every ranking over ``text`` and assemble a single result."""
    if top_n < 1:
        raise ValueError(f"top_n must be positive, got {top_n}")

    sentences = split_sentences(text)
    longest, shortest = rank_sentences(sentences, top_n)
    words = split_words(text)

    return AnalysisResult(
        longest_sentences=tuple(longest),
        shortest_sentences=tuple(shortest),
        longest_words=tuple(longest_words(words, top_n)),
        most_common_letters=tuple(letter_frequencies(text, top_n)),
        word_frequencies=word_frequencies(words, top_n),
    )


def analyze_document(doc: Document, top_n: int = DEFAULT_TOP_N) -> AnalysisResult:
    """Analyze a loaded document."""
    result = analyze_text(doc.text, top_n)
    LOGGER.debug(
        "Analyzed %s: %d longest, %d shortest sentences, %d words ranked",
        doc.doc_id,
        len(result.longest_sentences),
        len(result.shortest_sentences),
        len(result.word_frequencies),
    )
    return result


def compute_document_stats(text: str, byte_count: int | None = None) -> DocumentStats:
    """Collect the byte/word/sentence counters logged for each document."""
    if byte_count is None:
        byte_count = len(text.encode("utf-8"))
    return DocumentStats(
        byte_count=byte_count,
        word_count=count_words(text),
        sentence_count=count_sentences(text),
    )
