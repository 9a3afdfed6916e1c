from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(slots=True, frozen=True)
class Document:
    """Represents an input book."""

    doc_id: str
    text: str
    path: Path | None = None


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    """Ranked views computed over a single document.

    ``word_frequencies`` is copied into a read-only mapping so a result
    cannot change between analysis and report rendering.
    """

    longest_sentences: Tuple[str, ...] = ()
    shortest_sentences: Tuple[str, ...] = ()
    longest_words: Tuple[str, ...] = ()
    most_common_letters: Tuple[Tuple[str, int], ...] = ()
    word_frequencies: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "word_frequencies", MappingProxyType(dict(self.word_frequencies))
        )


@dataclass(slots=True, frozen=True)
class DocumentStats:
    """Raw size counters reported while a document is processed."""

    byte_count: int
    word_count: int
    sentence_count: int


@dataclass(slots=True)
class ProcessingOutcome:
    """Result of one per-document task."""

    doc_id: str
    source: Path
    title: str = ""
    report_path: Path | None = None
    stats: DocumentStats | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
