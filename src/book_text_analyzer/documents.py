from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from .models import Document


class AnalyzerError(RuntimeError):
    """Base class for per-document failures."""


class DocumentReadError(AnalyzerError):
    """Raised when a book cannot be read or decoded."""


def discover_documents(input_path: Path, pattern: str = "*.txt") -> List[Path]:
    """Expand the input path into the files to analyze.

    A file is returned as-is; a directory yields its direct children matching
    ``pattern``, sorted by name.
    """
    if input_path.is_file():
        return [input_path]
    if not input_path.is_dir():
        raise DocumentReadError(f"Input path not found: {input_path}")
    return sorted(p for p in input_path.glob(pattern) if p.is_file())


def read_document(
    path: Path, encoding: str = "utf-8-sig", doc_id: str | None = None
) -> Tuple[Document, int]:
    """Read a book from disk and return it with its size in bytes."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(f"Unable to read {path}: {exc}") from exc
    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise DocumentReadError(f"Unable to decode {path} as {encoding}: {exc}") from exc
    return Document(doc_id=doc_id or path.name, text=text, path=path), len(raw)
