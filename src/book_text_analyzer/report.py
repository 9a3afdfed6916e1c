from __future__ import annotations

from pathlib import Path
from typing import List

from .documents import AnalyzerError
from .models import AnalysisResult


class ReportWriteError(AnalyzerError):
    """Raised when a report cannot be saved."""


def render_report(result: AnalysisResult, top_n: int = 10) -> str:
    """Serialize an analysis result into the plain-text report layout.

    Headers name the configured ``top_n``; with the default of 10 they read
    ``Top 10 ...`` exactly.
    """
    lines: List[str] = [f"Top {top_n} Longest Sentences by Characters:"]
    lines.extend(f"{len(sentence)} chars" for sentence in result.longest_sentences)

    lines.append("")
    lines.append(f"Top {top_n} Shortest Sentences by Words:")
    lines.extend(result.shortest_sentences)

    lines.append("")
    lines.append(f"Top {top_n} Longest Words:")
    lines.extend(result.longest_words)

    lines.append("")
    lines.append(f"Top {top_n} Most Common Letters:")
    lines.extend(
        f"{letter}: {count} occurrences" for letter, count in result.most_common_letters
    )

    lines.append("")
    lines.append(f"Top {top_n} Words by Frequency:")
    lines.extend(f"{word}: {count}" for word, count in result.word_frequencies.items())

    return "\n".join(lines) + "\n"


def report_filename(title: str, fallback: str = "untitled") -> str:
    """Build the report file name from a book title.

    Spaces become underscores. Path separators are replaced too so a title
    can never point outside the output directory.
    """
    name = title or fallback
    for char in (" ", "/", "\\"):
        name = name.replace(char, "_")
    return f"{name}.txt"


def ensure_output_dir(path: Path) -> Path:
    """Create the output directory; safe to call from several threads at once."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ReportWriteError(f"Unable to create output directory {path}: {exc}") from exc
    return path


def write_report(
    result: AnalysisResult, output_dir: Path, filename: str, top_n: int = 10
) -> Path:
    """Write the rendered report under ``output_dir`` and return its path."""
    ensure_output_dir(output_dir)
    dest = output_dir / filename
    try:
        dest.write_text(render_report(result, top_n), encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Unable to write report {dest}: {exc}") from exc
    return dest
