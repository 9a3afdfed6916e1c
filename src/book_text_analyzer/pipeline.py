from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, List

from .analysis import analyze_document, compute_document_stats
from .config import AnalyzerConfig
from .documents import AnalyzerError, discover_documents, read_document
from .models import ProcessingOutcome
from .report import report_filename, write_report
from .tokenization import extract_title

LOGGER = logging.getLogger(__name__)


def process_file(
    path: Path, config: AnalyzerConfig, doc_id: str | None = None
) -> ProcessingOutcome:
    """Analyze one book and save its report.

    Every failure is logged and captured on the returned outcome so that one
    bad file never affects the rest of the batch.
    """
    doc_id = doc_id or path.name
    outcome = ProcessingOutcome(doc_id=doc_id, source=path)
    LOGGER.info("Processing %s...", doc_id)
    try:
        document, byte_count = read_document(path, config.encoding, doc_id)
        outcome.title = extract_title(document.text)
        LOGGER.info("File %s read. Title: %s", doc_id, outcome.title)

        result = analyze_document(document, config.top_n)
        outcome.stats = compute_document_stats(document.text, byte_count)
        LOGGER.info(
            "Analysis of %s completed. Bytes processed: %d, words processed: %d, "
            "sentences processed: %d",
            doc_id,
            outcome.stats.byte_count,
            outcome.stats.word_count,
            outcome.stats.sentence_count,
        )

        filename = report_filename(outcome.title, fallback=path.stem)
        outcome.report_path = write_report(
            result, Path(config.output_dir), filename, config.top_n
        )
    except AnalyzerError as exc:
        outcome.error = str(exc)
        LOGGER.error("Error processing %s: %s", doc_id, exc)
        return outcome
    except Exception as exc:  # noqa: broad-except
        outcome.error = f"{type(exc).__name__}: {exc}"
        LOGGER.exception("Unexpected error processing %s", doc_id)
        return outcome

    LOGGER.info("Processing of %s completed; report saved to %s", doc_id, outcome.report_path)
    return outcome


def process_paths(
    paths: Iterable[Path],
    config: AnalyzerConfig,
    doc_ids: Dict[Path, str] | None = None,
) -> List[ProcessingOutcome]:
    """Run one analysis task per path and wait for all of them to finish."""
    path_list = list(paths)
    if not path_list:
        return []
    doc_ids = doc_ids or {}

    with ThreadPoolExecutor(
        max_workers=config.max_workers, thread_name_prefix="book-analyzer"
    ) as executor:
        futures = [
            executor.submit(process_file, path, config, doc_ids.get(path))
            for path in path_list
        ]
        outcomes = [future.result() for future in futures]

    failed = sum(1 for outcome in outcomes if not outcome.succeeded)
    LOGGER.info(
        "Processed %d documents (%d succeeded, %d failed)",
        len(outcomes),
        len(outcomes) - failed,
        failed,
    )
    return sorted(outcomes, key=lambda outcome: outcome.doc_id)


def process_directory(
    config: AnalyzerConfig, input_path: Path | None = None
) -> List[ProcessingOutcome]:
    """Discover the configured input files and analyze them concurrently."""
    root = input_path or Path(config.input_dir)
    paths = discover_documents(root, config.file_pattern)
    if not paths:
        LOGGER.warning("No documents matching %s found under %s", config.file_pattern, root)
        return []
    doc_ids: Dict[Path, str] = {}
    if root.is_dir():
        doc_ids = {path: str(path.relative_to(root)) for path in paths}
    return process_paths(paths, config, doc_ids)
