from __future__ import annotations

import logging
from pathlib import Path

import pytest

from book_text_analyzer import pipeline
from book_text_analyzer.config import AnalyzerConfig
from book_text_analyzer.documents import DocumentReadError, discover_documents, read_document
from book_text_analyzer.pipeline import process_directory, process_file, process_paths
from tests.utils import SAMPLE_TEXT, create_sample_library, write_book


def _config(tmp_path: Path, **overrides) -> AnalyzerConfig:
    return AnalyzerConfig(
        input_dir=str(tmp_path / "books"),
        output_dir=str(tmp_path / "reports"),
        **overrides,
    )


def test_process_file_writes_report(tmp_path: Path):
    book = tmp_path / "books" / "sample.txt"
    book.parent.mkdir()
    book.write_text(SAMPLE_TEXT, encoding="utf-8")

    outcome = process_file(book, _config(tmp_path))

    assert outcome.succeeded
    assert outcome.title == "Test Book"
    assert outcome.report_path == tmp_path / "reports" / "Test_Book.txt"
    assert outcome.stats is not None
    assert outcome.stats.byte_count == len(SAMPLE_TEXT.encode("utf-8"))
    assert outcome.stats.word_count == 10
    assert outcome.stats.sentence_count == 4
    report = outcome.report_path.read_text(encoding="utf-8")
    assert report.startswith("Top 10 Longest Sentences by Characters:\n29 chars\n16 chars\n")


def test_process_file_without_title_uses_file_stem(tmp_path: Path):
    book = write_book(tmp_path / "books", "anonymous.txt", None, "No title here. Just words.")

    outcome = process_file(book, _config(tmp_path))

    assert outcome.title == ""
    assert outcome.report_path is not None
    assert outcome.report_path.name == "anonymous.txt"


def test_process_file_captures_read_failure(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    missing = tmp_path / "books" / "missing.txt"

    with caplog.at_level(logging.ERROR):
        outcome = process_file(missing, _config(tmp_path))

    assert not outcome.succeeded
    assert outcome.report_path is None
    assert "missing.txt" in caplog.text
    assert not (tmp_path / "reports").exists()


def test_process_file_captures_decode_failure(tmp_path: Path):
    book = tmp_path / "books" / "latin1.txt"
    book.parent.mkdir()
    book.write_bytes("Title: Caf\xe9\nOl\xe9 amigo.".encode("latin-1"))

    outcome = process_file(book, _config(tmp_path))

    assert not outcome.succeeded
    assert "decode" in (outcome.error or "")

    outcome = process_file(book, _config(tmp_path, encoding="latin-1"))
    assert outcome.succeeded
    assert outcome.title == "Café"


def test_process_file_captures_unexpected_errors(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
):
    book = write_book(tmp_path / "books", "boom.txt", "Boom", "It breaks here. Or not.")

    def explode(*_args, **_kwargs):
        raise RuntimeError("analysis exploded")

    monkeypatch.setattr(pipeline, "analyze_document", explode)
    outcome = process_file(book, _config(tmp_path))

    assert not outcome.succeeded
    assert outcome.error == "RuntimeError: analysis exploded"
    assert outcome.title == "Boom"
    assert outcome.report_path is None


def test_process_directory_analyzes_all_books(tmp_path: Path):
    create_sample_library(tmp_path)

    outcomes = process_directory(_config(tmp_path, max_workers=2))

    assert [o.doc_id for o in outcomes] == ["moby.txt", "pride.txt"]
    assert all(o.succeeded for o in outcomes)
    reports = sorted(p.name for p in (tmp_path / "reports").iterdir())
    assert reports == ["Moby_Dick.txt", "Pride_and_Prejudice.txt"]


def test_process_paths_isolates_failures(tmp_path: Path):
    library = create_sample_library(tmp_path)
    paths = [library / "moby.txt", library / "absent.txt", library / "pride.txt"]

    outcomes = process_paths(paths, _config(tmp_path))

    by_id = {o.doc_id: o for o in outcomes}
    assert by_id["moby.txt"].succeeded
    assert by_id["pride.txt"].succeeded
    assert not by_id["absent.txt"].succeeded


def test_process_directory_with_no_books(tmp_path: Path):
    (tmp_path / "books").mkdir()

    assert process_directory(_config(tmp_path)) == []


def test_discover_documents_filters_pattern(tmp_path: Path):
    library = create_sample_library(tmp_path)

    assert [p.name for p in discover_documents(library)] == ["moby.txt", "pride.txt"]
    assert discover_documents(library / "moby.txt") == [library / "moby.txt"]
    with pytest.raises(DocumentReadError):
        discover_documents(tmp_path / "nowhere")


def test_read_document_strips_byte_order_mark(tmp_path: Path):
    book = tmp_path / "bom.txt"
    book.write_bytes(b"\xef\xbb\xbfTitle: Marked\nBody text.")

    document, byte_count = read_document(book)

    assert document.text.startswith("Title: Marked")
    assert document.doc_id == "bom.txt"
    assert byte_count == book.stat().st_size
