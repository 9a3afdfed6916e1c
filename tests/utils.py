from __future__ import annotations

from pathlib import Path

SAMPLE_TEXT = "Title: Test Book\nHello world. Mr. Smith runs fast! Hi."


def write_book(directory: Path, name: str, title: str | None, body: str) -> Path:
    """Write a plain-text book, prefixed with a ``Title:`` line when given."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    header = f"Title: {title}\n" if title is not None else ""
    path.write_text(header + body, encoding="utf-8")
    return path


def create_sample_library(tmp_path: Path) -> Path:
    """Create a small directory of books plus a file the scanner must ignore."""
    library = tmp_path / "books"
    write_book(
        library,
        "moby.txt",
        "Moby Dick",
        "Call me Ishmael. Some years ago I went to sea. The whale was white!",
    )
    write_book(
        library,
        "pride.txt",
        "Pride and Prejudice",
        "It is a truth universally acknowledged. Mrs. Bennet was nervous. Why?",
    )
    (library / "notes.md").write_text("Title: Not A Book\nIgnore me.", encoding="utf-8")
    return library
