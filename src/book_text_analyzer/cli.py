from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import typer
import yaml

from .config import AnalyzerConfig, load_config
from .documents import AnalyzerError
from .pipeline import process_directory

app = typer.Typer(help="Book Text Analyzer CLI.", no_args_is_help=True)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


@app.command()
def analyze(
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        "-i",
        help="Directory of books (or a single book file). Defaults to config input_dir.",
    ),
    output_path: Path | None = typer.Option(
        None,
        "--output-path",
        "-o",
        file_okay=False,
        help="Directory receiving the reports. Defaults to config output_dir.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    top_n: int | None = typer.Option(
        None, "--top-n", min=1, help="Number of entries kept in each ranking."
    ),
    max_workers: int | None = typer.Option(
        None, "--max-workers", min=1, help="Number of books analyzed in parallel."
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Also write progress logs to this file."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Analyze every book and write one report per book."""
    try:
        cfg = load_config(
            config,
            input_dir=input_path,
            output_dir=output_path,
            top_n=top_n,
            max_workers=max_workers,
            log_file=log_file,
            log_level=log_level or None,
        )
    except (ValueError, TypeError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    configure_logging(cfg.log_level, cfg.log_file)

    source = Path(cfg.input_dir)
    try:
        outcomes = process_directory(cfg, source)
    except AnalyzerError as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc

    if not outcomes:
        typer.echo(f"No documents matching {cfg.file_pattern} found in {source}.")
        return

    failures: List[str] = [o.doc_id for o in outcomes if not o.succeeded]
    typer.echo(
        f"Analyzed {len(outcomes) - len(failures)} of {len(outcomes)} documents; "
        f"reports written to {cfg.output_dir}"
    )
    for doc_id in failures:
        typer.echo(f"[error] {doc_id}", err=True)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Send log records to the console and, optionally, to a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


if __name__ == "__main__":
    main()
