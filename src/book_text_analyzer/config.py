from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

LOGGER = logging.getLogger(__name__)

# Options that name files or directories; stored as plain strings so the
# configuration dumps cleanly back to YAML.
PATH_OPTIONS = frozenset({"input_dir", "output_dir", "log_file"})


@dataclass(slots=True)
class AnalyzerConfig:
    """Configuration options for a batch analysis run."""

    input_dir: str = "books"
    output_dir: str = "AnalyzedBooks"
    file_pattern: str = "*.txt"
    encoding: str = "utf-8-sig"
    top_n: int = 10
    max_workers: int | None = None
    log_level: str = "INFO"
    log_file: str | None = None

    def __post_init__(self) -> None:
        if self.top_n < 1:
            raise ValueError(f"top_n must be positive, got {self.top_n}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _option_values(data: Mapping[str, Any], source: str) -> dict[str, Any]:
    """Keep recognised options, stringifying paths; unknown keys are logged."""
    known = {option.name for option in fields(AnalyzerConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        LOGGER.warning("Ignoring unknown options in %s: %s", source, ", ".join(unknown))
    values: dict[str, Any] = {}
    for key in known & set(data):
        value = data[key]
        if key in PATH_OPTIONS and isinstance(value, Path):
            value = str(value)
        values[key] = value
    return values


def with_overrides(config: AnalyzerConfig, **overrides: Any) -> AnalyzerConfig:
    """Return a copy of ``config`` with every non-``None`` override applied."""
    provided = {key: value for key, value in overrides.items() if value is not None}
    return replace(config, **_option_values(provided, "overrides"))


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from parsed settings; ``None`` means defaults."""
    return AnalyzerConfig(**_option_values(data or {}, "settings"))


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Read an AnalyzerConfig from a YAML mapping; an empty file means defaults."""
    source = Path(path)
    parsed = yaml.safe_load(source.read_text(encoding="utf-8"))
    if parsed is None:
        return AnalyzerConfig()
    if not isinstance(parsed, Mapping):
        raise ValueError(f"{source} must contain a YAML mapping of options.")
    return AnalyzerConfig(**_option_values(parsed, str(source)))


def load_config(path: str | Path | None = None, **overrides: Any) -> AnalyzerConfig:
    """Load YAML settings when a path is given, then layer ``overrides`` on top."""
    base = AnalyzerConfig() if path is None else config_from_yaml(path)
    return with_overrides(base, **overrides) if overrides else base
