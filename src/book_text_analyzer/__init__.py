"""
book_text_analyzer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analysis import analyze_document, analyze_text
from .config import AnalyzerConfig, config_from_dict, config_from_yaml, load_config
from .models import AnalysisResult, Document, ProcessingOutcome
from .pipeline import process_directory, process_file, process_paths
from .report import render_report, write_report

__all__ = [
    "AnalyzerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "AnalysisResult",
    "Document",
    "ProcessingOutcome",
    "analyze_text",
    "analyze_document",
    "render_report",
    "write_report",
    "process_file",
    "process_paths",
    "process_directory",
]

__version__ = "0.1.0"
