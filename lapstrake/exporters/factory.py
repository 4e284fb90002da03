"""
exporters/factory.py - Exporter factory.
"""

from __future__ import annotations
from typing import Dict, Type

from .base import BaseExporter
from .csv_exporter import CSVExporter
from .json_exporter import JSONExporter
from .schema import ExportFormat
from .svg import SVGExporter

# Registry of exporters by format
_EXPORTER_REGISTRY: Dict[ExportFormat, Type[BaseExporter]] = {
    ExportFormat.SVG: SVGExporter,
    ExportFormat.CSV: CSVExporter,
    ExportFormat.JSON: JSONExporter,
}

_EXTENSION_MAP: Dict[str, ExportFormat] = {
    "svg": ExportFormat.SVG,
    "csv": ExportFormat.CSV,
    "json": ExportFormat.JSON,
}


def get_exporter(format: ExportFormat, **kwargs) -> BaseExporter:
    """
    Get exporter instance for format.

    Args:
        format: Export format
        **kwargs: Exporter-specific options

    Returns:
        BaseExporter instance

    Raises:
        ValueError: Unknown export format
    """
    if format not in _EXPORTER_REGISTRY:
        raise ValueError(f"Unknown export format: {format}")

    exporter_class = _EXPORTER_REGISTRY[format]
    return exporter_class(**kwargs)


def detect_format(file_path: str) -> ExportFormat:
    """Detect format from file extension."""
    ext = file_path.lower().split(".")[-1] if "." in file_path else ""

    if ext not in _EXTENSION_MAP:
        raise ValueError(
            f"Cannot detect format from extension '.{ext}'. "
            f"Supported: {list(_EXTENSION_MAP.keys())}"
        )

    return _EXTENSION_MAP[ext]


def exporter_for_file(file_path: str, **kwargs) -> BaseExporter:
    """Exporter for the format implied by the file's extension."""
    return get_exporter(detect_format(file_path), **kwargs)
