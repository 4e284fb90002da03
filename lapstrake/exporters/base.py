"""
exporters/base.py - Base exporter class.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import logging

from ..errors import ExportError
from .schema import Drawing, ExportFormat

logger = logging.getLogger(__name__)


class BaseExporter(ABC):
    """Abstract base class for drawing exporters."""

    format: ExportFormat

    @abstractmethod
    def export(self, drawing: Drawing) -> str:
        """
        Export drawing to string format.

        Args:
            drawing: Drawing to export

        Returns:
            String representation in target format
        """
        pass

    def export_to_file(self, drawing: Drawing, file_path: str) -> None:
        """
        Export drawing directly to file.

        Args:
            drawing: Drawing to export
            file_path: Output file path

        Raises:
            ExportError: The file could not be written
        """
        write_text(self.export(drawing), file_path, self.format)


def write_text(content: str, file_path: str, format: ExportFormat) -> None:
    """Write exporter output, reporting failures as ExportError."""
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as err:
        raise ExportError(format.value, f"could not write {file_path}") from err
    logger.info(f"Wrote {format.value} output to {file_path}")
