"""Export and clipboard module."""

from .clipboard import ClipboardError, IClipboard, MemoryClipboard, SystemClipboard
from .csv_export import CSV_HEADER, CsvExport, build_export, export_filename, render_csv
from .service import ExportService, IExportService

__all__ = [
    "CSV_HEADER",
    "ClipboardError",
    "CsvExport",
    "ExportService",
    "IClipboard",
    "IExportService",
    "MemoryClipboard",
    "SystemClipboard",
    "build_export",
    "export_filename",
    "render_csv",
]
