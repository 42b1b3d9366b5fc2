"""Result exporters."""

from .document_exporter import DEFAULT_FILENAME, DOCUMENT_TITLE, DocumentExporter
from .json_exporter import ExportFormatError, JsonExporter, ParsedExport
from .models import ExportDocument

__all__ = [
    "JsonExporter",
    "ParsedExport",
    "ExportFormatError",
    "ExportDocument",
    "DocumentExporter",
    "DOCUMENT_TITLE",
    "DEFAULT_FILENAME",
]
