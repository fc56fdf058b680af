# No dependencies
from enum import Enum


class ExportFormat(str, Enum):
    CSS = "css"
    TAILWIND = "tailwind"
    JSON = "json"
    ASE = "ase"


format_suffixes = {
    ExportFormat.CSS: ".css",
    ExportFormat.TAILWIND: ".config.js",
    ExportFormat.JSON: ".json",
    ExportFormat.ASE: ".ase",
}

format_mime_types = {
    ExportFormat.CSS: "text/css",
    ExportFormat.TAILWIND: "application/javascript",
    ExportFormat.JSON: "application/json",
    ExportFormat.ASE: "application/octet-stream",
}

binary_formats = {ExportFormat.ASE}

DEFAULT_PALETTE_NAME = "custom"
DEFAULT_FILE_STEM = "palette"
