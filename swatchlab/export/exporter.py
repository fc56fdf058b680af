from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence, Union
from ..colors.color import Color
from ..types.format_type import (
    ExportFormat,
    binary_formats,
    format_mime_types,
    format_suffixes,
    DEFAULT_FILE_STEM,
    DEFAULT_PALETTE_NAME,
)
from .ase import export_ase
from .css_variables import export_css_variables
from .json_data import export_json
from .tailwind import export_tailwind_config

FormatLike = Union[ExportFormat, str]


def to_export_format(fmt: FormatLike) -> ExportFormat:
    """
    Raises:
        ValueError: ``Unsupported export format: ...`` for anything else.
    """
    if isinstance(fmt, ExportFormat):
        return fmt
    try:
        return ExportFormat(fmt)
    except ValueError:
        raise ValueError(f"Unsupported export format: {fmt!r}") from None


def export_colors(
    format: FormatLike,
    colors: Sequence[Color],
    palette_name: str = DEFAULT_PALETTE_NAME,
    *,
    exported_at: Optional[datetime] = None,
) -> Union[str, bytes]:
    """
    Serialize ``colors`` as text (css, tailwind, json) or bytes (ase).

    ``exported_at`` pins the JSON timestamp; other formats ignore it.
    An empty ``colors`` sequence is not rejected: each format emits its
    empty skeleton.
    """
    fmt = to_export_format(format)
    if fmt == ExportFormat.CSS:
        return export_css_variables(colors, palette_name)
    if fmt == ExportFormat.TAILWIND:
        return export_tailwind_config(colors, palette_name)
    if fmt == ExportFormat.JSON:
        return export_json(colors, palette_name, exported_at)
    if fmt == ExportFormat.ASE:
        return export_ase(colors, palette_name)
    raise ValueError(f"Unsupported export format: {fmt!r}")


def export_filename(format: FormatLike, name: Optional[str] = None) -> str:
    """``palette.css``, ``brand.config.js``, ... (``palette`` when no name)."""
    return f"{name or DEFAULT_FILE_STEM}{format_suffixes[to_export_format(format)]}"


def export_mime_type(format: FormatLike) -> str:
    return format_mime_types[to_export_format(format)]


def is_binary_format(format: FormatLike) -> bool:
    return to_export_format(format) in binary_formats


@dataclass(frozen=True)
class ExportArtifact:
    """Export output together with the filename and MIME type to write it under."""
    format: ExportFormat
    content: Union[str, bytes]
    filename: str
    mime_type: str

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        if isinstance(self.content, bytes):
            return self.content
        return self.content.encode(encoding)


def create_export(
    format: FormatLike,
    colors: Sequence[Color],
    palette_name: str = DEFAULT_PALETTE_NAME,
    file_stem: Optional[str] = None,
    *,
    exported_at: Optional[datetime] = None,
) -> ExportArtifact:
    fmt = to_export_format(format)
    return ExportArtifact(
        format=fmt,
        content=export_colors(fmt, colors, palette_name, exported_at=exported_at),
        filename=export_filename(fmt, file_stem),
        mime_type=export_mime_type(fmt),
    )
