"""
swatchlab exporters
===================

``export_colors(format, colors, palette_name)`` turns a sequence of colors
into one of four artifacts:

- ``css``: custom properties plus utility classes (text)
- ``tailwind``: a ``tailwind.config.js`` palette module (text)
- ``json``: name, per-color hex/rgb/hsl/css records and a timestamp (text)
- ``ase``: Adobe Swatch Exchange binary (bytes)

The library never writes files; ``create_export`` bundles the content with
the filename and MIME type a caller should use.
"""
from .exporter import (
    export_colors,
    export_filename,
    export_mime_type,
    is_binary_format,
    to_export_format,
    create_export,
    ExportArtifact,
)
from .ase import export_ase, encode_color_block, swatch_name
from .css_variables import export_css_variables
from .json_data import export_json, build_json_document
from .tailwind import export_tailwind_config
from ..types.format_type import ExportFormat

__all__ = [
    'ExportFormat', 'ExportArtifact',
    'export_colors', 'export_filename', 'export_mime_type', 'is_binary_format',
    'to_export_format', 'create_export',
    'export_ase', 'encode_color_block', 'swatch_name',
    'export_css_variables', 'export_json', 'build_json_document',
    'export_tailwind_config',
]
