from datetime import datetime, timezone
from swatchlab.colors import RGBColor
from swatchlab.export import (
    ExportFormat,
    export_colors,
    export_filename,
    export_mime_type,
    is_binary_format,
    create_export,
)
import pytest

COLORS = [RGBColor(255, 0, 0), RGBColor(0, 0, 255)]


def test_dispatch_returns_text_or_bytes():
    for fmt in ("css", "tailwind", "json"):
        assert isinstance(export_colors(fmt, COLORS, "brand"), str)
    assert isinstance(export_colors("ase", COLORS, "brand"), bytes)
    assert export_colors(ExportFormat.CSS, COLORS) == export_colors("css", COLORS, "custom")


def test_unsupported_format():
    with pytest.raises(ValueError, match="Unsupported export format"):
        export_colors("sketch", COLORS)


def test_empty_palette_is_allowed():
    assert export_colors("css", []) == ":root {\n}\n\n"
    assert export_colors("ase", []).startswith(b"ASEF")


def test_filenames_and_mime_types():
    assert export_filename("css") == "palette.css"
    assert export_filename("tailwind", "brand") == "brand.config.js"
    assert export_filename(ExportFormat.JSON, "brand") == "brand.json"
    assert export_filename("ase") == "palette.ase"
    assert export_mime_type("css") == "text/css"
    assert export_mime_type("json") == "application/json"
    assert export_mime_type("ase") == "application/octet-stream"
    assert is_binary_format("ase")
    assert not is_binary_format("tailwind")


def test_create_export():
    stamp = datetime(2024, 1, 2, tzinfo=timezone.utc)
    artifact = create_export("json", COLORS, "brand", "brand", exported_at=stamp)
    assert artifact.format is ExportFormat.JSON
    assert artifact.filename == "brand.json"
    assert artifact.mime_type == "application/json"
    assert artifact.content == export_colors("json", COLORS, "brand", exported_at=stamp)
    assert artifact.to_bytes() == artifact.content.encode("utf-8")

    binary = create_export("ase", COLORS, "brand")
    assert binary.to_bytes() is binary.content
    assert binary.filename == "palette.ase"
