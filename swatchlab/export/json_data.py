from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence
import json
from ..colors.color import Color
from ..colors.color_base import ColorBase
from ..conversions.css import color_to_css
from ..conversions.wrapper import convert_color, to_hex_token
from ..types.color_types import ColorSpace

JSON_INDENT = 2
FLOAT_DIGITS = 2


def _record(color: ColorBase) -> Dict[str, Any]:
    record: Dict[str, Any] = {"type": color.space.value}
    for name, value in zip(color.fields, color.channels):
        record[name] = round(value, FLOAT_DIGITS) if isinstance(value, float) else value
    if color.alpha is not None:
        record["alpha"] = color.alpha
    return record


def isoformat_utc(moment: datetime) -> str:
    """``2024-01-02T03:04:05.678Z``; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_json_document(
    colors: Sequence[Color],
    palette_name: str,
    exported_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    moment = exported_at or datetime.now(timezone.utc)
    return {
        "name": palette_name,
        "colors": [
            {
                "id": index,
                "hex": to_hex_token(color),
                "rgb": _record(convert_color(color, ColorSpace.RGB)),
                "hsl": _record(convert_color(color, ColorSpace.HSL)),
                "css": color_to_css(color),
            }
            for index, color in enumerate(colors, start=1)
        ],
        "exportedAt": isoformat_utc(moment),
    }


def export_json(
    colors: Sequence[Color],
    palette_name: str,
    exported_at: Optional[datetime] = None,
) -> str:
    return json.dumps(
        build_json_document(colors, palette_name, exported_at),
        indent=JSON_INDENT,
        ensure_ascii=False,
    )
