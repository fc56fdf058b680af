"""
Adobe Swatch Exchange (ASE) writer.

Layout, all integers big-endian::

    "ASEF" | version u32 0x00010000 | block count u16
    per color:
        block type u16 (0x0001 color entry)
        block length u32 (= 2 + 2*n + 4 + 12 + 2)
        name length u16 (n UTF-16 code units, no terminator)
        name UTF-16BE
        color model b"RGB "
        r, g, b float32 in [0, 1]
        color type u16 (0x0002 normal)
"""
from __future__ import annotations
from typing import List, Sequence
import struct
import warnings
from ..colors.color import Color
from ..conversions.numbers import CHANNEL_MAX
from ..conversions.wrapper import to_rgb

ASE_SIGNATURE = b"ASEF"
ASE_VERSION = 0x00010000
BLOCK_COLOR_ENTRY = 0x0001
MODEL_RGB = b"RGB "
COLOR_TYPE_NORMAL = 0x0002

U16_MAX = 0xFFFF

_HEADER = struct.Struct(">4sIH")
_BLOCK_PREFIX = struct.Struct(">HIH")
_RGB_VALUES = struct.Struct(">fff")
_COLOR_TYPE = struct.Struct(">H")


def swatch_name(palette_name: str, index: int) -> str:
    """Name for the color at zero-based ``index``."""
    return f"{palette_name}-{index + 1}"


def encode_color_block(name: str, color: Color) -> bytes:
    rgb = to_rgb(color)
    encoded_name = name.encode("utf-16-be")
    name_units = len(encoded_name) // 2
    if name_units > U16_MAX:
        raise ValueError(f"Swatch name too long for ASE: {name_units} UTF-16 units")
    block_length = 2 + len(encoded_name) + len(MODEL_RGB) + _RGB_VALUES.size + _COLOR_TYPE.size
    return b"".join((
        _BLOCK_PREFIX.pack(BLOCK_COLOR_ENTRY, block_length, name_units),
        encoded_name,
        MODEL_RGB,
        _RGB_VALUES.pack(rgb.r / CHANNEL_MAX, rgb.g / CHANNEL_MAX, rgb.b / CHANNEL_MAX),
        _COLOR_TYPE.pack(COLOR_TYPE_NORMAL),
    ))


def export_ase(colors: Sequence[Color], palette_name: str) -> bytes:
    if len(colors) > U16_MAX:
        raise ValueError(f"ASE supports at most {U16_MAX} colors, got {len(colors)}")
    if any(not color.is_opaque for color in colors):
        warnings.warn(
            "ASE RGB swatches carry no alpha; translucent colors are exported opaque.",
            UserWarning,
            stacklevel=3,
        )
    parts: List[bytes] = [_HEADER.pack(ASE_SIGNATURE, ASE_VERSION, len(colors))]
    for index, color in enumerate(colors):
        parts.append(encode_color_block(swatch_name(palette_name, index), color))
    return b"".join(parts)
