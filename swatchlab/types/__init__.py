from .color_types import (
    ColorSpace,
    Hue,
    HUE_SPACES,
    ACHROMATIC_CHROMA,
    channel_ranges,
    to_color_space,
    is_hue_space,
    is_undefined_hue,
)
from .format_type import ExportFormat, format_suffixes, format_mime_types

__all__ = [
    "ColorSpace",
    "Hue",
    "HUE_SPACES",
    "ACHROMATIC_CHROMA",
    "channel_ranges",
    "to_color_space",
    "is_hue_space",
    "is_undefined_hue",
    "ExportFormat",
    "format_suffixes",
    "format_mime_types",
]
