import math
from boundednumbers.functions import clamp

CHANNEL_MAX = 255


def round_channel(value: float) -> float:
    """Round half away from zero for non-negative channels; NaN/inf pass through."""
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def clip_channel(value: float) -> float:
    """Round, then clamp into 0-255 (used where out-of-gamut input is expected)."""
    rounded = round_channel(value)
    if not math.isfinite(rounded):
        return rounded
    return int(clamp(rounded, 0, CHANNEL_MAX))
