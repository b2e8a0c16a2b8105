"""Small numeric and color primitives shared by the display helpers."""
from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def hex_to_rgb(hex_color: str) -> str:
    """Convert '#RRGGBB' to an 'r, g, b' string for use inside rgba()."""
    packed = int(hex_color.replace("#", ""), 16)
    r = (packed >> 16) & 255
    g = (packed >> 8) & 255
    b = packed & 255
    return f"{r}, {g}, {b}"


def pseudo_random(seed: float) -> float:
    """Reproducible float in [0, 1) derived from ``seed``.

    Cheap sine hash for decorative use only. Seeds too large to convert to
    a float, or whose angle is not finite, map to 0.0.
    """
    try:
        angle = float(seed) * 9999
    except OverflowError:
        return 0.0
    if not math.isfinite(angle):
        return 0.0
    x = math.sin(angle) * 10000
    return x - math.floor(x)
