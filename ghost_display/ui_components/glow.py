"""Glow styling: text shadows and card glow/border gradients."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum

from ghost_display.config import (
    BORDER_GRADIENT_STOPS,
    BRIGHTNESS_MULTIPLIERS,
    CARD_BORDER_COLORS,
    CARD_GLOW_COLORS,
    DEFAULT_BORDER_COLOR,
    GLOW_BLUR,
    GLOW_DEFAULT_OPACITY,
    GLOW_ELLIPSES,
    GLOW_MAX_MULTIPLIER,
    GLOW_MIN_MULTIPLIER,
    GLOW_Y_OFFSET,
    TEXT_GLOW_BLUR_SCALE,
    TEXT_GLOW_COLORS,
)
from ghost_display.ui_components.placement import SEED_OFFSETS, PlacementConfig, Point, select_placement
from ghost_display.ui_components.primitives import clamp, hex_to_rgb


class Brightness(str, Enum):
    NONE = "none"
    SOFT = "soft"
    BASE = "base"
    BRIGHT = "bright"


class CardGlow(str, Enum):
    SILVER = "silver"
    BLUE = "blue"
    PURPLE = "purple"
    GREEN = "green"
    AMBER = "amber"
    PINK = "pink"
    CORAL = "coral"
    CYAN = "cyan"
    AURORA = "aurora"
    SUNSET = "sunset"


@dataclass(frozen=True)
class DisplayContext:
    """Runtime display settings threaded through glow calculations."""

    glow_multiplier: float = 1.0


@dataclass(frozen=True)
class TextGlow:
    color: str
    opacity: float
    blur: float
    y_offset: float

    def css(self) -> str:
        return (
            f"0 {_css_number(self.y_offset)}px {_css_number(self.blur)}px "
            f"rgba({hex_to_rgb(self.color)}, {_css_number(self.opacity)})"
        )


@dataclass(frozen=True)
class CardGlowStyle:
    placement: PlacementConfig
    background: str | None
    border_color: str
    border_angle: float


def _css_number(value: float) -> str:
    return f"{round(value, 4):g}"


def brightness_multiplier(brightness: Brightness | str) -> float:
    return BRIGHTNESS_MULTIPLIERS[Brightness(brightness).value]


def runtime_multiplier(context: DisplayContext | None = None) -> float:
    context = context or DisplayContext()
    return clamp(context.glow_multiplier, GLOW_MIN_MULTIPLIER, GLOW_MAX_MULTIPLIER)


def text_glow(
    appearance: str,
    brightness: Brightness | str,
    context: DisplayContext | None = None,
) -> TextGlow | None:
    """Shadow parameters for glowing text, or None when the text does not glow.

    Only link/success/warning/danger/info appearances carry a glow color, and
    ``Brightness.NONE`` switches the glow off.
    """
    color = TEXT_GLOW_COLORS.get(appearance)
    multiplier = brightness_multiplier(brightness)
    if color is None or multiplier <= 0:
        return None
    runtime = runtime_multiplier(context)
    return TextGlow(
        color=color,
        opacity=min(GLOW_DEFAULT_OPACITY * multiplier * runtime, 1),
        blur=GLOW_BLUR * runtime * TEXT_GLOW_BLUR_SCALE,
        y_offset=GLOW_Y_OFFSET * runtime,
    )


def gradient_angle(start: Point, end: Point) -> float:
    """CSS linear-gradient angle (0deg points up, 90deg right) from start to end."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    return math.degrees(math.atan2(dx, -dy)) % 360


def build_glow_gradient(
    glow: CardGlow | str,
    primary: PlacementConfig,
    seed: float | None = None,
    rng: random.Random | None = None,
) -> str:
    """Layered radial-gradient CSS for a glow preset.

    The first layer sits at ``primary``; multi-color presets add layers at the
    placements of ``seed + 50`` and ``seed + 100``.
    """
    colors = CARD_GLOW_COLORS[CardGlow(glow).value]
    placements = [primary] + [
        select_placement(seed + offset if seed is not None else None, rng=rng)
        for offset in SEED_OFFSETS[1 : len(colors)]
    ]
    layers = []
    for color, ellipse, placement in zip(colors, GLOW_ELLIPSES, placements):
        x, y = placement.position
        layers.append(f"radial-gradient(ellipse {ellipse} at {x} {y}, {color} 0%, transparent 50%)")
    return ", ".join(layers)


def card_glow(
    glow: CardGlow | str | None = None,
    seed: float | None = None,
    rng: random.Random | None = None,
) -> CardGlowStyle:
    """Glow background and border gradient sharing one placement."""
    placement = select_placement(seed, rng=rng)
    background = build_glow_gradient(glow, placement, seed, rng=rng) if glow else None
    border_color = CARD_BORDER_COLORS[CardGlow(glow).value] if glow else DEFAULT_BORDER_COLOR
    return CardGlowStyle(
        placement=placement,
        background=background,
        border_color=border_color,
        border_angle=gradient_angle(placement.gradient_start, placement.gradient_end),
    )


def border_gradient_css(style: CardGlowStyle) -> str:
    start, end = BORDER_GRADIENT_STOPS
    return (
        f"linear-gradient({_css_number(style.border_angle)}deg, "
        f"{style.border_color} {start * 100:g}%, transparent {end * 100:g}%)"
    )
