"""Seeded glow placement for decorative cards.

Each placement centers a radial glow near one corner and runs the border
gradient from the opposite corner toward it, so the border highlight appears
to originate away from the glow. A seed always picks the same placement;
without one the choice is random.

Multi-layer glows take their second and third placements from
``seed + SECONDARY_SEED_OFFSET`` and ``seed + TERTIARY_SEED_OFFSET``.
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum

import pandas as pd

from ghost_display.config import SECONDARY_SEED_OFFSET, TERTIARY_SEED_OFFSET
from ghost_display.logging_utils import get_logger
from ghost_display.ui_components.primitives import clamp, pseudo_random

logger = get_logger(__name__)

Point = tuple[float, float]

SEED_OFFSETS = [0, SECONDARY_SEED_OFFSET, TERTIARY_SEED_OFFSET]


class Corner(str, Enum):
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def opposite(self) -> "Corner":
        return _OPPOSITE_CORNERS[self]


_OPPOSITE_CORNERS = {
    Corner.TOP_LEFT: Corner.BOTTOM_RIGHT,
    Corner.TOP_RIGHT: Corner.BOTTOM_LEFT,
    Corner.BOTTOM_LEFT: Corner.TOP_RIGHT,
    Corner.BOTTOM_RIGHT: Corner.TOP_LEFT,
}


class PlacementVariant(str, Enum):
    CORNER = "corner"
    EDGE = "edge"


@dataclass(frozen=True)
class PlacementConfig:
    corner: Corner
    variant: PlacementVariant
    position: tuple[str, str]
    gradient_start: Point
    gradient_end: Point


GLOW_PLACEMENTS = (
    PlacementConfig(Corner.TOP_LEFT, PlacementVariant.CORNER, ("-10%", "-10%"), (1, 1), (0, 0)),
    PlacementConfig(Corner.TOP_LEFT, PlacementVariant.EDGE, ("-8%", "20%"), (1, 0.8), (0, 0.2)),
    PlacementConfig(Corner.TOP_RIGHT, PlacementVariant.CORNER, ("110%", "-10%"), (0, 1), (1, 0)),
    PlacementConfig(Corner.TOP_RIGHT, PlacementVariant.EDGE, ("108%", "25%"), (0, 0.75), (1, 0.25)),
    PlacementConfig(Corner.BOTTOM_LEFT, PlacementVariant.CORNER, ("-10%", "110%"), (1, 0), (0, 1)),
    PlacementConfig(Corner.BOTTOM_LEFT, PlacementVariant.EDGE, ("-8%", "80%"), (1, 0.2), (0, 0.8)),
    PlacementConfig(Corner.BOTTOM_RIGHT, PlacementVariant.CORNER, ("110%", "110%"), (0, 0), (1, 1)),
    PlacementConfig(Corner.BOTTOM_RIGHT, PlacementVariant.EDGE, ("108%", "75%"), (0, 0.25), (1, 0.75)),
)


def point_corner(point: Point) -> Corner:
    """Corner of the unit square a normalized point leans toward."""
    x, y = point
    if y < 0.5:
        return Corner.TOP_LEFT if x < 0.5 else Corner.TOP_RIGHT
    return Corner.BOTTOM_LEFT if x < 0.5 else Corner.BOTTOM_RIGHT


def position_corner(position: tuple[str, str]) -> Corner:
    x, y = (float(axis.rstrip("%")) / 100 for axis in position)
    return point_corner((x, y))


def placement_index(seed: float) -> int:
    draw = pseudo_random(seed)
    return int(clamp(math.floor(draw * len(GLOW_PLACEMENTS)), 0, len(GLOW_PLACEMENTS) - 1))


def select_placement(seed: float | None = None, rng: random.Random | None = None) -> PlacementConfig:
    """Pick a placement, reproducibly when ``seed`` is given."""
    if seed is None:
        draw = (rng or random).random()
        index = min(math.floor(draw * len(GLOW_PLACEMENTS)), len(GLOW_PLACEMENTS) - 1)
    else:
        index = placement_index(seed)
        logger.debug("Seed %r selected placement %d", seed, index)
    return GLOW_PLACEMENTS[index]


def select_placements(
    seed: float | None = None,
    count: int = len(SEED_OFFSETS),
    rng: random.Random | None = None,
) -> list[PlacementConfig]:
    """Primary placement followed by the offset-seeded secondary and tertiary ones."""
    if not 1 <= count <= len(SEED_OFFSETS):
        raise ValueError(f"count must be between 1 and {len(SEED_OFFSETS)}, got {count}")
    return [
        select_placement(seed + offset if seed is not None else None, rng=rng)
        for offset in SEED_OFFSETS[:count]
    ]


def placement_frame() -> pd.DataFrame:
    """Placement table with numeric glow coordinates, one row per entry."""
    rows = []
    for index, config in enumerate(GLOW_PLACEMENTS):
        x, y = (float(axis.rstrip("%")) for axis in config.position)
        rows.append(
            {
                "index": index,
                "corner": config.corner.value,
                "variant": config.variant.value,
                "x_pct": x,
                "y_pct": y,
                "start_x": config.gradient_start[0],
                "start_y": config.gradient_start[1],
                "end_x": config.gradient_end[0],
                "end_y": config.gradient_end[1],
            }
        )
    return pd.DataFrame(rows)
