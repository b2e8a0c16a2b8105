"""Global configuration constants for the display engine."""
from __future__ import annotations

import os

APP_TITLE = "Ghost Display Preview"
LOG_LEVEL = os.getenv("GHOST_DISPLAY_LOG_LEVEL", "INFO").upper()

DEFAULT_SEPARATOR = ","
DEFAULT_PERCENT_MAX = 100
DIM_OPACITY = 0.33

SECONDARY_SEED_OFFSET = 50
TERTIARY_SEED_OFFSET = 100

GLOW_BLUR = 18
GLOW_Y_OFFSET = 8
GLOW_DEFAULT_OPACITY = 0.45
GLOW_MIN_MULTIPLIER = 0.25
GLOW_MAX_MULTIPLIER = 2.0
TEXT_GLOW_BLUR_SCALE = 0.75

BRIGHTNESS_MULTIPLIERS = {
    "none": 0.0,
    "soft": 0.5,
    "base": 1.0,
    "bright": 1.5,
}

TEXT_GLOW_COLORS = {
    "link": "#5A9BFF",
    "success": "#34C759",
    "warning": "#FF9F0A",
    "danger": "#FF453A",
    "info": "#5AC8FA",
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "¥",
    "KRW": "₩",
    "INR": "₹",
    "BTC": "₿",
    "ETH": "Ξ",
}

COMPACT_UNITS = [(1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K")]

CARD_GLOW_COLORS = {
    "silver": ["rgba(255, 255, 255, 0.20)"],
    "blue": ["rgba(60, 130, 255, 0.26)"],
    "purple": ["rgba(147, 51, 234, 0.26)"],
    "green": ["rgba(34, 197, 94, 0.24)"],
    "amber": ["rgba(251, 191, 36, 0.24)"],
    "pink": ["rgba(236, 72, 153, 0.24)"],
    "coral": ["rgba(251, 113, 133, 0.24)"],
    "cyan": ["rgba(34, 211, 238, 0.24)"],
    "aurora": ["rgba(34, 211, 238, 0.20)", "rgba(147, 51, 234, 0.16)", "rgba(34, 197, 94, 0.14)"],
    "sunset": ["rgba(251, 113, 133, 0.20)", "rgba(251, 191, 36, 0.16)", "rgba(236, 72, 153, 0.14)"],
}

CARD_BORDER_COLORS = {
    "silver": "rgba(255, 255, 255, 0.28)",
    "blue": "rgba(60, 130, 255, 0.44)",
    "purple": "rgba(147, 51, 234, 0.38)",
    "green": "rgba(34, 197, 94, 0.36)",
    "amber": "rgba(251, 191, 36, 0.36)",
    "pink": "rgba(236, 72, 153, 0.36)",
    "coral": "rgba(251, 113, 133, 0.36)",
    "cyan": "rgba(34, 211, 238, 0.36)",
    "aurora": "rgba(34, 211, 238, 0.34)",
    "sunset": "rgba(251, 113, 133, 0.34)",
}
DEFAULT_BORDER_COLOR = "rgba(255, 255, 255, 0.12)"

# Ellipse sizes for the primary, secondary and tertiary glow layers.
GLOW_ELLIPSES = ["120% 100%", "100% 80%", "80% 70%"]
BORDER_GRADIENT_STOPS = [0, 0.3]
