"""Validation helpers for user-entered format options."""
from __future__ import annotations

import math
import numbers
from typing import Any, Mapping, Tuple

from ghost_display.ui_components.formatting import MAX_DECIMALS, FormatKind

KNOWN_OPTIONS = ["type", "kind", "max", "minDigits", "min_digits", "decimals", "separator", "prefix", "suffix"]
TEXT_OPTIONS = ["separator", "prefix", "suffix"]


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_format_mapping(options: Mapping[str, Any]) -> Tuple[bool, list[str]]:
    """Strict check of format options before they reach ``NumberFormat``.

    The formatter itself normalizes sloppy counts; this is for inputs where
    the user should be told about them instead.
    """
    errors: list[str] = []
    unknown = [k for k in options if k not in KNOWN_OPTIONS]
    if unknown:
        errors.append(f"Unknown options: {unknown}")

    kind = options.get("type", options.get("kind"))
    allowed = [k.value for k in FormatKind]
    if kind is not None and kind not in allowed:
        errors.append(f"type must be one of {allowed}, got {kind!r}")

    upper = options.get("max")
    if upper is not None and (not _is_number(upper) or not math.isfinite(upper)):
        errors.append("max must be a finite number")

    for key in ["minDigits", "min_digits", "decimals"]:
        count = options.get(key)
        if count is None:
            continue
        if not _is_number(count) or not math.isfinite(count) or count != int(count) or count < 0:
            errors.append(f"{key} must be a non-negative integer")
        elif key == "decimals" and count > MAX_DECIMALS:
            errors.append(f"decimals cannot exceed {MAX_DECIMALS}")

    for key in TEXT_OPTIONS:
        if key in options and not isinstance(options[key], str):
            errors.append(f"{key} must be a string")

    return (len(errors) == 0, errors)
