"""Number formatting helpers for UI consistency.

``format_number`` renders a value the conventional way (fixed decimals,
thousands grouping, sign, affixes) and splits the result into segments that
a component can style independently: padding zeros on the left and zero
digits at the end of the fraction are returned apart from the significant
content so they can be drawn dimmed.

    >>> format_number(3376).text
    '03,376'
    >>> format_number(7, NumberFormat(kind="percent", suffix="%")).leading_zeros
    '00'
"""
from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from typing import Any, Iterator, Mapping

from ghost_display.config import DEFAULT_PERCENT_MAX, DEFAULT_SEPARATOR
from ghost_display.logging_utils import get_logger

logger = get_logger(__name__)

MAX_DECIMALS = 100
# Enough digits to fix the largest double to MAX_DECIMALS places.
_FIXED_PRECISION = 512

_GROUP_BOUNDARY = re.compile(r"\B(?=(\d{3})+(?!\d))")

_MAPPING_KEYS = {
    "type": "kind",
    "kind": "kind",
    "max": "max",
    "minDigits": "min_digits",
    "min_digits": "min_digits",
    "decimals": "decimals",
    "separator": "separator",
    "prefix": "prefix",
    "suffix": "suffix",
}


class FormatKind(str, Enum):
    """Leading-zero policy of a format."""

    DEFAULT = "default"
    PERCENT = "percent"
    SCORE = "score"


def _normalize_count(name: str, value: Any, upper: int | None = None) -> int | None:
    if value is None:
        return None
    if isinstance(value, numbers.Integral):
        count = int(value)
    else:
        number = float(value)
        if not math.isfinite(number):
            logger.debug("Ignoring non-finite %s=%r", name, value)
            return None
        count = math.floor(number)
    count = max(0, count)
    if upper is not None:
        count = min(count, upper)
    if count != value:
        logger.debug("Normalized %s=%r to %d", name, value, count)
    return count


def _normalize_bound(name: str, value: Any) -> float | None:
    if value is None:
        return None
    try:
        bound = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(bound):
        logger.debug("Ignoring non-finite %s=%r", name, value)
        return None
    return bound


@dataclass(frozen=True)
class NumberFormat:
    """Format descriptor.

    Counts are floored and clamped on construction; ``max`` is coerced to a
    float and dropped when not finite.
    """

    kind: FormatKind = FormatKind.DEFAULT
    max: float | None = None
    min_digits: int | None = None
    decimals: int | None = None
    separator: str = DEFAULT_SEPARATOR
    prefix: str = ""
    suffix: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", FormatKind(self.kind or FormatKind.DEFAULT))
        object.__setattr__(self, "max", _normalize_bound("max", self.max))
        object.__setattr__(self, "min_digits", _normalize_count("min_digits", self.min_digits))
        object.__setattr__(self, "decimals", _normalize_count("decimals", self.decimals, MAX_DECIMALS))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "NumberFormat":
        """Build from component-style options, e.g. ``{"type": "score", "minDigits": 3}``."""
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            if key not in _MAPPING_KEYS:
                raise ValueError(f"Unknown format option: {key}")
            if value is not None:
                kwargs[_MAPPING_KEYS[key]] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class FormattedNumber:
    """A formatted number split into independently stylable segments."""

    leading_zeros: str = ""
    main_content: str = ""
    decimal_content: str = ""
    trailing_zeros: str = ""
    prefix: str = ""
    suffix: str = ""

    @property
    def text(self) -> str:
        return (
            f"{self.prefix}{self.leading_zeros}{self.main_content}"
            f"{self.decimal_content}{self.trailing_zeros}{self.suffix}"
        )

    def segments(self) -> Iterator[tuple[str, str, bool]]:
        """Yield ``(role, text, dimmed)`` in render order, skipping empty parts."""
        parts = [
            ("prefix", self.prefix, False),
            ("leading_zeros", self.leading_zeros, True),
            ("main_content", self.main_content, False),
            ("decimal_content", self.decimal_content, False),
            ("trailing_zeros", self.trailing_zeros, True),
            ("suffix", self.suffix, False),
        ]
        for role, text, dimmed in parts:
            if text or role == "main_content":
                yield role, text, dimmed


def resolve_min_digits(value: float, fmt: NumberFormat) -> int:
    """Total integer-part width the value is padded to."""
    if fmt.min_digits is not None:
        return fmt.min_digits

    if fmt.kind is FormatKind.PERCENT:
        upper = fmt.max if fmt.max is not None else DEFAULT_PERCENT_MAX
        return 3 if upper >= 100 else 2

    if fmt.kind is FormatKind.SCORE:
        if fmt.max is not None:
            return len(str(math.floor(fmt.max)))
        return 0

    # Partial thousands groups get one balancing zero: 3,376 -> 03,376.
    if not math.isfinite(value):
        return 0
    whole = abs(math.floor(value))
    if 1000 <= whole < 10000:
        return 5
    if 100000 <= whole < 1000000:
        return 7
    return 0


def to_fixed(value: float, decimals: int) -> str:
    """Fixed-point string, rounding ties away from zero on the exact binary value."""
    if not math.isfinite(value):
        return _non_finite_text(value)
    with localcontext() as ctx:
        ctx.prec = _FIXED_PRECISION
        fixed = Decimal(value).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return format(fixed, "f")


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _plain_text(value: float) -> str:
    # Shortest round-trip digits, never in exponent form.
    if not math.isfinite(value):
        return _non_finite_text(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def group_digits(digits: str, separator: str) -> str:
    return _GROUP_BOUNDARY.sub(lambda _: separator, digits)


def _split_padding(grouped: str, padding: int, separator: str) -> tuple[str, str]:
    if padding <= 0:
        return "", grouped
    consumed = 0
    index = 0
    while index < len(grouped) and consumed < padding:
        if grouped[index] == "0":
            consumed += 1
            index += 1
        elif separator and grouped.startswith(separator, index):
            index += len(separator)
        else:
            break
    if separator and grouped.startswith(separator, index):
        index += len(separator)
    return grouped[:index], grouped[index:]


def format_number(value: float | Decimal, fmt: NumberFormat | None = None) -> FormattedNumber:
    """Format ``value`` and split it into dimmable and significant segments.

    Any real number or ``Decimal`` is accepted and formatted as a float;
    integers beyond the float range format as infinities.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise TypeError(f"value must be a real number, got {type(value).__name__}")
    fmt = fmt or NumberFormat()
    try:
        value = float(value)
    except OverflowError:
        value = math.inf if value > 0 else -math.inf
    if not math.isfinite(value):
        logger.debug("Formatting non-finite value %r", value)

    min_digits = resolve_min_digits(value, fmt)
    magnitude = abs(value)
    text = to_fixed(magnitude, fmt.decimals) if fmt.decimals is not None else _plain_text(magnitude)
    int_part, _, dec_part = text.partition(".")

    padding = max(0, min_digits - len(int_part))
    grouped = group_digits(int_part.rjust(min_digits, "0"), fmt.separator)
    leading_zeros, main_content = _split_padding(grouped, padding, fmt.separator)

    # Sub-one values dim their integer zero too: 0.0025 -> (0).0025
    if main_content == "0" and dec_part:
        leading_zeros += "0"
        main_content = ""

    decimal_content = ""
    trailing_zeros = ""
    if dec_part:
        significant = dec_part.rstrip("0")
        decimal_content = f".{significant}"
        trailing_zeros = dec_part[len(significant):]

    prefix = f"{fmt.prefix}-" if value < 0 else fmt.prefix
    return FormattedNumber(
        leading_zeros=leading_zeros,
        main_content=main_content,
        decimal_content=decimal_content,
        trailing_zeros=trailing_zeros,
        prefix=prefix,
        suffix=fmt.suffix,
    )
