"""Currency and percent-change formatting built on ``format_number``."""
from __future__ import annotations

from ghost_display.config import COMPACT_UNITS, CURRENCY_SYMBOLS
from ghost_display.ui_components.formatting import FormattedNumber, NumberFormat, format_number, to_fixed


def currency_symbol(currency: str) -> str:
    """Symbol for a currency code; anything unknown is treated as a symbol already."""
    return CURRENCY_SYMBOLS.get(currency.upper(), currency)


def format_compact(value: float, decimals: int = 2) -> str:
    """Magnitude of ``value`` with a K/M/B/T suffix, e.g. 1_500_000 -> '1.50M'."""
    magnitude = abs(value)
    for threshold, unit in COMPACT_UNITS:
        if magnitude >= threshold:
            return to_fixed(magnitude / threshold, decimals) + unit
    return to_fixed(magnitude, decimals)


def format_currency(
    value: float,
    currency: str = "USD",
    decimals: int = 2,
    show_positive_sign: bool = False,
    compact: bool = False,
) -> FormattedNumber:
    sign = ""
    if show_positive_sign and value > 0:
        sign = "+"
    elif value < 0:
        sign = "-"
    prefix = f"{sign}{currency_symbol(currency)}"

    if compact:
        return FormattedNumber(main_content=format_compact(value, decimals), prefix=prefix)
    return format_number(abs(value), NumberFormat(decimals=decimals, prefix=prefix))


def format_percent_change(
    value: float,
    decimals: int = 2,
    show_percent: bool = True,
) -> tuple[str, FormattedNumber]:
    """Direction ('up', 'down' or 'flat') and the unsigned formatted magnitude."""
    if value > 0:
        direction = "up"
    elif value < 0:
        direction = "down"
    else:
        direction = "flat"
    fmt = NumberFormat(decimals=decimals, suffix="%" if show_percent else "")
    return direction, format_number(abs(value), fmt)
