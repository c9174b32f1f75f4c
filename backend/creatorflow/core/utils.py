"""
Utility functions for the application.
"""
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Union

CENT = Decimal("0.01")


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats from dragging binary noise into the Decimal
    return Decimal(str(value))


def to_money(value: Union[Decimal, int, float, str, None]) -> Decimal:
    """Quantize a value to cents using half-up rounding."""
    if value is None:
        return Decimal("0.00")
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def is_whole_cents(value: Union[Decimal, int, float, str]) -> bool:
    """True when a value carries no fraction of a cent."""
    value = to_decimal(value)
    return value == value.quantize(CENT)


def format_money(value: Union[Decimal, int, float], symbol: str = "$") -> str:
    """Format an amount for display, e.g. ``$1,250.00``."""
    amount = to_money(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_display_date(value: date) -> str:
    """Format a date the way the console labels records, e.g. ``Oct 18, 2026``."""
    return f"{value:%b} {value.day}, {value.year}"


def format_response(data: Any, message: str = "Success") -> Dict[str, Any]:
    """Format API response."""
    return {
        "message": message,
        "data": data
    }
