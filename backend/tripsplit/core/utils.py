"""
Utility functions for the application.
"""
from typing import Any, Iterable
from datetime import date, datetime
from tripsplit.core.config import settings

# Tolerance used for every "is this balance settled" decision
EPSILON: float = settings.SETTLEMENT_TOLERANCE

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
    "CAD": "$",
    "AUD": "$",
}
DEFAULT_CURRENCY_SYMBOL = "₹"


def is_effectively_zero(value: float, tolerance: float = EPSILON) -> bool:
    """Return True if value is within tolerance of zero."""
    return abs(value) < tolerance


def is_zero_sum(values: Iterable[float], tolerance: float = EPSILON) -> bool:
    """Check that a collection of net balances sums to (numerically) zero."""
    return is_effectively_zero(sum(values), tolerance)


def get_currency_symbol(currency: str) -> str:
    """Get display symbol for a currency code."""
    return CURRENCY_SYMBOLS.get(currency, DEFAULT_CURRENCY_SYMBOL)


def format_currency(amount: float, currency: str) -> str:
    """
    Format an amount for display.
    JPY has no minor unit, so it is shown rounded to an integer.
    """
    symbol = get_currency_symbol(currency)
    if currency == "JPY":
        return f"{symbol}{round(amount)}"
    return f"{symbol}{amount:.2f}"


def serialize_date(obj: Any) -> str:
    """Serialize date objects to ISO format strings."""
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    raise TypeError(f"Type {type(obj)} not serializable")

