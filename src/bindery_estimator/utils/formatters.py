"""Formatting utilities for display values."""

from datetime import datetime
from typing import Optional


def format_currency(value: float, symbol: str = "$") -> str:
    """Format a float as currency."""
    return f"{symbol}{value:,.2f}"


def format_unit_price(value: float, symbol: str = "$") -> str:
    """Unit prices are quoted to three places (e.g. $0.345 per piece)."""
    return f"{symbol}{value:,.3f}"


def format_quote_number(quote_number: str, version: int) -> str:
    """Bare number for the first version, ``NNNN-vX`` for revisions."""
    if version == 1:
        return quote_number
    return f"{quote_number}-v{version}"


def format_date(value: Optional[str]) -> str:
    """Render an ISO 8601 date/time as ``MM/DD/YYYY`` ("" when unset)."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return parsed.strftime("%m/%d/%Y")
