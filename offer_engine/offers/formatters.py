"""Display formatting for offer values.

Currency symbol comes from settings so one catalog can serve any market.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from offer_engine.config import settings

# Locale-style number display: at most three fraction digits, trailing zeros dropped.
_DISPLAY_QUANTUM = Decimal("0.001")


def format_currency(value: Decimal | float | int | None) -> str:
    """Format as a display amount: 40000 -> "$40,000", 1250.5 -> "$1,250.5"."""
    if value is None:
        return "-"
    d = Decimal(str(value)).quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP).normalize()
    return f"{settings.storefront.currency_symbol}{d:,f}"
