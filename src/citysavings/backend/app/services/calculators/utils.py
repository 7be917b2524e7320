"""Utility helpers for calculator modules."""

from __future__ import annotations

import math
from collections.abc import Sequence

from citysavings.backend.config.jurisdictions import TaxBracket


def calculate_progressive_tax(amount: float, brackets: Sequence[TaxBracket]) -> float:
    """Calculate progressive tax for ``amount`` using ``brackets``."""

    if amount <= 0:
        return 0.0

    total = 0.0
    lower_bound = 0.0

    for bracket in brackets:
        upper = bracket.upper_bound
        if upper is None or amount < upper:
            total += (amount - lower_bound) * bracket.rate
            break

        total += (upper - lower_bound) * bracket.rate
        lower_bound = upper

    return total


def round_currency(value: float) -> int:
    """Round a monetary amount to whole euros, halves rounding up."""

    return int(math.floor(value + 0.5))


__all__ = ["calculate_progressive_tax", "round_currency"]
