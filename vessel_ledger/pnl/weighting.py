"""Zero-guarded ratio and weighted-average primitives for P&L computations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

_ZERO = Decimal("0")


@dataclass(frozen=True)
class WeightedAverage:
    """Result of one weighted reduction.

    Attributes:
        average: Weighted average value, 0 when total weight is 0.
        total_weight: Sum of weights.
    """

    average: Decimal
    total_weight: Decimal


def pnl_safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide two decimals, returning 0 when the denominator is 0.

    Args:
        numerator: Dividend.
        denominator: Divisor.

    Returns:
        Decimal: Quotient, or 0 for a zero divisor.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if denominator == _ZERO:
        return _ZERO
    return Decimal(numerator) / Decimal(denominator)


def pnl_weighted_average(pairs: Iterable[tuple[Decimal | None, Decimal]]) -> WeightedAverage:
    """Reduce `(value, weight)` pairs into a weighted average.

    A missing value contributes 0 while its weight still counts.

    Args:
        pairs: Value and weight pairs.

    Returns:
        WeightedAverage: Weighted average and total weight.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    weighted_sum = _ZERO
    total_weight = _ZERO
    for value, weight in pairs:
        weighted_sum += (value or _ZERO) * weight
        total_weight += weight
    return WeightedAverage(average=pnl_safe_ratio(weighted_sum, total_weight), total_weight=total_weight)


__all__ = ["WeightedAverage", "pnl_safe_ratio", "pnl_weighted_average"]
