"""Percentage-share derivations for breakdown displays."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from decimal import Decimal

from .interfaces import CounterpartyPnL, EntryT, ShareEntry, VesselCounterpartyBreakdown
from .weighting import pnl_safe_ratio

_HUNDRED = Decimal("100")


def pnl_with_shares(
    entries: Sequence[EntryT],
    total_selector: Callable[[Sequence[EntryT]], Decimal],
    value_selector: Callable[[EntryT], Decimal],
) -> tuple[ShareEntry[EntryT], ...]:
    """Attach each entry's percentage of a grand total.

    Every entry is returned, including zero-value ones. A zero total yields a
    percentage of 0 for every entry.

    Args:
        entries: Entries to annotate.
        total_selector: Returns the grand total for the entry set.
        value_selector: Returns one entry's value.

    Returns:
        tuple[ShareEntry[EntryT], ...]: Annotated entries in input order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    total = Decimal(total_selector(entries))
    shares = []
    for entry in entries:
        value = Decimal(value_selector(entry))
        shares.append(ShareEntry(entry=entry, value=value, percentage=pnl_safe_ratio(_HUNDRED * value, total)))
    return tuple(shares)


def pnl_counterparty_pnl_shares(
    breakdown: VesselCounterpartyBreakdown,
) -> tuple[ShareEntry[CounterpartyPnL], ...]:
    """Return each counterparty's share of the vessel's breakdown P&L."""

    return pnl_with_shares(
        breakdown.counterparties,
        total_selector=lambda _entries: breakdown.total_pnl,
        value_selector=lambda counterparty: counterparty.pnl_total,
    )


def pnl_counterparty_volume_shares(
    breakdown: VesselCounterpartyBreakdown,
) -> tuple[ShareEntry[CounterpartyPnL], ...]:
    """Return each counterparty's share of the vessel's sold volume."""

    return pnl_with_shares(
        breakdown.counterparties,
        total_selector=lambda _entries: breakdown.total_volume,
        value_selector=lambda counterparty: counterparty.volume_total,
    )


__all__ = ["pnl_counterparty_pnl_shares", "pnl_counterparty_volume_shares", "pnl_with_shares"]
