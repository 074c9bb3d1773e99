"""Debt ordering strategies (snowball and avalanche)."""

from __future__ import annotations

from typing import Iterable

from ..models.debt import Debt, Strategy


def snowball_order(debts: Iterable[Debt]) -> list[Debt]:
    """Return debts ordered by ascending balance."""
    return sorted(debts, key=lambda d: d.balance)


def avalanche_order(debts: Iterable[Debt]) -> list[Debt]:
    """Return debts ordered by descending APR."""
    # reverse=True keeps equal APRs in insertion order
    return sorted(debts, key=lambda d: d.apr, reverse=True)


def sort_debts(debts: Iterable[Debt], strategy: Strategy | str) -> list[Debt]:
    """Return a new list of ``debts`` ordered for ``strategy``."""

    strategy = Strategy.parse(strategy)
    if strategy is Strategy.SNOWBALL:
        return snowball_order(debts)
    return avalanche_order(debts)
