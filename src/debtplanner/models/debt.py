"""Debt entities and derived repayment plan records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class Strategy(str, Enum):
    """Ordering heuristic used to pick which debt receives the extra payment."""

    AVALANCHE = "avalanche"  # highest APR first
    SNOWBALL = "snowball"  # smallest balance first

    @classmethod
    def parse(cls, value: "Strategy | str") -> "Strategy":
        """Return the strategy for ``value``, accepting enum members or names."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError("Invalid debt payoff strategy.") from None


@dataclass(frozen=True, slots=True)
class Debt:
    """A single debt entered by the user."""

    creditor: str
    balance: float
    apr: float  # annual percentage, 19.99 means 19.99%
    minimum_payment: float

    @property
    def monthly_rate(self) -> float:
        return self.apr / 100 / 12


@dataclass(frozen=True, slots=True)
class DebtWithPayoff:
    """A debt plus the payment it receives and how long it takes to clear."""

    creditor: str
    balance: float
    apr: float
    minimum_payment: float
    monthly_payment: float
    months_to_payoff: float  # fractional; math.inf when the payment never amortizes

    @classmethod
    def from_debt(
        cls, debt: Debt, *, monthly_payment: float, months_to_payoff: float
    ) -> "DebtWithPayoff":
        return cls(
            creditor=debt.creditor,
            balance=debt.balance,
            apr=debt.apr,
            minimum_payment=debt.minimum_payment,
            monthly_payment=monthly_payment,
            months_to_payoff=months_to_payoff,
        )

    @property
    def amortizes(self) -> bool:
        """False when the payment does not cover accruing interest."""

        return math.isfinite(self.months_to_payoff)

    def to_debt(self) -> Debt:
        return Debt(
            creditor=self.creditor,
            balance=self.balance,
            apr=self.apr,
            minimum_payment=self.minimum_payment,
        )


@dataclass(frozen=True, slots=True)
class PlanTotals:
    """Aggregate row shown beneath the plan."""

    balance: float = 0.0
    avg_apr: float = 0.0
    min_payment: float = 0.0
    monthly_payment: float = 0.0
    months_to_payoff: float = 0.0


@dataclass(frozen=True, slots=True)
class RepaymentPlan:
    """Ordered repayment plan produced for one strategy and extra payment."""

    strategy: Strategy
    extra_payment: float
    rows: tuple[DebtWithPayoff, ...] = ()
    totals: PlanTotals = field(default_factory=PlanTotals)

    @property
    def insufficient(self) -> tuple[DebtWithPayoff, ...]:
        """Rows whose monthly payment never pays the balance down."""

        return tuple(row for row in self.rows if not row.amortizes)

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass(frozen=True, slots=True)
class PlanSummary:
    """Headline figures about the debt with the highest APR."""

    highest_apr: float | None
    highest_apr_creditor: str | None
    highest_apr_minimum_payment: float | None
    extra_payment: float
