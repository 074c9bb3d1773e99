"""Invariant checks that hold for any repayment plan."""

from __future__ import annotations

import pytest

from debtplanner.models.debt import Debt, Strategy
from debtplanner.services.payoff import (
    compute_plan,
    highest_apr_debt,
    months_to_payoff,
    summary_statistics,
)
from tests.conftest import assert_float_equal

DEBT_SETS = [
    [Debt("Solo", balance=750.0, apr=9.9, minimum_payment=40.0)],
    [
        Debt("A", balance=1000.0, apr=20.0, minimum_payment=50.0),
        Debt("B", balance=500.0, apr=10.0, minimum_payment=25.0),
    ],
    [
        Debt("Visa", balance=5000.0, apr=18.0, minimum_payment=100.0),
        Debt("Store", balance=1000.0, apr=12.0, minimum_payment=50.0),
        Debt("Car", balance=3000.0, apr=24.0, minimum_payment=75.0),
        Debt("Friend", balance=400.0, apr=0.0, minimum_payment=20.0),
        Debt("Store", balance=1000.0, apr=12.0, minimum_payment=50.0),
    ],
]


@pytest.mark.parametrize("debts", DEBT_SETS)
@pytest.mark.parametrize("strategy", list(Strategy))
class TestPlanInvariants:
    """Properties checked for each strategy over several debt sets."""

    def test_no_debt_dropped_or_duplicated(self, debts, strategy):
        plan = compute_plan(debts, strategy, 75.0)

        assert len(plan.rows) == len(debts)
        assert_float_equal(sum(r.balance for r in plan.rows), sum(d.balance for d in debts))
        assert sorted(map(repr, (r.to_debt() for r in plan.rows))) == sorted(map(repr, debts))

    def test_only_first_row_gets_extra(self, debts, strategy):
        plan = compute_plan(debts, strategy, 75.0)

        boosted = [i for i, r in enumerate(plan.rows) if r.monthly_payment > r.minimum_payment]
        assert boosted == [0]
        assert plan.rows[0].monthly_payment == plan.rows[0].minimum_payment + 75.0

    def test_no_row_boosted_without_extra(self, debts, strategy):
        plan = compute_plan(debts, strategy, 0.0)

        assert all(r.monthly_payment == r.minimum_payment for r in plan.rows)

    def test_adjacent_rows_follow_strategy(self, debts, strategy):
        plan = compute_plan(debts, strategy, 0.0)

        for a, b in zip(plan.rows, plan.rows[1:]):
            if strategy is Strategy.AVALANCHE:
                assert a.apr >= b.apr
            else:
                assert a.balance <= b.balance


@pytest.mark.parametrize("apr", [3.5, 12.0, 29.99])
def test_more_payment_never_takes_longer(apr):
    """Months to payoff is non-increasing as the payment grows."""
    rate = apr / 100 / 12
    balance = 2500.0
    payments = [balance * rate + step for step in (1.0, 5.0, 25.0, 100.0, 500.0, 2500.0)]

    months = [months_to_payoff(balance, rate, p) for p in payments]

    assert all(a >= b for a, b in zip(months, months[1:]))


class TestHighestAprDebt:
    """Tests for highest_apr_debt and the summary panel."""

    def test_returns_highest(self):
        debts = DEBT_SETS[2]
        assert highest_apr_debt(debts).creditor == "Car"

    def test_first_wins_ties(self):
        debts = [
            Debt("first", balance=10.0, apr=20.0, minimum_payment=1.0),
            Debt("second", balance=20.0, apr=20.0, minimum_payment=1.0),
        ]
        assert highest_apr_debt(debts).creditor == "first"

    def test_empty_returns_none(self):
        assert highest_apr_debt([]) is None

    def test_summary_statistics(self):
        summary = summary_statistics(DEBT_SETS[1], 100.0)

        assert summary.highest_apr == 20.0
        assert summary.highest_apr_creditor == "A"
        assert summary.highest_apr_minimum_payment == 50.0
        assert summary.extra_payment == 100.0

    def test_summary_statistics_empty(self):
        summary = summary_statistics([], 0.0)

        assert summary.highest_apr is None
        assert summary.highest_apr_creditor is None
        assert summary.highest_apr_minimum_payment is None
