"""Debt payoff calculators."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from ..errors import InsufficientPaymentToAmortize, InvalidExtraPayment
from ..logging_config import get_logger
from ..models.debt import (
    Debt,
    DebtWithPayoff,
    PlanSummary,
    PlanTotals,
    RepaymentPlan,
    Strategy,
)
from .registry import PlannerSession
from .strategies import sort_debts

logger = get_logger("services.payoff")


def months_to_payoff(balance: float, monthly_rate: float, payment: float) -> float:
    """Return the (fractional) number of equal payments that clear ``balance``.

    Solves the amortization equation for the number of periods. Raises
    ``InsufficientPaymentToAmortize`` when ``payment`` does not exceed the
    interest accruing each month, before any logarithm is evaluated.
    """

    if payment <= 0:
        raise InsufficientPaymentToAmortize(
            balance=balance, monthly_rate=monthly_rate, payment=payment
        )
    if monthly_rate == 0:
        return balance / payment
    if payment <= balance * monthly_rate:
        raise InsufficientPaymentToAmortize(
            balance=balance, monthly_rate=monthly_rate, payment=payment
        )
    # ln(1 + (B/P)(1 - (1 + r))) / ln(1 + r), oriented to a positive count
    return -math.log1p(-(balance / payment) * monthly_rate) / math.log1p(monthly_rate)


def _check_extra_payment(extra_payment: float) -> float:
    try:
        value = float(extra_payment)
    except (TypeError, ValueError) as exc:
        raise InvalidExtraPayment(f"Extra payment must be a number, got {extra_payment!r}") from exc
    if not math.isfinite(value) or value < 0:
        raise InvalidExtraPayment("Extra payment must be a non-negative number.")
    return value


def plan_totals(
    debts: Sequence[Debt], extra_payment: float, rows: Iterable[DebtWithPayoff] = ()
) -> PlanTotals:
    """Aggregate figures over the original (unsorted) debt list."""

    total_balance = sum(d.balance for d in debts)
    avg_apr = sum(d.apr for d in debts) / len(debts) if debts else 0.0
    total_minimum = sum(d.minimum_payment for d in debts)
    return PlanTotals(
        balance=total_balance,
        avg_apr=avg_apr,
        min_payment=total_minimum,
        monthly_payment=total_minimum + extra_payment,
        months_to_payoff=max((row.months_to_payoff for row in rows), default=0.0),
    )


def compute_plan(
    debts: Iterable[Debt], strategy: Strategy | str, extra_payment: float = 0.0
) -> RepaymentPlan:
    """Order ``debts`` for ``strategy`` and compute each debt's payoff time.

    The first debt in sorted order receives its minimum plus the whole extra
    payment; every other debt receives exactly its minimum. Debts whose payment
    never covers accruing interest are reported with ``math.inf`` months.
    """

    strategy = Strategy.parse(strategy)
    extra = _check_extra_payment(extra_payment)
    snapshot = tuple(debts)

    rows: list[DebtWithPayoff] = []
    for index, debt in enumerate(sort_debts(snapshot, strategy)):
        payment = debt.minimum_payment + extra if index == 0 else debt.minimum_payment
        try:
            months = months_to_payoff(debt.balance, debt.monthly_rate, payment)
        except InsufficientPaymentToAmortize as exc:
            logger.warning(
                "Payment insufficient to amortize",
                extra={
                    "creditor": debt.creditor,
                    "payment": payment,
                    "monthly_interest": exc.monthly_interest,
                },
            )
            months = math.inf
        rows.append(DebtWithPayoff.from_debt(debt, monthly_payment=payment, months_to_payoff=months))

    plan = RepaymentPlan(
        strategy=strategy,
        extra_payment=extra,
        rows=tuple(rows),
        totals=plan_totals(snapshot, extra, rows),
    )
    logger.debug(
        "Repayment plan computed",
        extra={
            "strategy": strategy.value,
            "debts": len(rows),
            "months_to_payoff": plan.totals.months_to_payoff,
        },
    )
    return plan


def highest_apr_debt(debts: Iterable[Debt]) -> Debt | None:
    """Return the debt with the highest APR (first wins ties), or None if empty."""

    highest: Debt | None = None
    for debt in debts:
        if highest is None or debt.apr > highest.apr:
            highest = debt
    return highest


def summary_statistics(debts: Iterable[Debt], extra_payment: float = 0.0) -> PlanSummary:
    """Headline figures shown alongside a plan."""

    top = highest_apr_debt(debts)
    return PlanSummary(
        highest_apr=top.apr if top else None,
        highest_apr_creditor=top.creditor if top else None,
        highest_apr_minimum_payment=top.minimum_payment if top else None,
        extra_payment=_check_extra_payment(extra_payment),
    )


def calculate(session: PlannerSession) -> RepaymentPlan:
    """Recompute the session's plan from a snapshot of its debts."""

    session.plan = compute_plan(list(session.debts), session.strategy, session.extra_payment)
    logger.info(
        "Plan recalculated",
        extra={
            "strategy": session.strategy.value,
            "debts": len(session.debts),
            "insufficient": len(session.plan.insufficient),
        },
    )
    return session.plan
