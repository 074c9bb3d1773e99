"""Planner data model exports."""

from .debt import Debt, DebtWithPayoff, PlanSummary, PlanTotals, RepaymentPlan, Strategy

__all__ = [
    "Debt",
    "DebtWithPayoff",
    "PlanSummary",
    "PlanTotals",
    "RepaymentPlan",
    "Strategy",
]
