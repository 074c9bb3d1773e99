"""DebtPlanner repayment planning package."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .models import Debt, DebtWithPayoff, PlanTotals, RepaymentPlan, Strategy
from .services.payoff import calculate, compute_plan, highest_apr_debt
from .services.registry import PlannerSession, add_debt, remove_debt

__all__ = [
    "BaseConfig",
    "Debt",
    "DebtWithPayoff",
    "DevConfig",
    "PlanTotals",
    "PlannerSession",
    "RepaymentPlan",
    "Strategy",
    "add_debt",
    "calculate",
    "compute_plan",
    "highest_apr_debt",
    "remove_debt",
]
