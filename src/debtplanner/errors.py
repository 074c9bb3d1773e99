"""Exceptions raised by the repayment planner."""

from __future__ import annotations


class DebtPlannerError(Exception):
    """Base class for planner failures."""


class InsufficientPaymentToAmortize(DebtPlannerError, ArithmeticError):
    """The monthly payment does not exceed the interest accruing on the balance."""

    def __init__(self, *, balance: float, monthly_rate: float, payment: float) -> None:
        self.balance = balance
        self.monthly_rate = monthly_rate
        self.payment = payment
        self.monthly_interest = balance * monthly_rate
        super().__init__(
            f"Payment {payment:.2f} does not cover monthly interest "
            f"{self.monthly_interest:.2f} on balance {balance:.2f}"
        )


class InvalidExtraPayment(DebtPlannerError, ValueError):
    """Extra payment is negative or not a finite number."""


class CsvFormatError(DebtPlannerError, ValueError):
    """A debt import file is missing required columns or cannot be read."""
