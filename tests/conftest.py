"""Pytest configuration and shared fixtures for DebtPlanner tests.

Provides debt factories, a fresh planner session, and helpers for comparing
fractional month counts and money values.
"""

from __future__ import annotations

import logging

import pytest

from debtplanner.models.debt import Debt
from debtplanner.services.registry import PlannerSession

# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point configuration at a temporary data directory for every test."""

    monkeypatch.setenv("DEBTPLANNER_DATA_DIR", str(tmp_path / "instance"))
    for name in (
        "DEBTPLANNER_DEV_MODE",
        "DEBTPLANNER_DEFAULT_STRATEGY",
        "DEBTPLANNER_EXTRA_PAYMENT",
        "DEBTPLANNER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    # Release file handles opened by setup_logging
    logger = logging.getLogger("debtplanner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def debt_factory():
    """Factory for creating test debts.

    Returns:
        Callable: Function that creates Debt instances with sensible defaults
    """

    def _create_debt(
        creditor: str = "Test Card",
        balance: float = 1000.00,
        apr: float = 18.0,
        minimum_payment: float = 50.00,
    ) -> Debt:
        return Debt(creditor=creditor, balance=balance, apr=apr, minimum_payment=minimum_payment)

    return _create_debt


@pytest.fixture
def sample_debts(debt_factory) -> list[Debt]:
    """Three debts whose avalanche and snowball orders differ."""

    return [
        debt_factory("Visa", balance=5000.00, apr=18.0, minimum_payment=100.00),
        debt_factory("Store Card", balance=1000.00, apr=12.0, minimum_payment=50.00),
        debt_factory("Car Loan", balance=3000.00, apr=24.0, minimum_payment=75.00),
    ]


@pytest.fixture
def session() -> PlannerSession:
    """Empty planner session."""
    return PlannerSession()


@pytest.fixture
def debts_csv(tmp_path):
    """Write a CSV of debts and return its path."""

    def _write(content: str, name: str = "debts.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
