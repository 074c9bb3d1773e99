"""In-memory debt registry held in an explicit planner session."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

from ..logging_config import get_logger
from ..models.debt import Debt, RepaymentPlan, Strategy

logger = get_logger("services.registry")


class RejectionReason(str, Enum):
    """Why a candidate debt or extra payment was not accepted."""

    EMPTY_CREDITOR = "empty_creditor"
    NON_POSITIVE_BALANCE = "non_positive_balance"
    NEGATIVE_APR = "negative_apr"
    NON_POSITIVE_MINIMUM = "non_positive_minimum"
    NOT_A_NUMBER = "not_a_number"
    NEGATIVE_EXTRA_PAYMENT = "negative_extra_payment"


@dataclass(frozen=True, slots=True)
class Accepted:
    """Candidate was stored; ``index`` is its position in the registry."""

    index: int | None = None

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    """Candidate was discarded; the session is unchanged."""

    reason: RejectionReason

    def __bool__(self) -> bool:
        return False


AddResult = Union[Accepted, Rejected]


@dataclass(slots=True)
class PlannerSession:
    """All mutable state for one planning session."""

    debts: list[Debt] = field(default_factory=list)
    strategy: Strategy = Strategy.AVALANCHE
    extra_payment: float = 0.0
    plan: RepaymentPlan | None = None


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def validate_debt(candidate: Debt | Mapping[str, Any]) -> Debt | Rejected:
    """Return a normalised ``Debt`` or the first field constraint it breaks."""

    if isinstance(candidate, Debt):
        raw = {
            "creditor": candidate.creditor,
            "balance": candidate.balance,
            "apr": candidate.apr,
            "minimum_payment": candidate.minimum_payment,
        }
    else:
        raw = candidate

    creditor = raw.get("creditor")
    creditor = creditor.strip() if isinstance(creditor, str) else ""
    if not creditor:
        return Rejected(RejectionReason.EMPTY_CREDITOR)

    balance = _to_number(raw.get("balance"))
    if balance is None:
        return Rejected(RejectionReason.NOT_A_NUMBER)
    if balance <= 0:
        return Rejected(RejectionReason.NON_POSITIVE_BALANCE)

    apr = _to_number(raw.get("apr"))
    if apr is None:
        return Rejected(RejectionReason.NOT_A_NUMBER)
    if apr < 0:
        return Rejected(RejectionReason.NEGATIVE_APR)

    minimum_payment = _to_number(raw.get("minimum_payment"))
    if minimum_payment is None:
        return Rejected(RejectionReason.NOT_A_NUMBER)
    if minimum_payment <= 0:
        return Rejected(RejectionReason.NON_POSITIVE_MINIMUM)

    return Debt(creditor=creditor, balance=balance, apr=apr, minimum_payment=minimum_payment)


def add_debt(session: PlannerSession, candidate: Debt | Mapping[str, Any]) -> AddResult:
    """Append ``candidate`` to the session when every field constraint holds."""

    result = validate_debt(candidate)
    if isinstance(result, Rejected):
        logger.info("Debt rejected", extra={"reason": result.reason.value})
        return result

    session.debts.append(result)
    index = len(session.debts) - 1
    logger.debug("Debt added", extra={"creditor": result.creditor, "index": index})
    return Accepted(index)


def remove_debt(session: PlannerSession, index: int) -> Debt | None:
    """Remove and return the debt at ``index``; out-of-range indices are ignored."""

    if not 0 <= index < len(session.debts):
        return None
    removed = session.debts.pop(index)
    logger.debug("Debt removed", extra={"creditor": removed.creditor, "index": index})
    return removed


def set_extra_payment(session: PlannerSession, amount: Any) -> AddResult:
    """Store the extra monthly payment; negative values are rejected."""

    value = _to_number(amount)
    if value is None:
        return Rejected(RejectionReason.NOT_A_NUMBER)
    if value < 0:
        logger.info("Extra payment rejected", extra={"reason": "negative", "amount": value})
        return Rejected(RejectionReason.NEGATIVE_EXTRA_PAYMENT)
    session.extra_payment = value
    return Accepted()


def set_strategy(session: PlannerSession, strategy: Strategy | str) -> Strategy:
    session.strategy = Strategy.parse(strategy)
    return session.strategy
