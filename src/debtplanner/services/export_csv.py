"""CSV export helpers for repayment plans."""

from __future__ import annotations

import csv
import math
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from ..models.debt import RepaymentPlan

HEADERS = [
    "creditor",
    "balance",
    "apr",
    "minimum_payment",
    "monthly_payment",
    "months_to_payoff",
]
TOTAL_LABEL = "TOTAL"
NEVER = "never"


def format_amount(value: float) -> str:
    """Round to cents, half up."""
    return str(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_months(value: float) -> str:
    if not math.isfinite(value):
        return NEVER
    return format_amount(value)


def plan_to_rows(plan: RepaymentPlan) -> list[dict[str, str]]:
    """Flatten a plan into CSV-ready dicts, totals row last."""

    rows = [
        {
            "creditor": row.creditor,
            "balance": format_amount(row.balance),
            "apr": format_amount(row.apr),
            "minimum_payment": format_amount(row.minimum_payment),
            "monthly_payment": format_amount(row.monthly_payment),
            "months_to_payoff": format_months(row.months_to_payoff),
        }
        for row in plan.rows
    ]
    totals = plan.totals
    rows.append(
        {
            "creditor": TOTAL_LABEL,
            "balance": format_amount(totals.balance),
            "apr": format_amount(totals.avg_apr),
            "minimum_payment": format_amount(totals.min_payment),
            "monthly_payment": format_amount(totals.monthly_payment),
            "months_to_payoff": format_months(totals.months_to_payoff),
        }
    )
    return rows


def export_plan_csv(*, plan: RepaymentPlan, output_path: Path) -> Path:
    """Write ``plan`` to CSV at ``output_path``.

    Columns are deterministic: creditor, balance, apr, minimum_payment,
    monthly_payment, months_to_payoff. Returns the path written.
    """

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=HEADERS, quoting=csv.QUOTE_MINIMAL)
        writer.writeheader()
        writer.writerows(plan_to_rows(plan))

    return output_path
