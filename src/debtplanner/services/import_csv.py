"""CSV ingestion of debt lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from ..errors import CsvFormatError
from ..logging_config import get_logger
from .registry import PlannerSession, RejectionReason, Rejected, add_debt

logger = get_logger("services.import_csv")

# Accepted header spellings for each debt field (compared lower-cased, stripped)
COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "creditor": ("creditor", "name"),
    "balance": ("balance",),
    "apr": ("apr", "apr %", "apr_percent"),
    "minimum_payment": ("minimum_payment", "min_payment", "minimum", "min payment"),
}


@dataclass(slots=True)
class ImportResult:
    """Outcome of loading a CSV file into a session."""

    session: PlannerSession
    accepted: int = 0
    rejected: list[tuple[int, RejectionReason]] = field(default_factory=list)


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file into a DataFrame with consistent column casing."""

    try:
        frame = pd.read_csv(file_path, encoding=encoding, dtype=str, keep_default_na=False)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        raise CsvFormatError(f"Could not read {file_path}: {exc}") from exc
    except pd.errors.EmptyDataError:
        frame = pd.DataFrame()
    frame.columns = [str(c).strip().lower() for c in frame.columns]
    return frame


def resolve_columns(columns: list[str]) -> dict[str, str]:
    """Map each debt field to the header present in ``columns``."""

    resolved: dict[str, str] = {}
    for name, aliases in COLUMN_ALIASES.items():
        match = next((alias for alias in aliases if alias in columns), None)
        if match is None:
            raise CsvFormatError(f"Missing required column: {name}")
        resolved[name] = match
    return resolved


def load_debts_csv(*, csv_path: Path, session: PlannerSession | None = None) -> ImportResult:
    """Parse ``csv_path`` and add each row to ``session`` via the registry."""

    frame = normalize_frame(file_path=Path(csv_path))
    mapping = resolve_columns(list(frame.columns))
    result = ImportResult(session=session if session is not None else PlannerSession())

    # Row numbers are 1-based data rows (header excluded)
    for row_number, (_, row) in enumerate(frame.iterrows(), start=1):
        candidate = {field_name: row[column] for field_name, column in mapping.items()}
        outcome = add_debt(result.session, candidate)
        if isinstance(outcome, Rejected):
            result.rejected.append((row_number, outcome.reason))
        else:
            result.accepted += 1

    logger.info(
        "Debts imported",
        extra={
            "path": str(csv_path),
            "accepted": result.accepted,
            "rejected": len(result.rejected),
        },
    )
    return result
