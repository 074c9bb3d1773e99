"""Command line entry points for DebtPlanner."""

from __future__ import annotations

from pathlib import Path

import click

from .config import BaseConfig
from .errors import DebtPlannerError
from .logging_config import setup_logging
from .models.debt import RepaymentPlan, Strategy
from .services.export_csv import NEVER, export_plan_csv, format_amount, format_months
from .services.import_csv import ImportResult, load_debts_csv
from .services.payoff import calculate, summary_statistics
from .services.registry import set_extra_payment, set_strategy

_STRATEGY_CHOICE = click.Choice([s.value for s in Strategy], case_sensitive=False)


def _load(csv_path: Path, strategy: str | None, extra: float | None, config: BaseConfig) -> ImportResult:
    try:
        result = load_debts_csv(csv_path=csv_path)
    except DebtPlannerError as exc:
        raise click.ClickException(str(exc)) from exc

    for row_number, reason in result.rejected:
        click.echo(f"Skipped row {row_number}: {reason.value}", err=True)

    session = result.session
    set_strategy(session, strategy or config.DEFAULT_STRATEGY)
    if not set_extra_payment(session, config.DEFAULT_EXTRA_PAYMENT if extra is None else extra):
        raise click.BadParameter("must be a non-negative number", param_hint="--extra")
    return result


def _render_plan(plan: RepaymentPlan) -> None:
    header = f"{'Creditor':<20} {'Balance':>12} {'APR %':>8} {'Minimum':>10} {'Monthly':>10} {'Months':>8}"
    click.echo(header)
    click.echo("-" * len(header))
    for row in plan.rows:
        click.echo(
            f"{row.creditor[:20]:<20} {format_amount(row.balance):>12} {format_amount(row.apr):>8} "
            f"{format_amount(row.minimum_payment):>10} {format_amount(row.monthly_payment):>10} "
            f"{format_months(row.months_to_payoff):>8}"
        )
    totals = plan.totals
    click.echo("-" * len(header))
    click.echo(
        f"{'TOTAL DEBT':<20} {format_amount(totals.balance):>12} {format_amount(totals.avg_apr):>8} "
        f"{format_amount(totals.min_payment):>10} {format_amount(totals.monthly_payment):>10} "
        f"{format_months(totals.months_to_payoff):>8}"
    )
    for row in plan.insufficient:
        click.echo(
            f"Warning: {row.creditor} payment {format_amount(row.monthly_payment)} "
            f"does not cover its interest; months to payoff is {NEVER}.",
            err=True,
        )


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log planner activity to the console")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Plan debt repayment with the avalanche or snowball strategy."""

    try:
        config = BaseConfig()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    if not verbose:
        config.DEV_MODE = False
    setup_logging(config)
    ctx.obj = config


@cli.command("plan")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--strategy", type=_STRATEGY_CHOICE, default=None, help="Payoff ordering")
@click.option("--extra", type=float, default=None, help="Extra monthly payment")
@click.pass_obj
def plan_command(config: BaseConfig, csv_path: Path, strategy: str | None, extra: float | None) -> None:
    """Print the repayment plan for the debts in CSV_PATH."""

    result = _load(csv_path, strategy, extra, config)
    plan = calculate(result.session)
    if plan.is_empty:
        click.echo("No debts to plan.")
        return
    click.echo(f"Strategy: {plan.strategy.value}  Extra payment: {format_amount(plan.extra_payment)}")
    _render_plan(plan)


@cli.command("summary")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--extra", type=float, default=None, help="Extra monthly payment")
@click.pass_obj
def summary_command(config: BaseConfig, csv_path: Path, extra: float | None) -> None:
    """Print headline statistics for the debts in CSV_PATH."""

    result = _load(csv_path, None, extra, config)
    summary = summary_statistics(result.session.debts, result.session.extra_payment)
    if summary.highest_apr is None:
        click.echo("No debts entered.")
    else:
        click.echo(f"Highest APR: {format_amount(summary.highest_apr)}%")
        click.echo(f"Card with Highest APR: {summary.highest_apr_creditor}")
        click.echo(
            "Min. Payment of Card with Highest APR: "
            f"${format_amount(summary.highest_apr_minimum_payment)}"
        )
    click.echo(f"Your Extra Payment: ${format_amount(summary.extra_payment)}")


@cli.command("export")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--strategy", type=_STRATEGY_CHOICE, default=None, help="Payoff ordering")
@click.option("--extra", type=float, default=None, help="Extra monthly payment")
@click.pass_obj
def export_command(
    config: BaseConfig,
    csv_path: Path,
    output_path: Path,
    strategy: str | None,
    extra: float | None,
) -> None:
    """Write the repayment plan for CSV_PATH to OUTPUT_PATH."""

    result = _load(csv_path, strategy, extra, config)
    plan = calculate(result.session)
    path = export_plan_csv(plan=plan, output_path=output_path)
    click.echo(f"Plan written: {path}")


def main() -> None:  # pragma: no cover - console script
    cli()
