"""Typer CLI interface for Tax Estimator."""

import logging

import typer

from taxestimator.engines.brackets import (
    JURISDICTION_NAMES,
    STATE_JURISDICTIONS,
    TAX_YEAR,
    parse_filing_status,
    parse_jurisdiction,
)
from taxestimator.exceptions import InvalidArgumentError
from taxestimator.models.enums import FilingStatus, Jurisdiction

app = typer.Typer(
    name="taxest",
    help=f"Tax Estimator: {TAX_YEAR} federal and state income tax estimates.",
)

# Short aliases accepted on the command line in addition to the exact keys
_FS_ALIASES: dict[str, FilingStatus] = {
    "SINGLE": FilingStatus.SINGLE,
    "MFJ": FilingStatus.MFJ,
    "HOH": FilingStatus.HOH,
}


def resolve_filing_status(value: str) -> FilingStatus:
    """Accept an exact filing-status key or one of the short aliases."""
    alias = _FS_ALIASES.get(value.upper())
    if alias is not None:
        return alias
    return parse_filing_status(value)


def _configure_logging() -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log intermediate figures to stderr"
    ),
) -> None:
    """Tax Estimator: federal and state income tax estimates."""
    if verbose:
        _configure_logging()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command()
def estimate(
    filing_status: str = typer.Option(
        "single",
        "--filing-status",
        "-s",
        help="Filing status: single, marriedFilingJointly, headOfHousehold (or SINGLE, MFJ, HOH)",
    ),
    state: str = typer.Option(
        "none",
        "--state",
        help="State of residence: " + ", ".join(j.value for j in STATE_JURISDICTIONS),
    ),
    wages: str = typer.Option("", "--wages", help="Wages, salaries, tips"),
    interest: str = typer.Option("", "--interest", help="Taxable interest"),
    ordinary_dividends: str = typer.Option("", "--ordinary-dividends", help="Ordinary dividends"),
    qualified_dividends: str = typer.Option(
        "", "--qualified-dividends", help="Qualified dividends"
    ),
    short_term_gains: str = typer.Option("", "--short-term-gains", help="Short-term capital gains"),
    long_term_gains: str = typer.Option("", "--long-term-gains", help="Long-term capital gains"),
    schedule_e: str = typer.Option(
        "", "--schedule-e", help="Net Schedule E income or loss (signed)"
    ),
    rental_income: str = typer.Option(
        "", "--rental-income", help="Schedule E worksheet: gross rental income"
    ),
    rental_expenses: str = typer.Option(
        "", "--rental-expenses", help="Schedule E worksheet: total rental expenses"
    ),
    passthrough_income: str = typer.Option(
        "", "--passthrough-income", help="Schedule E worksheet: passthrough income (K-1)"
    ),
    charitable: str = typer.Option(
        "", "--charitable", help="Charitable contributions, added to the standard deduction"
    ),
    credits: str = typer.Option("", "--credits", help="Federal tax credits"),
    withheld: str = typer.Option("", "--withheld", help="Federal income tax withheld"),
    estimated_payments: str = typer.Option(
        "", "--estimated-payments", help="Estimated tax payments made"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Compute estimated federal and state tax for one taxpayer.

    Blank or unparseable amounts count as zero. When any Schedule E worksheet
    field is given, the worksheet's net income replaces --schedule-e.
    """
    from taxestimator.engines.estimator import TaxEstimator
    from taxestimator.models.inputs import IncomeInputs, ScheduleE
    from taxestimator.reports.tax_summary import TaxSummaryGenerator

    try:
        fs = resolve_filing_status(filing_status)
        jurisdiction = parse_jurisdiction(state)
        if jurisdiction is Jurisdiction.FEDERAL:
            raise InvalidArgumentError(
                "state", state, [j.value for j in STATE_JURISDICTIONS]
            )
    except InvalidArgumentError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    inputs = IncomeInputs(
        wages=wages,
        interest=interest,
        ordinary_dividends=ordinary_dividends,
        qualified_dividends=qualified_dividends,
        short_term_gains=short_term_gains,
        long_term_gains=long_term_gains,
        schedule_e_income=schedule_e,
        charitable_contribution=charitable,
        tax_credits=credits,
        tax_withheld=withheld,
        estimated_payments=estimated_payments,
    )
    if any(v.strip() for v in (rental_income, rental_expenses, passthrough_income)):
        worksheet = ScheduleE(
            rental_income=rental_income,
            rental_expenses=rental_expenses,
            passthrough_income=passthrough_income,
        )
        inputs = inputs.with_schedule_e(worksheet)

    result = TaxEstimator().estimate(inputs, fs, jurisdiction)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return
    typer.echo(TaxSummaryGenerator().render(result))


@app.command()
def brackets(
    jurisdiction: str = typer.Argument(
        "federal",
        help="Jurisdiction key: federal, " + ", ".join(j.value for j in STATE_JURISDICTIONS),
    ),
    filing_status: str = typer.Option(
        "single", "--filing-status", "-s", help="Filing status (key or SINGLE, MFJ, HOH)"
    ),
) -> None:
    """Show the rate schedule for a jurisdiction and filing status."""
    from rich.console import Console
    from rich.table import Table

    from taxestimator.engines.brackets import get_rate_schedule, is_no_tax_jurisdiction
    from taxestimator.exceptions import RateScheduleNotFoundError
    from taxestimator.reports.formatting import format_currency

    try:
        fs = resolve_filing_status(filing_status)
        j = parse_jurisdiction(jurisdiction)
        schedule = get_rate_schedule(j, fs)
    except (InvalidArgumentError, RateScheduleNotFoundError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    console = Console()
    name = JURISDICTION_NAMES[j]
    if is_no_tax_jurisdiction(j):
        console.print(f"{name} has no state income tax.")
        return

    console.print(f"[bold]{name}[/bold] ({fs.value}), {TAX_YEAR}")
    console.print(f"Standard deduction: {format_currency(schedule.standard_deduction)}")
    if schedule.is_flat:
        console.print(f"Flat rate: {schedule.sole_rate * 100:.2f}%")

    tables = [("Ordinary income brackets", schedule.brackets)]
    if schedule.preferential_brackets is not None:
        tables.append(("Capital gains / qualified dividend brackets", schedule.preferential_brackets))

    for title, rows in tables:
        table = Table(title=title)
        table.add_column("Rate", justify="right")
        table.add_column("Over", justify="right")
        table.add_column("Up to", justify="right")
        lower = None
        for bracket in rows:
            table.add_row(
                f"{bracket.rate * 100:.2f}%",
                format_currency(lower or 0),
                format_currency(bracket.upper_limit) if bracket.upper_limit is not None else "and up",
            )
            lower = bracket.upper_limit
        console.print(table)

    if schedule.medicare_threshold is not None:
        console.print(f"Additional Medicare Tax threshold: {format_currency(schedule.medicare_threshold)}")
    if schedule.niit_threshold is not None:
        console.print(f"NIIT threshold: {format_currency(schedule.niit_threshold)}")


@app.command()
def wizard() -> None:
    """Interactive step-by-step estimate."""
    from rich.console import Console

    from taxestimator.wizard import run_wizard

    run_wizard(Console())
