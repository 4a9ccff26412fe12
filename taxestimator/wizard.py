"""Interactive step-by-step wizard for Tax Estimator.

Walks through the same inputs as the estimate form:
  Step 1: Filing status and state of residence
  Step 2: Wages and the optional Schedule E worksheet
  Step 3: Advanced income and deductions (optional)
  Step 4: Payments, withholding and credits
and then renders the federal and state estimate.
"""

from __future__ import annotations

from decimal import Decimal

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.rule import Rule
from rich.table import Table

from taxestimator.engines.brackets import STATE_JURISDICTIONS, TAX_YEAR
from taxestimator.engines.estimator import TaxEstimator
from taxestimator.models.enums import FilingStatus, Jurisdiction
from taxestimator.models.inputs import IncomeInputs, ScheduleE, parse_amount
from taxestimator.models.results import CalculationResult
from taxestimator.reports.formatting import format_currency

_FS_CHOICES = [s.value for s in FilingStatus]
_STATE_CHOICES = [j.value for j in STATE_JURISDICTIONS]


# ---------------------------------------------------------------------------
# Prompt helpers
# ---------------------------------------------------------------------------


def _prompt_amount(label: str, console: Console) -> Decimal:
    """Prompt for a currency amount. Blank or unparseable input counts as zero."""
    raw = Prompt.ask(label, default="0", console=console)
    return parse_amount(raw)


def _show_step_header(step_num: int, title: str, console: Console) -> None:
    console.print()
    console.print(Rule(f"Step {step_num}: {title}", style="bold cyan"))
    console.print()


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


def _step_status(console: Console) -> tuple[FilingStatus, Jurisdiction]:
    fs_key = Prompt.ask(
        "Filing status", choices=_FS_CHOICES, default=FilingStatus.SINGLE.value, console=console
    )
    state_key = Prompt.ask(
        "State of residence", choices=_STATE_CHOICES, default=Jurisdiction.NONE.value, console=console
    )
    return FilingStatus(fs_key), Jurisdiction(state_key)


def _step_schedule_e(console: Console) -> ScheduleE:
    """Schedule E worksheet: rental real estate and passthrough entities."""
    worksheet = ScheduleE(
        rental_income=_prompt_amount("Gross rental income", console),
        rental_expenses=_prompt_amount(
            "Total rental expenses (mortgage interest, taxes, repairs, depreciation)", console
        ),
        passthrough_income=_prompt_amount("Passthrough income (K-1)", console),
    )
    console.print(f"Net Schedule E income: [bold]{format_currency(worksheet.net_income)}[/bold]")
    return worksheet


def _step_advanced(console: Console) -> dict[str, Decimal]:
    return {
        "interest": _prompt_amount("Taxable interest", console),
        "ordinary_dividends": _prompt_amount("Ordinary dividends", console),
        "qualified_dividends": _prompt_amount("Qualified dividends", console),
        "short_term_gains": _prompt_amount("Short-term capital gains", console),
        "long_term_gains": _prompt_amount("Long-term capital gains", console),
        "charitable_contribution": _prompt_amount("Charitable contributions", console),
    }


def _step_payments(console: Console) -> dict[str, Decimal]:
    return {
        "tax_withheld": _prompt_amount("Federal income tax withheld", console),
        "estimated_payments": _prompt_amount("Estimated tax payments made", console),
        "tax_credits": _prompt_amount("Federal tax credits", console),
    }


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_result(result: CalculationResult, console: Console) -> None:
    """Print the estimate: summary, federal breakdown, payments, state."""
    federal = result.federal
    if federal.is_refund:
        headline = f"Estimated Refund\n[bold green]{format_currency(abs(federal.balance_due_or_refund))}[/bold green]"
        style = "green"
    else:
        headline = f"Estimated Amount Owed\n[bold red]{format_currency(federal.balance_due_or_refund)}[/bold red]"
        style = "red"
    console.print(Panel(headline, border_style=style))

    table = Table(title="Federal Tax Breakdown", show_header=False)
    table.add_column("Line")
    table.add_column("Amount", justify="right")
    table.add_row("Income Tax (Regular + Cap Gains)", format_currency(federal.income_tax_before_surtaxes))
    table.add_row("Add'l Medicare Tax", format_currency(federal.medicare_surtax))
    table.add_row("Net Investment Income Tax", format_currency(federal.net_investment_income_tax))
    table.add_row("[bold]Tax Before Credits[/bold]", format_currency(federal.tax_before_credits))
    table.add_row("[bold]Total Federal Tax[/bold]", format_currency(federal.total_tax))
    console.print(table)

    payments = Table(title="Payment Summary", show_header=False)
    payments.add_column("Line")
    payments.add_column("Amount", justify="right")
    payments.add_row("Total Tax", format_currency(federal.total_tax))
    payments.add_row("Payments & Withholding", f"- {format_currency(federal.total_payments)}")
    console.print(payments)

    state = result.state
    if state is not None:
        if state.no_tax_state:
            body = f"{state.jurisdiction_name} has no state income tax."
        else:
            body = f"Estimated State Tax Owed\n[bold]{format_currency(state.total_tax)}[/bold]"
        console.print(Panel(body, title=f"{state.jurisdiction_name} State Tax", border_style="green"))

    for warning in federal.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run_wizard(console: Console | None = None) -> CalculationResult:
    """Run the interactive estimate and return the computed result."""
    console = console or Console()
    console.print(
        Panel(
            "[bold]Comprehensive Tax Estimator[/bold]\n\n"
            "A detailed tool for federal and state income tax estimation.",
            title=f"[bold cyan]{TAX_YEAR} Tax Estimator[/bold cyan]",
            border_style="cyan",
        )
    )

    _show_step_header(1, "Filing Status & State", console)
    filing_status, jurisdiction = _step_status(console)

    _show_step_header(2, "Wages & Schedule E", console)
    fields: dict[str, Decimal] = {"wages": _prompt_amount("Wages, salaries, tips", console)}
    worksheet: ScheduleE | None = None
    if Confirm.ask("Enter rental/passthrough income (Schedule E)?", default=False, console=console):
        worksheet = _step_schedule_e(console)

    _show_step_header(3, "Advanced Income & Deductions", console)
    if Confirm.ask("Enter interest, dividends, capital gains or charity?", default=False, console=console):
        fields.update(_step_advanced(console))

    _show_step_header(4, "Payments & Withholding", console)
    fields.update(_step_payments(console))

    inputs = IncomeInputs(**fields)
    if worksheet is not None:
        inputs = inputs.with_schedule_e(worksheet)

    result = TaxEstimator().estimate(inputs, filing_status, jurisdiction)

    console.print()
    console.print(Rule("Your Estimate", style="bold cyan"))
    render_result(result, console)
    return result
