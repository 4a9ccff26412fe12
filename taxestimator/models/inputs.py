"""Income input models.

Raw currency amounts arrive from a form or the command line. Missing, blank or
unparseable values are treated as zero rather than rejected; negative values
pass through unchanged and are clamped only where a computation calls for it.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, Field, field_validator

ZERO = Decimal("0")


def parse_amount(value: Any) -> Decimal:
    """Coerce a raw currency value to Decimal, defaulting to zero."""
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return ZERO
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return ZERO
    # NaN and Infinity are as useless as garbage text
    if not amount.is_finite():
        return ZERO
    return amount


class ScheduleE(BaseModel):
    """Schedule E worksheet: rental real estate and passthrough entities."""

    rental_income: Decimal = Field(
        default=ZERO, description="Gross rental income"
    )
    rental_expenses: Decimal = Field(
        default=ZERO,
        description="Total rental expenses (mortgage interest, taxes, repairs, depreciation)",
    )
    passthrough_income: Decimal = Field(
        default=ZERO, description="Passthrough income from partnerships and S-corps (K-1)"
    )

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Decimal:
        return parse_amount(value)

    @property
    def net_income(self) -> Decimal:
        """Net Schedule E income. Negative when expenses exceed income."""
        return self.rental_income - self.rental_expenses + self.passthrough_income


class IncomeInputs(BaseModel):
    """Annual income, deduction and payment amounts for one taxpayer."""

    # --- Income ---
    wages: Decimal = Field(default=ZERO, description="Wages, salaries, tips")
    interest: Decimal = Field(default=ZERO, description="Taxable interest")
    ordinary_dividends: Decimal = Field(default=ZERO, description="Ordinary dividends")
    qualified_dividends: Decimal = Field(
        default=ZERO, description="Qualified dividends (taxed at preferential rates)"
    )
    short_term_gains: Decimal = Field(default=ZERO, description="Short-term capital gains")
    long_term_gains: Decimal = Field(default=ZERO, description="Long-term capital gains")
    schedule_e_income: Decimal = Field(
        default=ZERO, description="Net Schedule E income or loss (signed)"
    )

    # --- Deductions and credits ---
    charitable_contribution: Decimal = Field(
        default=ZERO, description="Charitable contributions, added to the standard deduction"
    )
    tax_credits: Decimal = Field(
        default=ZERO, description="Federal tax credits applied after tax is computed"
    )

    # --- Payments ---
    tax_withheld: Decimal = Field(default=ZERO, description="Federal income tax withheld")
    estimated_payments: Decimal = Field(default=ZERO, description="Estimated tax payments made")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Decimal:
        return parse_amount(value)

    def with_schedule_e(self, worksheet: ScheduleE) -> "IncomeInputs":
        """Return a copy whose Schedule E income is the worksheet's net figure."""
        return self.model_copy(update={"schedule_e_income": worksheet.net_income})
