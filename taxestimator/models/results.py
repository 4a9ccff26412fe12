"""Calculation result models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from taxestimator.models.enums import FilingStatus, Jurisdiction


class FederalResult(BaseModel):
    filing_status: FilingStatus
    # Income
    ordinary_income: Decimal
    preferential_income: Decimal
    adjusted_gross_income: Decimal
    total_deductions: Decimal
    taxable_income: Decimal
    taxable_ordinary_income: Decimal
    # Tax
    regular_tax: Decimal
    preferential_tax: Decimal
    income_tax_before_surtaxes: Decimal
    medicare_surtax: Decimal
    net_investment_income: Decimal
    net_investment_income_tax: Decimal
    tax_credits: Decimal
    total_tax: Decimal
    # Payments
    total_payments: Decimal
    balance_due_or_refund: Decimal  # positive = owed, negative = refund
    warnings: list[str] = Field(default_factory=list)

    @property
    def tax_before_credits(self) -> Decimal:
        return (
            self.income_tax_before_surtaxes
            + self.medicare_surtax
            + self.net_investment_income_tax
        )

    @property
    def is_refund(self) -> bool:
        return self.balance_due_or_refund <= 0


class StateResult(BaseModel):
    jurisdiction: Jurisdiction
    jurisdiction_name: str
    total_tax: Decimal
    no_tax_state: bool = False
    taxable_income: Decimal | None = None  # None for no-tax states


class CalculationResult(BaseModel):
    federal: FederalResult
    state: StateResult | None = None

    @property
    def warnings(self) -> list[str]:
        return list(self.federal.warnings)
