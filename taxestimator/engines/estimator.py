"""Tax-due estimation engine.

Computes federal and state tax liability from the rate table.
Implements:
  - Progressive ordinary income tax (federal + state)
  - LTCG/qualified dividend stacking on top of ordinary income
  - Additional Medicare Tax on wages above the filing-status threshold
  - Net Investment Income Tax (NIIT) capped by AGI over the threshold
  - Simplified state income tax (progressive, flat, or none)

Every call recomputes from scratch. The estimator keeps no per-call state, so
one instance may be shared freely; warnings travel on the result.
"""

import logging
from decimal import Decimal

from taxestimator.engines.bracket_tax import compute_bracket_tax, compute_stacked_tax
from taxestimator.engines.brackets import (
    ADDITIONAL_MEDICARE_TAX_RATE,
    NIIT_RATE,
    get_rate_schedule,
    jurisdiction_name,
    parse_filing_status,
    parse_jurisdiction,
)
from taxestimator.engines.classifier import classify_income, net_investment_income
from taxestimator.exceptions import InvalidArgumentError
from taxestimator.models.enums import FilingStatus, Jurisdiction
from taxestimator.models.inputs import IncomeInputs
from taxestimator.models.results import CalculationResult, FederalResult, StateResult

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class TaxEstimator:
    """Estimates federal and state tax liability."""

    def estimate(
        self,
        inputs: IncomeInputs,
        filing_status: FilingStatus | str,
        jurisdiction: Jurisdiction | str = Jurisdiction.NONE,
    ) -> CalculationResult:
        """Compute the federal result and, when a state is selected, the state result."""
        federal = self.compute_federal(inputs, filing_status)
        state = self.compute_state(inputs, filing_status, jurisdiction)
        return CalculationResult(federal=federal, state=state)

    # ------------------------------------------------------------------
    # Federal
    # ------------------------------------------------------------------

    def compute_federal(
        self, inputs: IncomeInputs, filing_status: FilingStatus | str
    ) -> FederalResult:
        filing_status = parse_filing_status(filing_status)
        schedule = get_rate_schedule(Jurisdiction.FEDERAL, filing_status)
        warnings: list[str] = []

        # --- Income aggregation ---
        income = classify_income(inputs)
        agi = income.total

        # --- Deductions ---
        total_deductions = schedule.standard_deduction + inputs.charitable_contribution
        taxable_income = max(agi - total_deductions, ZERO)

        # --- Preferential income sits on top of ordinary income ---
        taxable_ordinary = max(taxable_income - income.preferential, ZERO)

        regular_tax = self.compute_federal_tax(taxable_ordinary, filing_status)
        preferential_tax = self.compute_preferential_tax(
            income.preferential, taxable_ordinary, filing_status
        )
        income_tax = regular_tax + preferential_tax

        # --- Surtaxes ---
        medicare_surtax = self.compute_additional_medicare_tax(inputs.wages, filing_status)
        nii = net_investment_income(inputs)
        niit = self.compute_niit(nii, agi, filing_status)

        if inputs.schedule_e_income < ZERO:
            warnings.append(
                f"Schedule E loss of ${abs(inputs.schedule_e_income):,.2f} does not "
                f"offset ordinary income; it only reduces net investment income."
            )

        # --- Totals ---
        total_tax = income_tax + medicare_surtax + niit - inputs.tax_credits
        if total_tax < ZERO:
            warnings.append(
                f"Tax credits of ${inputs.tax_credits:,.2f} exceed the tax before "
                f"credits of ${income_tax + medicare_surtax + niit:,.2f}."
            )
        total_payments = inputs.tax_withheld + inputs.estimated_payments
        balance = total_tax - total_payments

        logger.debug(
            "Federal %s: agi=%s taxable=%s regular=%s preferential=%s "
            "medicare=%s niit=%s total=%s balance=%s",
            filing_status.value, agi, taxable_income, regular_tax,
            preferential_tax, medicare_surtax, niit, total_tax, balance,
        )

        return FederalResult(
            filing_status=filing_status,
            ordinary_income=income.ordinary,
            preferential_income=income.preferential,
            adjusted_gross_income=agi,
            total_deductions=total_deductions,
            taxable_income=taxable_income,
            taxable_ordinary_income=taxable_ordinary,
            regular_tax=regular_tax,
            preferential_tax=preferential_tax,
            income_tax_before_surtaxes=income_tax,
            medicare_surtax=medicare_surtax,
            net_investment_income=nii,
            net_investment_income_tax=niit,
            tax_credits=inputs.tax_credits,
            total_tax=total_tax,
            total_payments=total_payments,
            balance_due_or_refund=balance,
            warnings=warnings,
        )

    def compute_federal_tax(
        self, taxable_ordinary_income: Decimal, filing_status: FilingStatus | str
    ) -> Decimal:
        """Compute federal ordinary income tax using progressive brackets."""
        schedule = get_rate_schedule(Jurisdiction.FEDERAL, filing_status)
        return compute_bracket_tax(taxable_ordinary_income, schedule.brackets)

    def compute_preferential_tax(
        self,
        preferential_income: Decimal,
        taxable_ordinary_income: Decimal,
        filing_status: FilingStatus | str,
    ) -> Decimal:
        """Compute federal tax on LTCG and qualified dividends.

        The preferential income fills bracket space starting where taxable
        ordinary income ends, so the 0%/15%/20% tiers depend on total taxable
        income.
        """
        if preferential_income <= ZERO:
            return ZERO
        schedule = get_rate_schedule(Jurisdiction.FEDERAL, filing_status)
        return compute_stacked_tax(
            preferential_income, schedule.preferential_brackets, taxable_ordinary_income
        )

    def compute_additional_medicare_tax(
        self, wages: Decimal, filing_status: FilingStatus | str
    ) -> Decimal:
        """Additional Medicare Tax: 0.9% of wages above the threshold.

        Self-employment income and per-spouse wage splits are not modeled.
        """
        schedule = get_rate_schedule(Jurisdiction.FEDERAL, filing_status)
        excess_wages = max(wages - schedule.medicare_threshold, ZERO)
        return excess_wages * ADDITIONAL_MEDICARE_TAX_RATE

    def compute_niit(
        self, investment_income: Decimal, agi: Decimal, filing_status: FilingStatus | str
    ) -> Decimal:
        """Compute Net Investment Income Tax (3.8%) on the lesser of NII and excess AGI."""
        schedule = get_rate_schedule(Jurisdiction.FEDERAL, filing_status)
        excess_agi = max(agi - schedule.niit_threshold, ZERO)
        niit_base = min(max(investment_income, ZERO), excess_agi)
        return niit_base * NIIT_RATE

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def compute_state(
        self,
        inputs: IncomeInputs,
        filing_status: FilingStatus | str,
        jurisdiction: Jurisdiction | str,
    ) -> StateResult | None:
        """Compute simplified state income tax on federal AGI.

        Returns None when no state is selected.
        """
        filing_status = parse_filing_status(filing_status)
        jurisdiction = parse_jurisdiction(jurisdiction)
        if jurisdiction is Jurisdiction.NONE:
            return None
        if jurisdiction is Jurisdiction.FEDERAL:
            raise InvalidArgumentError(
                "state jurisdiction", jurisdiction.value,
                [j.value for j in Jurisdiction if j is not Jurisdiction.FEDERAL],
            )

        name = jurisdiction_name(jurisdiction)
        schedule = get_rate_schedule(jurisdiction, filing_status)
        if schedule.no_tax:
            return StateResult(
                jurisdiction=jurisdiction,
                jurisdiction_name=name,
                total_tax=ZERO,
                no_tax_state=True,
            )

        # State AGI reuses federal AGI; no state-specific adjustments
        agi = classify_income(inputs).total
        state_taxable = max(agi - schedule.standard_deduction, ZERO)
        if schedule.is_flat:
            state_tax = state_taxable * schedule.sole_rate
        else:
            state_tax = compute_bracket_tax(state_taxable, schedule.brackets)

        logger.debug(
            "State %s %s: taxable=%s tax=%s",
            jurisdiction.value, filing_status.value, state_taxable, state_tax,
        )

        return StateResult(
            jurisdiction=jurisdiction,
            jurisdiction_name=name,
            total_tax=max(state_tax, ZERO),
            taxable_income=state_taxable,
        )
