"""Shared test fixtures for Tax Estimator."""

from decimal import Decimal

import pytest

from taxestimator.engines.estimator import TaxEstimator
from taxestimator.models.inputs import IncomeInputs, ScheduleE


@pytest.fixture
def engine() -> TaxEstimator:
    return TaxEstimator()


@pytest.fixture
def wage_earner() -> IncomeInputs:
    """Single filer, $150k wages, $25k withheld."""
    return IncomeInputs(wages=Decimal("150000"), tax_withheld=Decimal("25000"))


@pytest.fixture
def investor() -> IncomeInputs:
    """Wages plus a mix of ordinary and preferential investment income."""
    return IncomeInputs(
        wages=Decimal("180000"),
        interest=Decimal("4000"),
        ordinary_dividends=Decimal("6000"),
        qualified_dividends=Decimal("5000"),
        short_term_gains=Decimal("3000"),
        long_term_gains=Decimal("40000"),
        tax_withheld=Decimal("40000"),
    )


@pytest.fixture
def rental_loss() -> ScheduleE:
    return ScheduleE(
        rental_income=Decimal("24000"),
        rental_expenses=Decimal("30000"),
        passthrough_income=Decimal("1000"),
    )
