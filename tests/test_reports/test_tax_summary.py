"""Tests for the tax summary report and currency formatting."""

from decimal import Decimal

import pytest

from taxestimator.models.enums import FilingStatus, Jurisdiction
from taxestimator.models.inputs import IncomeInputs
from taxestimator.reports import TaxSummaryGenerator, format_currency


class TestFormatCurrency:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("0"), "$0.00"),
            (Decimal("1234.5"), "$1,234.50"),
            (Decimal("9977.142"), "$9,977.14"),
            (Decimal("0.005"), "$0.01"),
            (Decimal("-2000"), "-$2,000.00"),
            (1500000, "$1,500,000.00"),
            (12.345, "$12.35"),
        ],
    )
    def test_format(self, value, expected):
        assert format_currency(value) == expected


class TestTaxSummaryReportGeneration:
    def test_render_balance_due(self, engine, wage_earner):
        result = engine.estimate(wage_earner, FilingStatus.SINGLE)
        content = TaxSummaryGenerator().render(result)
        assert "2025 Tax Estimate Summary" in content
        assert "single" in content
        assert "ESTIMATED AMOUNT OWED" in content
        assert "$232.00" in content
        assert "$25,232.00" in content
        assert "STATE TAX" not in content

    def test_render_refund(self, engine):
        inputs = IncomeInputs(
            wages=Decimal("150000"),
            tax_credits=Decimal("15232"),
            tax_withheld=Decimal("12000"),
        )
        content = TaxSummaryGenerator().render(engine.estimate(inputs, FilingStatus.SINGLE))
        assert "ESTIMATED REFUND" in content
        assert "$2,000.00" in content
        assert "-$2,000.00" not in content

    def test_render_state(self, engine, wage_earner):
        result = engine.estimate(wage_earner, FilingStatus.SINGLE, Jurisdiction.CALIFORNIA)
        content = TaxSummaryGenerator().render(result)
        assert "CALIFORNIA STATE TAX" in content
        assert "$144,460.00" in content
        assert "$9,977.14" in content

    def test_render_no_tax_state(self, engine, wage_earner):
        result = engine.estimate(wage_earner, FilingStatus.SINGLE, Jurisdiction.FLORIDA)
        content = TaxSummaryGenerator().render(result)
        assert "Florida has no state income tax." in content

    def test_render_surtaxes(self, engine):
        inputs = IncomeInputs(wages=Decimal("250000"), interest=Decimal("10000"))
        content = TaxSummaryGenerator().render(engine.estimate(inputs, FilingStatus.SINGLE))
        assert "Add'l Medicare Tax:     $450.00" in content
        assert "Net Investment Income Tax: $380.00" in content

    def test_render_warnings(self, engine):
        inputs = IncomeInputs(wages=Decimal("90000"), schedule_e_income=Decimal("-8000"))
        content = TaxSummaryGenerator().render(engine.estimate(inputs, FilingStatus.SINGLE))
        assert "WARNINGS" in content
        assert "Schedule E loss of $8,000.00" in content
