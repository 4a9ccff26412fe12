"""Tests for income classification."""

from decimal import Decimal

from taxestimator.engines.classifier import classify_income, net_investment_income
from taxestimator.models.inputs import IncomeInputs


class TestClassifyIncome:
    def test_all_zero(self):
        income = classify_income(IncomeInputs())
        assert income.ordinary == Decimal("0")
        assert income.preferential == Decimal("0")
        assert income.total == Decimal("0")

    def test_split(self, investor):
        income = classify_income(investor)
        # 180000 + 4000 + 6000 + 3000
        assert income.ordinary == Decimal("193000")
        # 5000 + 40000
        assert income.preferential == Decimal("45000")
        assert income.total == Decimal("238000")

    def test_positive_schedule_e_is_ordinary(self):
        income = classify_income(
            IncomeInputs(wages=Decimal("50000"), schedule_e_income=Decimal("12000"))
        )
        assert income.ordinary == Decimal("62000")

    def test_schedule_e_loss_excluded(self):
        income = classify_income(
            IncomeInputs(wages=Decimal("50000"), schedule_e_income=Decimal("-12000"))
        )
        assert income.ordinary == Decimal("50000")

    def test_payments_and_deductions_ignored(self):
        income = classify_income(
            IncomeInputs(
                charitable_contribution=Decimal("5000"),
                tax_withheld=Decimal("9000"),
                tax_credits=Decimal("2000"),
            )
        )
        assert income.total == Decimal("0")


class TestNetInvestmentIncome:
    def test_excludes_wages_and_qualified_dividends(self, investor):
        # interest + ordinary dividends + ST + LT
        assert net_investment_income(investor) == Decimal("53000")

    def test_schedule_e_loss_reduces(self):
        inputs = IncomeInputs(interest=Decimal("10000"), schedule_e_income=Decimal("-4000"))
        assert net_investment_income(inputs) == Decimal("6000")

    def test_can_be_negative(self):
        inputs = IncomeInputs(schedule_e_income=Decimal("-4000"))
        assert net_investment_income(inputs) == Decimal("-4000")
