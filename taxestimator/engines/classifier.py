"""Income classification: ordinary vs. preferential income."""

from decimal import Decimal
from typing import NamedTuple

from taxestimator.models.inputs import IncomeInputs

ZERO = Decimal("0")


class ClassifiedIncome(NamedTuple):
    ordinary: Decimal
    preferential: Decimal

    @property
    def total(self) -> Decimal:
        return self.ordinary + self.preferential


def classify_income(inputs: IncomeInputs) -> ClassifiedIncome:
    """Split inputs into ordinary and preferential totals.

    A Schedule E loss does not reduce ordinary income here; only a net
    Schedule E gain is added.
    """
    ordinary = (
        inputs.wages
        + inputs.interest
        + inputs.ordinary_dividends
        + inputs.short_term_gains
        + max(inputs.schedule_e_income, ZERO)
    )
    preferential = inputs.qualified_dividends + inputs.long_term_gains
    return ClassifiedIncome(ordinary=ordinary, preferential=preferential)


def net_investment_income(inputs: IncomeInputs) -> Decimal:
    """Net investment income for NIIT. A Schedule E loss reduces it."""
    return (
        inputs.interest
        + inputs.ordinary_dividends
        + inputs.short_term_gains
        + inputs.long_term_gains
        + inputs.schedule_e_income
    )
