"""Tax computation engines."""

from taxestimator.engines.bracket_tax import compute_bracket_tax, compute_stacked_tax
from taxestimator.engines.classifier import ClassifiedIncome, classify_income
from taxestimator.engines.estimator import TaxEstimator

__all__ = [
    "ClassifiedIncome",
    "TaxEstimator",
    "classify_income",
    "compute_bracket_tax",
    "compute_stacked_tax",
]
