"""Report generation for Tax Estimator."""

from taxestimator.reports.formatting import format_currency
from taxestimator.reports.tax_summary import TaxSummaryGenerator

__all__ = [
    "TaxSummaryGenerator",
    "format_currency",
]
