"""Tax estimate summary report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from taxestimator.engines.brackets import TAX_YEAR
from taxestimator.models.results import CalculationResult
from taxestimator.reports.formatting import format_currency

TEMPLATE_DIR = Path(__file__).parent / "templates"


class TaxSummaryGenerator:
    """Generates a human-readable tax estimate summary report."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))
        self.env.filters["currency"] = format_currency

    def render(self, result: CalculationResult) -> str:
        """Render tax estimate summary report."""
        template = self.env.get_template("tax_summary.txt")
        return template.render(
            federal=result.federal,
            state=result.state,
            tax_year=TAX_YEAR,
        )
