"""Data models for Tax Estimator."""

from taxestimator.models.enums import FilingStatus, Jurisdiction
from taxestimator.models.inputs import IncomeInputs, ScheduleE, parse_amount
from taxestimator.models.results import CalculationResult, FederalResult, StateResult
from taxestimator.models.schedules import Bracket, RateSchedule

__all__ = [
    "Bracket",
    "CalculationResult",
    "FederalResult",
    "FilingStatus",
    "IncomeInputs",
    "Jurisdiction",
    "RateSchedule",
    "ScheduleE",
    "StateResult",
    "parse_amount",
]
