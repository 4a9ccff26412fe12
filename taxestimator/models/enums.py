"""Enumerations for Tax Estimator."""

from enum import StrEnum


class FilingStatus(StrEnum):
    SINGLE = "single"
    MFJ = "marriedFilingJointly"
    HOH = "headOfHousehold"


class Jurisdiction(StrEnum):
    FEDERAL = "federal"
    CALIFORNIA = "california"
    FLORIDA = "florida"
    NEW_YORK = "newYork"
    NORTH_CAROLINA = "northCarolina"
    TEXAS = "texas"
    VIRGINIA = "virginia"
    NONE = "none"  # no state selected
