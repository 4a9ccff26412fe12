"""Rate schedule models.

A rate schedule describes one jurisdiction's treatment of one filing status.
Schedules are frozen once built; the bracket ordering rules are checked at
construction so a malformed table fails at import time, not mid-calculation.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Bracket(BaseModel):
    """One slice of a progressive schedule. ``upper_limit`` of None is unbounded."""

    model_config = ConfigDict(frozen=True)

    rate: Decimal = Field(ge=0, le=1)
    upper_limit: Decimal | None = None

    @property
    def is_unbounded(self) -> bool:
        return self.upper_limit is None


def _check_brackets(name: str, brackets: tuple[Bracket, ...]) -> None:
    if not brackets:
        raise ValueError(f"{name} must contain at least one bracket")
    if not brackets[-1].is_unbounded:
        raise ValueError(f"{name}: last bracket must be unbounded")
    prev = Decimal("0")
    for bracket in brackets[:-1]:
        if bracket.is_unbounded:
            raise ValueError(f"{name}: only the last bracket may be unbounded")
        if bracket.upper_limit <= prev:
            raise ValueError(
                f"{name}: limits must be strictly increasing "
                f"({bracket.upper_limit} <= {prev})"
            )
        prev = bracket.upper_limit


class RateSchedule(BaseModel):
    """Deduction, brackets and surtax thresholds for one filing status."""

    model_config = ConfigDict(frozen=True)

    standard_deduction: Decimal = Field(default=Decimal("0"), ge=0)
    brackets: tuple[Bracket, ...] = ()
    # Federal only
    preferential_brackets: tuple[Bracket, ...] | None = None
    niit_threshold: Decimal | None = None
    medicare_threshold: Decimal | None = None
    no_tax: bool = False
    is_flat: bool = False

    @model_validator(mode="after")
    def _validate_brackets(self) -> "RateSchedule":
        if self.no_tax:
            if self.brackets:
                raise ValueError("a no-tax schedule cannot carry brackets")
            return self
        _check_brackets("brackets", self.brackets)
        if self.preferential_brackets is not None:
            _check_brackets("preferential_brackets", self.preferential_brackets)
        if self.is_flat and len(self.brackets) != 1:
            raise ValueError("a flat schedule has exactly one bracket")
        return self

    @property
    def sole_rate(self) -> Decimal:
        """Rate of a flat schedule."""
        if not self.is_flat:
            raise ValueError("sole_rate is only defined for flat schedules")
        return self.brackets[0].rate
