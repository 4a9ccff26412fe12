"""Tax rate table configuration.

Federal and state standard deductions, brackets and surtax thresholds for the
2025 tax year, keyed by jurisdiction and filing status. Never hardcode
brackets in computation functions.

The table is built once at import time from frozen models and exposed through
read-only mappings.
"""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from taxestimator.exceptions import InvalidArgumentError, RateScheduleNotFoundError
from taxestimator.models.enums import FilingStatus, Jurisdiction
from taxestimator.models.schedules import Bracket, RateSchedule

TAX_YEAR = 2025


def _brackets(*rows: tuple[str | None, str]) -> tuple[Bracket, ...]:
    """Build brackets from (upper_limit, rate) rows. None marks the top bracket."""
    return tuple(
        Bracket(
            rate=Decimal(rate),
            upper_limit=Decimal(upper) if upper is not None else None,
        )
        for upper, rate in rows
    )


# ---------------------------------------------------------------------------
# Surtax rates (statutory, not inflation-adjusted)
# ---------------------------------------------------------------------------
ADDITIONAL_MEDICARE_TAX_RATE = Decimal("0.009")  # IRC Section 3101(b)(2)
NIIT_RATE = Decimal("0.038")  # IRC Section 1411

# ---------------------------------------------------------------------------
# Federal: ordinary brackets, LTCG/qualified dividend brackets, thresholds
# ---------------------------------------------------------------------------
_FEDERAL: dict[FilingStatus, RateSchedule] = {
    FilingStatus.SINGLE: RateSchedule(
        standard_deduction=Decimal("15000"),
        brackets=_brackets(
            ("11950", "0.10"),
            ("48575", "0.12"),
            ("103575", "0.22"),
            ("197725", "0.24"),
            ("251050", "0.32"),
            ("627600", "0.35"),
            (None, "0.37"),
        ),
        preferential_brackets=_brackets(
            ("49230", "0.00"),
            ("541900", "0.15"),
            (None, "0.20"),
        ),
        niit_threshold=Decimal("200000"),
        medicare_threshold=Decimal("200000"),
    ),
    FilingStatus.MFJ: RateSchedule(
        standard_deduction=Decimal("30000"),
        brackets=_brackets(
            ("23900", "0.10"),
            ("97150", "0.12"),
            ("207150", "0.22"),
            ("395450", "0.24"),
            ("502100", "0.32"),
            ("753100", "0.35"),
            (None, "0.37"),
        ),
        preferential_brackets=_brackets(
            ("98460", "0.00"),
            ("606550", "0.15"),
            (None, "0.20"),
        ),
        niit_threshold=Decimal("250000"),
        medicare_threshold=Decimal("250000"),
    ),
    FilingStatus.HOH: RateSchedule(
        standard_deduction=Decimal("22500"),
        brackets=_brackets(
            ("17050", "0.10"),
            ("65100", "0.12"),
            ("103550", "0.22"),
            ("197700", "0.24"),
            ("251050", "0.32"),
            ("627600", "0.35"),
            (None, "0.37"),
        ),
        preferential_brackets=_brackets(
            ("66050", "0.00"),
            ("573700", "0.15"),
            (None, "0.20"),
        ),
        niit_threshold=Decimal("200000"),
        medicare_threshold=Decimal("200000"),
    ),
}

# ---------------------------------------------------------------------------
# Virginia: same brackets for every filing status
# ---------------------------------------------------------------------------
_VIRGINIA_BRACKETS = _brackets(
    ("3000", "0.02"),
    ("5000", "0.03"),
    ("17000", "0.05"),
    (None, "0.0575"),
)
_VIRGINIA: dict[FilingStatus, RateSchedule] = {
    FilingStatus.SINGLE: RateSchedule(
        standard_deduction=Decimal("8000"), brackets=_VIRGINIA_BRACKETS
    ),
    FilingStatus.MFJ: RateSchedule(
        standard_deduction=Decimal("16000"), brackets=_VIRGINIA_BRACKETS
    ),
    FilingStatus.HOH: RateSchedule(
        standard_deduction=Decimal("8000"), brackets=_VIRGINIA_BRACKETS
    ),
}

# ---------------------------------------------------------------------------
# California
# ---------------------------------------------------------------------------
_CALIFORNIA: dict[FilingStatus, RateSchedule] = {
    FilingStatus.SINGLE: RateSchedule(
        standard_deduction=Decimal("5540"),
        brackets=_brackets(
            ("10756", "0.01"),
            ("25499", "0.02"),
            ("40245", "0.04"),
            ("55866", "0.06"),
            ("70606", "0.08"),
            ("360659", "0.093"),
            ("432787", "0.103"),
            ("721314", "0.113"),
            (None, "0.123"),
        ),
    ),
    FilingStatus.MFJ: RateSchedule(
        standard_deduction=Decimal("11080"),
        brackets=_brackets(
            ("21512", "0.01"),
            ("50998", "0.02"),
            ("80490", "0.04"),
            ("111732", "0.06"),
            ("141212", "0.08"),
            ("721318", "0.093"),
            ("865574", "0.103"),
            ("1442628", "0.113"),
            (None, "0.123"),
        ),
    ),
    FilingStatus.HOH: RateSchedule(
        standard_deduction=Decimal("11080"),
        brackets=_brackets(
            ("21527", "0.01"),
            ("51000", "0.02"),
            ("65744", "0.04"),
            ("81364", "0.06"),
            ("97329", "0.08"),
            ("489637", "0.093"),
            ("587563", "0.103"),
            ("979273", "0.113"),
            (None, "0.123"),
        ),
    ),
}

# ---------------------------------------------------------------------------
# New York
# ---------------------------------------------------------------------------
_NEW_YORK: dict[FilingStatus, RateSchedule] = {
    FilingStatus.SINGLE: RateSchedule(
        standard_deduction=Decimal("8000"),
        brackets=_brackets(
            ("8500", "0.04"),
            ("11700", "0.045"),
            ("13900", "0.0525"),
            ("80650", "0.055"),
            ("215400", "0.06"),
            ("1077550", "0.0685"),
            ("5000000", "0.0965"),
            ("25000000", "0.103"),
            (None, "0.109"),
        ),
    ),
    FilingStatus.MFJ: RateSchedule(
        standard_deduction=Decimal("16050"),
        brackets=_brackets(
            ("17150", "0.04"),
            ("23600", "0.045"),
            ("27900", "0.0525"),
            ("161550", "0.055"),
            ("323200", "0.06"),
            ("2155350", "0.0685"),
            ("5000000", "0.0965"),
            ("25000000", "0.103"),
            (None, "0.109"),
        ),
    ),
    FilingStatus.HOH: RateSchedule(
        standard_deduction=Decimal("11200"),
        brackets=_brackets(
            ("12800", "0.04"),
            ("17650", "0.045"),
            ("20900", "0.0525"),
            ("107650", "0.055"),
            ("269300", "0.06"),
            ("1616450", "0.0685"),
            ("5000000", "0.0965"),
            ("25000000", "0.103"),
            (None, "0.109"),
        ),
    ),
}

# ---------------------------------------------------------------------------
# North Carolina: flat 4.25%
# ---------------------------------------------------------------------------
_NC_BRACKETS = _brackets((None, "0.0425"))
_NORTH_CAROLINA: dict[FilingStatus, RateSchedule] = {
    FilingStatus.SINGLE: RateSchedule(
        standard_deduction=Decimal("12750"), brackets=_NC_BRACKETS, is_flat=True
    ),
    FilingStatus.MFJ: RateSchedule(
        standard_deduction=Decimal("25500"), brackets=_NC_BRACKETS, is_flat=True
    ),
    FilingStatus.HOH: RateSchedule(
        standard_deduction=Decimal("19125"), brackets=_NC_BRACKETS, is_flat=True
    ),
}

# ---------------------------------------------------------------------------
# No income tax
# ---------------------------------------------------------------------------
_NO_TAX = RateSchedule(no_tax=True)
_NO_TAX_SCHEDULES: dict[FilingStatus, RateSchedule] = {
    status: _NO_TAX for status in FilingStatus
}

RATE_TABLE: Mapping[Jurisdiction, Mapping[FilingStatus, RateSchedule]] = MappingProxyType(
    {
        Jurisdiction.FEDERAL: MappingProxyType(_FEDERAL),
        Jurisdiction.CALIFORNIA: MappingProxyType(_CALIFORNIA),
        Jurisdiction.FLORIDA: MappingProxyType(_NO_TAX_SCHEDULES),
        Jurisdiction.NEW_YORK: MappingProxyType(_NEW_YORK),
        Jurisdiction.NORTH_CAROLINA: MappingProxyType(_NORTH_CAROLINA),
        Jurisdiction.TEXAS: MappingProxyType(_NO_TAX_SCHEDULES),
        Jurisdiction.VIRGINIA: MappingProxyType(_VIRGINIA),
    }
)

JURISDICTION_NAMES: Mapping[Jurisdiction, str] = MappingProxyType(
    {
        Jurisdiction.FEDERAL: "Federal",
        Jurisdiction.CALIFORNIA: "California",
        Jurisdiction.FLORIDA: "Florida",
        Jurisdiction.NEW_YORK: "New York",
        Jurisdiction.NORTH_CAROLINA: "North Carolina",
        Jurisdiction.TEXAS: "Texas",
        Jurisdiction.VIRGINIA: "Virginia",
        Jurisdiction.NONE: "Select State",
    }
)

STATE_JURISDICTIONS: tuple[Jurisdiction, ...] = tuple(
    j for j in Jurisdiction if j is not Jurisdiction.FEDERAL
)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def parse_filing_status(value: FilingStatus | str) -> FilingStatus:
    """Resolve a case-sensitive filing-status key to the enum."""
    if isinstance(value, FilingStatus):
        return value
    try:
        return FilingStatus(value)
    except ValueError:
        raise InvalidArgumentError(
            "filing status", value, [s.value for s in FilingStatus]
        ) from None


def parse_jurisdiction(value: Jurisdiction | str) -> Jurisdiction:
    """Resolve a case-sensitive jurisdiction key to the enum."""
    if isinstance(value, Jurisdiction):
        return value
    try:
        return Jurisdiction(value)
    except ValueError:
        raise InvalidArgumentError(
            "jurisdiction", value, [j.value for j in Jurisdiction]
        ) from None


def jurisdiction_name(jurisdiction: Jurisdiction | str) -> str:
    return JURISDICTION_NAMES[parse_jurisdiction(jurisdiction)]


def is_no_tax_jurisdiction(jurisdiction: Jurisdiction | str) -> bool:
    """True for jurisdictions that levy no income tax at all."""
    schedules = RATE_TABLE.get(parse_jurisdiction(jurisdiction))
    if schedules is None:
        return False
    return all(schedule.no_tax for schedule in schedules.values())


def get_rate_schedule(
    jurisdiction: Jurisdiction | str, filing_status: FilingStatus | str
) -> RateSchedule:
    """Return the rate schedule for a jurisdiction and filing status."""
    jurisdiction = parse_jurisdiction(jurisdiction)
    filing_status = parse_filing_status(filing_status)
    schedules = RATE_TABLE.get(jurisdiction)
    if schedules is None:
        raise RateScheduleNotFoundError(jurisdiction.value, "no state selected")
    return schedules[filing_status]
