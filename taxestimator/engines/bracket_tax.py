"""Progressive bracket walk shared by every schedule."""

from collections.abc import Sequence
from decimal import Decimal

from taxestimator.models.schedules import Bracket

ZERO = Decimal("0")


def compute_bracket_tax(
    amount: Decimal,
    brackets: Sequence[Bracket],
    start_offset: Decimal = ZERO,
) -> Decimal:
    """Apply progressive brackets to ``amount``.

    The amount occupies bracket space from ``start_offset`` upward. Each
    bracket taxes the part of the remaining amount that fits between the
    cursor and its upper limit; the unbounded bracket takes whatever is left.
    With the default offset of zero this is the ordinary bracket walk.
    """
    tax = ZERO
    remaining = amount
    position = start_offset

    for bracket in brackets:
        if remaining <= ZERO:
            break
        if bracket.upper_limit is None:
            taxed_here = remaining
        else:
            room = max(bracket.upper_limit - position, ZERO)
            taxed_here = min(remaining, room)
        tax += taxed_here * bracket.rate
        remaining -= taxed_here
        position += taxed_here

    return tax


def compute_stacked_tax(
    amount: Decimal,
    brackets: Sequence[Bracket],
    stacked_on: Decimal,
) -> Decimal:
    """Tax ``amount`` as if it sits on top of ``stacked_on`` of other income.

    Used for qualified dividends and long-term gains, whose rate tiers are
    keyed on total taxable income rather than on the preferential amount alone.
    """
    return compute_bracket_tax(amount, brackets, start_offset=max(stacked_on, ZERO))
