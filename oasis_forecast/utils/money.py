"""Currency helpers"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def round_cents(amount: Decimal) -> Decimal:
    """Round to the currency's minor unit, half away from zero"""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal) -> str:
    """
    Render a magnitude for event notes.

    Whole amounts drop the fraction ("850"), others keep two decimals ("850.50").
    """
    rounded = round_cents(abs(amount))
    if rounded == rounded.to_integral_value():
        return f"{rounded:.0f}"
    return f"{rounded:.2f}"


def to_cents(amount: Decimal) -> int:
    """Convert a decimal amount to integer minor units"""
    return int(round_cents(amount) * 100)
