"""Token amount conversions and the safe borrow amount."""

from decimal import Decimal
from fractions import Fraction

from aave_borrow.data.constants import (
    BASE_CURRENCY_DECIMALS,
    BORROW_SAFETY_MARGIN,
    DAI_DECIMALS,
)


def to_decimal(amount: int, decimals: int) -> Decimal:
    """Convert a minimal-unit integer to a human-readable Decimal.

    ``to_decimal(1_500_000_000_000_000_000, 18) == Decimal("1.5")``
    """
    if amount == 0:
        return Decimal(0)
    sign, digits, _ = Decimal(amount).as_tuple()
    return Decimal((sign, digits, -decimals))


def to_base_units(value: Decimal | Fraction | int, decimals: int) -> int:
    """Convert a human-readable value to minimal units, rounding down."""
    scaled = Fraction(value) * 10**decimals
    return scaled.numerator // scaled.denominator


def compute_borrow_amount(
    available_borrows: int,
    price: int,
    margin: Decimal = BORROW_SAFETY_MARGIN,
    base_decimals: int = BASE_CURRENCY_DECIMALS,
    price_decimals: int = 18,
    token_decimals: int = DAI_DECIMALS,
) -> int:
    """Amount of the borrowed token worth ``margin`` of the available borrows.

    amount = available_borrows * margin / price

    ``available_borrows`` is in base-currency minimal units and ``price`` is
    the token's price in base currency, scaled by ``10**price_decimals``.
    The result is in the token's minimal units, rounded down so the request
    never exceeds the margin.
    """
    if price <= 0:
        raise ValueError(f"price must be positive, got {price}")
    if available_borrows <= 0:
        return 0

    available = Fraction(available_borrows, 10**base_decimals)
    unit_price = Fraction(price, 10**price_decimals)
    return to_base_units(available * Fraction(margin) / unit_price, token_decimals)
