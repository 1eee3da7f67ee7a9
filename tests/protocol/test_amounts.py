"""Tests for token amount conversions and the safe borrow amount."""

from decimal import Decimal
from fractions import Fraction

import pytest

from aave_borrow.protocol.amounts import compute_borrow_amount, to_base_units, to_decimal

ONE_ETH = 10**18
# 1 DAI = 0.0005 ETH (ETH at 2000 DAI), 18-decimal Chainlink answer
DAI_PRICE = 5 * 10**14


class TestToDecimal:
    def test_whole_units(self) -> None:
        assert to_decimal(3 * ONE_ETH, 18) == Decimal(3)

    def test_fractional_units(self) -> None:
        assert to_decimal(1_500_000_000_000_000_000, 18) == Decimal("1.5")

    def test_zero(self) -> None:
        assert to_decimal(0, 18) == 0
        assert str(to_decimal(0, 18)) == "0"

    def test_eight_decimals(self) -> None:
        assert to_decimal(99_850_000, 8) == Decimal("0.9985")

    def test_no_float_rounding(self) -> None:
        assert str(to_decimal(123_456_789_012_345_678_901, 18)) == "123.456789012345678901"


class TestToBaseUnits:
    def test_decimal(self) -> None:
        assert to_base_units(Decimal("1.5"), 18) == 15 * 10**17

    def test_int(self) -> None:
        assert to_base_units(2, 6) == 2_000_000

    def test_rounds_down(self) -> None:
        assert to_base_units(Fraction(1, 3), 2) == 33
        assert to_base_units(Fraction(2, 3), 2) == 66

    def test_inverse_of_to_decimal(self) -> None:
        raw = 987_654_321_000_000_123
        assert to_base_units(to_decimal(raw, 18), 18) == raw


class TestComputeBorrowAmount:
    def test_one_eth_of_borrowing_power(self) -> None:
        # 0.95 ETH / 0.0005 ETH per DAI = 1900 DAI
        assert compute_borrow_amount(ONE_ETH, DAI_PRICE) == 1900 * 10**18

    def test_eight_decimal_price_feed(self) -> None:
        amount = compute_borrow_amount(2 * ONE_ETH, 50_000, price_decimals=8)
        assert amount == 3800 * 10**18

    def test_six_decimal_token(self) -> None:
        amount = compute_borrow_amount(ONE_ETH, DAI_PRICE, token_decimals=6)
        assert amount == 1900 * 10**6

    def test_custom_margin(self) -> None:
        amount = compute_borrow_amount(ONE_ETH, DAI_PRICE, margin=Decimal("0.5"))
        assert amount == 1000 * 10**18

    @pytest.mark.parametrize(
        "available, price",
        [
            (1, 1),
            (10**18, 3 * 10**14),
            (7_777_777_777_777_777, 333_333_333_333_333),
            (45_123_456_789_000_000_000, 289_000_123_456_789),
            (10**15, 10**18 + 1),
        ],
    )
    def test_within_one_unit_of_formula(self, available: int, price: int) -> None:
        exact = Fraction(available) * Fraction(95, 100) / Fraction(price) * 10**18
        amount = compute_borrow_amount(available, price)
        assert amount <= exact
        assert exact - amount < 1

    def test_matches_float_formula(self) -> None:
        available = 12_345_678_900_000_000
        expected = (available / 1e18) * 0.95 * (1 / (DAI_PRICE / 1e18))
        amount = compute_borrow_amount(available, DAI_PRICE)
        assert amount / 1e18 == pytest.approx(expected, rel=1e-12)

    def test_zero_available_borrows(self) -> None:
        assert compute_borrow_amount(0, DAI_PRICE) == 0

    def test_zero_price_rejected(self) -> None:
        with pytest.raises(ValueError, match="price must be positive"):
            compute_borrow_amount(ONE_ETH, 0)

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValueError):
            compute_borrow_amount(ONE_ETH, -1)
