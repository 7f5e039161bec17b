"""
Тесты для fixed-point денежной арифметики

Проверяет:
1. Конверсию входа в Decimal (float через str, отказ от NaN/Inf)
2. round2 и режимы округления
3. Конверсию центов в обе стороны
"""

from decimal import ROUND_HALF_EVEN, Decimal

import pytest

from src.core.math import (
    format_amount,
    from_cents,
    is_whole_cents,
    round2,
    subtract,
    to_cents,
    to_decimal,
)


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_float_has_no_binary_drift(self) -> None:
        """float конвертируется через str"""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(19.95) == Decimal("19.95")

    def test_string_and_int(self) -> None:
        assert to_decimal("47.50") == Decimal("47.50")
        assert to_decimal(" 33.33 ") == Decimal("33.33")
        assert to_decimal(100) == Decimal("100")

    def test_decimal_passthrough(self) -> None:
        value = Decimal("1.005")
        assert to_decimal(value) is value

    def test_not_a_number_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be a number"):
            to_decimal("abc")

    def test_none_rejected(self) -> None:
        with pytest.raises(ValueError, match="NoneType"):
            to_decimal(None)  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        """bool — подкласс int, но не сумма"""
        with pytest.raises(ValueError, match="bool"):
            to_decimal(True)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "NaN"])
    def test_non_finite_rejected(self, value) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            to_decimal(value)


class TestRound2:
    """Тесты для round2"""

    def test_half_up_default(self) -> None:
        assert round2(Decimal("0.005")) == Decimal("0.01")
        assert round2(Decimal("0.015")) == Decimal("0.02")
        assert round2(Decimal("0.025")) == Decimal("0.03")

    def test_half_even_when_requested(self) -> None:
        assert round2(Decimal("0.025"), ROUND_HALF_EVEN) == Decimal("0.02")
        assert round2(Decimal("0.005"), ROUND_HALF_EVEN) == Decimal("0.00")

    def test_always_two_places(self) -> None:
        assert str(round2(Decimal("2.5"))) == "2.50"
        assert str(round2(Decimal("100"))) == "100.00"

    def test_beyond_default_precision(self) -> None:
        """Значения длиннее 28 цифр не бросают InvalidOperation"""
        assert round2(Decimal(10**29)) == Decimal(f"{10**29}.00")
        assert str(round2(Decimal("1E+30"))).endswith(".00")


class TestCents:
    """Тесты конверсий Decimal ↔ центы"""

    def test_to_cents(self) -> None:
        assert to_cents(Decimal("16.67")) == 1667
        assert to_cents(Decimal("0.05")) == 5
        assert to_cents(Decimal("100")) == 10_000

    def test_to_cents_rounds(self) -> None:
        assert to_cents(Decimal("0.005")) == 1

    def test_from_cents(self) -> None:
        assert from_cents(1667) == Decimal("16.67")
        assert str(from_cents(5)) == "0.05"
        assert str(from_cents(0)) == "0.00"

    def test_huge_values_exact(self) -> None:
        assert from_cents(10**31) == Decimal(10**29)
        assert str(from_cents(10**31 + 5)) == f"{10**29}.05"
        assert to_cents(Decimal(f"{10**29}.05")) == 10**31 + 5

    def test_negative_cents(self) -> None:
        assert from_cents(-105) == Decimal("-1.05")
        assert to_cents(Decimal("-1.05")) == -105

    def test_subtract_keeps_every_digit(self) -> None:
        assert subtract(Decimal(10**29), Decimal("0.05")) == Decimal(f"{10**29 - 1}.95")

    def test_is_whole_cents(self) -> None:
        assert is_whole_cents(Decimal("0.10"))
        assert is_whole_cents(Decimal("100"))
        assert not is_whole_cents(Decimal("0.105"))


def test_format_amount() -> None:
    assert format_amount(Decimal("2.5")) == "$2.50"
    assert format_amount(Decimal("0")) == "$0.00"
