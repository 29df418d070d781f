"""
Тесты для Multiplier

Проверяет:
1. Дистрибутивное умножение (I_a + F_a)(I_b + F_b) на целых
2. Знак произведения (XOR знаков операндов)
3. n-арную свёртку, научную нотацию, ILLEGAL_NUMBER и overflow guard
4. Коммутативность и согласованность со сложением
"""

import pytest

from src.arithmetic import ArithmeticConfig, add, multiply, multiply_numbers
from src.arithmetic.multiplier import rescale_product
from src.core.domain import ArithmeticStatus
from src.core.math.parser import parse


class TestBinaryMultiply:
    """Тесты для multiply(a, b)"""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("2.5", "4", "10"),
            ("-1.5", "1.5", "-2.25"),
            ("1.2", "1.5", "1.8"),
            ("0.1", "0.1", "0.01"),
            ("12.34", "5.6", "69.104"),
            ("-0.5", "-0.5", "0.25"),
            ("3", "-4", "-12"),
            ("7", "6", "42"),
        ],
    )
    def test_product(self, a: str, b: str, expected: str) -> None:
        result = multiply(a, b)

        assert result.status == ArithmeticStatus.SUCCESS
        assert result.literal == expected

    @pytest.mark.parametrize("a,b", [("0", "-2.5"), ("-0.5", "0"), ("-0", "-3")])
    def test_zero_product_non_negative(self, a: str, b: str) -> None:
        result = multiply(a, b)

        assert result.literal == "0"
        assert not result.value.is_negative

    def test_large_exact(self) -> None:
        assert multiply("9999999999", "9999999999").literal == "99999999980000000001"


class TestNaryMultiply:
    """Тесты для multiply(*operands)"""

    def test_three_operands(self) -> None:
        assert multiply("2", "3", "4").literal == "24"

    def test_decimal_operands(self) -> None:
        assert multiply("1.5", "2", "2").literal == "6"

    def test_single_operand(self) -> None:
        assert multiply("-0.50").literal == "-0.50"

    def test_no_operands(self) -> None:
        assert multiply().status == ArithmeticStatus.GENERAL_FAILURE


class TestScientificMultiply:
    def test_scientific_operand(self) -> None:
        assert multiply("1.5e2", "2").literal == "3.0e2"

    def test_negative_exponent(self) -> None:
        assert multiply("2.5e-1", "-2").literal == "-5.0e-1"


class TestMultiplyErrors:
    def test_illegal_operand(self) -> None:
        result = multiply("2", "x")

        assert result.status == ArithmeticStatus.ILLEGAL_NUMBER
        assert result.offending_literal == "x"

    def test_overflow_guard(self) -> None:
        config = ArithmeticConfig(overflow_guard=True)

        result = multiply("9999999999", "9999999999", config=config)

        assert result.status == ArithmeticStatus.GENERAL_FAILURE


class TestMultiplyProperties:
    """Свойства умножения"""

    @pytest.mark.parametrize(
        "a,b",
        [("12.34", "5.6"), ("-0.001", "250"), ("3.5", "-0.25"), ("1000", "0.0001")],
    )
    def test_commutative(self, a: str, b: str) -> None:
        assert multiply(a, b).literal == multiply(b, a).literal

    @pytest.mark.parametrize("literal", ["0", "1.5", "-12.34", "0.001", "1.5e2"])
    def test_one_is_identity(self, literal: str) -> None:
        assert multiply(literal, "1").value.to_literal() == parse(literal).value.to_literal()

    def test_multiplication_by_integer_is_repeated_addition(self) -> None:
        assert multiply("1.25", "3").literal == add("1.25", "1.25", "1.25").literal


class TestRescaleProduct:
    """Тесты для rescale_product"""

    def test_no_fraction(self) -> None:
        assert rescale_product(42, 0).to_literal() == "42"

    def test_split(self) -> None:
        assert rescale_product(204, 3).to_literal() == "0.204"
        assert rescale_product(72, 1).to_literal() == "7.2"

    def test_multiply_numbers_keeps_scientific_flag(self) -> None:
        value = multiply_numbers(parse("1e1").value, parse("2").value)

        assert value.to_literal() == "20"
        assert value.source_was_scientific


class TestMultiplyLongOperands:
    """Операнды и произведения длиннее лимита int <-> str интерпретатора"""

    def test_product_too_long(self, int_digit_limit) -> None:
        result = multiply("9" * 3000, "9" * 3000)

        assert result.status == ArithmeticStatus.GENERAL_FAILURE

    def test_fraction_too_long(self, int_digit_limit) -> None:
        assert multiply("0." + "3" * 5000, "2").status == ArithmeticStatus.GENERAL_FAILURE

    def test_within_limit(self, int_digit_limit) -> None:
        assert multiply("1" + "0" * 2000, "1" + "0" * 2000).literal == "1" + "0" * 4000
