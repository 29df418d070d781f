"""
Number Parser — Разбор и нормализация числовых литералов

Грамматика (проверяется по порядку):
1. Integer:    -?[0-9]+
2. Decimal:    -?[0-9]*.[0-9]+   (пустая целая часть → "0")
3. Scientific: <significand>[eE]<exponent>
               significand — Integer или Decimal (со своим знаком),
               exponent — знаковое целое, |exponent| <= MAX_EXPONENT_MAGNITUDE

Всё остальное → ILLEGAL_NUMBER с исходным литералом.

Научная нотация раскрывается сдвигом десятичной точки на exponent позиций:
- exponent > 0: дробные цифры переходят в целую часть, недостаток добивается нулями
- exponent < 0: целые цифры переходят в дробную часть, слева добиваются нули
- exponent == 0: прямое разбиение

Знак хранится отдельно от модуля. source_was_scientific сообщает точке входа
верхнего уровня, что результат нужно вернуть в научной нотации.
"""

import logging
import re
from typing import Any, Final

from src.core.domain.arithmetic_result import ArithmeticResult
from src.core.domain.decimal_number import DecimalNumber

logger = logging.getLogger(__name__)


# =============================================================================
# GRAMMAR
# =============================================================================

INTEGER_PATTERN: Final[re.Pattern] = re.compile(r"(-?)([0-9]+)")
DECIMAL_PATTERN: Final[re.Pattern] = re.compile(r"(-?)([0-9]*)\.([0-9]+)")
SCIENTIFIC_PATTERN: Final[re.Pattern] = re.compile(r"(.*)[eE](.*)", re.DOTALL)
SIGNIFICAND_PATTERN: Final[re.Pattern] = re.compile(r"(-?)([0-9]*)(?:\.([0-9]+))?")
EXPONENT_PATTERN: Final[re.Pattern] = re.compile(r"[-+]?[0-9]+")

# Максимальный |exponent|: раскрытая запись длиннее литерала не более чем на столько цифр
MAX_EXPONENT_MAGNITUDE: Final[int] = 4300

# Ноль без научной нотации: 0, -0, 0.000, .0, -00.00
ZERO_LITERAL_PATTERN: Final[re.Pattern] = re.compile(r"-?(?:0+|0*\.0+)")


# =============================================================================
# PARSE
# =============================================================================


def parse(literal: Any) -> ArithmeticResult:
    """
    Разбор литерала в нормализованное DecimalNumber.

    Args:
        literal: Числовой литерал (str)

    Returns:
        ArithmeticResult:
        - SUCCESS: value = DecimalNumber, literal = исходная строка
        - ILLEGAL_NUMBER: offending_literal = исходная строка

    Examples:
        >>> parse("-12.50").value.to_literal()
        '-12.5'
        >>> parse("1.5e2").value.to_literal()
        '150'
        >>> parse("abc").status.name
        'ILLEGAL_NUMBER'
    """
    if not isinstance(literal, str):
        logger.warning("Illegal number (not a string): %r", literal)
        return ArithmeticResult.illegal_number(literal)

    # 1. Integer
    match = INTEGER_PATTERN.fullmatch(literal)
    if match:
        negative, digits = match.groups()
        number = DecimalNumber.from_parts(digits, "", negative=bool(negative))
        return ArithmeticResult.success(number, literal)

    # 2. Decimal
    match = DECIMAL_PATTERN.fullmatch(literal)
    if match:
        negative, integer_digits, fractional_digits = match.groups()
        number = DecimalNumber.from_parts(
            integer_digits, fractional_digits, negative=bool(negative)
        )
        return ArithmeticResult.success(number, literal)

    # 3. Scientific
    match = SCIENTIFIC_PATTERN.fullmatch(literal)
    if match:
        significand, exponent = match.groups()
        number = _parse_scientific(significand, exponent)
        if number is not None:
            return ArithmeticResult.success(number, literal)

    logger.warning("Illegal number: %r", literal)
    return ArithmeticResult.illegal_number(literal)


def _parse_scientific(significand: str, exponent: str) -> DecimalNumber | None:
    """Раскрытие научной нотации; None если significand/exponent невалидны"""
    sig_match = SIGNIFICAND_PATTERN.fullmatch(significand)
    if not sig_match or not EXPONENT_PATTERN.fullmatch(exponent):
        return None

    negative, sig_integer, sig_fraction = sig_match.groups()
    sig_fraction = sig_fraction or ""
    if not sig_integer and not sig_fraction:
        # "e5", "-e5", "."
        return None

    exponent_value = _bounded_exponent(exponent)
    if exponent_value is None:
        return None

    integer_digits, fractional_digits = shift_decimal_point(
        sig_integer or "0", sig_fraction, exponent_value
    )

    return DecimalNumber.from_parts(
        integer_digits,
        fractional_digits,
        negative=bool(negative),
        source_was_scientific=True,
    )


def _bounded_exponent(exponent: str) -> int | None:
    """Значение exponent; None если |exponent| > MAX_EXPONENT_MAGNITUDE"""
    magnitude = exponent.lstrip("-+").lstrip("0")
    # Длина проверяется до int(): строка цифр сама может быть сколь угодно длинной
    if len(magnitude) > len(str(MAX_EXPONENT_MAGNITUDE)):
        return None
    value = int(exponent, 10)
    if abs(value) > MAX_EXPONENT_MAGNITUDE:
        return None
    return value


def shift_decimal_point(
    integer_digits: str, fractional_digits: str, exponent: int
) -> tuple[str, str]:
    """
    Сдвиг десятичной точки на exponent позиций.

    Args:
        integer_digits: Цифры целой части significand
        fractional_digits: Цифры дробной части significand
        exponent: Положительный — вправо, отрицательный — влево

    Returns:
        (integer_digits, fractional_digits) после сдвига

    Examples:
        >>> shift_decimal_point("1", "5", 2)
        ('150', '')
        >>> shift_decimal_point("1", "2345", 2)
        ('123', '45')
        >>> shift_decimal_point("2", "44", -3)
        ('0', '00244')
        >>> shift_decimal_point("1234", "5", -2)
        ('12', '345')
    """
    if exponent > 0:
        zero_count = exponent - len(fractional_digits)
        if zero_count >= 0:
            return integer_digits + fractional_digits + "0" * zero_count, ""
        return integer_digits + fractional_digits[:exponent], fractional_digits[exponent:]

    if exponent < 0:
        shift = -exponent
        zero_count = shift - len(integer_digits)
        if zero_count >= 0:
            return "0", "0" * zero_count + integer_digits + fractional_digits
        return integer_digits[:-shift], integer_digits[-shift:] + fractional_digits

    return integer_digits, fractional_digits


# =============================================================================
# HELPERS
# =============================================================================


def negate_literal(literal: str) -> str:
    """
    Символьное отрицание литерала: переключение ведущего "-".

    Examples:
        >>> negate_literal("5")
        '-5'
        >>> negate_literal("-2.5e3")
        '2.5e3'
    """
    if literal.startswith("-"):
        return literal[1:]
    return "-" + literal


def is_zero_literal(literal: Any) -> bool:
    """
    Быстрая проверка на ноль без полного разбора (только integer/decimal формы).

    Examples:
        >>> is_zero_literal("0")
        True
        >>> is_zero_literal("-0.000")
        True
        >>> is_zero_literal("0.01")
        False
    """
    return isinstance(literal, str) and ZERO_LITERAL_PATTERN.fullmatch(literal) is not None
