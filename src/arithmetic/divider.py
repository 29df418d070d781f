"""
Divider — Деление через одно целочисленное деление с масштабированием

Задача переводится в целочисленную: десятичные точки убираются, числитель
дополняется нулями справа так, чтобы число его значащих цифр достигло
max_safe_digits (потолок PrecisionProbe). Выполняется одно усекающее
целочисленное деление, затем десятичная точка возвращается на позицию

    rescale = zero_count + len(frac_dividend) - len(frac_divisor)

Результат усекается (без округления) на потолке точности. Хвостовые нули
дробной части всегда отбрасываются (единое каноническое поведение).

DIVIDE_BY_ZERO проверяется до полного разбора для integer/decimal нуля;
ноль в научной нотации (0e5) ловится сразу после разбора делителя.
"""

import logging
from typing import Any, Optional

from src.arithmetic.config import DEFAULT_CONFIG, ArithmeticConfig
from src.arithmetic.reduction import arity_failure, single_operand
from src.core.domain.arithmetic_result import ArithmeticResult
from src.core.domain.decimal_number import DecimalNumber
from src.core.math.parser import is_zero_literal, parse
from src.core.math.precision import PrecisionLimits, PrecisionOverflowError
from src.core.math.scientific import render_number

logger = logging.getLogger(__name__)


def divide_numbers(
    dividend: DecimalNumber,
    divisor: DecimalNumber,
    max_safe_digits: int,
    limits: Optional[PrecisionLimits] = None,
) -> DecimalNumber:
    """
    Частное двух разобранных чисел (делитель ненулевой).

    Args:
        dividend: Делимое
        divisor: Делитель (не ноль)
        max_safe_digits: Число значащих цифр масштабированного числителя
        limits: PrecisionLimits для overflow guard (None — без проверки)

    Returns:
        DecimalNumber, усечённый на потолке точности

    Raises:
        PrecisionOverflowError: Если guard включён и числитель/знаменатель
            вне нативной ширины
    """
    scientific = dividend.source_was_scientific or divisor.source_was_scientific
    negative = dividend.is_negative != divisor.is_negative

    dividend_digits = dividend.integer_digits + dividend.fractional_digits
    significant = dividend_digits.lstrip("0")
    zero_count = max(0, max_safe_digits - len(significant))

    numerator = int(dividend_digits + "0" * zero_count, 10)
    denominator = int(divisor.integer_digits + divisor.fractional_digits, 10)
    if limits is not None:
        limits.check_native(numerator, "numerator")
        limits.check_native(denominator, "denominator")

    quotient = numerator // denominator
    rescale = zero_count + len(dividend.fractional_digits) - len(divisor.fractional_digits)

    logger.debug(
        "divide: numerator=%d denominator=%d quotient=%d rescale=%d",
        numerator,
        denominator,
        quotient,
        rescale,
    )

    digits = str(quotient)
    if rescale <= 0:
        integer_digits, fractional_digits = digits + "0" * -rescale, ""
    else:
        digits = digits.zfill(rescale)
        integer_digits, fractional_digits = digits[:-rescale], digits[-rescale:]

    return DecimalNumber.from_parts(
        integer_digits,
        fractional_digits.rstrip("0"),
        negative=negative,
        source_was_scientific=scientific,
    )


def divide(*operands: Any, config: Optional[ArithmeticConfig] = None) -> ArithmeticResult:
    """
    Частное dividend / divisor.

    Args:
        *operands: (dividend, divisor); один операнд возвращается без изменений
        config: Конфигурация (default: DEFAULT_CONFIG)

    Returns:
        ArithmeticResult (DIVIDE_BY_ZERO если делитель численно равен нулю)

    Examples:
        >>> divide("10", "4").literal
        '2.5'
        >>> divide("10", "0").status.name
        'DIVIDE_BY_ZERO'
        >>> divide("1", "3").literal
        '0.33333333333333333'
    """
    config = config or DEFAULT_CONFIG

    if len(operands) == 1:
        return single_operand(operands[0])
    if len(operands) != 2:
        return arity_failure("divide", len(operands), "one or two")

    dividend_literal, divisor_literal = operands

    if is_zero_literal(divisor_literal):
        logger.warning("divide: divide by zero (%r)", divisor_literal)
        return ArithmeticResult.divide_by_zero()

    dividend = parse(dividend_literal)
    if not dividend.ok:
        return dividend
    divisor = parse(divisor_literal)
    if not divisor.ok:
        return divisor

    if divisor.value.is_zero:
        logger.warning("divide: divide by zero (%r)", divisor_literal)
        return ArithmeticResult.divide_by_zero()

    limits = config.resolve_limits()
    try:
        value = divide_numbers(
            dividend.value,
            divisor.value,
            limits.max_safe_digits,
            config.guard_limits(),
        )
    except PrecisionOverflowError as e:
        logger.warning("divide: native precision exceeded: %s", e)
        return ArithmeticResult.general_failure(str(e))
    except ValueError as e:
        # int <-> str для операндов длиннее sys.get_int_max_str_digits()
        logger.warning("divide: operand too long for integer conversion: %s", e)
        return ArithmeticResult.general_failure(str(e))

    return ArithmeticResult.success(value, render_number(value, value.source_was_scientific))
