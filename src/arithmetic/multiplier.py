"""
Multiplier — Точное умножение через дистрибутивное разложение

Для a = A + a', b = B + b' (A, B — целые части, a', b' — дробные):

    a * b = A*B + A*b' + B*a' + a'*b'

- A*B — обычное целочисленное произведение
- A*b' — целое произведение цифр, масштабированное обратно на len(b') знаков
- B*a' — симметрично
- a'*b' — целое произведение цифр, добитое нулями слева до len(a') + len(b')

Слагаемые объединяются двумя последовательными вызовами add_numbers:
логика переносов не дублируется. Знак = XOR знаков операндов.
"""

import logging
from typing import Any, Optional

from src.arithmetic.adder import add_numbers
from src.arithmetic.config import DEFAULT_CONFIG, ArithmeticConfig
from src.arithmetic.reduction import arity_failure, reduce_pairwise, single_operand
from src.core.domain.arithmetic_result import ArithmeticResult
from src.core.domain.decimal_number import DecimalNumber
from src.core.math.precision import PrecisionLimits, PrecisionOverflowError
from src.core.math.scientific import render_number

logger = logging.getLogger(__name__)


def rescale_product(raw_product: int, fractional_width: int) -> DecimalNumber:
    """
    Целое произведение цифр → десятичное число с fractional_width знаками.

    Examples:
        >>> rescale_product(20, 1).to_literal()
        '2'
        >>> rescale_product(7, 3).to_literal()
        '0.007'
    """
    digits = str(raw_product)
    if fractional_width == 0:
        return DecimalNumber.from_parts(digits, "")

    digits = digits.zfill(fractional_width)
    return DecimalNumber.from_parts(digits[:-fractional_width], digits[-fractional_width:])


def multiply_numbers(
    a: DecimalNumber,
    b: DecimalNumber,
    limits: Optional[PrecisionLimits] = None,
) -> DecimalNumber:
    """
    Произведение двух разобранных чисел (внутренний API, без рендеринга).

    Raises:
        PrecisionOverflowError: Если guard включён и частичное произведение
            вне нативной ширины
    """
    scientific = a.source_was_scientific or b.source_was_scientific
    negative = a.is_negative != b.is_negative

    integer_a = int(a.integer_digits, 10)
    integer_b = int(b.integer_digits, 10)
    integer_term = integer_a * integer_b
    if limits is not None:
        limits.check_native(integer_term, "integer product")

    # Fast path
    if a.is_integer and b.is_integer:
        logger.debug("multiply: integer fast path (%s, %s)", a, b)
        return DecimalNumber.from_parts(
            str(integer_term), "", negative=negative, source_was_scientific=scientific
        )

    fraction_a = int(a.fractional_digits or "0", 10)
    fraction_b = int(b.fractional_digits or "0", 10)

    # a' * b'
    fractional_width = len(a.fractional_digits) + len(b.fractional_digits)
    fractional_term = fraction_a * fraction_b

    # A * b' и B * a'
    inner_a = integer_a * fraction_b
    inner_b = integer_b * fraction_a

    if limits is not None:
        limits.check_native(fractional_term, "fractional product")
        limits.check_native(inner_a, "inner product")
        limits.check_native(inner_b, "inner product")

    inner_sum = add_numbers(
        rescale_product(inner_a, len(b.fractional_digits)),
        rescale_product(inner_b, len(a.fractional_digits)),
        limits,
    )
    outer = DecimalNumber.from_parts(
        str(integer_term), str(fractional_term).zfill(fractional_width)
    )
    magnitude = add_numbers(inner_sum, outer, limits)

    return DecimalNumber.from_parts(
        magnitude.integer_digits,
        magnitude.fractional_digits,
        negative=negative,
        source_was_scientific=scientific,
    )


def multiply(*operands: Any, config: Optional[ArithmeticConfig] = None) -> ArithmeticResult:
    """
    Произведение двух и более литералов (свёртка бинарным деревом).

    Examples:
        >>> multiply("2.5", "4").literal
        '10'
        >>> multiply("-1.5", "1.5").literal
        '-2.25'
        >>> multiply("1.5e2", "2").literal
        '3.0e2'
    """
    config = config or DEFAULT_CONFIG

    if not operands:
        return arity_failure("multiply", 0, "at least one")
    if len(operands) == 1:
        return single_operand(operands[0])

    try:
        result = reduce_pairwise(operands, multiply_numbers, config.guard_limits())
    except PrecisionOverflowError as e:
        logger.warning("multiply: native precision exceeded: %s", e)
        return ArithmeticResult.general_failure(str(e))
    except ValueError as e:
        # int <-> str для операндов длиннее sys.get_int_max_str_digits()
        logger.warning("multiply: operand too long for integer conversion: %s", e)
        return ArithmeticResult.general_failure(str(e))

    if not result.ok:
        return result

    value = result.value
    return ArithmeticResult.success(value, render_number(value, value.source_was_scientific))
