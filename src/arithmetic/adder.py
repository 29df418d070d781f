"""
Adder — Точное сложение десятичных литералов

Только целочисленная арифметика и операции над строками цифр.

Алгоритм (бинарный случай):
1. Разбор обоих операндов (ILLEGAL_NUMBER прерывает операцию сразу)
2. Fast path: оба операнда целые → обычное целочисленное сложение
3. Дробные части добиваются нулями справа до общей длины F
4. Знак вносится в модуль: отрицательный операнд даёт отрицательные
   целую и дробную части (строки цифр разбираются явно в base 10)
5. Целые и дробные части складываются независимо
6. Перенос: длина модуля дробной суммы F+1 → перенос 1 в целую часть
   (знак переноса = знак дробной суммы), ведущая "1" отбрасывается;
   длина меньше F → ведущие нули восстанавливаются
7. Согласование знаков: целая < 0 и дробная > 0 → целая + 1, дробная = 10**F - дробная;
   целая > 0 и дробная < 0 → целая - 1, дробная = 10**F + дробная;
   целая == 0 и дробная < 0 → знак результата отрицательный
8. Сборка результата; научная нотация — только на точке входа верхнего уровня

n-арный случай — свёртка бинарным деревом (src.arithmetic.reduction).
"""

import logging
from typing import Any, Optional

from src.arithmetic.config import DEFAULT_CONFIG, ArithmeticConfig
from src.arithmetic.reduction import arity_failure, reduce_pairwise, single_operand
from src.core.domain.arithmetic_result import ArithmeticResult
from src.core.domain.decimal_number import DecimalNumber
from src.core.math.precision import PrecisionLimits, PrecisionOverflowError
from src.core.math.scientific import render_number

logger = logging.getLogger(__name__)


# =============================================================================
# INTERNAL API (без рендеринга)
# =============================================================================


def signed_digits(digits: str, negative: bool) -> int:
    """Строка цифр → знаковое целое (base 10, ведущие нули допустимы)"""
    value = int(digits, 10) if digits else 0
    return -value if negative else value


def add_numbers(
    a: DecimalNumber,
    b: DecimalNumber,
    limits: Optional[PrecisionLimits] = None,
) -> DecimalNumber:
    """
    Сумма двух разобранных чисел.

    Внутренний API: результат никогда не переводится в научную нотацию,
    source_was_scientific результата = OR флагов операндов.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое
        limits: PrecisionLimits для overflow guard (None — без проверки)

    Returns:
        DecimalNumber

    Raises:
        PrecisionOverflowError: Если guard включён и частичная сумма вне нативной ширины
    """
    scientific = a.source_was_scientific or b.source_was_scientific

    integer_sum = signed_digits(a.integer_digits, a.is_negative) + signed_digits(
        b.integer_digits, b.is_negative
    )
    if limits is not None:
        limits.check_native(integer_sum, "integer sum")

    # Fast path
    if a.is_integer and b.is_integer:
        logger.debug("add: integer fast path (%s, %s)", a, b)
        return DecimalNumber.from_parts(
            str(abs(integer_sum)),
            "",
            negative=integer_sum < 0,
            source_was_scientific=scientific,
        )

    width = max(len(a.fractional_digits), len(b.fractional_digits))
    fraction_a = a.fractional_digits.ljust(width, "0")
    fraction_b = b.fractional_digits.ljust(width, "0")

    fractional_sum = signed_digits(fraction_a, a.is_negative) + signed_digits(
        fraction_b, b.is_negative
    )
    if limits is not None:
        limits.check_native(fractional_sum, "fractional sum")

    fraction_negative = fractional_sum < 0
    fraction_digits = str(abs(fractional_sum))

    if fractional_sum != 0 and len(fraction_digits) > width:
        # Перенос в целую часть
        integer_sum += -1 if fraction_negative else 1
        fraction_digits = fraction_digits[1:]
    elif len(fraction_digits) < width:
        fraction_digits = fraction_digits.zfill(width)

    fraction = signed_digits(fraction_digits, fraction_negative)

    # Согласование знаков целой и дробной сумм
    if integer_sum < 0 and fraction > 0:
        integer_sum += 1
        fraction = 10**width - fraction
        negative = True
    elif integer_sum > 0 and fraction < 0:
        integer_sum -= 1
        fraction = 10**width + fraction
        negative = False
    else:
        negative = integer_sum < 0 or (integer_sum == 0 and fraction < 0)

    return DecimalNumber.from_parts(
        str(abs(integer_sum)),
        str(abs(fraction)).zfill(width),
        negative=negative,
        source_was_scientific=scientific,
    )


# =============================================================================
# PUBLIC API
# =============================================================================


def add(*operands: Any, config: Optional[ArithmeticConfig] = None) -> ArithmeticResult:
    """
    Сумма двух и более литералов.

    Args:
        *operands: Литералы (integer / decimal / scientific)
        config: Конфигурация (default: DEFAULT_CONFIG)

    Returns:
        ArithmeticResult; при SUCCESS literal — plain-запись либо научная нотация,
        если хотя бы один операнд был в научной нотации

    Examples:
        >>> add("202.895", "6.00311").literal
        '208.89811'
        >>> add("-5", "3").literal
        '-2'
        >>> add("1", "2", "3", "4.5").literal
        '10.5'
    """
    config = config or DEFAULT_CONFIG

    if not operands:
        return arity_failure("add", 0, "at least one")
    if len(operands) == 1:
        return single_operand(operands[0])

    try:
        result = reduce_pairwise(operands, add_numbers, config.guard_limits())
    except PrecisionOverflowError as e:
        logger.warning("add: native precision exceeded: %s", e)
        return ArithmeticResult.general_failure(str(e))
    except ValueError as e:
        # int <-> str для операндов длиннее sys.get_int_max_str_digits()
        logger.warning("add: operand too long for integer conversion: %s", e)
        return ArithmeticResult.general_failure(str(e))

    if not result.ok:
        return result

    value = result.value
    return ArithmeticResult.success(value, render_number(value, value.source_was_scientific))
