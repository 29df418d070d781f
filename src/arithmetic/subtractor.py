"""
Subtractor — Вычитание через сложение с отрицанием

subtract(a, b) = add(a, negate_literal(b)), где negate_literal переключает
ведущий "-" литерала до разбора.
"""

from typing import Any, Optional

from src.arithmetic.adder import add
from src.arithmetic.config import ArithmeticConfig
from src.arithmetic.reduction import arity_failure, single_operand
from src.core.domain.arithmetic_result import ArithmeticResult
from src.core.math.parser import negate_literal, parse


def subtract(*operands: Any, config: Optional[ArithmeticConfig] = None) -> ArithmeticResult:
    """
    Разность minuend - subtrahend.

    Args:
        *operands: (minuend, subtrahend); один операнд возвращается без изменений
        config: Конфигурация (default: DEFAULT_CONFIG)

    Returns:
        ArithmeticResult; ILLEGAL_NUMBER несёт исходный (не отрицательный) литерал

    Examples:
        >>> subtract("10", "2.5").literal
        '7.5'
        >>> subtract("1.5", "-1.5").literal
        '3'
    """
    if len(operands) == 1:
        return single_operand(operands[0])
    if len(operands) != 2:
        return arity_failure("subtract", len(operands), "one or two")

    minuend, subtrahend = operands

    # "--5" после отрицания стал бы валидным "-5", поэтому subtrahend
    # проверяется до отрицания; minuend по-прежнему проверяется первым
    if not parse(subtrahend).ok:
        minuend_parsed = parse(minuend)
        if not minuend_parsed.ok:
            return minuend_parsed
        return ArithmeticResult.illegal_number(subtrahend)

    return add(minuend, negate_literal(subtrahend), config=config)
