"""
Reduction — Бинарное дерево свёртки n-арных операций

Список операндов делится пополам, каждая половина сворачивается рекурсивно,
затем частичные результаты объединяются бинарной операцией.
Глубина рекурсии O(log n); бинарный оператор — единственный источник истины.
"""

from typing import Any, Callable, Optional, Sequence

from src.core.domain.arithmetic_result import ArithmeticResult
from src.core.domain.decimal_number import DecimalNumber
from src.core.math.parser import parse
from src.core.math.precision import PrecisionLimits

# combine(a, b, guard_limits) -> DecimalNumber
Combine = Callable[[DecimalNumber, DecimalNumber, Optional[PrecisionLimits]], DecimalNumber]


def reduce_pairwise(
    operands: Sequence[Any],
    combine: Combine,
    limits: Optional[PrecisionLimits] = None,
) -> ArithmeticResult:
    """
    Свёртка двух и более литералов бинарным деревом.

    Любой неуспешный частичный результат прерывает свёртку и возвращается как есть
    (правая половина в этом случае не разбирается).

    Args:
        operands: Литералы (не пустой список)
        combine: Бинарная операция над разобранными значениями (без рендеринга)
        limits: PrecisionLimits для overflow guard (None — без проверки)

    Returns:
        ArithmeticResult с plain-значением (рендеринг — на точке входа)
    """
    if len(operands) == 1:
        return parse(operands[0])

    middle = len(operands) // 2

    left = reduce_pairwise(operands[:middle], combine, limits)
    if not left.ok:
        return left

    right = reduce_pairwise(operands[middle:], combine, limits)
    if not right.ok:
        return right

    return ArithmeticResult.success(combine(left.value, right.value, limits))


def single_operand(literal: Any) -> ArithmeticResult:
    """
    Один операнд: возвращается без изменений (после проверки грамматики).
    """
    parsed = parse(literal)
    if not parsed.ok:
        return parsed
    return ArithmeticResult.success(parsed.value, literal)


def arity_failure(operation: str, count: int, expected: str) -> ArithmeticResult:
    """GENERAL_FAILURE для недопустимого количества операндов"""
    return ArithmeticResult.general_failure(
        f"{operation} expects {expected} operand(s), got {count}"
    )
