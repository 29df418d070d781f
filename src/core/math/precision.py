"""
Precision Probe — Потолок десятичной точности нативной целочисленной арифметики

Определяет максимальное количество десятичных цифр, которые безопасно
помещаются в нативное знаковое целое хоста:

    max_safe_digits = floor(log10(2 ** (width - 1)))

Проверяются только пороги 64, 32 и 16 бит. На 64-битном хосте результат 18.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. PrecisionLimits вычисляется один раз за процесс (ленивый singleton)
2. Первая инициализация защищена threading.Lock (нет гонок и двойного расчёта)
3. После создания PrecisionLimits неизменяем
4. Никаких float: логарифм считается подсчётом цифр
"""

import logging
import sys
import threading
from typing import Final, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Проверяемые ширины нативного целого (от широкой к узкой)
NATIVE_INT_WIDTHS: Final[tuple[int, ...]] = (64, 32, 16)

# Минимальная ширина, если ни один порог не подошёл
FALLBACK_INT_WIDTH: Final[int] = 16


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PrecisionOverflowError(ArithmeticError):
    """
    Промежуточный целочисленный результат вышел за нативную ширину.

    Поднимается только при включённом overflow guard и перехватывается
    точкой входа той же операции (превращается в GENERAL_FAILURE).
    """

    pass


# =============================================================================
# PRECISION LIMITS
# =============================================================================


class PrecisionLimits(BaseModel):
    """
    Потолок точности нативной арифметики.

    Immutable модель (frozen=True), один экземпляр на процесс.
    """

    native_int_bits: int = Field(..., gt=0, description="Ширина нативного знакового целого (бит)")
    max_safe_digits: int = Field(..., gt=0, description="Безопасное число десятичных цифр")

    model_config = {"frozen": True}

    @property
    def max_native_int(self) -> int:
        """Максимальное значение нативного знакового целого"""
        return 2 ** (self.native_int_bits - 1) - 1

    def check_native(self, value: int, what: str = "value") -> int:
        """
        Проверка, что целое помещается в нативную ширину.

        Raises:
            PrecisionOverflowError: Если abs(value) > max_native_int
        """
        if abs(value) > self.max_native_int:
            raise PrecisionOverflowError(
                f"{what} exceeds {self.native_int_bits}-bit native range: {value}"
            )
        return value


# =============================================================================
# PROBE
# =============================================================================


def detect_native_int_width(max_native: int = sys.maxsize) -> int:
    """
    Определение ширины нативного знакового целого.

    Выбирается самая широкая ширина, граничное значение которой
    (2 ** (width - 1) - 1) не переполняет нативное целое хоста.

    Args:
        max_native: Максимальное нативное целое хоста (default: sys.maxsize)

    Returns:
        Ширина в битах: 64, 32 или 16

    Examples:
        >>> detect_native_int_width(2 ** 63 - 1)
        64
        >>> detect_native_int_width(2 ** 31 - 1)
        32
    """
    for width in NATIVE_INT_WIDTHS:
        boundary = 2 ** (width - 1) - 1
        if boundary <= max_native:
            return width
    return FALLBACK_INT_WIDTH


def max_safe_digits_for_width(width: int) -> int:
    """
    floor(log10(2 ** (width - 1))) через подсчёт цифр.

    Examples:
        >>> max_safe_digits_for_width(64)
        18
        >>> max_safe_digits_for_width(32)
        9
        >>> max_safe_digits_for_width(16)
        4
    """
    if width < 2:
        raise ValueError(f"width must be >= 2, got {width}")
    return len(str(2 ** (width - 1))) - 1


def probe_precision_limits(max_native: int = sys.maxsize) -> PrecisionLimits:
    """Вычисление PrecisionLimits без кэширования"""
    width = detect_native_int_width(max_native)
    return PrecisionLimits(
        native_int_bits=width,
        max_safe_digits=max_safe_digits_for_width(width),
    )


# Singleton; инициализируется под _LIMITS_LOCK
_LIMITS: Optional[PrecisionLimits] = None
_LIMITS_LOCK = threading.Lock()


def get_precision_limits() -> PrecisionLimits:
    """
    Process-wide PrecisionLimits (ленивая инициализация).

    Double-checked locking: после первого вызова чтение идёт без блокировки.
    """
    global _LIMITS

    limits = _LIMITS
    if limits is not None:
        return limits

    with _LIMITS_LOCK:
        if _LIMITS is None:
            _LIMITS = probe_precision_limits()
            logger.info(
                "Precision limits probed: native_int_bits=%d, max_safe_digits=%d",
                _LIMITS.native_int_bits,
                _LIMITS.max_safe_digits,
            )
        return _LIMITS
