"""Конфигурация арифметического движка."""

from dataclasses import dataclass
from typing import Optional

from src.core.math.precision import PrecisionLimits, get_precision_limits


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация ArithmeticEngine.

    - max_safe_digits: переопределение потолка точности деления
      (None — использовать значение PrecisionProbe)
    - overflow_guard: проверять, что промежуточные целые помещаются в нативную
      ширину; при выходе за неё операция возвращает GENERAL_FAILURE
    """

    max_safe_digits: Optional[int] = None
    overflow_guard: bool = False

    def __post_init__(self):
        if self.max_safe_digits is not None and self.max_safe_digits < 1:
            raise ValueError(f"max_safe_digits must be >= 1, got {self.max_safe_digits}")

    def resolve_limits(self) -> PrecisionLimits:
        """Эффективные PrecisionLimits с учётом переопределения"""
        probed = get_precision_limits()
        if self.max_safe_digits is None:
            return probed
        return PrecisionLimits(
            native_int_bits=probed.native_int_bits,
            max_safe_digits=self.max_safe_digits,
        )

    def guard_limits(self) -> Optional[PrecisionLimits]:
        """PrecisionLimits для overflow guard (None если guard выключен)"""
        if not self.overflow_guard:
            return None
        return self.resolve_limits()


DEFAULT_CONFIG = ArithmeticConfig()
