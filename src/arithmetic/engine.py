"""
ArithmeticEngine — Фасад арифметического движка

Объединяет parse и четыре операции с одной ArithmeticConfig.
Экземпляр хранит только неизменяемую конфигурацию и безопасен для
совместного использования между потоками.
"""

import logging
from typing import Any, Optional

from src.arithmetic.adder import add
from src.arithmetic.config import ArithmeticConfig
from src.arithmetic.divider import divide
from src.arithmetic.multiplier import multiply
from src.arithmetic.subtractor import subtract
from src.core.domain.arithmetic_result import ArithmeticResult
from src.core.math.parser import parse
from src.core.math.precision import PrecisionLimits

logger = logging.getLogger(__name__)


class ArithmeticEngine:
    """Точная десятичная арифметика на целых числах.

    Example:
        >>> engine = ArithmeticEngine(ArithmeticConfig(max_safe_digits=9))
        >>> engine.divide("1", "3").literal
        '0.33333333'
    """

    def __init__(self, config: Optional[ArithmeticConfig] = None):
        """
        Args:
            config: конфигурация движка (default: ArithmeticConfig())
        """
        self.config = config or ArithmeticConfig()

        logger.debug(
            "ArithmeticEngine initialized: max_safe_digits=%s, overflow_guard=%s",
            self.config.max_safe_digits,
            self.config.overflow_guard,
        )

    @property
    def limits(self) -> PrecisionLimits:
        """Эффективные PrecisionLimits"""
        return self.config.resolve_limits()

    def parse(self, literal: Any) -> ArithmeticResult:
        return parse(literal)

    def add(self, *operands: Any) -> ArithmeticResult:
        return add(*operands, config=self.config)

    def subtract(self, *operands: Any) -> ArithmeticResult:
        return subtract(*operands, config=self.config)

    def multiply(self, *operands: Any) -> ArithmeticResult:
        return multiply(*operands, config=self.config)

    def divide(self, *operands: Any) -> ArithmeticResult:
        return divide(*operands, config=self.config)
