"""Arithmetic — точные операции над десятичными литералами.

- Adder: сложение (бинарное и n-арное через бинарное дерево)
- Subtractor: вычитание через сложение с отрицанием
- Multiplier: умножение через дистрибутивное разложение
- Divider: деление через одно масштабированное целочисленное деление
- ArithmeticEngine: фасад с общей конфигурацией
"""

from src.core.math.parser import parse

from .adder import add, add_numbers
from .config import DEFAULT_CONFIG, ArithmeticConfig
from .divider import divide, divide_numbers
from .engine import ArithmeticEngine
from .multiplier import multiply, multiply_numbers
from .reduction import reduce_pairwise
from .subtractor import subtract

__all__ = [
    # Operations
    "parse",
    "add",
    "subtract",
    "multiply",
    "divide",
    # Internal API (без рендеринга)
    "add_numbers",
    "multiply_numbers",
    "divide_numbers",
    "reduce_pairwise",
    # Engine & config
    "ArithmeticEngine",
    "ArithmeticConfig",
    "DEFAULT_CONFIG",
]
