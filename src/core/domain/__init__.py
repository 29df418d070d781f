"""
Domain models and value objects.

Contains the fundamental value types of the engine: DecimalNumber, ArithmeticResult.
"""

from src.core.domain.arithmetic_result import (
    STATUS_MESSAGES,
    ArithmeticResult,
    ArithmeticStatus,
)
from src.core.domain.decimal_number import DecimalNumber, Sign

__all__ = [
    # DecimalNumber model
    "DecimalNumber",
    "Sign",
    # ArithmeticResult model
    "ArithmeticResult",
    "ArithmeticStatus",
    "STATUS_MESSAGES",
]
