"""
Contract Validation Module

Модуль для валидации JSON контракта результата арифметического движка.
"""

from .validators import (
    ARITHMETIC_RESULT_SCHEMA,
    CONTRACTS_SCHEMA_DIR,
    ArithmeticResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_arithmetic_result,
)

__all__ = [
    # Constants
    "CONTRACTS_SCHEMA_DIR",
    "ARITHMETIC_RESULT_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ArithmeticResultValidator",
    # Functions
    "validate_arithmetic_result",
]
