"""
ArithmeticResult — Результат арифметической операции

Каждая точка входа движка возвращает явный статус вместе со значением.
Коды статусов стабильны и являются частью внешнего контракта
(contracts/schema/arithmetic_result.json):

- SUCCESS = 0
- GENERAL_FAILURE = 1
- ILLEGAL_NUMBER = 2 (несёт исходный литерал)
- DIVIDE_BY_ZERO = 3
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Final, Optional

from .decimal_number import DecimalNumber


# =============================================================================
# STATUS CODES
# =============================================================================


class ArithmeticStatus(int, Enum):
    """Код статуса арифметической операции"""

    SUCCESS = 0
    GENERAL_FAILURE = 1
    ILLEGAL_NUMBER = 2
    DIVIDE_BY_ZERO = 3


# Шаблоны сообщений; %s подставляется только для ILLEGAL_NUMBER
STATUS_MESSAGES: Final[Dict[ArithmeticStatus, str]] = {
    ArithmeticStatus.SUCCESS: "Success",
    ArithmeticStatus.GENERAL_FAILURE: "General failure",
    ArithmeticStatus.ILLEGAL_NUMBER: "Invalid argument; decimal number required: '%s'",
    ArithmeticStatus.DIVIDE_BY_ZERO: "Divide by zero error",
}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ArithmeticResult:
    """Результат операции: статус + значение (при SUCCESS)."""

    status: ArithmeticStatus

    # SUCCESS: разобранное значение и его отрендеренная запись
    value: Optional[DecimalNumber] = None
    literal: Optional[str] = None

    # ILLEGAL_NUMBER: исходный литерал без изменений
    offending_literal: Optional[str] = None

    # Детали
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == ArithmeticStatus.SUCCESS

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def success(cls, value: DecimalNumber, literal: Optional[str] = None) -> "ArithmeticResult":
        """
        Успешный результат.

        Args:
            value: Значение
            literal: Отрендеренная запись (по умолчанию каноническая plain-запись)
        """
        return cls(
            status=ArithmeticStatus.SUCCESS,
            value=value,
            literal=literal if literal is not None else value.to_literal(),
            message=STATUS_MESSAGES[ArithmeticStatus.SUCCESS],
        )

    @classmethod
    def illegal_number(cls, offending_literal: Any) -> "ArithmeticResult":
        text = offending_literal if isinstance(offending_literal, str) else repr(offending_literal)
        return cls(
            status=ArithmeticStatus.ILLEGAL_NUMBER,
            offending_literal=text,
            message=STATUS_MESSAGES[ArithmeticStatus.ILLEGAL_NUMBER] % text,
        )

    @classmethod
    def divide_by_zero(cls) -> "ArithmeticResult":
        return cls(
            status=ArithmeticStatus.DIVIDE_BY_ZERO,
            message=STATUS_MESSAGES[ArithmeticStatus.DIVIDE_BY_ZERO],
        )

    @classmethod
    def general_failure(cls, details: str = "") -> "ArithmeticResult":
        message = STATUS_MESSAGES[ArithmeticStatus.GENERAL_FAILURE]
        if details:
            message = f"{message}: {details}"
        return cls(status=ArithmeticStatus.GENERAL_FAILURE, message=message)

    # -------------------------------------------------------------------------
    # Контракт
    # -------------------------------------------------------------------------

    def to_contract(self) -> Dict[str, Any]:
        """
        JSON-сериализуемое представление для внешних потребителей.

        Соответствует contracts/schema/arithmetic_result.json.
        """
        return {
            "status_code": int(self.status),
            "status": self.status.name,
            "message": self.message,
            "output": self.literal,
            "offending_literal": self.offending_literal,
        }
