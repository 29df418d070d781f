"""
DecimalNumber — Нормализованное десятичное число

Immutable Pydantic модель, представляющая разобранный числовой литерал:
- Целая часть (строка цифр, непустая, "0" допустим)
- Дробная часть (строка цифр, может быть пустой)
- Знак (отдельно от модуля)
- Признак научной нотации исходного литерала

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Строки цифр содержат только 0-9, без знака
2. Целая часть без лишних ведущих нулей (кроме самого "0")
3. Ноль всегда NON_NEGATIVE (единственный канонический ноль)
4. Модель никогда не изменяется после создания
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак числа"""

    NEGATIVE = "negative"
    NON_NEGATIVE = "non_negative"


# =============================================================================
# DECIMAL NUMBER
# =============================================================================


class DecimalNumber(BaseModel):
    """
    Нормализованное десятичное число.

    Immutable модель (frozen=True). Значение = sign * integer_digits.fractional_digits.

    Examples:
        >>> DecimalNumber.from_parts("0042", "50", negative=True).to_literal()
        '-42.5'
        >>> DecimalNumber.from_parts("0", "000", negative=True).sign
        <Sign.NON_NEGATIVE: 'non_negative'>
    """

    integer_digits: str = Field(..., pattern=r"^[0-9]+$", description="Цифры целой части")
    fractional_digits: str = Field(
        "", pattern=r"^[0-9]*$", description="Цифры дробной части (может быть пустой)"
    )
    sign: Sign = Field(Sign.NON_NEGATIVE, description="Знак числа")
    source_was_scientific: bool = Field(
        False, description="Исходный литерал был в научной нотации"
    )

    model_config = {"frozen": True}

    @field_validator("sign")
    @classmethod
    def normalize_zero_sign(cls, v: Sign, info) -> Sign:
        """Отрицательный ноль нормализуется в NON_NEGATIVE"""
        integer_digits = info.data.get("integer_digits")
        fractional_digits = info.data.get("fractional_digits")
        if integer_digits is None or fractional_digits is None:
            return v
        if integer_digits.strip("0") == "" and fractional_digits.strip("0") == "":
            return Sign.NON_NEGATIVE
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_parts(
        cls,
        integer_digits: str,
        fractional_digits: str = "",
        negative: bool = False,
        source_was_scientific: bool = False,
    ) -> "DecimalNumber":
        """
        Создание числа из строк цифр с нормализацией ведущих нулей.

        Args:
            integer_digits: Цифры целой части (пустая строка трактуется как "0")
            fractional_digits: Цифры дробной части
            negative: Отрицательное ли число
            source_was_scientific: Литерал был в научной нотации

        Returns:
            DecimalNumber
        """
        return cls(
            integer_digits=integer_digits.lstrip("0") or "0",
            fractional_digits=fractional_digits,
            sign=Sign.NEGATIVE if negative else Sign.NON_NEGATIVE,
            source_was_scientific=source_was_scientific,
        )

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE

    @property
    def is_integer(self) -> bool:
        """True если дробной части нет (fast path для сложения/умножения)"""
        return self.fractional_digits == ""

    @property
    def is_zero(self) -> bool:
        return self.integer_digits.strip("0") == "" and self.fractional_digits.strip("0") == ""

    def negated(self) -> "DecimalNumber":
        """Число с противоположным знаком (ноль остаётся неотрицательным)"""
        return DecimalNumber.from_parts(
            self.integer_digits,
            self.fractional_digits,
            negative=not self.is_negative,
            source_was_scientific=self.source_was_scientific,
        )

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def to_literal(self) -> str:
        """
        Каноническая запись без научной нотации.

        Хвостовые нули дробной части отбрасываются вместе с точкой,
        если дробная часть становится пустой.

        Examples:
            >>> DecimalNumber.from_parts("2", "50").to_literal()
            '2.5'
            >>> DecimalNumber.from_parts("10", "000").to_literal()
            '10'
        """
        fraction = self.fractional_digits.rstrip("0")
        prefix = "-" if self.is_negative else ""
        if fraction:
            return f"{prefix}{self.integer_digits}.{fraction}"
        return f"{prefix}{self.integer_digits}"

    def signed_integer_part(self) -> str:
        """Целая часть со знаком ("-0" для отрицательных чисел меньше единицы)"""
        if self.is_negative:
            return "-" + self.integer_digits
        return self.integer_digits

    def __str__(self) -> str:
        return self.to_literal()
