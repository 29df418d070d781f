"""
Scientific Formatter — Рендеринг десятичных чисел в научной нотации

Формат: d.ddde±n (например, 1.5e2, 2.44e-3, -3.0e0)

Алгоритм:
- Ищем первую ненулевую цифру, двигаясь от десятичной точки:
  в целой части (если она ненулевая), иначе в дробной части
- Эта цифра — голова мантиссы (head)
- Экспонента — знаковое расстояние от head до исходной точки
- Оставшиеся цифры — хвост мантиссы (tail) без хвостовых нулей ("0" если пусто)

Знак "-" в целой части не участвует в поиске цифр и переносится в результат.
"""

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from src.core.domain.decimal_number import DecimalNumber


# Каноническая запись нуля
SCIENTIFIC_ZERO: Final[str] = "0.0e0"


def to_scientific(integer_part: str, fractional_part: str = "") -> str:
    """
    Перевод пары (целая часть, дробная часть) в научную нотацию.

    Args:
        integer_part: Цифры целой части, возможно с ведущим "-"
        fractional_part: Цифры дробной части (может быть пустой)

    Returns:
        Литерал вида d.ddde±n

    Examples:
        >>> to_scientific("150")
        '1.5e2'
        >>> to_scientific("0", "00244")
        '2.44e-3'
        >>> to_scientific("-0", "5")
        '-5.0e-1'
        >>> to_scientific("7", "")
        '7.0e0'
    """
    sign = ""
    if integer_part.startswith("-"):
        sign = "-"
        integer_part = integer_part[1:]

    significant = integer_part.lstrip("0")

    if significant:
        exponent = len(significant) - 1
        head = significant[0]
        tail = significant[1:] + fractional_part
    else:
        stripped = fractional_part.lstrip("0")
        if not stripped:
            return SCIENTIFIC_ZERO
        leading_zeros = len(fractional_part) - len(stripped)
        exponent = -(leading_zeros + 1)
        head = stripped[0]
        tail = stripped[1:]

    tail = tail.rstrip("0") or "0"

    return f"{sign}{head}.{tail}e{exponent}"


def render_number(number: "DecimalNumber", scientific: bool) -> str:
    """
    Рендеринг числа: научная нотация или каноническая plain-запись.

    Решение о научной нотации принимает точка входа верхнего уровня;
    внутренние вызовы между операциями всегда передают scientific=False.
    """
    if scientific:
        return to_scientific(number.signed_integer_part(), number.fractional_digits)
    return number.to_literal()
