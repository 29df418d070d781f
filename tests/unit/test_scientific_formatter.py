"""
Тесты для Scientific Formatter

Проверяет:
1. Перевод (целая часть, дробная часть) → d.ddde±n
2. Положительные/отрицательные/нулевые экспоненты
3. Перенос знака "-" и каноническую запись нуля
4. render_number для plain и научной записи
"""

import pytest

from src.core.math.parser import parse
from src.core.math.scientific import SCIENTIFIC_ZERO, render_number, to_scientific


class TestToScientific:
    """Тесты для to_scientific"""

    @pytest.mark.parametrize(
        "integer_part,fractional_part,expected",
        [
            ("150", "", "1.5e2"),
            ("0", "00244", "2.44e-3"),
            ("-0", "5", "-5.0e-1"),
            ("7", "", "7.0e0"),
            ("-123", "45", "-1.2345e2"),
            ("100", "000", "1.0e2"),
            ("10", "01", "1.001e1"),
            ("0", "1", "1.0e-1"),
            ("208", "89811", "2.0889811e2"),
        ],
    )
    def test_rendering(self, integer_part: str, fractional_part: str, expected: str) -> None:
        assert to_scientific(integer_part, fractional_part) == expected

    def test_default_fractional_part(self) -> None:
        assert to_scientific("42") == "4.2e1"

    @pytest.mark.parametrize("integer_part,fractional_part", [("0", ""), ("0", "000"), ("-0", "0")])
    def test_zero(self, integer_part: str, fractional_part: str) -> None:
        """Ноль всегда 0.0e0 (без знака)"""
        assert to_scientific(integer_part, fractional_part) == SCIENTIFIC_ZERO

    def test_leading_zeros_ignored(self) -> None:
        assert to_scientific("007", "5") == "7.5e0"

    def test_rendered_literal_parses_back(self) -> None:
        """Научная запись разбирается обратно в то же значение"""
        rendered = to_scientific("208", "89811")

        assert parse(rendered).value.to_literal() == "208.89811"


class TestRenderNumber:
    """Тесты для render_number"""

    def test_plain(self) -> None:
        number = parse("-12.340").value

        assert render_number(number, False) == "-12.34"

    def test_scientific(self) -> None:
        number = parse("-0.5").value

        assert render_number(number, True) == "-5.0e-1"

    def test_scientific_zero(self) -> None:
        number = parse("0.000").value

        assert render_number(number, True) == SCIENTIFIC_ZERO
