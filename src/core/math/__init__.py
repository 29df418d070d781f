"""
Core math modules

Разбор литералов, научная нотация и потолок точности нативных целых.
Никаких float: только целочисленная арифметика и операции над строками цифр.
"""

# Number Parser
from src.core.math.parser import (
    DECIMAL_PATTERN,
    INTEGER_PATTERN,
    MAX_EXPONENT_MAGNITUDE,
    SCIENTIFIC_PATTERN,
    is_zero_literal,
    negate_literal,
    parse,
    shift_decimal_point,
)

# Precision Probe
from src.core.math.precision import (
    FALLBACK_INT_WIDTH,
    NATIVE_INT_WIDTHS,
    PrecisionLimits,
    PrecisionOverflowError,
    detect_native_int_width,
    get_precision_limits,
    max_safe_digits_for_width,
    probe_precision_limits,
)

# Scientific Formatter
from src.core.math.scientific import (
    SCIENTIFIC_ZERO,
    render_number,
    to_scientific,
)

__all__ = [
    # Number Parser — Grammar
    "INTEGER_PATTERN",
    "DECIMAL_PATTERN",
    "SCIENTIFIC_PATTERN",
    "MAX_EXPONENT_MAGNITUDE",
    # Number Parser — Functions
    "parse",
    "shift_decimal_point",
    "negate_literal",
    "is_zero_literal",
    # Precision Probe — Constants
    "NATIVE_INT_WIDTHS",
    "FALLBACK_INT_WIDTH",
    # Precision Probe — Types
    "PrecisionLimits",
    "PrecisionOverflowError",
    # Precision Probe — Functions
    "detect_native_int_width",
    "max_safe_digits_for_width",
    "probe_precision_limits",
    "get_precision_limits",
    # Scientific Formatter
    "SCIENTIFIC_ZERO",
    "to_scientific",
    "render_number",
]
