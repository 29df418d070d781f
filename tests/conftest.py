"""
Общие fixtures для unit тестов.
"""

import sys

import pytest


# Лимит int <-> str по умолчанию в CPython
DEFAULT_INT_MAX_STR_DIGITS = 4300


@pytest.fixture
def int_digit_limit():
    """Фиксирует лимит цифр int <-> str на время теста (восстанавливается после)"""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str digit limit")

    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(DEFAULT_INT_MAX_STR_DIGITS)
    yield DEFAULT_INT_MAX_STR_DIGITS
    sys.set_int_max_str_digits(previous)
