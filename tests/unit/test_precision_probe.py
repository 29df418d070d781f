"""
Тесты для Precision Probe

Проверяет:
1. Определение ширины нативного целого (64/32/16, fallback)
2. max_safe_digits = floor(log10(2 ** (width - 1)))
3. Singleton: один расчёт на процесс, безопасная первая инициализация из потоков
4. PrecisionLimits: immutability и check_native
"""

import sys
import threading

import pytest
from pydantic import ValidationError

from src.core.math import precision
from src.core.math.precision import (
    FALLBACK_INT_WIDTH,
    PrecisionLimits,
    PrecisionOverflowError,
    detect_native_int_width,
    get_precision_limits,
    max_safe_digits_for_width,
    probe_precision_limits,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def fresh_singleton(monkeypatch):
    """Сброс process-wide singleton на время теста"""
    monkeypatch.setattr(precision, "_LIMITS", None)
    yield


# =============================================================================
# ТЕСТЫ PROBE
# =============================================================================


class TestDetectNativeIntWidth:
    """Тесты для detect_native_int_width"""

    @pytest.mark.parametrize(
        "max_native,expected",
        [
            (2**63 - 1, 64),
            (2**127, 64),
            (2**31 - 1, 32),
            (2**62, 32),
            (2**15 - 1, 16),
        ],
    )
    def test_width(self, max_native: int, expected: int) -> None:
        assert detect_native_int_width(max_native) == expected

    def test_fallback(self) -> None:
        """Ни один порог не подошёл → минимальная ширина"""
        assert detect_native_int_width(100) == FALLBACK_INT_WIDTH

    def test_host_default(self) -> None:
        assert detect_native_int_width() == detect_native_int_width(sys.maxsize)


class TestMaxSafeDigits:
    """Тесты для max_safe_digits_for_width"""

    @pytest.mark.parametrize("width,expected", [(64, 18), (32, 9), (16, 4)])
    def test_known_widths(self, width: int, expected: int) -> None:
        assert max_safe_digits_for_width(width) == expected

    def test_invalid_width(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 2"):
            max_safe_digits_for_width(1)

    def test_probe_64_bit(self) -> None:
        limits = probe_precision_limits(2**63 - 1)

        assert limits.native_int_bits == 64
        assert limits.max_safe_digits == 18


# =============================================================================
# ТЕСТЫ SINGLETON
# =============================================================================


class TestPrecisionSingleton:
    """Тесты для get_precision_limits"""

    def test_same_instance(self) -> None:
        assert get_precision_limits() is get_precision_limits()

    def test_matches_probe(self) -> None:
        limits = get_precision_limits()

        assert limits == probe_precision_limits()
        assert limits.max_safe_digits == max_safe_digits_for_width(limits.native_int_bits)

    def test_64_bit_host(self) -> None:
        if sys.maxsize < 2**63 - 1:
            pytest.skip("not a 64-bit host")

        assert get_precision_limits().max_safe_digits == 18

    def test_concurrent_first_use(self, fresh_singleton, monkeypatch) -> None:
        """Параллельная первая инициализация: один расчёт, один экземпляр"""
        calls = []
        original_probe = precision.probe_precision_limits

        def counting_probe(*args, **kwargs):
            calls.append(1)
            return original_probe(*args, **kwargs)

        monkeypatch.setattr(precision, "probe_precision_limits", counting_probe)

        barrier = threading.Barrier(8)
        results = []
        results_lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            limits = get_precision_limits()
            with results_lock:
                results.append(limits)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(limits is results[0] for limits in results)


# =============================================================================
# ТЕСТЫ PRECISION LIMITS
# =============================================================================


class TestPrecisionLimits:
    """Тесты для PrecisionLimits"""

    def test_max_native_int(self) -> None:
        limits = PrecisionLimits(native_int_bits=64, max_safe_digits=18)

        assert limits.max_native_int == 2**63 - 1

    def test_immutable(self) -> None:
        limits = PrecisionLimits(native_int_bits=64, max_safe_digits=18)

        with pytest.raises(ValidationError):
            limits.max_safe_digits = 9

    def test_positive_fields(self) -> None:
        with pytest.raises(ValidationError):
            PrecisionLimits(native_int_bits=64, max_safe_digits=0)

    def test_check_native_within_range(self) -> None:
        limits = PrecisionLimits(native_int_bits=16, max_safe_digits=4)

        assert limits.check_native(32767) == 32767
        assert limits.check_native(-32767) == -32767

    def test_check_native_overflow(self) -> None:
        limits = PrecisionLimits(native_int_bits=16, max_safe_digits=4)

        with pytest.raises(PrecisionOverflowError, match="16-bit"):
            limits.check_native(32768, "integer sum")
