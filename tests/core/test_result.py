"""
Tests for the Result[P] envelope and the Timer that fills its timing field.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_gram_schmidt",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_gram_schmidt"
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("slow convergence: 900 iterations",),
        )
        assert result.has_warning("slow convergence")
        assert not result.has_warning("singular")


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section("factor"):
                pass
        timer.stop()
        timing = timer.result()
        assert set(timing) == {"total_seconds", "factor"}
        assert timing["factor"] >= 0.0
        assert timing["total_seconds"] >= timing["factor"]

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context_manager(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()["total_seconds"] >= 0.0
