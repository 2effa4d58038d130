from __future__ import annotations

import pytest

from engine.core.clock import FixedStepClock, ManualClock, MonotonicClock


def test_monotonic_clock_never_goes_backwards() -> None:
    c = MonotonicClock()
    a = c.now()
    b = c.now()
    assert b >= a


def test_manual_clock_moves_only_on_advance() -> None:
    c = ManualClock(start=10.0)
    assert c.now() == 10.0
    assert c.now() == 10.0
    c.advance(0.5)
    assert c.now() == pytest.approx(10.5)


def test_manual_clock_rejects_negative_dt() -> None:
    with pytest.raises(ValueError):
        ManualClock().advance(-1.0)


def test_fixed_step_clock_sequence() -> None:
    c = FixedStepClock(0.25, start=1.0)
    assert [c.now() for _ in range(4)] == [1.0, 1.25, 1.5, 1.75]


@pytest.mark.parametrize("step", [0.0, -0.1])
def test_fixed_step_clock_rejects_non_positive_step(step: float) -> None:
    with pytest.raises(ValueError):
        FixedStepClock(step)
