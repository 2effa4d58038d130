import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from api.donut_runner.duration import parse_duration
from engine.core.rotation import RotationState, normalize_degrees
from engine.raster import grid
from engine.raster.shading import MAX_INDEX, luminance_index
from engine.ui.formatter import FRAME_WIDTH, fit_width
from engine.ui.hud.overlay import splice


@given(st.floats(-1e7, 1e7, allow_nan=False))
def test_normalized_degrees_are_in_range(deg):
    d = normalize_degrees(deg)
    assert 0.0 <= d < 360.0


@given(st.floats(-1e4, 1e4), st.floats(-1e4, 1e4))
def test_displayed_angles_are_in_range(yaw, roll):
    r = RotationState(yaw, roll)
    assert 0.0 <= r.yaw_degrees < 360.0
    assert 0.0 <= r.roll_degrees < 360.0


@given(st.floats(-50, 50, allow_nan=False))
def test_luminance_index_is_bounded(raw):
    assert 0 <= luminance_index(raw) <= MAX_INDEX


@given(st.text(max_size=200))
def test_fit_width_is_exact(line):
    assert len(fit_width(line)) == FRAME_WIDTH


@given(
    st.integers(0, grid.ROWS - 1),
    st.integers(0, 200),
    st.text(alphabet=st.characters(blacklist_characters="\n"), max_size=120),
)
def test_splice_never_touches_newline_column(row, col, text):
    buf = grid.new_char_buffer()
    n = splice(buf, row, col, text)
    assert 0 <= n <= len(text)
    assert np.all(buf[grid.ROW_STRIDE - 1 :: grid.ROW_STRIDE] == grid.NEWLINE)


@given(st.integers(0, 10_000), st.integers(0, 999))
def test_duration_seconds_and_milliseconds_agree(s, ms):
    assert parse_duration(f"{s}s{ms}ms") == pytest.approx(s + ms / 1000.0)
