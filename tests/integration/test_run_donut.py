from __future__ import annotations

import io

import pytest

from api.donut import run_donut
from engine.runtime.worker import FrameProducerError
from engine.ui.formatter import BOTTOM, TOP, TOP_PLAIN
from engine.ui.terminal import CLEAR_HOME


def _frames(out: str) -> list[str]:
    return [chunk for chunk in out.split(CLEAR_HOME) if chunk]


@pytest.mark.integration
def test_run_donut_displays_frames_until_deadline(clock_60fps) -> None:
    out = io.StringIO()
    delays: list[float] = []
    rc = run_donut(
        2.0,
        stream=out,
        clock=clock_60fps,
        max_frames=2,
        sleep=delays.append,
    )
    assert rc == 0
    frames = _frames(out.getvalue())
    assert len(frames) == 2
    for chunk in frames:
        assert chunk.startswith("\x0c" + TOP + "\n")
        assert chunk.endswith(BOTTOM + "\n")
    assert delays == [pytest.approx(0.03)] * 2


@pytest.mark.integration
def test_run_donut_zero_duration_shows_nothing() -> None:
    out = io.StringIO()
    assert run_donut("0s", stream=out, sleep=lambda _s: None) == 0
    assert out.getvalue() == ""


@pytest.mark.integration
def test_run_donut_negative_duration_exits_immediately() -> None:
    out = io.StringIO()
    assert run_donut(-3.0, stream=out) == 0
    assert out.getvalue() == ""


@pytest.mark.integration
def test_run_donut_options(clock_60fps) -> None:
    out = io.StringIO()
    run_donut(
        "2s",
        frame_delay=0.0,
        ramp="glyph",
        show_hud=False,
        stream=out,
        clock=clock_60fps,
        max_frames=1,
    )
    (chunk,) = _frames(out.getvalue())
    assert chunk.startswith("\x0c" + TOP_PLAIN + "\n")
    assert "Frame:" not in chunk
    body = set(chunk) - set(" \n\x0c│┌┐└┘—")
    assert body and body <= set("∙◦▪●☼◊≠≡☺♦☻◙")


@pytest.mark.integration
def test_run_donut_propagates_producer_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    import engine.runtime.worker as worker

    def _boom(*_a, **_k):
        raise ValueError("broken raster")

    monkeypatch.setattr(worker, "render", _boom)
    with pytest.raises(FrameProducerError) as ei:
        run_donut(10.0, stream=io.StringIO(), sleep=lambda _s: None)
    assert ei.value.frame_id == 1
    assert isinstance(ei.value.original, ValueError)


@pytest.mark.integration
def test_run_donut_rejects_bad_duration() -> None:
    with pytest.raises(ValueError):
        run_donut("soon", stream=io.StringIO())
