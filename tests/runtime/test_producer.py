from __future__ import annotations

import pytest

from engine.core.rotation import RotationState
from engine.runtime.channel import FrameChannel
from engine.runtime.worker import FrameProducer, FrameProducerError
from engine.ui.formatter import TOP, TOP_PLAIN
from engine.ui.hud.config import HUDConfig


def test_tick_produces_numbered_frames(producer: FrameProducer) -> None:
    f1 = producer.tick()
    f2 = producer.tick()
    assert (f1.frame_id, f2.frame_id) == (1, 2)
    assert producer.ticks == 2
    assert producer.rotation.yaw == pytest.approx(0.14)
    assert producer.rotation.roll == pytest.approx(0.06)
    assert f1.lines[0] == TOP
    assert len(f1.lines) == 25


def test_tick_respects_initial_rotation_and_hud(clock_60fps) -> None:
    p = FrameProducer(
        FrameChannel(),
        clock=clock_60fps,
        hud_config=HUDConfig(enabled=False),
        initial=RotationState(yaw=1.0, roll=2.0),
    )
    f = p.tick()
    assert f.lines[0] == TOP_PLAIN
    assert p.rotation.yaw == pytest.approx(1.07)
    assert p.rotation.roll == pytest.approx(2.03)
    p.close()


def test_frames_do_not_alias_buffers(producer: FrameProducer) -> None:
    """Frame は不変テキストなので、次の tick でバッファが再利用されても変わらない"""
    f1 = producer.tick()
    text = f1.text
    for _ in range(3):
        producer.tick()
    assert f1.text == text


def test_run_stops_at_max_frames(clock_60fps) -> None:
    ch = FrameChannel(poll_interval=0.01)
    p = FrameProducer(ch, clock=clock_60fps, max_frames=1)
    p.run()
    assert p.ticks == 1
    assert ch.get(timeout=0.0).frame_id == 1


def test_run_wraps_errors_with_frame_id(monkeypatch: pytest.MonkeyPatch, clock_60fps) -> None:
    import engine.runtime.worker as worker

    def _boom(*_a, **_k):
        raise ZeroDivisionError("bad math")

    monkeypatch.setattr(worker, "render", _boom)
    ch = FrameChannel(poll_interval=0.01)
    p = FrameProducer(ch, clock=clock_60fps)
    p.run()
    with pytest.raises(FrameProducerError) as ei:
        ch.get(timeout=0.1)
    assert ei.value.frame_id == 1
    assert isinstance(ei.value.original, ZeroDivisionError)


def test_close_is_idempotent_and_blocks_restart(producer: FrameProducer) -> None:
    producer.close()
    producer.close()
    assert producer.cancelled
    with pytest.raises(RuntimeError):
        producer.start()
