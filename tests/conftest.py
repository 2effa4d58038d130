"""共通フィクスチャ。

- ラスタライザは純 Python 経路で実行（JIT コンパイル待ちを避ける。JIT 経路は tests/optional）
- 小さなバッファ/クロック試料
"""

from __future__ import annotations

import os

os.environ.setdefault("ASCIITORUS_USE_NUMBA", "0")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from engine.core.clock import FixedStepClock  # noqa: E402
from engine.raster import grid  # noqa: E402
from engine.runtime.channel import FrameChannel  # noqa: E402
from engine.runtime.worker import FrameProducer  # noqa: E402


@pytest.fixture()
def char_buffer() -> np.ndarray:
    return grid.new_char_buffer()


@pytest.fixture()
def depth_buffer() -> np.ndarray:
    return grid.new_depth_buffer()


@pytest.fixture()
def clock_60fps() -> FixedStepClock:
    """1 回の `now()` で 1/60 秒進むクロック（表示 FPS が 60.0 になる）。"""
    return FixedStepClock(1.0 / 60.0)


@pytest.fixture()
def producer(clock_60fps: FixedStepClock):
    """同期 `tick()` 用のプロデューサ（スレッドは起動しない）。"""
    p = FrameProducer(FrameChannel(), clock=clock_60fps)
    yield p
    p.close()
