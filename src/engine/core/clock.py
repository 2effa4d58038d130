"""
どこで: `engine.core` の時刻源。
何を: 経過時間の基準となる `Clock` Protocol と、実時間/手動/固定ステップの実装。
なぜ: FPS/経過時間の計算を壁時計から切り離し、テストで決定的に再現できるようにするため。
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """単調増加する秒単位の時刻を返すインターフェース。"""

    def now(self) -> float:
        """現在時刻 [sec] を返す（起点は実装依存）。"""


class MonotonicClock:
    """`time.perf_counter` ベースの実時間クロック。"""

    def now(self) -> float:
        return time.perf_counter()


class ManualClock:
    """`advance()` でのみ進むクロック（テスト用）。"""

    def __init__(self, start: float = 0.0) -> None:
        self._t = float(start)

    def now(self) -> float:
        return self._t

    def advance(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self._t += float(dt)


class FixedStepClock:
    """`now()` を呼ぶたびに `step` 秒ずつ進むクロック。

    最初の呼び出しは `start` を返す。プロデューサは起点で 1 回、各フレームで 1 回
    `now()` を呼ぶため、step=1/60 なら表示 FPS はちょうど 60.0 になる。
    """

    def __init__(self, step: float, start: float = 0.0) -> None:
        if step <= 0:
            raise ValueError(f"step must be > 0, got {step}")
        self._step = float(step)
        self._calls = 0
        self._start = float(start)

    def now(self) -> float:
        # start + calls * step（累積加算しない）
        t = self._start + self._calls * self._step
        self._calls += 1
        return t


__all__ = ["Clock", "MonotonicClock", "ManualClock", "FixedStepClock"]
