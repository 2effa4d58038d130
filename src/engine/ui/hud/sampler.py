"""
どこで: `engine.ui.hud` の計測サブモジュール。
何を: フレーム数と経過時間から FPS を求め、回転角とあわせて表示用の文字列辞書にする。
なぜ: 統計パネルの値を時刻源（Clock）経由で算出し、テストで決定的に再現できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.core.clock import Clock, MonotonicClock
from engine.core.rotation import RotationState

from .fields import DEGREE_SIGN, FPS, FRAME, ROLL, YAW


@dataclass(frozen=True, slots=True)
class StatsSnapshot:
    """1 フレーム分の統計値。"""

    frame_count: int
    elapsed: float
    fps: float
    yaw_degrees: float
    roll_degrees: float

    def formatted(self) -> dict[str, str]:
        """フィールド名 → 表示文字列。"""
        return {
            FRAME: f"{self.frame_count:5d}",
            FPS: f"{self.fps:5.1f}",
            ROLL: f"{self.roll_degrees:5.1f}{DEGREE_SIGN}",
            YAW: f"{self.yaw_degrees:5.1f}{DEGREE_SIGN}",
        }


class StatsSampler:
    """フレーム数（単調増加・リセットなし）と起点からの経過時間を保持する。

    起点は生成時の `clock.now()`。経過 0 秒のときの FPS は 0.0 とする。
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or MonotonicClock()
        self._t0 = self._clock.now()
        self._frames = 0

    @property
    def frame_count(self) -> int:
        return self._frames

    def record(self, rotation: RotationState) -> StatsSnapshot:
        """1 フレームを計上し、その時点の統計を返す。"""
        self._frames += 1
        elapsed = self._clock.now() - self._t0
        fps = self._frames / elapsed if elapsed > 0.0 else 0.0
        return StatsSnapshot(
            frame_count=self._frames,
            elapsed=elapsed,
            fps=fps,
            yaw_degrees=rotation.yaw_degrees,
            roll_degrees=rotation.roll_degrees,
        )


__all__ = ["StatsSnapshot", "StatsSampler"]
