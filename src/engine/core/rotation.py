"""
どこで: `engine.core.rotation`。
何を: ヨー/ロールの 2 角を保持する不変の `RotationState` と 1 tick あたりの増分。
なぜ: 角度は三角関数に渡す前に巻き戻さない（表示時のみ正規化）という約束を型で固定するため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

YAW_STEP = 0.07  # rad / tick
ROLL_STEP = 0.03  # rad / tick

RAD_TO_DEG = 180.0 / math.pi


def normalize_degrees(degree: float) -> float:
    """角度 [deg] を [0, 360) へ正規化する（360 の整数倍は捨てる）。

    ラジアン→度の変換誤差で 359.99999... になった値は 0.0 に寄せる。
    """
    d = math.fmod(degree, 360.0)
    if d < 0.0:
        d += 360.0
    if d >= 360.0 - 1e-9:
        return 0.0
    return d


def display_degrees(radians: float) -> float:
    """累積角 [rad] を表示用の [0, 360) 度に変換する。"""
    return normalize_degrees(radians * RAD_TO_DEG)


@dataclass(frozen=True, slots=True)
class RotationState:
    """累積回転角（上限なし）。"""

    yaw: float = 0.0
    roll: float = 0.0

    def advanced(self, yaw_step: float = YAW_STEP, roll_step: float = ROLL_STEP) -> "RotationState":
        """1 tick 進めた新しい状態を返す。"""
        return RotationState(self.yaw + yaw_step, self.roll + roll_step)

    @property
    def yaw_degrees(self) -> float:
        return display_degrees(self.yaw)

    @property
    def roll_degrees(self) -> float:
        return display_degrees(self.roll)


__all__ = [
    "YAW_STEP",
    "ROLL_STEP",
    "RAD_TO_DEG",
    "normalize_degrees",
    "display_degrees",
    "RotationState",
]
