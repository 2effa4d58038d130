"""
どこで: `engine.core` サブパッケージ。
何を: 回転状態（RotationState）と時刻源（Clock）を提供。
なぜ: ラスタライザ/統計/ランタイムから共通に参照される最小の基盤を分離するため。
"""

from .clock import Clock, FixedStepClock, ManualClock, MonotonicClock
from .rotation import ROLL_STEP, YAW_STEP, RotationState

__all__ = [
    "Clock",
    "MonotonicClock",
    "ManualClock",
    "FixedStepClock",
    "RotationState",
    "YAW_STEP",
    "ROLL_STEP",
]
