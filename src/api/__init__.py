"""
どこで: `api` 入口（高レベル公開 API）。
何を: 実行ランナー `run_donut` と、フレームを 1 枚ずつ得るための部品を再輸出。
なぜ: 利用者が単一名前空間から実行/埋め込みまで完結できるようにするため。

Usage:
    from api import run

    run(duration="3s")

    # 端末を使わずにフレームだけ得る
    from api import FrameChannel, FrameProducer, FixedStepClock

    producer = FrameProducer(FrameChannel(), clock=FixedStepClock(1 / 60))
    frames = [producer.tick() for _ in range(3)]
"""

from engine.core.clock import FixedStepClock, ManualClock, MonotonicClock
from engine.core.rotation import RotationState
from engine.runtime.channel import FrameChannel
from engine.runtime.frame import Frame
from engine.runtime.worker import FrameProducer, FrameProducerError
from engine.ui.hud.config import HUDConfig

from .donut import run_donut
from .donut import run_donut as run

__all__ = [
    # メインAPI
    "run_donut",  # 実行（詳細指定）
    "run",  # 実行（エイリアス、簡易）
    # 部品（埋め込み/テスト用）
    "Frame",
    "FrameChannel",
    "FrameProducer",
    "FrameProducerError",
    "HUDConfig",
    "RotationState",
    "FixedStepClock",
    "ManualClock",
    "MonotonicClock",
]

__version__ = "0.1.0"
