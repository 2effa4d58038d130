"""
どこで: `engine.ui.hud` パッケージ。
何を: 統計パネルの設定・項目定義・計測・バッファへの上書きを提供する。
なぜ: パネルの有効/無効や表示項目を宣言的に制御し、整形処理から分離するため。
"""

from __future__ import annotations

from .config import HUDConfig
from .fields import FPS, FRAME, ROLL, YAW
from .overlay import overlay_stats, splice, stats_lines
from .sampler import StatsSampler, StatsSnapshot

__all__ = [
    "HUDConfig",
    "FRAME",
    "FPS",
    "ROLL",
    "YAW",
    "StatsSampler",
    "StatsSnapshot",
    "overlay_stats",
    "splice",
    "stats_lines",
]
