"""
どこで: `engine.ui.hud.fields`。
何を: 統計パネルに用いる標準フィールド名（ラベルキー）を定義する。
なぜ: 項目名の重複や表記ゆれを避け、順序指定や参照を安定化するため。
"""

from __future__ import annotations

# 表示キー（ラベルの左側に出るキー文字列）
FRAME = "Frame"
FPS = "FPS"
ROLL = "Roll"
YAW = "Yaw"

DEFAULT_ORDER = (FRAME, FPS, ROLL, YAW)

# ラベルは右寄せでこの幅に揃える（" Frame", "   FPS" ...）
LABEL_WIDTH = 6

DEGREE_SIGN = "˚"

__all__ = [
    "FRAME",
    "FPS",
    "ROLL",
    "YAW",
    "DEFAULT_ORDER",
    "LABEL_WIDTH",
    "DEGREE_SIGN",
]
