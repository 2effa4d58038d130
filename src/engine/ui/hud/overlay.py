"""
どこで: `engine.ui.hud` の統計パネル描画モジュール。
何を: StatsSnapshot の値を固定位置の行として文字バッファへ上書き（splice）する。
なぜ: トーラス本体と同じバッファに重ねることで、枠付けを 1 回の整形で済ませるため。
"""

from __future__ import annotations

import numpy as np

from engine.raster.grid import VISIBLE_COLS, index

from .config import HUDConfig
from .fields import LABEL_WIDTH
from .sampler import StatsSnapshot

PANEL_EDGE = "│"
PANEL_CORNER = "└"
PANEL_RULE = "—"


def splice(buf: np.ndarray, row: int, col: int, text: str) -> int:
    """`row` 行の `col` 列から `text` を上書きし、書き込んだ文字数を返す。

    行末の改行列（とそれ以降）には書かない。はみ出し分は黙って切り捨てる。
    """
    if col >= VISIBLE_COLS:
        return 0
    start = index(row, col)
    n = max(0, min(len(text), VISIBLE_COLS - col))
    if n:
        buf[start : start + n] = [ord(c) for c in text[:n]]
    return n


def panel_bottom(col: int) -> str:
    """パネル下端の罫線（`col` から改行列の手前まで。右端は枠の `┤` に接続する）。"""
    return PANEL_CORNER + PANEL_RULE * max(0, VISIBLE_COLS - col - 1)


def stats_lines(snapshot: StatsSnapshot, config: HUDConfig | None = None) -> list[str]:
    """表示順に並んだパネル行（先頭に縦罫線）を返す。"""
    cfg = config or HUDConfig()
    values = snapshot.formatted()
    return [f"{PANEL_EDGE}{key:>{LABEL_WIDTH}}: {values[key]}" for key in cfg.order]


def panel_column(lines: list[str], config: HUDConfig) -> int:
    """パネルの書き出し列（先頭行の長さで右端に揃える）。

    列 0 は枠の縦罫線、列 79 は改行なので、結果は [1, 78] に収める。
    """
    return min(VISIBLE_COLS - 1, max(1, config.panel_right - len(lines[0])))


def overlay_stats(buf: np.ndarray, snapshot: StatsSnapshot, config: HUDConfig | None = None) -> int:
    """統計行とパネル下端の罫線を `buf` へ上書きし、パネルの書き出し列を返す。"""
    cfg = config or HUDConfig()
    lines = stats_lines(snapshot, cfg)
    col = panel_column(lines, cfg)
    for row, line in enumerate(lines):
        splice(buf, row, col, line)
    splice(buf, cfg.panel_rows, col, panel_bottom(col))
    return col


__all__ = [
    "PANEL_EDGE",
    "PANEL_CORNER",
    "PANEL_RULE",
    "panel_bottom",
    "splice",
    "stats_lines",
    "panel_column",
    "overlay_stats",
]
