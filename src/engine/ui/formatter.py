"""
どこで: `engine.ui.formatter`。
何を: 文字バッファに統計パネルを重ね、各行を固定幅に揃えて罫線で囲み、不変の `Frame` を作る。
なぜ: ラスタライズ結果をそのまま端末へ出せる最終形に整えるため。

レイアウト（既定）:
- 上端: `┌` + `—`×62 + `┬` + `—`×15 + `┐`（┬ は統計パネル左端の列。既定レイアウトでは 63）
- 各行: 80 文字に詰め/切り、先頭と末尾を `│` に置換。パネル下端の行は列 79 を `┤` に。
- 下端: `└` + `—`×78 + `┘`
- バッファは改行で終わるため、分割すると末尾に空行が 1 つでき、それも枠付きの行になる。
"""

from __future__ import annotations

import numpy as np

from engine.raster.grid import to_text
from engine.runtime.frame import Frame

from .hud.config import HUDConfig
from .hud.overlay import overlay_stats
from .hud.sampler import StatsSnapshot

FRAME_WIDTH = 80
SIDE = "│"
TEE_LEFT = "┤"
TEE_DOWN = "┬"
RULE = "—"
PANEL_COL = 63

TOP_PLAIN = "┌" + RULE * (FRAME_WIDTH - 2) + "┐"
BOTTOM = "└" + RULE * (FRAME_WIDTH - 2) + "┘"


def top_border(panel_col: int | None = PANEL_COL) -> str:
    """上端の罫線。`panel_col` の列に `┬` を置く（None なら `┬` なし）。"""
    if panel_col is None:
        return TOP_PLAIN
    col = min(FRAME_WIDTH - 2, max(1, panel_col))
    return "┌" + RULE * (col - 1) + TEE_DOWN + RULE * (FRAME_WIDTH - col - 2) + "┐"


TOP = top_border(PANEL_COL)


def fit_width(line: str, width: int = FRAME_WIDTH) -> str:
    """文字数（コードポイント数）で `width` に切り詰め、足りなければ空白で埋める。"""
    if len(line) > width:
        return line[:width]
    return line + " " * (width - len(line))


def frame_line(line: str, glyph: str = SIDE) -> str:
    """先頭と末尾の 1 文字を `glyph` に置き換える。"""
    if not line:
        return line
    if len(line) == 1:
        return glyph
    return glyph + line[1:-1] + glyph


def make_frame(
    text: str,
    *,
    junction_row: int | None = 4,
    panel_col: int = PANEL_COL,
    frame_id: int = 0,
) -> Frame:
    """改行区切りのテキストを枠で囲んだ `Frame` にする。

    `text` を改行で分割した全行を枠付けする。文字バッファは改行で終わるため末尾に空行が
    1 つでき、それも枠付きの行として残る（22 行のバッファ → 上端 + 23 行 + 下端の 25 行）。

    Parameters
    ----------
    text : str
        枠付け前のテキスト（通常は文字バッファ全体）。
    junction_row : int | None, default 4
        列 79 に `┤` を置く行。None なら T 字接続なし（上端も `┬` なし）。
    panel_col : int, default PANEL_COL
        上端の `┬` を置く列（統計パネルの左端の縦罫線と揃える）。
    frame_id : int, default 0
        `Frame.frame_id` に格納する番号。
    """
    lines = text.split("\n")
    framed: list[str] = []
    for i, raw in enumerate(lines):
        nl = frame_line(fit_width(raw, FRAME_WIDTH), SIDE)
        if junction_row is not None and i == junction_row:
            nl = nl[: FRAME_WIDTH - 1] + TEE_LEFT
        framed.append(nl)

    top = top_border(panel_col if junction_row is not None else None)
    return Frame("\n".join([top, *framed, BOTTOM]), frame_id=frame_id)


def format_frame(
    buffer: np.ndarray,
    stats: StatsSnapshot,
    config: HUDConfig | None = None,
) -> Frame:
    """統計パネルを `buffer` へ上書きし、枠付けした `Frame` を返す。

    `buffer` はその場で変更される（呼び出し側＝プロデューサの所有物）。
    """
    cfg = config or HUDConfig()
    if not cfg.enabled:
        return make_frame(to_text(buffer), junction_row=None, frame_id=stats.frame_count)
    col = overlay_stats(buffer, stats, cfg)
    return make_frame(
        to_text(buffer),
        junction_row=cfg.panel_rows,
        panel_col=col,
        frame_id=stats.frame_count,
    )


__all__ = [
    "FRAME_WIDTH",
    "SIDE",
    "TEE_LEFT",
    "TEE_DOWN",
    "TOP",
    "TOP_PLAIN",
    "top_border",
    "BOTTOM",
    "fit_width",
    "frame_line",
    "make_frame",
    "format_frame",
]
