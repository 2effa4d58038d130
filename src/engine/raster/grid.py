"""
どこで: `engine.raster.grid`。
何を: 80x22 の文字グリッドをフラットな 1 次元配列として扱うための定数と (row, col) → index 変換。
なぜ: ネストしたコンテナを避けつつ、行ストライドなどのマジックナンバーを 1 箇所に閉じ込めるため。

表現:
- 文字バッファは `<u4`（UCS-4 コードポイント）の 1 次元 ndarray。各行の末尾列は改行。
- 深度バッファは同じ長さの float64 ndarray（値が大きいほど手前）。
"""

from __future__ import annotations

import numpy as np

ROW_STRIDE = 80  # 1 行の長さ（改行列を含む）
ROWS = 22
VISIBLE_COLS = ROW_STRIDE - 1  # 改行列を除いた可視幅
SIZE = ROW_STRIDE * ROWS

NEWLINE = ord("\n")
BLANK = ord(" ")

CHAR_DTYPE = np.dtype("<u4")
DEPTH_DTYPE = np.float64


def index(row: int, col: int) -> int:
    """(row, col) をフラット配列の添字へ変換する。"""
    if not (0 <= row < ROWS and 0 <= col < ROW_STRIDE):
        raise IndexError(f"cell out of range: row={row}, col={col}")
    return row * ROW_STRIDE + col


def new_char_buffer() -> np.ndarray:
    """空白と改行で初期化済みの文字バッファを確保する。"""
    buf = np.empty(SIZE, dtype=CHAR_DTYPE)
    clear_chars(buf)
    return buf


def new_depth_buffer() -> np.ndarray:
    return np.zeros(SIZE, dtype=DEPTH_DTYPE)


def clear_chars(buf: np.ndarray) -> None:
    """全セルを空白に、各行の末尾列を改行にする。"""
    buf[:] = BLANK
    buf[VISIBLE_COLS::ROW_STRIDE] = NEWLINE


def to_text(buf: np.ndarray) -> str:
    """文字バッファを str へ変換する（改行込み）。"""
    return np.ascontiguousarray(buf, dtype=CHAR_DTYPE).tobytes().decode("utf-32-le")


def from_text(text: str) -> np.ndarray:
    """`to_text` の逆変換。長さは検証しない（テスト/デバッグ用）。"""
    return np.frombuffer(text.encode("utf-32-le"), dtype=CHAR_DTYPE).copy()


def encode_ramp(chars: str) -> np.ndarray:
    """輝度ランプ文字列をカーネルに渡せるコードポイント配列へ変換する。"""
    return np.array([ord(c) for c in chars], dtype=CHAR_DTYPE)


__all__ = [
    "ROW_STRIDE",
    "ROWS",
    "VISIBLE_COLS",
    "SIZE",
    "NEWLINE",
    "BLANK",
    "CHAR_DTYPE",
    "DEPTH_DTYPE",
    "index",
    "new_char_buffer",
    "new_depth_buffer",
    "clear_chars",
    "to_text",
    "from_text",
    "encode_ramp",
]
