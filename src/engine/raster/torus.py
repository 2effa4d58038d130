"""
どこで: `engine.raster.torus`。
何を: 回転したトーラス表面を (theta, phi) で走査し、透視投影・深度テスト・陰影付けを経て
      フラットな文字バッファへ書き込む。
なぜ: 1 tick ぶんのフレーム本体（枠/統計を除く）を生成するラスタライザの中核。

処理（1 回の `render` 呼び出し）:
1) 回転角を 1 tick 進める（巻き戻しなし）。
2) 文字バッファを空白/改行で、深度バッファを 0 でクリア。
3) theta（管の周方向, 0.07 刻み）× phi（リング方向, 0.02 刻み）の二重走査。
   刻み幅は点密度を決めるので変えないこと（粗くすると表面に穴が空く）。
4) 各サンプルで D = 1/(z + 5) を求め、D が深度バッファの値より大きい場合のみ上書き。

注意:
- 内側ループは Numba でコンパイルする。`ASCIITORUS_USE_NUMBA=0` で同じ関数を
  純 Python として実行する（結果は同一）。
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from common import settings
from engine.core.rotation import RotationState

from .grid import CHAR_DTYPE, ROW_STRIDE, ROWS, VISIBLE_COLS, clear_chars, encode_ramp
from .shading import ASCII_RAMP, LUMINANCE_SCALE

logger = logging.getLogger(__name__)

# 幾何/カメラ定数（可視領域 79x22 に合わせた固定値）
MINOR_RADIUS = 1.0
MAJOR_OFFSET = 2.0
CAMERA_DISTANCE = 5.0
SCALE_X = 30.0
SCALE_Y = 15.0
OFFSET_X = 40.0
OFFSET_Y = 12.0

# 走査範囲と刻み
TURN = 6.28
THETA_STEP = 0.07
PHI_STEP = 0.02


@njit(cache=True)
def _draw_torus(
    buf: np.ndarray,
    depth: np.ndarray,
    s_a: float,
    c_a: float,
    s_b: float,
    c_b: float,
    ramp: np.ndarray,
) -> int:
    """クリア済みバッファへトーラスを描き、書き込んだサンプル数を返す。"""
    max_index = ramp.shape[0] - 1
    written = 0
    theta = 0.0
    while theta < TURN:
        st = math.sin(theta)
        ct = math.cos(theta)
        # 管中心からのオフセット（= R + r·cos(theta)）
        h = MINOR_RADIUS * ct + MAJOR_OFFSET

        phi = 0.0
        while phi < TURN:
            sp = math.sin(phi)
            cp = math.cos(phi)

            d = 1.0 / (sp * h * s_a + st * c_a + CAMERA_DISTANCE)
            t = sp * h * c_a - st * s_a

            x = int(OFFSET_X + SCALE_X * d * (cp * h * c_b - t * s_b))
            y = int(OFFSET_Y + SCALE_Y * d * (cp * h * s_b + t * c_b))

            n = int(
                LUMINANCE_SCALE
                * ((st * s_a - sp * ct * c_a) * c_b - sp * ct * s_a - st * c_a - cp * ct * s_b)
            )

            if 0 <= y < ROWS and 0 <= x < VISIBLE_COLS:
                o = x + ROW_STRIDE * y
                if d > depth[o]:
                    depth[o] = d
                    if n < 0:
                        n = 0
                    elif n > max_index:
                        n = max_index
                    buf[o] = ramp[n]
                    written += 1
            phi += PHI_STEP
        theta += THETA_STEP
    return written


@lru_cache(maxsize=8)
def ramp_codes(ramp: str) -> np.ndarray:
    """ランプ文字列のコードポイント配列（読み取り専用・キャッシュ済み）。"""
    codes = encode_ramp(ramp)
    codes.flags.writeable = False
    return codes


def clear(buffer: np.ndarray, depth: np.ndarray) -> None:
    """文字バッファを空白/改行に、深度バッファを 0 に戻す。"""
    clear_chars(buffer)
    depth[:] = 0.0


def _kernel():
    if settings.get().USE_NUMBA:
        return _draw_torus
    return _draw_torus.py_func


def render(
    buffer: np.ndarray,
    depth: np.ndarray,
    rotation: RotationState,
    *,
    ramp: str = ASCII_RAMP,
) -> RotationState:
    """1 tick 分のトーラスを `buffer`/`depth` へ描画し、進めた回転状態を返す。

    Parameters
    ----------
    buffer : np.ndarray
        `<u4` の文字バッファ（長さ `grid.SIZE`）。その場で上書きされる。
    depth : np.ndarray
        float64 の深度バッファ（同じ長さ）。その場で上書きされる。
    rotation : RotationState
        直前の回転状態。描画には 1 tick 進めた角度を使う。
    ramp : str, default ASCII_RAMP
        暗→明の 12 文字。
    """
    if buffer.dtype != CHAR_DTYPE or buffer.shape != depth.shape:
        raise ValueError(
            f"buffer/depth mismatch: dtype={buffer.dtype}, shapes={buffer.shape}/{depth.shape}"
        )
    nxt = rotation.advanced()
    clear(buffer, depth)
    written = _kernel()(
        buffer,
        depth,
        math.sin(nxt.yaw),
        math.cos(nxt.yaw),
        math.sin(nxt.roll),
        math.cos(nxt.roll),
        ramp_codes(ramp),
    )
    logger.debug("torus rasterized: yaw=%.3f roll=%.3f written=%d", nxt.yaw, nxt.roll, written)
    return nxt


__all__ = [
    "MINOR_RADIUS",
    "MAJOR_OFFSET",
    "CAMERA_DISTANCE",
    "SCALE_X",
    "SCALE_Y",
    "OFFSET_X",
    "OFFSET_Y",
    "TURN",
    "THETA_STEP",
    "PHI_STEP",
    "clear",
    "ramp_codes",
    "render",
]
