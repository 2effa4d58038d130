"""
どこで: `engine.runtime.buffer`。
何を: プロデューサが所有する 2 枚の文字バッファと 1 枚の深度バッファ（tick の偶奇で選択）。
なぜ: グローバルな共有バッファをなくし、所有権をプロデューサの tick 関数へ明示的に渡すため。
"""

from __future__ import annotations

import numpy as np

from engine.raster.grid import new_char_buffer, new_depth_buffer


class FrameArena:
    """事前確保したバッファを再利用するだけの入れ物。"""

    def __init__(self) -> None:
        self._chars = (new_char_buffer(), new_char_buffer())
        self._depth = new_depth_buffer()

    def acquire(self, tick: int) -> tuple[np.ndarray, np.ndarray]:
        """`tick` の偶奇に対応する文字バッファと共有の深度バッファを返す。"""
        return self._chars[tick % 2], self._depth


__all__ = ["FrameArena"]
