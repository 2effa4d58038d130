"""
どこで: `engine.raster` サブパッケージ。
何を: トーラスのラスタライズ（投影・深度テスト・陰影）と文字グリッドの表現を提供。
なぜ: フレーム本体の生成を枠/統計の整形から切り離し、単体で検証できるようにするため。
"""

from . import grid
from .shading import ASCII_RAMP, GLYPH_RAMP, luminance_index, resolve_ramp, shade
from .torus import clear, render

__all__ = [
    "grid",
    "ASCII_RAMP",
    "GLYPH_RAMP",
    "luminance_index",
    "resolve_ramp",
    "shade",
    "clear",
    "render",
]
