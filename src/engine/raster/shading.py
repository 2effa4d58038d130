"""
どこで: `engine.raster.shading`。
何を: 輝度ランプ（暗→明の 12 文字）と、生の輝度値からランプ添字への量子化。
なぜ: ランバート近似の陰影を文字の密度で表すため。

上限について:
- 生の輝度は単位法線と光源方向 (0, 1, -1) の内積なので |値| <= √2。
  8·√2 ≈ 11.31 を切り捨てると 11 となり、ランプ長 12 に収まる。
- 解析的には不要だが、上限 11 のクランプも明示的に入れている（カーネル側も同じ）。
"""

from __future__ import annotations

LUMINANCE_SCALE = 8.0

ASCII_RAMP = ".,-~:;=!*#$@"
GLYPH_RAMP = "∙◦▪●☼◊≠≡☺♦☻◙"

RAMPS: dict[str, str] = {
    "ascii": ASCII_RAMP,
    "glyph": GLYPH_RAMP,
}

RAMP_LEN = len(ASCII_RAMP)
MAX_INDEX = RAMP_LEN - 1


def resolve_ramp(name: str) -> str:
    """ランプ名（ascii/glyph）をランプ文字列に解決する。"""
    key = str(name).strip().lower()
    if key not in RAMPS:
        allowed = ", ".join(sorted(RAMPS))
        raise ValueError(f"invalid ramp: {name!r}; allowed={allowed}")
    return RAMPS[key]


def luminance_index(raw: float) -> int:
    """生の輝度値を [0, 11] のランプ添字へ量子化する（0 方向へ切り捨て）。"""
    n = int(LUMINANCE_SCALE * raw)
    if n < 0:
        return 0
    if n > MAX_INDEX:
        return MAX_INDEX
    return n


def shade(raw: float, ramp: str = ASCII_RAMP) -> str:
    """生の輝度値に対応するランプ文字を返す。"""
    return ramp[luminance_index(raw)]


__all__ = [
    "LUMINANCE_SCALE",
    "ASCII_RAMP",
    "GLYPH_RAMP",
    "RAMPS",
    "RAMP_LEN",
    "MAX_INDEX",
    "resolve_ramp",
    "luminance_index",
    "shade",
]
