"""
どこで: `api.donut_runner.duration`。
何を: `5s` / `300ms` / `1m30s` / `1.5h` 形式の時間指定を秒（float）へ変換する。
なぜ: CLI の `-d` と設定ファイルの `run.duration` で同じ書式を受け付けるため。

書式:
- `[+-]` 符号の後に「数値 + 単位」を 1 個以上連結（単位: ns, us, µs, ms, s, m, h）。
- 単位なしの数値は秒とみなす。`0` も可。
"""

from __future__ import annotations

import math
import re

_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # U+00B5
    "μs": 1e-6,  # U+03BC
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

# 2 文字単位を先に試す（"ms" と "m" の曖昧さ回避）
_TOKEN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(value: str | float | int) -> float:
    """時間指定を秒に変換する（不正な書式は `ValueError`）。"""
    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError(f"invalid duration: {value!r}")
        return float(value)

    text = str(value).strip()
    s = text
    sign = 1.0
    if s[:1] in ("+", "-"):
        sign = -1.0 if s[0] == "-" else 1.0
        s = s[1:]
    if not s:
        raise ValueError(f"invalid duration: {value!r}")

    # 単位なし → 秒
    try:
        bare = float(s)
    except ValueError:
        bare = None
    if bare is not None:
        if not math.isfinite(bare):
            raise ValueError(f"invalid duration: {value!r}")
        return sign * bare

    total = 0.0
    pos = 0
    for m in _TOKEN.finditer(s):
        if m.start() != pos:
            break
        total += float(m.group(1)) * _UNITS[m.group(2)]
        pos = m.end()
    if pos == 0 or pos != len(s):
        raise ValueError(f"invalid duration: {value!r}")
    return sign * total


def format_duration(seconds: float) -> str:
    """ログ表示用の短い表記（例: 5s, 250ms）。"""
    if seconds != 0 and abs(seconds) < 1.0:
        return f"{seconds * 1e3:g}ms"
    return f"{seconds:g}s"


__all__ = ["parse_duration", "format_duration"]
