"""
どこで: `engine.ui.hud.config`。
何を: 統計パネルの設定（有効/無効・表示順・右端位置）を定義する。
なぜ: パネルの表示を宣言的に制御し、枠の T 字接続位置と整合させるため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .fields import DEFAULT_ORDER, FPS, FRAME, ROLL, YAW

_KNOWN = frozenset((FRAME, FPS, ROLL, YAW))


@dataclass(frozen=True)
class HUDConfig:
    """統計パネルの表示設定。

    Parameters
    ----------
    enabled : bool
        パネル全体の有効/無効。無効時は枠のみで T 字接続も描かない。
    order : tuple[str, ...]
        表示順（各要素は `fields` のキー）。
    panel_right : int
        各行の書き出し列を `panel_right - len(行)` とする基準列。
    """

    enabled: bool = True
    order: tuple[str, ...] = DEFAULT_ORDER
    panel_right: int = 77

    def __post_init__(self) -> None:
        unknown = [k for k in self.order if k not in _KNOWN]
        if unknown:
            raise ValueError(f"unknown HUD fields: {unknown}")
        if not self.order:
            raise ValueError("HUD order must not be empty")

    @property
    def panel_rows(self) -> int:
        """統計行の数（パネル下端の罫線はこの行に置く）。"""
        return len(self.order)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "HUDConfig":
        """設定ファイルの `hud` セクションから生成する（欠落キーは既定値）。"""
        if not data:
            return cls()
        kwargs: dict[str, Any] = {}
        if "enabled" in data:
            kwargs["enabled"] = bool(data["enabled"])
        if "order" in data and data["order"] is not None:
            kwargs["order"] = tuple(str(k) for k in data["order"])
        if "panel_right" in data:
            kwargs["panel_right"] = int(data["panel_right"])
        return cls(**kwargs)


__all__ = ["HUDConfig"]
