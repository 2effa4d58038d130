"""
どこで: `api.donut_runner.utils`（純粋関数/小ヘルパ）。
何を: 実行時間・フレーム遅延・輝度ランプ・統計パネル設定を「明示指定 > 設定ファイル > 既定」で解決する。
なぜ: `api.donut` を薄く保ち、テスト容易性と再利用性を上げるため。
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping

from engine.raster.shading import resolve_ramp as _resolve_ramp_name
from engine.ui.hud.config import HUDConfig
from util.utils import config_section

from .duration import parse_duration

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 5.0  # sec
DEFAULT_FRAME_DELAY_MS = 30.0
DEFAULT_RAMP = "ascii"


def resolve_duration(requested: float | str | None, cfg: Mapping[str, Any] | None = None) -> float:
    """実行時間 [sec] を解決する。

    - 明示指定があればそれを優先（不正な書式は `ValueError`）。
    - それ以外は `run.duration` を読み取り、失敗時は既定値。
    """
    if requested is not None:
        return parse_duration(requested)
    raw = config_section(dict(cfg or {}), "run").get("duration")
    if raw is None:
        return DEFAULT_DURATION
    try:
        return parse_duration(raw)
    except ValueError as exc:
        logger.warning("ignoring run.duration from config: %s", exc)
        return DEFAULT_DURATION


def resolve_frame_delay(requested: float | None, cfg: Mapping[str, Any] | None = None) -> float:
    """表示 1 回ごとの待ち時間 [sec] を解決する（負値は `ValueError`）。

    明示指定は秒、設定ファイルの `display.frame_delay_ms` はミリ秒。
    """
    if requested is not None:
        delay = float(requested)
    else:
        raw = config_section(dict(cfg or {}), "display").get("frame_delay_ms", DEFAULT_FRAME_DELAY_MS)
        try:
            delay = float(raw) / 1e3
        except (TypeError, ValueError):
            logger.warning("ignoring display.frame_delay_ms from config: %r", raw)
            delay = DEFAULT_FRAME_DELAY_MS / 1e3
    if delay < 0.0:
        raise ValueError(f"frame delay must be >= 0, got {delay}")
    return delay


def resolve_ramp(requested: str | None, cfg: Mapping[str, Any] | None = None) -> str:
    """輝度ランプ名（ascii/glyph）を解決してランプ文字列を返す。"""
    name = requested
    if name is None:
        name = config_section(dict(cfg or {}), "shading").get("ramp", DEFAULT_RAMP)
    return _resolve_ramp_name(str(name))


def resolve_hud_config(
    show_hud: bool | None,
    hud_config: HUDConfig | None,
    cfg: Mapping[str, Any] | None = None,
) -> HUDConfig:
    """統計パネル設定を解決する（優先: show_hud 明示 > hud_config > 設定ファイル > 既定）。"""
    if hud_config is None:
        hud_config = HUDConfig.from_mapping(config_section(dict(cfg or {}), "hud"))
    if show_hud is None:
        return hud_config
    return replace(hud_config, enabled=bool(show_hud))


__all__ = [
    "DEFAULT_DURATION",
    "DEFAULT_FRAME_DELAY_MS",
    "DEFAULT_RAMP",
    "resolve_duration",
    "resolve_frame_delay",
    "resolve_ramp",
    "resolve_hud_config",
]
