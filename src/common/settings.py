"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str


@dataclass
class _Settings:
    # Rasterizer
    USE_NUMBA: bool = True

    # Logging（アニメーション出力と混ざらないよう既定は WARNING）
    LOG_LEVEL: str = "WARNING"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    _settings.USE_NUMBA = env_bool("ASCIITORUS_USE_NUMBA", True)
    _settings.LOG_LEVEL = env_str("ASCIITORUS_LOG_LEVEL", "WARNING").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
