"""
内部ヘルパ群（API 非公開）。

どこで: `api.donut_runner`
何を: `api.donut` の補助（時間指定のパース/設定解決）を分離し、
      `run_donut` 本体を薄く保つための内部モジュール群。
なぜ: シンプルさと可読性を維持しつつ、責務を小分割するため。
"""

from __future__ import annotations

__all__: list[str] = []
