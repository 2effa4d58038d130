"""
どこで: `engine.runtime` の表示ペイロード型。
何を: 表示ループへ渡す 1 フレームぶんの整形済みテキスト（不変）。
なぜ: プロデューサ/チャネル/表示ループ間の契約を明示し、受け渡し後の変更を防ぐため。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Frame:
    """枠付け済みの 1 フレーム。"""

    text: str
    frame_id: int = 0  # プロデューサ側で 1 から連番付与

    def __str__(self) -> str:
        return self.text

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")


__all__ = ["Frame"]
