"""
どこで: `engine.ui` サブパッケージ。
何を: フレーム整形（統計パネル・罫線）と端末表示を提供。
なぜ: ラスタライズ結果を人が見る形へ変換する責務をまとめるため。
"""

from .formatter import format_frame, make_frame
from .terminal import TerminalDisplay

__all__ = ["format_frame", "make_frame", "TerminalDisplay"]
