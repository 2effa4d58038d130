"""
どこで: `engine.ui.terminal`。
何を: ANSI のカーソル復帰/画面消去に続けて `Frame` を出力ストリームへ書く表示器。
なぜ: 表示ループ側の I/O を 1 箇所にまとめ、テストで任意のストリームへ差し替えられるようにするため。

書き込み失敗（端末切断など）は DEBUG ログのみで無視する。
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from engine.runtime.frame import Frame

logger = logging.getLogger(__name__)

CLEAR_HOME = "\033[H\033[2J"
FORM_FEED = "\x0c"


class TerminalDisplay:
    """1 フレームごとに画面を消去して描き直す。"""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.frames_shown = 0

    def show(self, frame: Frame) -> None:
        try:
            self._stream.write(CLEAR_HOME)
            self._stream.write(f"{FORM_FEED}{frame.text}\n")
            self._stream.flush()
        except OSError as exc:
            logger.debug("terminal write failed (frame %d): %s", frame.frame_id, exc)
            return
        self.frames_shown += 1


__all__ = ["TerminalDisplay", "CLEAR_HOME", "FORM_FEED"]
