"""
どこで: `engine.runtime` の受け渡し層。
何を: 容量 1 のキューでプロデューサから表示ループへ `Frame`（または例外）を 1 つずつ渡す。
なぜ: 空きが無ければプロデューサを待たせ（背圧）、常に生成順で届けるため。
"""

from __future__ import annotations

import threading
from queue import Empty, Full, Queue

from .frame import Frame


class FrameChannel:
    """単一スロットのハンドオフチャネル。

    - `put` はスロットが空くか、`cancel` がセットされるまで待つ。
    - `get` は `timeout` 秒待って何も無ければ None を返す。
    - 例外が流れてきた場合は受信側で送出し直す。
    """

    def __init__(self, poll_interval: float = 0.05) -> None:
        self._q: Queue[Frame | BaseException] = Queue(maxsize=1)
        self._poll = float(poll_interval)

    def put(self, item: Frame | BaseException, cancel: threading.Event | None = None) -> bool:
        """`item` を投入する。キャンセルされた場合は投入せず False を返す。"""
        while True:
            if cancel is not None and cancel.is_set():
                return False
            try:
                self._q.put(item, timeout=self._poll)
                return True
            except Full:
                continue  # 受信側が前のフレームをまだ取っていない

    def get(self, timeout: float | None = None) -> Frame | None:
        """次のフレームを取り出す（タイムアウト時は None）。"""
        try:
            if timeout is not None and timeout <= 0.0:
                item = self._q.get_nowait()
            else:
                item = self._q.get(timeout=timeout)
        except Empty:
            return None

        # 例外は親に投げ直す
        if isinstance(item, BaseException):
            raise item
        return item

    def full(self) -> bool:
        return self._q.full()


__all__ = ["FrameChannel"]
