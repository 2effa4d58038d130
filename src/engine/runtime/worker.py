"""
どこで: `engine.runtime` のプロデューサ実行層。
何を: 回転を進めてトーラスをラスタライズし、統計パネルと枠を付けた `Frame` を `FrameChannel` へ
      送り続ける `FrameProducer`。`tick()` は 1 フレームを同期的に生成し、`start()` は同じ処理を
      バックグラウンドスレッドで回す。例外は `FrameProducerError` でフレーム番号付きに包んで
      チャネル経由で受信側へ伝搬する。
なぜ: 生成（CPU 計算）を表示ループから切り離しつつ、キャンセルトークンで確実に停止できるようにするため。

所有権:
- 文字バッファ 2 枚と深度バッファ 1 枚は `FrameArena` としてプロデューサが専有する。
- チャネルへ渡すのは不変の `Frame` のみなので、ロックは不要。
"""

from __future__ import annotations

import logging
import threading

from engine.core.clock import Clock
from engine.core.rotation import RotationState
from engine.raster.shading import ASCII_RAMP
from engine.raster.torus import render
from engine.ui.formatter import format_frame
from engine.ui.hud.config import HUDConfig
from engine.ui.hud.sampler import StatsSampler

from .buffer import FrameArena
from .channel import FrameChannel
from .frame import Frame

logger = logging.getLogger(__name__)


class FrameProducerError(Exception):
    """フレーム生成中の例外をラップしてフレーム番号の文脈を付与。"""

    def __init__(self, frame_id: int, original: BaseException) -> None:
        super().__init__(f"FrameProducerError(frame_id={frame_id}): {original!r}")
        self.frame_id = frame_id
        self.original = original


class FrameProducer:
    """ラスタライズ → 整形 → チャネル投入を繰り返すプロデューサ。

    Parameters
    ----------
    channel : FrameChannel
        生成したフレームの送り先。
    clock : Clock | None
        FPS/経過時間の時刻源。None で実時間。
    hud_config : HUDConfig | None
        統計パネルの設定。
    ramp : str
        輝度ランプ（暗→明の 12 文字）。
    initial : RotationState
        初期回転（最初のフレームはこれを 1 tick 進めた角度で描く）。
    max_frames : int | None
        生成するフレーム数の上限（None で無制限）。
    """

    def __init__(
        self,
        channel: FrameChannel,
        *,
        clock: Clock | None = None,
        hud_config: HUDConfig | None = None,
        ramp: str = ASCII_RAMP,
        initial: RotationState | None = None,
        max_frames: int | None = None,
    ) -> None:
        self._channel = channel
        self._hud = hud_config or HUDConfig()
        self._ramp = ramp
        self._rotation = initial if initial is not None else RotationState()
        self._max_frames = max_frames
        self._arena = FrameArena()
        self._sampler = StatsSampler(clock)
        self._cancel = threading.Event()
        self._thread: threading.Thread | None = None
        self._closed = False
        self.ticks = 0

    @property
    def rotation(self) -> RotationState:
        return self._rotation

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    # -------- 1 フレーム --------
    def tick(self) -> Frame:
        """1 フレームを生成して返す（チャネルへは送らない）。"""
        buf, depth = self._arena.acquire(self.ticks)
        self._rotation = render(buf, depth, self._rotation, ramp=self._ramp)
        stats = self._sampler.record(self._rotation)
        frame = format_frame(buf, stats, self._hud)
        self.ticks += 1
        return frame

    # -------- ループ本体 --------
    def run(self) -> None:
        """キャンセルされるか上限に達するまでフレームをチャネルへ送り続ける。"""
        while not self._cancel.is_set():
            if self._max_frames is not None and self.ticks >= self._max_frames:
                break
            try:
                frame = self.tick()
            except Exception as exc:
                logger.debug("frame generation failed at tick %d", self.ticks + 1, exc_info=True)
                self._channel.put(FrameProducerError(self.ticks + 1, exc), self._cancel)
                return
            if not self._channel.put(frame, self._cancel):
                break
        logger.debug("producer stopped after %d ticks", self.ticks)

    # --------- public API ---------
    def start(self) -> None:
        """バックグラウンドスレッドで `run()` を開始する。"""
        if self._closed:
            raise RuntimeError("producer is closed")
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self.run, name="frame-producer", daemon=True)
        self._thread.start()

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def close(self, timeout: float = 1.0) -> None:
        """キャンセルを通知してスレッドの終了を待つ（多重呼び出しに安全）。"""
        if self._closed:
            return
        self._closed = True
        self._cancel.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("frame producer did not stop within %.2fs", timeout)

    def __enter__(self) -> "FrameProducer":
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


__all__ = ["FrameProducer", "FrameProducerError"]
