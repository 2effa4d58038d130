"""
どこで: `api.donut`（実行ランナー）。
何を: フレーム生成スレッド（FrameProducer）と表示ループを結線し、指定時間だけトーラスを描き続ける。
なぜ: CLI からもテストからも同じ入口で、時間制限付きの描画を実行できるようにするため。

実行フロー（概要）:
1) 設定解決: 実行時間/フレーム遅延/ランプ/統計パネルを「明示指定 > 設定ファイル > 既定」で確定。
2) 基盤: `FrameChannel`（容量 1）・`FrameProducer`・`TerminalDisplay` を生成。
3) 表示ループ: 締め切りまでフレームを受け取り、表示して `frame_delay` 秒待つ。
   フレーム待ちは締め切りまでの残り時間でタイムアウトする。
4) 終了: プロデューサへキャンセルを通知してスレッドを回収し、終了コード 0 を返す。

プロデューサ内の例外は `FrameProducerError` として表示ループ側で送出される。
"""

from __future__ import annotations

import logging
import time
from typing import Callable, TextIO

from engine.core.clock import Clock
from engine.runtime.channel import FrameChannel
from engine.runtime.worker import FrameProducer
from engine.ui.hud.config import HUDConfig
from engine.ui.terminal import TerminalDisplay
from util.utils import load_config

from .donut_runner.duration import format_duration
from .donut_runner.utils import (
    resolve_duration,
    resolve_frame_delay,
    resolve_hud_config,
    resolve_ramp,
)

logger = logging.getLogger(__name__)


def run_donut(
    duration: float | str | None = None,
    *,
    frame_delay: float | None = None,
    ramp: str | None = None,
    show_hud: bool | None = None,
    hud_config: HUDConfig | None = None,
    stream: TextIO | None = None,
    clock: Clock | None = None,
    max_frames: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
    timer: Callable[[], float] = time.monotonic,
) -> int:
    """回転するトーラスを `duration` 秒間端末へ描画し、終了コードを返す。

    Parameters
    ----------
    duration : float | str | None
        実行時間（秒 or `5s`/`300ms` 形式）。None で設定ファイル、未設定時は 5 秒。
    frame_delay : float | None
        1 フレーム表示後の待ち時間 [sec]。None で設定ファイル、未設定時は 0.03。
    ramp : str | None
        `ascii` または `glyph`。None で設定ファイル、未設定時は `ascii`。
    show_hud : bool | None
        統計パネルの有効/無効。None で上書きしない（`hud_config`/設定ファイルを尊重）。
    hud_config : HUDConfig | None
        統計パネル設定。
    stream : TextIO | None
        出力先。None で標準出力。
    clock : Clock | None
        FPS 算出用の時刻源。None で実時間。
    max_frames : int | None
        生成フレーム数の上限（テスト用）。
    sleep, timer : Callable
        待機関数と締め切り判定用の時刻関数（テストで差し替え可能）。
    """
    cfg = load_config()
    duration_s = resolve_duration(duration, cfg)
    delay = resolve_frame_delay(frame_delay, cfg)
    ramp_chars = resolve_ramp(ramp, cfg)
    hud_conf = resolve_hud_config(show_hud, hud_config, cfg)

    channel = FrameChannel()
    producer = FrameProducer(
        channel,
        clock=clock,
        hud_config=hud_conf,
        ramp=ramp_chars,
        max_frames=max_frames,
    )
    display = TerminalDisplay(stream)

    logger.info(
        "running for %s (frame delay %s, hud=%s)",
        format_duration(duration_s),
        format_duration(delay),
        hud_conf.enabled,
    )
    deadline = timer() + duration_s
    producer.start()
    try:
        while True:
            remaining = deadline - timer()
            if remaining <= 0.0:
                break
            frame = channel.get(timeout=remaining)
            if frame is None:
                continue  # 締め切りは次の周回で判定
            display.show(frame)
            if delay > 0.0:
                sleep(delay)
    finally:
        producer.close()
    logger.info("displayed %d frames (%d produced)", display.frames_shown, producer.ticks)
    return 0


__all__ = ["run_donut"]
