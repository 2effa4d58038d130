"""
どこで: `api.cli`（コマンドライン入口）。
何を: `-d <duration>` などのフラグを解釈し、ロギングを初期化して `run_donut` を実行する。
なぜ: 起動時にだけ決まる設定を 1 箇所で受け取り、ランナー本体を引数解釈から切り離すため。

例:
    asciitorus -d 10s
    asciitorus -d 1m30s --ramp glyph
"""

from __future__ import annotations

import argparse
from typing import Sequence

from common import settings
from common.logging import setup_default_logging
from engine.raster.shading import RAMPS

from .donut import run_donut
from .donut_runner.duration import parse_duration


def _duration_arg(text: str) -> float:
    try:
        return parse_duration(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="asciitorus",
        description="Render a rotating ASCII torus in the terminal for a fixed duration.",
    )
    p.add_argument(
        "-d",
        "--duration",
        type=_duration_arg,
        default=None,
        help="a run duration, e.g. 5s, 300ms, 1m30s (default: run.duration or 5s)",
    )
    p.add_argument(
        "--ramp",
        choices=sorted(RAMPS),
        default=None,
        help="luminance ramp (default: shading.ramp or ascii)",
    )
    p.add_argument("--no-hud", action="store_true", help="hide the stats panel")
    p.add_argument(
        "--log-level",
        default=None,
        help="logging level for stderr (default: ASCIITORUS_LOG_LEVEL or WARNING)",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level or settings.get().LOG_LEVEL)
    return run_donut(
        args.duration,
        ramp=args.ramp,
        show_hud=False if args.no_hud else None,
    )


if __name__ == "__main__":
    raise SystemExit(main())
