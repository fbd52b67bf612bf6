"""
鸭子大战狗 - 命令行终端版
主程序入口

使用方法:
    python main.py --preset nemo
    python main.py --preset classic --paced --speed 2 --locale en_US
    python main.py --list-presets
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys

from rich.console import Console

from duckdog.config import GameConfig, get_config
from duckdog.decks import DEFAULT_PRESET, PRESET_DECKS
from duckdog.events import GameEvent
from duckdog.exceptions import GameError
from duckdog.match import Match
from duckdog.win_checker import GameOverInfo
from i18n import get_available_locales, kind_name, set_locale, t as _t
from logging_config import setup_logging
from ui.paced_view import paced_view_factory
from ui.rich_view import RichBoardView

logger = logging.getLogger(__name__)

# 对局出错时写入日志的最近事件数
RECENT_EVENTS = 20


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ducks vs Dogs")
    parser.add_argument("--preset", default=DEFAULT_PRESET, help="预设牌组名称")
    parser.add_argument(
        "--locale", choices=get_available_locales(), default=None, help="界面语言"
    )
    parser.add_argument("--speed", type=float, default=None, help="动画速度倍率")
    parser.add_argument(
        "--paced", action="store_true", help="按动画节奏在事件循环中运行对局"
    )
    parser.add_argument("--log-level", default=None, help="日志级别")
    parser.add_argument(
        "--console-log", action="store_true", help="同时把日志输出到终端"
    )
    parser.add_argument(
        "--list-presets", action="store_true", help="列出预设牌组后退出"
    )
    return parser


def build_config(args: argparse.Namespace) -> GameConfig:
    """命令行参数覆盖环境变量配置"""
    overrides: dict[str, object] = {}
    if args.locale:
        overrides["locale"] = args.locale
    if args.speed is not None:
        overrides["speed_rate"] = args.speed
    if args.log_level:
        overrides["log_level"] = args.log_level
    config = get_config()
    return dataclasses.replace(config, **overrides) if overrides else config


def list_presets(console: Console) -> None:
    console.print(_t("main.presets"), style="bold")
    for name, (first, second) in PRESET_DECKS.items():
        first_names = ", ".join(kind_name(k) for k in first)
        second_names = ", ".join(kind_name(k) for k in second)
        console.print(f"  [cyan]{name}[/cyan]: {first_names}  vs  {second_names}")


def _trace_event(event: GameEvent) -> None:
    logger.debug("event %s %s", event.event_type.name, event.data)


def run_match(
    preset: str, config: GameConfig, paced: bool, console: Console
) -> GameOverInfo:
    first, second = PRESET_DECKS[preset]
    view = RichBoardView(console)
    match = Match(
        first,
        second,
        config=config,
        board_view=view,
        view_factory=paced_view_factory(config) if paced else None,
    )
    view.attach(match.event_bus)
    if config.debug_mode:
        match.event_bus.subscribe_all(_trace_event)

    try:
        if paced:
            info = asyncio.run(match.play_async())
        else:
            outcome: list[GameOverInfo] = []
            match.play(outcome.append)
            info = outcome[0]
    except GameError:
        for event in match.event_bus.get_history(RECENT_EVENTS):
            logger.error("recent event: %s %s", event.event_type.name, event.data)
        raise
    finally:
        view.detach(match.event_bus)

    view.show_result(info.message, info.is_stalemate)
    return info


def main(argv: list[str] | None = None) -> int:
    """程序入口"""
    args = build_parser().parse_args(argv)
    config = build_config(args)

    console = Console(highlight=False)
    setup_logging(level=config.log_level, enable_console=args.console_log, console=console)
    set_locale(config.locale)

    if args.list_presets:
        list_presets(console)
        return 0

    if args.preset not in PRESET_DECKS:
        console.print(_t("main.unknown_preset", name=args.preset), style="red")
        list_presets(console)
        return 2

    try:
        run_match(args.preset, config, args.paced, console)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        console.print(_t("main.interrupted"))
        return 0
    except GameError as e:
        logger.exception("Match failed")
        console.print(_t("main.error", error=e), style="red")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
