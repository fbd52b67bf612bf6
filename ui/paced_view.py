"""按节奏完成的卡牌视图

每个动画信号在 ``config.animation_seconds`` 秒之后才调用完成回调，
由正在运行的 asyncio 事件循环调度（call_later）。
全局速率 speed_rate 越大动画越快；speed_rate <= 0 时立即完成。
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from duckdog.config import GameConfig, get_config

if TYPE_CHECKING:
    from duckdog.card import Card

logger = logging.getLogger(__name__)


class PacedCardView:
    """延迟完成的卡牌视图（实现 CardView 协议）

    必须在事件循环中使用，通常配合 ``Match.play_async``。
    """

    def __init__(self, card: Card, config: GameConfig | None = None):
        self.card = card
        self.config = config or get_config()
        self.signals: list[str] = []

    def _schedule(self, signal: str, done: Callable[[], None]) -> None:
        self.signals.append(signal)
        delay = self.config.animation_seconds
        if delay <= 0:
            done()
            return
        logger.debug("%s: %s (%.2fs)", self.card.name, signal, delay)
        asyncio.get_running_loop().call_later(delay, done)

    def show_attack(self, done: Callable[[], None]) -> None:
        self._schedule("attack", done)

    def signal_ability(self, done: Callable[[], None]) -> None:
        self._schedule("ability", done)

    def signal_heal(self, done: Callable[[], None]) -> None:
        self._schedule("heal", done)

    def signal_damage(self, done: Callable[[], None]) -> None:
        self._schedule("damage", done)

    def update(self) -> None:
        pass


def paced_view_factory(config: GameConfig | None = None) -> Callable[[Card], PacedCardView]:
    """生成 Match(view_factory=...) 可用的工厂"""
    def _factory(card: Card) -> PacedCardView:
        return PacedCardView(card, config)
    return _factory
