"""鸭子一系

  和平鸭(duck)   - 会嘎嘎叫、会游泳
  酿酒师(brewer) - 攻击前为场上所有鸭子提升上限并恢复力量
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..card import is_duck
from ..events import EventType
from ..hooks import HookName
from ..task_queue import Step, TaskQueue
from .registry import define_kind, kind_hook, static_trait

if TYPE_CHECKING:
    from ..card import Card
    from ..context import GameContext

logger = logging.getLogger(__name__)


define_kind("duck", parent="creature", max_power=2)
define_kind("brewer", parent="duck", max_power=2)


# ==================== 和平鸭 ====================


@kind_hook("duck", HookName.QUACKS)
def duck_quacks(card: Card) -> str:
    logger.debug("%s: quack", card.name)
    return "quack"


@kind_hook("duck", HookName.SWIMS)
def duck_swims(card: Card) -> str:
    logger.debug("%s: float: both;", card.name)
    return "float: both;"


# ==================== 酿酒师 ====================


def _brew_step(brewer: Card, target: Card, ctx: GameContext) -> Step:
    def _step(done: Callable[[], None]) -> None:
        target.max_power += 1
        target.current_power += 2
        ctx.emit(EventType.CARD_BUFFED, source=brewer, card=target)
        ctx.log(
            "log.buffed",
            brewer=brewer.name,
            card=target.name,
            power=target.current_power,
            max=target.max_power,
        )

        def _healed() -> None:
            target.update_view()
            done()

        target.view.signal_heal(_healed)

    return _step


@kind_hook("brewer", HookName.BEFORE_ATTACK)
def brewer_before_attack(card: Card, ctx: GameContext, done: Callable[[], None]) -> None:
    """双方牌桌上的每只鸭子：上限 +1，力量 +2"""
    queue = TaskQueue(f"brew:{card.name}")
    for target in [*ctx.current_player.table, *ctx.opposite_player.table]:
        if is_duck(target):
            queue.push(_brew_step(card, target, ctx))
    queue.continue_with(done)


static_trait("brewer", "trait.brewer", requires=(HookName.BEFORE_ATTACK,))
