"""直接继承生物的种类

  加特林(gatling) - 攻击时对每张敌方卡牌各造成 2 点伤害
  浪人(rogue)     - 攻击前夺走敌方种类模板上的伤害修正能力
  尼莫(nemo)      - 攻击前变成对面同位置卡牌的种类
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from i18n import kind_name

from ..events import EventType
from ..hooks import DAMAGE_HOOKS, HookName, steal_hooks
from ..task_queue import Step, TaskQueue
from .registry import define_kind, kind_hook, static_trait

if TYPE_CHECKING:
    from ..card import Card
    from ..context import GameContext

logger = logging.getLogger(__name__)


define_kind("gatling", parent="creature", max_power=6)
define_kind("rogue", parent="creature", max_power=2)
define_kind("nemo", parent="creature", max_power=4)


# ==================== 加特林 ====================

GATLING_DAMAGE = 2


def _volley(ctx: GameContext, target: Card) -> Step:
    def _step(done: Callable[[], None]) -> None:
        # 前面的步骤可能已经击倒了目标
        if not target.is_alive or target not in ctx.opposite_player.table:
            done()
            return
        ctx.deal_damage_to_creature(GATLING_DAMAGE, target, done)

    return _step


@kind_hook("gatling", HookName.ATTACK)
def gatling_attack(card: Card, ctx: GameContext, done: Callable[[], None]) -> None:
    queue = TaskQueue(f"gatling:{card.name}")
    queue.push(lambda step_done: card.view.show_attack(step_done))
    for target in ctx.opposite_player.table:
        if target.is_alive:
            queue.push(_volley(ctx, target))
    queue.continue_with(done)


static_trait("gatling", "trait.gatling", requires=(HookName.ATTACK,))


# ==================== 浪人 ====================


@kind_hook("rogue", HookName.BEFORE_ATTACK)
def rogue_before_attack(card: Card, ctx: GameContext, done: Callable[[], None]) -> None:
    """夺走的是对方种类模板上的钩子：该种类现有与以后的卡牌都会失去能力"""
    for victim in list(ctx.opposite_player.table):
        if victim.template.is_a("rogue"):
            continue
        stolen = steal_hooks(victim.template, card, DAMAGE_HOOKS)
        if not stolen:
            continue
        ctx.emit(
            EventType.HOOKS_STOLEN,
            source=card,
            card=victim,
            kind=victim.kind,
            hooks=stolen,
        )
        ctx.log(
            "log.hooks_stolen",
            thief=card.name,
            kind=kind_name(victim.kind),
            hooks=", ".join(stolen),
        )
    ctx.update_view()
    done()


static_trait("rogue", "trait.rogue", requires=(HookName.BEFORE_ATTACK,))


# ==================== 尼莫 ====================

# 冒充后重新调用 before_attack 期间置位，防止落回本钩子时无限递归
_IMPERSONATING_FLAG = "nemo_impersonating"


@kind_hook("nemo", HookName.BEFORE_ATTACK)
def nemo_before_attack(card: Card, ctx: GameContext, done: Callable[[], None]) -> None:
    if card.flags.get(_IMPERSONATING_FLAG):
        # 对面也是尼莫：换绑后的钩子仍是本钩子
        done()
        return

    opposite = ctx.opposite_player.card_at(ctx.position)
    if opposite is None:
        done()
        return

    card.rebind(opposite.template)
    ctx.emit(EventType.KIND_REBOUND, card=card, kind=card.kind)
    ctx.log("log.rebound", card=card.name, kind=kind_name(card.kind))
    ctx.update_view()

    card.flags[_IMPERSONATING_FLAG] = True

    def _finished() -> None:
        card.flags.pop(_IMPERSONATING_FLAG, None)
        done()

    card.invoke(HookName.BEFORE_ATTACK, ctx, _finished)


static_trait("nemo", "trait.nemo", requires=(HookName.BEFORE_ATTACK,))
