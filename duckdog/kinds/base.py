"""基础种类

  卡牌(card)    - 全部钩子的默认实现：恒等伤害修正、空生命周期、默认攻击
  生物(creature) - 在描述中加入结构化分类
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from i18n import kind_name, t as _t

from ..card import classify
from ..hooks import HookName
from ..task_queue import TaskQueue
from .registry import define_kind, kind_hook, kind_trait

if TYPE_CHECKING:
    from ..card import Card
    from ..context import GameContext
    from ..hooks import VariantTemplate
    from ..player import Player


define_kind("card", max_power=0)
define_kind("creature", parent="card")


# ==================== 伤害修正（恒等） ====================


@kind_hook("card", HookName.MODIFY_DAMAGE_TO_CREATURE)
def identity_damage_to_creature(
    card: Card, amount: int, target: Card, ctx: GameContext, done: Callable[[int], None]
) -> None:
    done(amount)


@kind_hook("card", HookName.MODIFY_DAMAGE_TO_PLAYER)
def identity_damage_to_player(
    card: Card, amount: int, target: Player, ctx: GameContext, done: Callable[[int], None]
) -> None:
    done(amount)


@kind_hook("card", HookName.MODIFY_DAMAGE_TAKEN)
def identity_damage_taken(
    card: Card, amount: int, source: Card, ctx: GameContext, done: Callable[[int], None]
) -> None:
    done(amount)


# ==================== 生命周期（空操作） ====================


@kind_hook("card", HookName.ON_ENTER_PLAY)
def noop_enter_play(card: Card, ctx: GameContext, done: Callable[[], None]) -> None:
    done()


@kind_hook("card", HookName.ON_LEAVE_PLAY)
def noop_leave_play(card: Card, done: Callable[[], None]) -> None:
    done()


@kind_hook("card", HookName.BEFORE_ATTACK)
def noop_before_attack(card: Card, ctx: GameContext, done: Callable[[], None]) -> None:
    done()


# ==================== 默认攻击 ====================


@kind_hook("card", HookName.ATTACK)
def default_attack(card: Card, ctx: GameContext, done: Callable[[], None]) -> None:
    """攻击对面同一位置的卡牌；该位置为空时直接攻击对手"""
    queue = TaskQueue(f"attack:{card.name}")
    queue.push(lambda step_done: card.view.show_attack(step_done))

    def _strike(step_done: Callable[[], None]) -> None:
        target = ctx.opposite_player.card_at(ctx.position)
        if target is not None:
            ctx.deal_damage_to_creature(card.current_power, target, step_done)
        else:
            ctx.deal_damage_to_player(ctx.config.player_hit_damage, step_done)

    queue.push(_strike)
    queue.continue_with(done)


# ==================== 描述 ====================


@kind_trait("creature")
def classification_trait(card: Card, layer: VariantTemplate) -> str:
    return classify(card).label


@kind_trait("card")
def lineage_trait(card: Card, layer: VariantTemplate) -> str:
    """种类继承链，如 "酿酒师 ← 和平鸭 ← 生物 ← 卡牌" """
    chain = " ← ".join(kind_name(t.kind_id) for t in card.template.lineage())
    return _t("trait.lineage", chain=chain)
