"""狗一系

  强盗狗(dog)         - 无特殊能力
  打手(trasher)       - 受到的伤害减少 1 点
  小弟(lad)           - 在场同类越多，造成的伤害越高、受到的伤害越低
  伪鸭(pseudo_duck)   - 会嘎嘎叫也会游泳的狗（鸭狗）
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ..hooks import HookName
from .ducks import duck_quacks, duck_swims
from .registry import define_kind, kind_hook, static_trait

if TYPE_CHECKING:
    from ..card import Card
    from ..context import GameContext
    from ..counting import LiveCounter


define_kind("dog", parent="creature", max_power=3)
define_kind("trasher", parent="dog", max_power=5)
define_kind("lad", parent="dog", max_power=2)
define_kind("pseudo_duck", parent="dog", max_power=3)


# ==================== 打手 ====================


@kind_hook("trasher", HookName.MODIFY_DAMAGE_TAKEN)
def trasher_damage_taken(
    card: Card, amount: int, source: Card, ctx: GameContext, done: Callable[[int], None]
) -> None:
    """先播放能力动画，再少受 1 点伤害（结果可能为负，由结算处截断）"""
    card.view.signal_ability(lambda: done(amount - 1))


static_trait("trasher", "trait.trasher", requires=(HookName.MODIFY_DAMAGE_TAKEN,))


# ==================== 小弟 ====================

LAD_KIND = "lad"
# 实例是否已计入在场数量，保证进场/离场各只计数一次
_COUNTED_FLAG = "lad_counted"


def _counter(card: Card) -> LiveCounter | None:
    return card.registry.counts if card.registry is not None else None


def lad_bonus(card: Card) -> int:
    """在场小弟数为 n 时，加成为 n(n+1)/2"""
    counter = _counter(card)
    count = counter.get(LAD_KIND) if counter is not None else 0
    return count * (count + 1) // 2


@kind_hook("lad", HookName.ON_ENTER_PLAY)
def lad_enter_play(card: Card, ctx: GameContext, done: Callable[[], None]) -> None:
    counter = _counter(card)
    if counter is not None and not card.flags.get(_COUNTED_FLAG):
        counter.increment(LAD_KIND)
        card.flags[_COUNTED_FLAG] = True
    done()


@kind_hook("lad", HookName.ON_LEAVE_PLAY)
def lad_leave_play(card: Card, done: Callable[[], None]) -> None:
    counter = _counter(card)
    if counter is not None and card.flags.pop(_COUNTED_FLAG, False):
        counter.decrement(LAD_KIND)
    done()


@kind_hook("lad", HookName.MODIFY_DAMAGE_TO_CREATURE)
def lad_damage_to_creature(
    card: Card, amount: int, target: Card, ctx: GameContext, done: Callable[[int], None]
) -> None:
    done(amount + lad_bonus(card))


@kind_hook("lad", HookName.MODIFY_DAMAGE_TAKEN)
def lad_damage_taken(
    card: Card, amount: int, source: Card, ctx: GameContext, done: Callable[[int], None]
) -> None:
    done(max(amount - lad_bonus(card), 0))


static_trait(
    "lad",
    "trait.lad",
    requires=(HookName.MODIFY_DAMAGE_TO_CREATURE, HookName.MODIFY_DAMAGE_TAKEN),
)


# ==================== 伪鸭 ====================

kind_hook("pseudo_duck", HookName.QUACKS)(duck_quacks)
kind_hook("pseudo_duck", HookName.SWIMS)(duck_swims)
