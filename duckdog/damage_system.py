"""
伤害系统模块
负责伤害结算：依次调用攻击方与防守方的伤害修正钩子，再扣除力量

钩子链从左到右组合：
    攻击方 modify_damage_to_creature → 防守方 modify_damage_taken → 扣除
    攻击方 modify_damage_to_player → 扣除玩家力量

钩子在结算时才查找，两次攻击之间的能力夺取/种类换绑会被下一次结算看到。
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .events import EventType
from .hooks import HookName

if TYPE_CHECKING:
    from .card import Card
    from .context import GameContext
    from .match import Match
    from .player import Player

logger = logging.getLogger(__name__)


@dataclass
class DamageRecord:
    """一次已生效的伤害"""
    source: Card                  # 伤害来源卡牌
    target: Card | Player         # 受到伤害的卡牌或玩家
    damage: int                   # 修正后的伤害值
    old_power: int
    new_power: int


class DamageSystem:
    """
    伤害系统

    所有入口都是续体风格：结算（包括动画）完成后调用 ``done()``，
    可以直接作为 TaskQueue 的步骤使用。
    """

    def __init__(self, match: Match):
        """
        初始化伤害系统

        Args:
            match: 对局引用（日志、事件总线、牌桌刷新）
        """
        self.match = match
        self.records: list[DamageRecord] = []

    def deal_damage_to_creature(
        self,
        source: Card,
        amount: int,
        target: Card,
        ctx: GameContext,
        done: Callable[[], None],
    ) -> None:
        """卡牌对卡牌造成伤害"""
        def _modified(actual: int) -> None:
            self.take_damage(target, actual, source, ctx, done)

        source.invoke(HookName.MODIFY_DAMAGE_TO_CREATURE, amount, target, ctx, _modified)

    def take_damage(
        self,
        target: Card,
        amount: int,
        source: Card,
        ctx: GameContext,
        done: Callable[[], None],
    ) -> None:
        """卡牌受到伤害：先经过自身的 modify_damage_taken，再扣除力量"""
        def _apply(actual: int) -> None:
            if actual <= 0:
                logger.debug("%s took no damage from %s (%d)", target.name, source.name, actual)
                done()
                return

            def _after_signal() -> None:
                old = target.current_power
                target.current_power = old - actual
                self._record(source, target, actual, old, target.current_power)
                self.match.log_event(
                    "damage",
                    "log.damage",
                    target=target.name,
                    source=source.name,
                    damage=actual,
                    old=old,
                    new=target.current_power,
                    max=target.max_power,
                )
                self.match.event_bus.emit(
                    EventType.DAMAGE_INFLICTED,
                    source=source,
                    card=target,
                    damage=actual,
                )
                target.update_view()
                done()

            target.view.signal_damage(_after_signal)

        target.invoke(HookName.MODIFY_DAMAGE_TAKEN, amount, source, ctx, _apply)

    def deal_damage_to_player(
        self,
        source: Card,
        amount: int,
        player: Player,
        ctx: GameContext,
        done: Callable[[], None],
    ) -> None:
        """卡牌直接攻击玩家"""
        def _apply(actual: int) -> None:
            if actual <= 0:
                done()
                return
            old = player.current_power
            player.take_damage(actual)
            self._record(source, player, actual, old, player.current_power)
            self.match.log_event(
                "damage",
                "log.player_damage",
                player=player.name,
                source=source.name,
                damage=actual,
                old=old,
                new=player.current_power,
            )
            self.match.event_bus.emit(
                EventType.PLAYER_DAMAGED,
                source=source,
                player=player,
                damage=actual,
            )
            self.match.update_view()
            done()

        source.invoke(HookName.MODIFY_DAMAGE_TO_PLAYER, amount, player, ctx, _apply)

    def _record(
        self, source: Card, target: Card | Player, damage: int, old: int, new: int
    ) -> None:
        self.records.append(DamageRecord(source, target, damage, old, new))
