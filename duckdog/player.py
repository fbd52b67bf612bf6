"""玩家模块
玩家持有牌组（deck，顶部在前）与牌桌（table，按位置从左到右）
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .card import Card


class Player:
    """玩家

    Attributes:
        name: 显示名称
        deck: 尚未打出的卡牌，deck[0] 为牌顶
        table: 在场卡牌，下标即位置
        max_power: 力量上限
    """

    def __init__(self, name: str, deck: list[Card] | None = None, max_power: int = 10):
        self.name = name
        self.deck: list[Card] = list(deck or [])
        self.table: list[Card] = []
        self.max_power = max(0, max_power)
        self._current_power = self.max_power

    def __repr__(self) -> str:
        return (
            f"Player({self.name!r}, power={self.current_power}/{self.max_power}, "
            f"deck={len(self.deck)}, table={len(self.table)})"
        )

    @property
    def current_power(self) -> int:
        return self._current_power

    @current_power.setter
    def current_power(self, value: int) -> None:
        self._current_power = max(0, min(self.max_power, value))

    @property
    def is_alive(self) -> bool:
        return self._current_power > 0

    def take_damage(self, amount: int) -> int:
        """受到伤害，返回实际扣除的力量"""
        old = self._current_power
        self.current_power = old - amount
        return old - self._current_power

    def card_at(self, position: int) -> Card | None:
        """指定位置的在场卡牌（越界返回 None）"""
        if 0 <= position < len(self.table):
            return self.table[position]
        return None

    def draw(self) -> Card | None:
        """从牌顶取一张牌（牌组为空返回 None）"""
        if not self.deck:
            return None
        return self.deck.pop(0)

    def dead_cards(self) -> list[Card]:
        return [card for card in self.table if not card.is_alive]

    @property
    def is_exhausted(self) -> bool:
        """牌组和牌桌都已经空了"""
        return not self.deck and not self.table
