"""外部协作方协议

定义卡牌能力与外部世界交互的最小接口：

- CardView   : 单张卡牌的动画/刷新能力。每个动画信号接收一个 ``done`` 回调，
               动画结束时恰好调用一次（可以立即调用，也可以延迟调用）
- BoardView  : 整个牌桌的刷新（fire-and-forget）
- GameContext: 卡牌行动时可见的对局上下文，由 match.TurnContext 实现

使用 typing.Protocol 实现结构子类型化，实现类无需显式继承，
测试时可替换为轻量 stub。
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .card import Card
    from .config import GameConfig
    from .events import EventType, GameEvent
    from .match import Match
    from .player import Player


@runtime_checkable
class CardView(Protocol):
    """单张卡牌的视图能力。"""

    def show_attack(self, done: Callable[[], None]) -> None: ...
    def signal_ability(self, done: Callable[[], None]) -> None: ...
    def signal_heal(self, done: Callable[[], None]) -> None: ...
    def signal_damage(self, done: Callable[[], None]) -> None: ...
    def update(self) -> None: ...


@runtime_checkable
class BoardView(Protocol):
    """牌桌视图：对局状态变化后请求重绘。"""

    def update(self, match: Match) -> None: ...


class NullCardView:
    """无动画视图：所有信号立即完成。"""

    def show_attack(self, done: Callable[[], None]) -> None:
        done()

    def signal_ability(self, done: Callable[[], None]) -> None:
        done()

    def signal_heal(self, done: Callable[[], None]) -> None:
        done()

    def signal_damage(self, done: Callable[[], None]) -> None:
        done()

    def update(self) -> None:
        pass


@runtime_checkable
class GameContext(Protocol):
    """卡牌行动时看到的对局上下文。

    match.TurnContext 隐式实现此协议 (结构子类型化)。
    """

    # ==================== 只读属性 ====================

    @property
    def card(self) -> Card:
        """正在行动的卡牌。"""
        ...

    @property
    def current_player(self) -> Player:
        """行动卡牌所属的玩家。"""
        ...

    @property
    def opposite_player(self) -> Player:
        """对手。"""
        ...

    @property
    def position(self) -> int:
        """行动卡牌在己方牌桌上的位置。"""
        ...

    @property
    def config(self) -> GameConfig:
        """对局配置。"""
        ...

    # ==================== 对局动作 ====================

    def update_view(self) -> None:
        """请求刷新牌桌 (fire-and-forget)。"""
        ...

    def deal_damage_to_creature(
        self, amount: int, target: Card, done: Callable[[], None]
    ) -> None:
        """以行动卡牌为来源对敌方卡牌造成伤害 (含完整钩子链)。"""
        ...

    def deal_damage_to_player(self, amount: int, done: Callable[[], None]) -> None:
        """以行动卡牌为来源对对手造成伤害 (含完整钩子链)。"""
        ...

    # ==================== 日志与事件 ====================

    def log(self, message_key: str, **params: Any) -> None:
        """记录一条本地化的对局日志。"""
        ...

    def emit(self, event_type: EventType, **data: Any) -> GameEvent:
        """通过事件总线发布事件。"""
        ...
