"""事件总线系统
实现观察者模式，把对局过程通知给视图、日志等外部模块
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .card import Card
    from .player import Player

logger = logging.getLogger(__name__)


class EventType(Enum):
    """对局事件类型枚举"""
    # 对局
    GAME_START = auto()
    GAME_END = auto()

    # 回合
    TURN_START = auto()
    TURN_END = auto()

    # 卡牌进出场
    CARD_ENTERED_PLAY = auto()
    CARD_LEFT_PLAY = auto()

    # 伤害
    DAMAGE_INFLICTED = auto()   # 卡牌受到伤害后
    PLAYER_DAMAGED = auto()     # 玩家受到伤害后

    # 能力
    HOOKS_STOLEN = auto()       # 浪人夺取了某种类的能力
    KIND_REBOUND = auto()       # 尼莫变成了另一种类
    CARD_BUFFED = auto()        # 酿酒师强化了鸭子

    # 日志/UI
    LOG_MESSAGE = auto()
    STATE_CHANGED = auto()


@dataclass
class GameEvent:
    """
    对局事件数据类
    携带事件的所有相关信息
    """
    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)

    cancelled: bool = False

    # 常用字段的快捷访问
    @property
    def source(self) -> Card | None:
        return self.data.get('source')

    @property
    def card(self) -> Card | None:
        return self.data.get('card')

    @property
    def player(self) -> Player | None:
        return self.data.get('player')

    @property
    def damage(self) -> int:
        return self.data.get('damage', 0)

    @property
    def message(self) -> str:
        return self.data.get('message', '')

    def cancel(self) -> None:
        """停止后续处理器"""
        self.cancelled = True


# 事件处理器类型
EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    事件总线
    负责事件的发布和订阅
    """

    def __init__(self, max_history: int = 100):
        # 事件处理器映射：事件类型 -> (优先级, 处理器) 列表
        self._handlers: dict[EventType, list[tuple[int, EventHandler]]] = defaultdict(list)
        # 全局处理器（监听所有事件）
        self._global_handlers: list[tuple[int, EventHandler]] = []
        self._event_history: list[GameEvent] = []
        self._max_history = max_history

    def subscribe(self, event_type: EventType, handler: EventHandler,
                  priority: int = 0) -> None:
        """
        订阅事件

        Args:
            event_type: 事件类型
            handler: 事件处理器
            priority: 优先级（数字越大越先执行）
        """
        self._handlers[event_type].append((priority, handler))
        # 按优先级排序（sort 稳定，同优先级保持订阅顺序）
        self._handlers[event_type].sort(key=lambda x: x[0], reverse=True)

    def subscribe_all(self, handler: EventHandler, priority: int = 0) -> None:
        """订阅所有事件（调试追踪用）"""
        self._global_handlers.append((priority, handler))
        self._global_handlers.sort(key=lambda x: x[0], reverse=True)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """取消订阅"""
        self._handlers[event_type] = [
            (p, h) for p, h in self._handlers[event_type] if h != handler
        ]

    def publish(self, event: GameEvent) -> GameEvent:
        """
        发布事件

        处理器抛出的异常会被记录，不影响其余处理器。

        Args:
            event: 对局事件

        Returns:
            处理后的事件（可能被取消）
        """
        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history = self._event_history[-self._max_history:]

        for _, handler in self._global_handlers:
            if event.cancelled:
                break
            try:
                handler(event)
            except Exception:
                logger.exception("EventBus handler failed for %s", event.event_type.name)

        if not event.cancelled:
            for _, handler in self._handlers.get(event.event_type, []):
                if event.cancelled:
                    break
                try:
                    handler(event)
                except Exception:
                    logger.exception("EventBus handler failed for %s", event.event_type.name)

        return event

    def emit(self, event_type: EventType, **kwargs: Any) -> GameEvent:
        """
        快捷发布事件

        Args:
            event_type: 事件类型
            **kwargs: 事件数据

        Returns:
            处理后的事件
        """
        return self.publish(GameEvent(event_type=event_type, data=kwargs))

    def get_history(self, count: int = 10) -> list[GameEvent]:
        """获取最近的事件历史"""
        return self._event_history[-count:]
