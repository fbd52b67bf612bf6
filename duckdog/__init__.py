"""
鸭子大战狗 卡牌对战引擎
包含卡牌与种类模板、能力钩子、任务队列、伤害结算和对局引擎

- 种类注册 (kinds/) 用装饰器登记钩子，每局对局复制出独立的可变模板
- 任务队列 (task_queue.py) 以续体风格串行执行动画与结算步骤
- 事件总线 (events.py) 把对局过程通知给视图与日志
"""

from .card import Card, Classification, Creature, classify, is_dog, is_duck
from .config import GameConfig, get_config, reset_config
from .counting import LiveCounter
from .damage_system import DamageRecord, DamageSystem
from .decks import PRESET_DECKS, get_preset
from .events import EventBus, EventType, GameEvent
from .exceptions import (
    GameError,
    InvalidConfigError,
    MatchStateError,
    TaskQueueError,
    TaskQueueStalledError,
    UnknownKindError,
)
from .hooks import DAMAGE_HOOKS, HookName, VariantTemplate, steal_hooks
from .match import Match, MatchState, TurnContext
from .player import Player
from .task_queue import QueueState, TaskQueue
from .templates import KindRegistry
from .win_checker import GameOverInfo, WinConditionChecker, WinResult

__version__ = "1.0.0"

__all__ = [
    # 卡牌
    'Card', 'Creature', 'Classification', 'classify', 'is_duck', 'is_dog',
    # 种类与钩子
    'HookName', 'DAMAGE_HOOKS', 'VariantTemplate', 'steal_hooks', 'KindRegistry',
    'LiveCounter',
    # 任务队列
    'TaskQueue', 'QueueState',
    # 对局
    'Match', 'MatchState', 'TurnContext', 'Player', 'PRESET_DECKS', 'get_preset',
    'DamageSystem', 'DamageRecord',
    'GameOverInfo', 'WinConditionChecker', 'WinResult',
    # 事件
    'EventBus', 'EventType', 'GameEvent',
    # 配置
    'GameConfig', 'get_config', 'reset_config',
    # 异常
    'GameError', 'TaskQueueError', 'TaskQueueStalledError', 'UnknownKindError',
    'InvalidConfigError', 'MatchStateError',
]
