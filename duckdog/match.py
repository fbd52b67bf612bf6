"""对局引擎模块

驱动双方轮流行动，直到一方力量归零或出现平局。

一个回合：
    1. 当前玩家把牌顶的卡牌放到己方牌桌末尾，执行 on_enter_play
    2. 己方牌桌上的卡牌从左到右依次执行 before_attack、attack；
       每张卡牌行动结束后，双方牌桌上力量为 0 的卡牌离场（执行 on_leave_play）
    3. 对手力量归零则当前玩家立即获胜
    4. 交换攻守

每一步都是续体风格；同步完成的回合在循环中推进，不随回合数递归。
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

from i18n import t as _t

from .config import GameConfig, get_config
from .damage_system import DamageSystem
from .events import EventBus, EventType, GameEvent
from .exceptions import InvalidConfigError, MatchStateError
from .hooks import HookName
from .player import Player
from .task_queue import TaskQueue
from .templates import KindRegistry
from .win_checker import GameOverInfo, WinConditionChecker

if TYPE_CHECKING:
    from .card import Card
    from .context import BoardView, CardView

logger = logging.getLogger(__name__)

Done = Callable[[], None]
ViewFactory = Callable[["Card"], "CardView"]


class MatchState(Enum):
    """对局状态"""

    READY = "ready"
    RUNNING = "running"
    FINISHED = "finished"


class TurnContext:
    """某张卡牌行动时看到的对局上下文（实现 GameContext 协议）"""

    def __init__(
        self,
        match: Match,
        card: Card,
        current_player: Player,
        opposite_player: Player,
    ) -> None:
        self._match = match
        self._card = card
        self._current_player = current_player
        self._opposite_player = opposite_player

    @property
    def card(self) -> Card:
        return self._card

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def opposite_player(self) -> Player:
        return self._opposite_player

    @property
    def position(self) -> int:
        """按当前牌桌计算，前面的卡牌离场后位置随之左移"""
        try:
            return self._current_player.table.index(self._card)
        except ValueError:
            return -1

    @property
    def config(self) -> GameConfig:
        return self._match.config

    def update_view(self) -> None:
        self._match.update_view()

    def deal_damage_to_creature(self, amount: int, target: Card, done: Done) -> None:
        self._match.damage_system.deal_damage_to_creature(
            self._card, amount, target, self, done
        )

    def deal_damage_to_player(self, amount: int, done: Done) -> None:
        self._match.damage_system.deal_damage_to_player(
            self._card, amount, self._opposite_player, self, done
        )

    def log(self, message_key: str, **params: Any) -> None:
        self._match.log_event("skill", message_key, **params)

    def emit(self, event_type: EventType, **data: Any) -> GameEvent:
        return self._match.event_bus.emit(event_type, **data)


class Match:
    """一局对局

    Attributes:
        config: 对局配置
        kinds: 本局的种类模板注册表（含在场计数）
        players: (先手, 后手)
        event_bus: 事件总线
        damage_system: 伤害结算
        win_checker: 胜负判定
        turn: 已开始的回合数
    """

    def __init__(
        self,
        first_deck: Iterable[str],
        second_deck: Iterable[str],
        *,
        first_name: str | None = None,
        second_name: str | None = None,
        config: GameConfig | None = None,
        view_factory: ViewFactory | None = None,
        board_view: BoardView | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        """
        初始化对局

        Args:
            first_deck: 先手牌组（种类标识符，牌顶在前）
            second_deck: 后手牌组
            first_name: 先手名称，默认“警长”
            second_name: 后手名称，默认“强盗”
            config: 对局配置，默认使用全局配置
            view_factory: 为每张卡牌创建视图，默认无动画
            board_view: 牌桌视图
            event_bus: 事件总线，默认新建

        Raises:
            InvalidConfigError: 配置校验失败
            UnknownKindError: 牌组中有未注册的种类
        """
        self.config = config or get_config()
        errors = self.config.validate()
        if errors:
            raise InvalidConfigError(errors=errors)

        self.kinds = KindRegistry()
        self.event_bus = event_bus or EventBus()
        self.board_view = board_view
        self._view_factory = view_factory

        self.players: tuple[Player, Player] = (
            Player(
                first_name or _t("player.sheriff"),
                self._build_deck(first_deck),
                max_power=self.config.player_power,
            ),
            Player(
                second_name or _t("player.bandit"),
                self._build_deck(second_deck),
                max_power=self.config.player_power,
            ),
        )
        self.current_index = 0

        self.damage_system = DamageSystem(self)
        self.win_checker = WinConditionChecker(self)

        self.turn = 0
        self.state = MatchState.READY
        self.result: GameOverInfo | None = None
        self._on_game_over: Callable[[GameOverInfo], None] | None = None

        # 回合蹦床：同步完成的回合只做标记，由 _run_turns 循环推进
        self._in_turn = False
        self._turn_finished = False

    def __repr__(self) -> str:
        first, second = self.players
        return f"Match({first!r} vs {second!r}, turn={self.turn}, state={self.state.value})"

    def _build_deck(self, kind_ids: Iterable[str]) -> list[Card]:
        deck = []
        for kind_id in kind_ids:
            card = self.kinds.create(kind_id)
            if self._view_factory is not None:
                card.view = self._view_factory(card)
            deck.append(card)
        return deck

    # ==================== 玩家 ====================

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    @property
    def opposite_player(self) -> Player:
        return self.players[1 - self.current_index]

    def owner_of(self, card: Card) -> Player | None:
        """卡牌所属玩家（不在任何牌组或牌桌上时为 None）"""
        for player in self.players:
            if card in player.table or card in player.deck:
                return player
        return None

    # ==================== 日志与视图 ====================

    def log_event(self, log_type: str, message_key: str, **params: Any) -> None:
        """
        记录对局日志并通过事件总线发布

        Args:
            log_type: 日志类别（damage / skill / turn ...）
            message_key: 翻译键
            **params: 翻译参数
        """
        message = _t(message_key, **params)
        logger.info("[%s] %s", log_type, message)
        self.event_bus.emit(EventType.LOG_MESSAGE, message=message, log_type=log_type)

    def update_view(self) -> None:
        if self.board_view is not None:
            self.board_view.update(self)
        self.event_bus.emit(EventType.STATE_CHANGED, match=self)

    # ==================== 对局流程 ====================

    def play(self, on_game_over: Callable[[GameOverInfo], None] | None = None) -> None:
        """
        开始对局，结束时调用 ``on_game_over(info)`` 恰好一次

        视图同步完成时本方法返回前对局就已结束；
        视图延迟完成时对局在后续回调中继续推进。

        Raises:
            MatchStateError: 对局已经开始过
        """
        if self.state is not MatchState.READY:
            raise MatchStateError(_t("exc.match_started"), state=self.state.value)
        self._on_game_over = on_game_over
        self.state = MatchState.RUNNING

        first, second = self.players
        self.event_bus.emit(EventType.GAME_START, match=self)
        self.log_event("game", "log.game_start", first=first.name, second=second.name)
        self.update_view()
        self._run_turns()

    async def play_async(self, timeout: float | None = None) -> GameOverInfo:
        """
        开始对局并等待结束

        Args:
            timeout: 看门狗超时（秒），默认取 config.task_timeout，0 表示不限

        Raises:
            TaskQueueStalledError: 超时仍未结束
        """
        if timeout is None:
            timeout = self.config.task_timeout
        outcome: list[GameOverInfo] = []

        def _play(done: Done) -> None:
            def _over(info: GameOverInfo) -> None:
                outcome.append(info)
                done()

            self.play(_over)

        queue = TaskQueue("match")
        queue.push(_play)
        await queue.run(timeout or None)
        return outcome[0]

    def _run_turns(self) -> None:
        while self.state is MatchState.RUNNING:
            info = self.win_checker.check_game_over()
            if info.is_over:
                self._finish(info)
                return

            self._in_turn = True
            self._turn_finished = False
            self._play_turn(self._on_turn_done)
            self._in_turn = False
            if not self._turn_finished:
                # 回合尚未结束，等待 _on_turn_done 重新进入
                return

    def _on_turn_done(self) -> None:
        self.event_bus.emit(EventType.TURN_END, player=self.current_player, turn=self.turn)
        self.current_index = 1 - self.current_index
        if self._in_turn:
            self._turn_finished = True
        else:
            self._run_turns()

    def _play_turn(self, done: Done) -> None:
        self.turn += 1
        player = self.current_player
        self.event_bus.emit(EventType.TURN_START, player=player, turn=self.turn)
        self.log_event("turn", "log.turn_start", turn=self.turn, player=player.name)

        queue = TaskQueue(f"turn:{self.turn}")
        queue.push(self._play_top_card)
        queue.continue_with(lambda: self._attack_phase(done))

    def _play_top_card(self, done: Done) -> None:
        player = self.current_player
        card = player.draw()
        if card is None:
            done()
            return

        player.table.append(card)
        self.log_event("turn", "log.card_played", player=player.name, card=card.name)

        def _entered() -> None:
            self.event_bus.emit(EventType.CARD_ENTERED_PLAY, card=card, player=player)
            card.update_view()
            self.update_view()
            done()

        card.invoke(HookName.ON_ENTER_PLAY, self._context_for(card), _entered)

    def _attack_phase(self, done: Done) -> None:
        queue = TaskQueue(f"attacks:{self.turn}")
        for card in list(self.current_player.table):
            queue.push(self._card_action(card))
        queue.continue_with(done)

    def _card_action(self, card: Card) -> Callable[[Done], None]:
        def _step(done: Done) -> None:
            # 对局已分出胜负，或卡牌在之前的行动中离场
            if self._decided() or card not in self.current_player.table:
                done()
                return

            ctx = self._context_for(card)
            queue = TaskQueue(f"action:{card.name}")
            queue.push(lambda step_done: card.invoke(HookName.BEFORE_ATTACK, ctx, step_done))
            queue.push(lambda step_done: self._attack_if_present(card, ctx, step_done))
            queue.push(self._remove_dead_cards)
            queue.continue_with(done)

        return _step

    def _attack_if_present(self, card: Card, ctx: TurnContext, done: Done) -> None:
        if card not in self.current_player.table or not card.is_alive:
            done()
            return
        card.invoke(HookName.ATTACK, ctx, done)

    def _context_for(self, card: Card) -> TurnContext:
        return TurnContext(self, card, self.current_player, self.opposite_player)

    def _decided(self) -> bool:
        return not self.current_player.is_alive or not self.opposite_player.is_alive

    # ==================== 离场 ====================

    def _remove_dead_cards(self, done: Done) -> None:
        queue = TaskQueue("cleanup")
        for player in self.players:
            for card in player.dead_cards():
                queue.push(lambda step_done, c=card: self.discard(c, step_done))
        queue.continue_with(done)

    def discard(self, card: Card, done: Done | None = None) -> None:
        """
        让卡牌离场（从牌桌或牌组中移除）

        在牌桌上的卡牌会执行 on_leave_play；不属于任何玩家的卡牌直接完成。
        """
        finish = done or (lambda: None)
        owner = self.owner_of(card)
        if owner is None:
            finish()
            return

        if card in owner.deck:
            owner.deck.remove(card)
            finish()
            return

        owner.table.remove(card)

        def _left() -> None:
            self.event_bus.emit(EventType.CARD_LEFT_PLAY, card=card, player=owner)
            self.log_event("turn", "log.card_removed", card=card.name)
            self.update_view()
            finish()

        card.invoke(HookName.ON_LEAVE_PLAY, _left)

    # ==================== 结束 ====================

    def _finish(self, info: GameOverInfo) -> None:
        self.state = MatchState.FINISHED
        self.result = info
        logger.info("Match finished after %d turn(s): %s", self.turn, info.message)
        self.event_bus.emit(
            EventType.GAME_END,
            player=info.winner,
            message=info.message,
            stalemate=info.is_stalemate,
        )
        callback = self._on_game_over
        self._on_game_over = None
        if callback is not None:
            callback(info)
