"""胜利条件检查器模块
负责判定对局结束条件和确定获胜方

- 某一方玩家力量归零 → 另一方获胜
- 双方牌组与牌桌都已空，或超过最大回合数 → 平局
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from i18n import t as _t

if TYPE_CHECKING:
    from .match import Match
    from .player import Player


class WinResult(Enum):
    """胜利结果"""

    NOT_FINISHED = "not_finished"
    WIN = "win"
    STALEMATE = "stalemate"


@dataclass(slots=True)
class GameOverInfo:
    """对局结束信息"""

    is_over: bool
    result: WinResult
    winner: Player | None
    message: str

    @property
    def is_stalemate(self) -> bool:
        return self.result is WinResult.STALEMATE


class WinConditionChecker:
    """胜利条件检查器"""

    def __init__(self, match: Match):
        """初始化胜利条件检查器

        Args:
            match: 对局引用
        """
        self.match = match

    def check_game_over(self) -> GameOverInfo:
        """检查对局是否结束

        Returns:
            GameOverInfo: 对局结束信息
        """
        first, second = self.match.players

        if not first.is_alive and second.is_alive:
            return self._win(second)
        if not second.is_alive and first.is_alive:
            return self._win(first)

        if (not first.is_alive and not second.is_alive) or (
            first.is_exhausted and second.is_exhausted
        ):
            return self._stalemate()

        if self.match.turn >= self.match.config.max_turns:
            return self._stalemate()

        return GameOverInfo(
            is_over=False, result=WinResult.NOT_FINISHED, winner=None, message=""
        )

    def _win(self, winner: Player) -> GameOverInfo:
        return GameOverInfo(
            is_over=True,
            result=WinResult.WIN,
            winner=winner,
            message=_t("game.winner", name=winner.name),
        )

    def _stalemate(self) -> GameOverInfo:
        return GameOverInfo(
            is_over=True,
            result=WinResult.STALEMATE,
            winner=None,
            message=_t("game.stalemate"),
        )

    def get_winner_message(self) -> str:
        """获取胜利消息"""
        info = self.check_game_over()
        return info.message if info.is_over else _t("game.in_progress")

    def is_game_over(self) -> bool:
        """检查对局是否结束"""
        return self.check_game_over().is_over
