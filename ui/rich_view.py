"""
Rich 牌桌视图
使用 rich 库在终端中绘制双方玩家与牌桌，并实时打印对局日志。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.box import DOUBLE, ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from duckdog.events import EventType, GameEvent
from i18n import t as _t

if TYPE_CHECKING:
    from duckdog.card import Card
    from duckdog.events import EventBus
    from duckdog.match import Match
    from duckdog.player import Player


class RichBoardView:
    """
    Rich 牌桌视图（实现 BoardView 协议）

    update(match) 时重绘牌桌；订阅事件总线后会逐条打印 LOG_MESSAGE。
    """

    def __init__(self, console: Console | None = None, show_logs: bool = True):
        self.console = console or Console(highlight=False)
        self.show_logs = show_logs
        self.log_messages: list[str] = []
        self.max_log_lines = 15

    def attach(self, event_bus: EventBus) -> None:
        """订阅对局日志"""
        event_bus.subscribe(EventType.LOG_MESSAGE, self._on_log)

    def detach(self, event_bus: EventBus) -> None:
        event_bus.unsubscribe(EventType.LOG_MESSAGE, self._on_log)

    def _on_log(self, event: GameEvent) -> None:
        self.log_messages.append(event.message)
        if len(self.log_messages) > self.max_log_lines:
            self.log_messages = self.log_messages[-self.max_log_lines:]
        if self.show_logs:
            self.console.print(Text(event.message, style="dim"))

    # ==================== 绘制 ====================

    def _power_style(self, power: int, max_power: int) -> str:
        if power <= 0:
            return "red"
        return "green" if power * 2 > max_power else "yellow"

    def _render_card(self, card: Card | None) -> Text:
        if card is None:
            return Text(_t("view.empty"), style="dim")
        text = Text(
            _t("view.card", name=card.name, power=card.current_power, max=card.max_power),
            style=f"bold {self._power_style(card.current_power, card.max_power)}",
        )
        for line in card.get_descriptions():
            text.append(f"\n{line}", style="italic")
        return text

    def _render_player(self, player: Player, is_current: bool) -> Text:
        style = "bold cyan" if is_current else "white"
        return Text(
            _t(
                "view.player",
                name=player.name,
                power=player.current_power,
                max=player.max_power,
                deck=len(player.deck),
            ),
            style=style,
        )

    def render(self, match: Match) -> Panel:
        """把对局状态渲染为 rich 面板"""
        first, second = match.players
        width = max(len(first.table), len(second.table), 1)

        table = Table(box=ROUNDED, show_header=False, expand=True)
        for _ in range(width):
            table.add_column(justify="center", ratio=1)

        # 后手在上，先手在下，同一列即同一位置
        for player in (second, first):
            cells = [self._render_card(player.card_at(i)) for i in range(width)]
            table.add_row(*cells)

        grid = Table.grid(expand=True)
        grid.add_column()
        grid.add_row(self._render_player(second, match.current_player is second))
        grid.add_row(table)
        grid.add_row(self._render_player(first, match.current_player is first))

        return Panel(grid, title=_t("view.title", turn=match.turn), border_style="blue")

    def update(self, match: Match) -> None:
        self.console.print(self.render(match))

    def show_result(self, message: str, is_stalemate: bool = False) -> None:
        style = "bold yellow" if is_stalemate else "bold green"
        self.console.print(Panel(message, title=_t("view.result"), style=style, box=DOUBLE))
