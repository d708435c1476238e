"""Rich rendering engine - ties together all UI components."""

from typing import Dict

from rich.console import Console

from mahjong_rules.core.seat import Seat
from mahjong_rules.engine.event import EventBus, EventType, GameEvent
from mahjong_rules.player.base import TableView
from mahjong_rules.ui.board_layout import (
    render_board, render_claims, render_discard, render_draw_screen,
)
from mahjong_rules.ui.i18n import t


class Renderer:
    """Main rendering engine that subscribes to table events."""

    def __init__(self, console: Console, event_bus: EventBus,
                 names: Dict[Seat, str]):
        self.console = console
        self.event_bus = event_bus
        self.names = names
        self._subscribe_events()

    def _subscribe_events(self):
        """Subscribe to relevant table events."""
        self.event_bus.subscribe(EventType.DISCARD, self._on_discard)
        self.event_bus.subscribe(EventType.CLAIMS_OPEN, self._on_claims_open)
        self.event_bus.subscribe(EventType.ROUND_END, self._on_round_end)

    def render_table_view(self, view: TableView):
        """Render the board from one seat's perspective."""
        render_board(self.console, view)

    def _on_discard(self, event: GameEvent):
        seat = event.data["player"]
        render_discard(self.console, self.names[seat], seat, event.data["tile"])

    def _on_claims_open(self, event: GameEvent):
        render_claims(self.console, self.names, event.data["claims"])

    def _on_round_end(self, event: GameEvent):
        result = event.data["result"]
        if result.is_draw:
            render_draw_screen(self.console, result.remaining, result.turns)

    def pause(self, message: str = None):
        """Pause and wait for user input."""
        message = message or t("msg.press_enter")
        self.console.input(f"\n  {message}")
