"""Human player - interfaces with terminal UI for input."""

from rich.console import Console

from mahjong_rules.player.base import Player, TableView
from mahjong_rules.ui.input_handler import get_discard_input
from mahjong_rules.ui.renderer import Renderer


class HumanPlayer(Player):
    """Human player that uses terminal UI for interaction."""

    def __init__(self, name: str, console: Console, renderer: Renderer):
        super().__init__(name)
        self.console = console
        self.renderer = renderer

    def choose_discard(self, view: TableView) -> int:
        """Show the board and ask which tile to discard."""
        self.renderer.render_table_view(view)
        return get_discard_input(self.console, view)
