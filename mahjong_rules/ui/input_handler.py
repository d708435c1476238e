"""User input handling for the terminal UI."""

from rich.console import Console

from mahjong_rules.player.base import TableView
from mahjong_rules.ui.i18n import t


def get_discard_input(console: Console, view: TableView) -> int:
    """Ask for a discard selector until one is in range."""
    n = len(view.my_hand.closed_tiles)
    prompt = "  > " + t("input.discard", n=n)
    while True:
        choice = console.input(prompt).strip()
        try:
            idx = int(choice)
        except ValueError:
            idx = -1
        if 0 <= idx <= n:
            return idx
        console.print(f"  [red]{t('msg.invalid_input')}[/red]")
