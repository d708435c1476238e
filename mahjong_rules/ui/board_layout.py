"""Board layout rendering using Rich."""

from typing import Dict

from rich.console import Console
from rich.panel import Panel
from rich.table import Table as RichTable
from rich.text import Text

from mahjong_rules.core.seat import Seat
from mahjong_rules.engine.action import AvailableActions
from mahjong_rules.player.base import TableView
from mahjong_rules.ui.i18n import t
from mahjong_rules.ui.tile_display import (
    format_discard_pool, numbered_tiles_text, tile_to_rich_text, tiles_to_rich_text,
)


def render_board(console: Console, view: TableView):
    """Render every seat's open tiles and the viewer's own hand."""
    header = Text()
    header.append(f"  {view.my_name} ({view.my_seat.kanji})")
    header.append("  " + t("board.remaining", n=view.remaining_tiles), style="dim")
    console.print(Panel(header, title="[bold]Mahjong[/bold]", border_style="cyan"))

    grid = RichTable(show_header=True, header_style="bold", box=None, padding=(0, 1))
    grid.add_column(t("board.seat"))
    grid.add_column(t("board.player"))
    grid.add_column(t("board.melds"))
    grid.add_column(t("board.discards"))

    rows = [(view.my_seat, view.my_name, view.my_hand.melds, view.my_hand.discard_pool)]
    for opp in view.opponents:
        rows.append((opp.seat, opp.name, opp.melds, opp.discard_pool))
    # Turn order: 東→南→西→北
    rows.sort(key=lambda r: r[0].value)

    for seat, name, melds, pool in rows:
        meld_text = Text(" ".join(m.render() for m in melds) or "-")
        grid.add_row(seat.kanji, name, meld_text, format_discard_pool(pool))
    console.print(grid)

    console.print("─" * 60, style="dim")
    hand = view.my_hand
    console.print(numbered_tiles_text(hand.closed_tiles, hand.draw_tile))


def render_discard(console: Console, name: str, seat: Seat, tile):
    line = Text(f"  {name} ({seat.kanji}) ")
    line.append_text(tile_to_rich_text(tile))
    console.print(line)


def render_claims(console: Console, names: Dict[Seat, str],
                  claims: Dict[Seat, AvailableActions]):
    """List the claims each seat could make on the last discard."""
    for seat, available in claims.items():
        line = Text(f"    {names[seat]}: ", style="bold")
        for i, action in enumerate(available.actions):
            if i > 0:
                line.append(" | ")
            line.append(f"{action.action_type.value} ", style="magenta")
            line.append_text(tiles_to_rich_text(action.tiles, separator=""))
        console.print(line)


def render_hands(console: Console, names: Dict[Seat, str], hands):
    """Show every hand in compact form (end of round)."""
    for seat in Seat:
        console.print(f"  {seat.kanji} {names[seat]}: {hands[seat].render()}")


def render_draw_screen(console: Console, remaining: int, turns: int):
    """Display the exhaustive draw banner."""
    console.print(Panel(
        f"[bold yellow]{t('draw.exhaustive')}[/bold yellow]  "
        + t("draw.detail", turns=turns, remaining=remaining),
        border_style="yellow",
    ))
