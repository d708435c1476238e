"""Mahjong table demo - Terminal CLI"""

from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel

from mahjong_rules.core.errors import DealError, HandError, WallExhausted
from mahjong_rules.core.seat import Seat
from mahjong_rules.engine.event import EventBus
from mahjong_rules.engine.table import Table, TableConfig
from mahjong_rules.engine.table_logger import TableLogger
from mahjong_rules.player.base import Player, build_table_view
from mahjong_rules.player.human import HumanPlayer
from mahjong_rules.player.random_ai import RandomPlayer
from mahjong_rules.ui.board_layout import render_hands
from mahjong_rules.ui.i18n import t
from mahjong_rules.ui.renderer import Renderer

console = Console()


def show_menu() -> int:
    """Show mode selection menu and return choice."""
    console.print()
    console.print(Panel(
        "[bold cyan]Mahjong[/bold cyan]\n"
        f"[dim]{t('menu.subtitle')}[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    console.print()
    console.print(f"  {t('menu.choose_mode')}")
    console.print(f"    1. {t('menu.play')}")
    console.print(f"    2. {t('menu.watch')}")
    console.print(f"    0. {t('menu.quit')}")
    console.print()

    while True:
        try:
            choice = int(console.input("  > " + t("menu.prompt")).strip())
            if 0 <= choice <= 2:
                return choice
        except ValueError:
            pass
        console.print(f"  [red]{t('msg.invalid_input')}[/red]")


def ask_seed() -> Optional[int]:
    """Optional seed for a reproducible wall (blank for random)."""
    while True:
        raw = console.input("  > " + t("menu.seed")).strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            console.print(f"  [red]{t('msg.invalid_input')}[/red]")


def create_table(choice: int, seed: Optional[int]):
    """Create config, players and UI for a menu choice."""
    is_spectator = choice == 2
    config = TableConfig(
        seed=seed,
        human_seat=None if is_spectator else Seat.EAST,
    )

    event_bus = EventBus()
    names: Dict[Seat, str] = {}
    for seat in Seat:
        if seat == config.human_seat:
            names[seat] = t("name.you")
        else:
            names[seat] = t("name.cpu", seat=seat.kanji)
    renderer = Renderer(console, event_bus, names)

    players: Dict[Seat, Player] = {}
    for seat in Seat:
        if seat == config.human_seat:
            players[seat] = HumanPlayer(names[seat], console, renderer)
        else:
            player_seed = None if seed is None else seed + seat.value
            players[seat] = RandomPlayer(names[seat], player_seed)

    return config, event_bus, renderer, names, players


def take_turn(table: Table, seat: Seat, player: Player, names: Dict[Seat, str]):
    """Ask seat's player for a discard until the table accepts it."""
    while True:
        view = build_table_view(seat, table, names)
        selector = player.choose_discard(view)
        try:
            return table.discard(seat, selector)
        except HandError as e:
            if not isinstance(player, HumanPlayer):
                raise
            console.print(f"  [red]{e}[/red]")


def play_round(choice: int):
    """Play one round until the wall runs out."""
    seed = ask_seed()
    config, event_bus, renderer, names, players = create_table(choice, seed)

    logger = TableLogger(config.to_dict(), config.log_dir)
    logger.subscribe_events(event_bus)

    table = Table(config, event_bus)
    try:
        table.deal()
    except DealError as e:
        console.print(f"  [red]{t('msg.deal_failed', error=e)}[/red]")
        return

    console.print(f"\n  [bold]{t('msg.round_start')}[/bold]")
    console.print(f"  [dim]session {logger.session_id}[/dim]")

    seat = Seat.EAST
    while not table.is_finished:
        try:
            table.draw(seat)
        except WallExhausted:
            table.end_round("exhaustive")
            break

        take_turn(table, seat, players[seat], names)
        table.claims_for(table.last_discard, seat)

        seat = seat.next

    render_hands(console, names, table.hands)

    if config.save_log:
        log_path = logger.save()
        console.print(f"  [dim]{t('msg.log_saved', path=log_path)}[/dim]")

    if config.human_seat is not None:
        renderer.pause()


def main():
    """Main entry point."""
    try:
        while True:
            choice = show_menu()
            if choice == 0:
                console.print(f"\n  {t('menu.goodbye')}\n")
                break
            play_round(choice)
            console.print()
    except (KeyboardInterrupt, EOFError):
        console.print(f"\n\n  [dim]{t('menu.exited')}[/dim]\n")
