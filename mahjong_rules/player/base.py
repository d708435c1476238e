"""Abstract player interface and TableView (read-only information barrier)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from mahjong_rules.core.hand import Hand
from mahjong_rules.core.meld import Meld
from mahjong_rules.core.seat import Seat
from mahjong_rules.core.tile import Tile


@dataclass
class OpponentView:
    """Read-only view of an opponent (no hidden tiles)."""
    seat: Seat
    name: str
    melds: List[Meld]
    discard_pool: List[Tile]
    num_closed_tiles: int


@dataclass
class TableView:
    """What one seat may legally see: its own hand and everyone's open tiles."""
    my_hand: Hand
    my_seat: Seat
    my_name: str
    opponents: List[OpponentView] = field(default_factory=list)
    remaining_tiles: int = 0
    last_discard: Optional[Tile] = None
    last_discard_seat: Optional[Seat] = None


class Player(ABC):
    """Abstract base class for all players."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def choose_discard(self, view: TableView) -> int:
        """Return a discard selector: 0 for the drawn tile, 1..N for a closed tile."""
        ...


def build_table_view(seat: Seat, table, names: Dict[Seat, str]) -> TableView:
    """Build a TableView of table for seat."""
    opponents = []
    for other, hand in table.hands.items():
        if other == seat:
            continue
        opponents.append(OpponentView(
            seat=other,
            name=names[other],
            melds=list(hand.melds),
            discard_pool=list(hand.discard_pool),
            num_closed_tiles=len(hand.closed_tiles),
        ))

    return TableView(
        my_hand=table.hands[seat],
        my_seat=seat,
        my_name=names[seat],
        opponents=opponents,
        remaining_tiles=table.pile.remaining,
        last_discard=table.last_discard,
        last_discard_seat=table.last_discard_seat,
    )
