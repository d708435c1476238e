"""Claim action definitions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from mahjong_rules.core.meld import MeldType
from mahjong_rules.core.seat import Seat
from mahjong_rules.core.tile import Tile


class ActionType(Enum):
    CHI = "chi"
    PON = "pon"
    KAN = "kan"   # Open kan from discard
    SKIP = "skip"


# Meld formed by each claim type
ACTION_MELDS = {
    ActionType.CHI: MeldType.CHI,
    ActionType.PON: MeldType.PON,
    ActionType.KAN: MeldType.KAN,
}


@dataclass(frozen=True)
class Action:
    """A claim a seat may make on a discarded tile.

    tiles lists every tile of the resulting meld, the claimed tile included.
    """
    action_type: ActionType
    seat: Seat
    tile: Optional[Tile] = None
    tiles: Tuple[Tile, ...] = ()
    from_seat: Optional[Seat] = None

    @property
    def meld_type(self) -> MeldType:
        return ACTION_MELDS[self.action_type]

    def __repr__(self):
        parts = [self.action_type.value]
        if self.tiles:
            parts.append("tiles=" + "".join(t.name for t in self.tiles))
        elif self.tile:
            parts.append(f"tile={self.tile.name}")
        return f"Action({', '.join(parts)}, {self.seat.name})"


@dataclass
class AvailableActions:
    """Claims open to one seat for one discard."""
    seat: Seat
    can_chi: List[Action] = field(default_factory=list)
    can_pon: List[Action] = field(default_factory=list)
    can_kan: List[Action] = field(default_factory=list)

    @property
    def has_action(self) -> bool:
        return bool(self.can_chi or self.can_pon or self.can_kan)

    @property
    def actions(self) -> List[Action]:
        """Every available claim: kan, then pon, then chi candidates."""
        return self.can_kan + self.can_pon + self.can_chi
