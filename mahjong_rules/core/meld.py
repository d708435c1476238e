"""Meld (副露) data structures for Chi/Pon/Kan."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .seat import Seat
from .tile import Tile


class MeldType(Enum):
    CHI = "chi"   # 吃
    PON = "pon"   # 碰
    KAN = "kan"   # 明杠

    @property
    def size(self) -> int:
        return MELD_SIZES[self]


MELD_SIZES = {
    MeldType.CHI: 3,
    MeldType.PON: 3,
    MeldType.KAN: 4,
}

# Rendering brackets per meld type
MELD_BRACKETS = {
    MeldType.CHI: ("(", ")"),
    MeldType.PON: ("[", "]"),
    MeldType.KAN: ("{", "}"),
}


@dataclass(frozen=True)
class Meld:
    """A frozen, face-up meld.

    Attributes:
        meld_type: Type of meld
        tiles: All tiles in the meld, sorted
        called_tile: The discarded tile that was claimed
        from_seat: Seat the called tile was claimed from
    """
    meld_type: MeldType
    tiles: Tuple[Tile, ...]
    called_tile: Tile
    from_seat: Seat

    @property
    def is_kan(self) -> bool:
        return self.meld_type == MeldType.KAN

    @property
    def suit(self):
        return self.tiles[0].suit

    def render(self) -> str:
        """Compact form: bracketed ranks, suit letter, source seat marker."""
        left, right = MELD_BRACKETS[self.meld_type]
        ranks = "".join(str(t.rank) for t in self.tiles)
        return f"{left}{ranks}{self.suit.letter}{right}{self.from_seat.marker}"

    def __str__(self):
        return self.render()
