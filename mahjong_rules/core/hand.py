"""Hand management - closed tiles, drawn tile, melds, discard pool."""

from collections import Counter
from typing import Iterable, List, Optional

from .errors import DealError, HandError, WallExhausted
from .meld import Meld, MeldType
from .seat import Seat
from .tile import Tile, TileSuit, tiles_to_string
from .wall import DrawPile

# Discard selector for the drawn tile; 1..N select sorted closed tiles.
DRAWN_TILE = 0


class Hand:
    """Manages one seat's tiles during a round.

    Attributes:
        seat: Fixed seat of the owner
        closed_tiles: Concealed tiles, kept sorted
        draw_tile: Tile drawn this turn and not yet resolved
        melds: Claimed melds (append-only)
        discard_pool: Tiles discarded (oldest first)
    """

    def __init__(self, seat: Seat):
        self.seat = seat
        self.closed_tiles: List[Tile] = []
        self.draw_tile: Optional[Tile] = None
        self.melds: List[Meld] = []
        self.discard_pool: List[Tile] = []

    def deal_from(self, pile: DrawPile) -> Tile:
        """Take one tile straight into the closed tiles (initial deal only)."""
        tile = pile.draw()
        if tile is None:
            raise DealError("draw pile ran out during the initial deal")
        self.closed_tiles.append(tile)
        self.sort_closed()
        return tile

    def draw_from(self, pile: DrawPile) -> Tile:
        """Draw one tile from the pile into draw_tile."""
        if self.draw_tile is not None:
            raise HandError(f"{self.seat.name} already holds drawn tile {self.draw_tile}")
        tile = pile.draw()
        if tile is None:
            raise WallExhausted("no tiles left in the draw pile")
        self.draw_tile = tile
        return tile

    def discard(self, selector: int) -> Tile:
        """Discard by selector: 0 for the drawn tile, 1..N for a sorted closed tile.

        Discarding a closed tile moves the drawn tile into the closed tiles, so
        the closed tile count never changes across a turn.
        """
        if isinstance(selector, bool) or not isinstance(selector, int):
            raise HandError(f"discard selector must be an int, got {selector!r}")
        if self.draw_tile is None:
            raise HandError(f"{self.seat.name} has no drawn tile to discard or swap in")
        if selector == DRAWN_TILE:
            tile = self.draw_tile
            self.draw_tile = None
            return tile
        if not 1 <= selector <= len(self.closed_tiles):
            raise HandError(
                f"discard position {selector} out of range 0..{len(self.closed_tiles)}")
        tile = self.closed_tiles.pop(selector - 1)
        self.closed_tiles.append(self.draw_tile)
        self.draw_tile = None
        self.sort_closed()
        return tile

    def record_discard(self, tile: Tile):
        """Append a discarded tile to the discard pool."""
        self.discard_pool.append(tile)

    def sort_closed(self):
        """Sort closed tiles by suit then effective rank."""
        self.closed_tiles.sort()

    def count(self, tile: Tile) -> int:
        """Number of closed tiles exactly equal to tile."""
        return sum(1 for t in self.closed_tiles if t == tile)

    def find_by_rank(self, suit: TileSuit, rank: int) -> Optional[Tile]:
        """First closed tile of suit whose effective rank is rank."""
        for t in self.closed_tiles:
            if t.suit == suit and t.effective_rank == rank:
                return t
        return None

    def form_meld(self, meld_type: MeldType, tiles: Iterable[Tile],
                  called_tile: Tile, from_seat: Seat) -> Meld:
        """Claim called_tile into a meld, consuming the other tiles from hand.

        Nothing is mutated unless the meld is valid and every consumed tile is
        present in the closed tiles.
        """
        tiles = list(tiles)
        if from_seat == self.seat and meld_type != MeldType.KAN:
            raise HandError(
                f"{self.seat.name} cannot {meld_type.value} its own discard")
        if len(tiles) != meld_type.size:
            raise HandError(
                f"{meld_type.value} needs {meld_type.size} tiles, got {len(tiles)}")
        if called_tile not in tiles:
            raise HandError(f"called tile {called_tile} is not part of the meld")
        _check_shape(meld_type, tiles, called_tile)

        consumed = list(tiles)
        consumed.remove(called_tile)
        have = Counter(self.closed_tiles)
        need = Counter(consumed)
        missing = [t for t, n in need.items() if have[t] < n]
        if missing:
            raise HandError(
                f"{self.seat.name} is missing {' '.join(map(str, missing))} "
                f"for {meld_type.value}")

        for t in consumed:
            self.closed_tiles.remove(t)
        meld = Meld(meld_type, tuple(sorted(tiles)), called_tile, from_seat)
        self.melds.append(meld)
        return meld

    def pon(self, tile: Tile, from_seat: Seat) -> Meld:
        """Claim a discarded tile as a triple with two matching closed tiles."""
        if from_seat == self.seat:
            raise HandError(f"{self.seat.name} cannot pon its own discard")
        matching = [t for t in self.closed_tiles if t == tile][:2]
        if len(matching) < 2:
            raise HandError(f"{self.seat.name} holds fewer than two {tile}")
        return self.form_meld(MeldType.PON, matching + [tile], tile, from_seat)

    def render(self) -> str:
        """Closed tiles grouped by suit, followed by melds."""
        parts = []
        if self.closed_tiles:
            parts.append(tiles_to_string(self.closed_tiles))
        parts.extend(m.render() for m in self.melds)
        return " ".join(parts)

    @property
    def num_melds(self) -> int:
        return len(self.melds)

    @property
    def total_tiles(self) -> int:
        """Closed + drawn, with every meld counted as three hand slots."""
        drawn = 1 if self.draw_tile is not None else 0
        return len(self.closed_tiles) + 3 * len(self.melds) + drawn

    def clone(self) -> 'Hand':
        """Create a copy for simulation."""
        h = Hand(self.seat)
        h.closed_tiles = list(self.closed_tiles)
        h.draw_tile = self.draw_tile
        h.melds = list(self.melds)
        h.discard_pool = list(self.discard_pool)
        return h

    def __repr__(self):
        return f"Hand({self.seat.name}, {self.render()!r})"


def _check_shape(meld_type: MeldType, tiles: List[Tile], called_tile: Tile):
    if meld_type == MeldType.CHI:
        suits = {t.suit for t in tiles}
        if len(suits) != 1 or called_tile.is_honor:
            raise HandError("chi needs three tiles of one numeral suit")
        ranks = sorted(t.effective_rank for t in tiles)
        if ranks != list(range(ranks[0], ranks[0] + 3)):
            raise HandError(f"{' '.join(map(str, tiles))} is not a run")
    elif any(t != called_tile for t in tiles):
        raise HandError(f"{meld_type.value} needs identical tiles to {called_tile}")
