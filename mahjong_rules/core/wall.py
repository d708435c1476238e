"""Draw pile (牌山) construction, shuffling and depletion."""

import random
from typing import Iterable, List, Optional, Union

from .tile import Tile, TileSuit, NUMERAL_SUITS, ROUND_RANK, ROUND_AS_RANK

STANDARD_TILE_COUNT = 136
COPIES_PER_TILE = 4


def build_standard_tiles() -> List[Tile]:
    """Build the 136-tile set in canonical order.

    Per numeral suit: the round five first, then ranks 1..9 with four copies
    each except the plain five, which has three. Honors: four copies of 1..7.
    """
    tiles = []
    for suit in NUMERAL_SUITS:
        tiles.append(Tile(suit, ROUND_RANK))
        for rank in range(1, 10):
            copies = COPIES_PER_TILE - 1 if rank == ROUND_AS_RANK else COPIES_PER_TILE
            tiles.extend(Tile(suit, rank) for _ in range(copies))
    for rank in range(1, 8):
        tiles.extend(Tile(TileSuit.HONORS, rank) for _ in range(COPIES_PER_TILE))
    return tiles


class DrawPile:
    """The shared wall every seat draws from.

    The pile only shrinks: tiles leave from the front and are never put back.
    """

    def __init__(self, tiles: Optional[Iterable[Tile]] = None):
        self.tiles: List[Tile] = list(tiles) if tiles is not None else []

    @classmethod
    def standard(cls) -> 'DrawPile':
        """Unshuffled standard pile in canonical order."""
        return cls(build_standard_tiles())

    @classmethod
    def new_game(cls, seed: Optional[int] = None) -> 'DrawPile':
        """Standard pile, shuffled (reproducibly when a seed is given)."""
        pile = cls.standard()
        pile.shuffle(seed)
        return pile

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile]) -> 'DrawPile':
        """Pile in a fixed, caller-chosen order (tests and replays)."""
        return cls(tiles)

    def shuffle(self, rng: Union[random.Random, int, None] = None):
        """Shuffle in place with a Fisher-Yates pass.

        rng may be a random.Random, an integer seed, or None for the module RNG.
        """
        if rng is None:
            random.shuffle(self.tiles)
            return
        if not isinstance(rng, random.Random):
            rng = random.Random(rng)
        rng.shuffle(self.tiles)

    def draw(self) -> Optional[Tile]:
        """Remove and return the front tile, or None when the pile is empty."""
        if self.tiles:
            return self.tiles.pop(0)
        return None

    @property
    def remaining(self) -> int:
        return len(self.tiles)

    @property
    def is_empty(self) -> bool:
        return len(self.tiles) == 0

    def __len__(self):
        return len(self.tiles)

    def __repr__(self):
        return f"DrawPile({self.remaining} tiles)"
