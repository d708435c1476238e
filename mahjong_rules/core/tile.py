"""Tile definition with suit-aware ordering and round-five support."""

from enum import IntEnum
from typing import Iterable, List, Tuple

from .errors import TileError


class TileSuit(IntEnum):
    CHARACTERS = 0  # 万子
    CIRCLES = 1     # 筒子
    BAMBOO = 2      # 索子
    HONORS = 3      # 字牌

    @property
    def letter(self) -> str:
        return SUIT_LETTERS[self]


SUIT_LETTERS = {
    TileSuit.CHARACTERS: 'm',
    TileSuit.CIRCLES: 'p',
    TileSuit.BAMBOO: 's',
    TileSuit.HONORS: 'z',
}
LETTER_SUITS = {letter: suit for suit, letter in SUIT_LETTERS.items()}

NUMERAL_SUITS = (TileSuit.CHARACTERS, TileSuit.CIRCLES, TileSuit.BAMBOO)

# Rank 0 is the round five: sorts and runs as a five, never equal to one.
ROUND_RANK = 0
ROUND_AS_RANK = 5

# Honor ranks 1..7: 東 南 西 北 中 發 白
HONOR_NAMES = ["東", "南", "西", "北", "中", "發", "白"]


def _valid_rank(suit: TileSuit, rank: int) -> bool:
    if suit == TileSuit.HONORS:
        return 1 <= rank <= 7
    return 0 <= rank <= 9


class Tile:
    """Immutable tile identified by suit and rank."""
    __slots__ = ('_suit', '_rank')

    def __init__(self, suit: TileSuit, rank: int):
        try:
            suit = TileSuit(suit)
        except ValueError:
            raise TileError(f"unknown suit {suit!r}") from None
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise TileError(f"rank must be an int, got {rank!r}")
        if not _valid_rank(suit, rank):
            raise TileError(f"rank {rank} is not valid for suit {suit.name}")
        self._suit = suit
        self._rank = rank

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def is_round(self) -> bool:
        return self._suit != TileSuit.HONORS and self._rank == ROUND_RANK

    @property
    def is_honor(self) -> bool:
        return self._suit == TileSuit.HONORS

    @property
    def effective_rank(self) -> int:
        """Rank used for ordering and runs (round five counts as five)."""
        return ROUND_AS_RANK if self.is_round else self._rank

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (int(self._suit), self.effective_rank)

    @property
    def name(self) -> str:
        return f"{self._rank}{self._suit.letter}"

    def with_rank(self, rank: int) -> 'Tile':
        """Same suit, different rank (a new tile)."""
        return Tile(self._suit, rank)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Tile({self.name})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._suit == other._suit and self._rank == other._rank
        return NotImplemented

    def __hash__(self):
        return hash((self._suit, self._rank))

    def __lt__(self, other):
        if isinstance(other, Tile):
            return self.sort_key < other.sort_key
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Tile):
            return self.sort_key <= other.sort_key
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Tile):
            return self.sort_key > other.sort_key
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, Tile):
            return self.sort_key >= other.sort_key
        return NotImplemented


def compare(a: Tile, b: Tile) -> int:
    """Three-way compare on sort key: -1, 0 or 1.

    0 does not imply equality: a round five and a plain five compare 0.
    """
    ka, kb = a.sort_key, b.sort_key
    return (ka > kb) - (ka < kb)


def make_tiles_from_string(s: str) -> List[Tile]:
    """Parse shorthand like '123m0p44z' into tiles (digits then suit letter)."""
    tiles = []
    ranks = []
    for ch in s:
        if ch.isdigit():
            ranks.append(int(ch))
        elif ch in LETTER_SUITS:
            if not ranks:
                raise TileError(f"suit letter {ch!r} without ranks in {s!r}")
            tiles.extend(Tile(LETTER_SUITS[ch], r) for r in ranks)
            ranks = []
        elif ch.isspace():
            continue
        else:
            raise TileError(f"unexpected character {ch!r} in {s!r}")
    if ranks:
        raise TileError(f"ranks without a suit letter in {s!r}")
    return tiles


def tiles_to_string(tiles: Iterable[Tile]) -> str:
    """Render tiles compactly: ranks, then the suit letter once per same-suit run.

    Runs of different suits are separated by a space, e.g. '1123m 334p 44z'.
    """
    groups = []
    ranks = ""
    suit = None
    for tile in tiles:
        if suit is not None and tile.suit != suit:
            groups.append(ranks + suit.letter)
            ranks = ""
        suit = tile.suit
        ranks += str(tile.rank)
    if suit is not None:
        groups.append(ranks + suit.letter)
    return " ".join(groups)
