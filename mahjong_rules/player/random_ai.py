"""Random player - discards a uniformly chosen tile."""

import random
from typing import Optional

from mahjong_rules.player.base import Player, TableView


class RandomPlayer(Player):
    """Automated seat that picks any legal discard selector at random."""

    def __init__(self, name: str, seed: Optional[int] = None):
        super().__init__(name)
        self.rng = random.Random(seed)

    def choose_discard(self, view: TableView) -> int:
        hand = view.my_hand
        if hand.draw_tile is None:
            raise ValueError(f"{self.name} has nothing drawn to discard")
        return self.rng.randint(0, len(hand.closed_tiles))
