"""Table state - the single owner of the draw pile and the four hands.

The table exposes the primitives a turn loop needs (deal, draw, discard,
claim lookup, claim execution) but does not sequence turns or arbitrate
between seats claiming the same discard.
"""

from typing import Dict, List, Optional

from mahjong_rules.core.errors import HandError, WallExhausted
from mahjong_rules.core.hand import Hand
from mahjong_rules.core.meld import Meld, MeldType
from mahjong_rules.core.seat import Seat, SEATS
from mahjong_rules.core.tile import Tile
from mahjong_rules.core.wall import DrawPile
from mahjong_rules.engine.action import Action, AvailableActions
from mahjong_rules.engine.claims import available_actions, execute_claim
from mahjong_rules.engine.event import EventBus, EventType, GameEvent

HAND_SIZE = 13

MELD_EVENTS = {
    MeldType.CHI: EventType.CHI,
    MeldType.PON: EventType.PON,
    MeldType.KAN: EventType.KAN,
}


class TableConfig:
    """Table configuration."""

    def __init__(
        self,
        seed: Optional[int] = None,
        hand_size: int = HAND_SIZE,
        human_seat: Optional[Seat] = Seat.EAST,
        save_log: bool = True,
        log_dir: Optional[str] = None,
    ):
        if hand_size < 1:
            raise ValueError(f"hand_size must be positive, got {hand_size}")
        self.seed = seed
        self.hand_size = hand_size
        self.human_seat = human_seat
        self.save_log = save_log
        self.log_dir = log_dir

    def to_dict(self) -> dict:
        return {
            "seed": self.seed,
            "hand_size": self.hand_size,
            "human_seat": self.human_seat.name if self.human_seat is not None else None,
        }


class RoundResult:
    """Outcome of a round driven at this table."""

    def __init__(self, reason: str, turns: int, remaining: int):
        self.reason = reason  # "exhaustive" when the wall ran out
        self.turns = turns
        self.remaining = remaining

    @property
    def is_draw(self) -> bool:
        return self.reason == "exhaustive"


class Table:
    """Pile plus four hands for one round.

    Attributes:
        pile: The draw pile (only the table draws from it)
        hands: Hand per seat
        initial_wall: Pile order before the deal (for logs/replays)
        last_discard: Most recent discard still open to claims
        last_discard_seat: Seat that made last_discard
    """

    def __init__(self, config: Optional[TableConfig] = None,
                 event_bus: Optional[EventBus] = None,
                 pile: Optional[DrawPile] = None):
        self.config = config or TableConfig()
        self.event_bus = event_bus or EventBus()
        self.pile = pile if pile is not None else DrawPile.new_game(self.config.seed)
        self.initial_wall: List[Tile] = list(self.pile.tiles)
        self.hands: Dict[Seat, Hand] = {seat: Hand(seat) for seat in SEATS}

        self.turn_count = 0
        self.last_discard: Optional[Tile] = None
        self.last_discard_seat: Optional[Seat] = None
        self.result: Optional[RoundResult] = None

    def hand(self, seat: Seat) -> Hand:
        return self.hands[seat]

    def deal(self):
        """Deal hand_size tiles to each seat, one at a time in seat order."""
        self.event_bus.emit(GameEvent(EventType.ROUND_START, {
            "wall": list(self.initial_wall),
            "config": self.config,
        }))
        for _ in range(self.config.hand_size):
            for seat in SEATS:
                self.hands[seat].deal_from(self.pile)

        self.event_bus.emit(GameEvent(EventType.DEAL, {
            "hands": {seat: list(h.closed_tiles) for seat, h in self.hands.items()},
            "remaining": self.pile.remaining,
        }))

    def draw(self, seat: Seat) -> Tile:
        """Draw for seat. Raises WallExhausted when the pile is empty."""
        try:
            tile = self.hands[seat].draw_from(self.pile)
        except WallExhausted:
            self.event_bus.emit(GameEvent(EventType.WALL_EXHAUSTED, {
                "player": seat,
            }))
            raise
        self.turn_count += 1
        self.last_discard = None
        self.last_discard_seat = None
        self.event_bus.emit(GameEvent(EventType.DRAW, {
            "player": seat,
            "tile": tile,
            "remaining": self.pile.remaining,
        }))
        return tile

    def discard(self, seat: Seat, selector: int) -> Tile:
        """Discard by selector and record it in the seat's discard pool."""
        hand = self.hands[seat]
        is_tsumogiri = selector == 0
        tile = hand.discard(selector)
        hand.record_discard(tile)

        self.last_discard = tile
        self.last_discard_seat = seat
        self.event_bus.emit(GameEvent(EventType.DISCARD, {
            "player": seat,
            "tile": tile,
            "is_tsumogiri": is_tsumogiri,
        }))
        return tile

    def claims_for(self, tile: Tile, discard_seat: Seat) -> Dict[Seat, AvailableActions]:
        """Claims each other seat may make on tile, for seats that have any."""
        claims = {}
        for offset in range(1, len(SEATS)):
            seat = Seat((discard_seat + offset) % len(SEATS))
            available = available_actions(self.hands[seat], tile, discard_seat)
            if available.has_action:
                claims[seat] = available

        if claims:
            self.event_bus.emit(GameEvent(EventType.CLAIMS_OPEN, {
                "player": discard_seat,
                "tile": tile,
                "claims": claims,
            }))
        return claims

    def claim(self, action: Action) -> Meld:
        """Execute a claim on the last discard.

        The action must be one the claimant is currently eligible for.
        """
        if self.last_discard is None:
            raise HandError("there is no discard open to claims")
        if action.tile != self.last_discard or action.from_seat != self.last_discard_seat:
            raise HandError(f"{action!r} does not target the last discard")
        hand = self.hands[action.seat]
        available = available_actions(hand, self.last_discard, self.last_discard_seat)
        if action not in available.actions:
            raise HandError(f"{action!r} is not available to {action.seat.name}")

        meld = execute_claim(hand, action)
        self.last_discard = None
        self.last_discard_seat = None
        self.event_bus.emit(GameEvent(MELD_EVENTS[meld.meld_type], {
            "player": action.seat,
            "meld": meld,
        }))
        return meld

    def end_round(self, reason: str = "exhaustive") -> RoundResult:
        """Close the round and announce the result."""
        self.result = RoundResult(reason, self.turn_count, self.pile.remaining)
        self.event_bus.emit(GameEvent(EventType.ROUND_END, {
            "result": self.result,
        }))
        return self.result

    @property
    def is_finished(self) -> bool:
        return self.result is not None
