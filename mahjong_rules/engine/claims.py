"""Claim eligibility for a discarded tile, and claim execution."""

from typing import List

from mahjong_rules.core.errors import HandError
from mahjong_rules.core.hand import Hand
from mahjong_rules.core.meld import Meld
from mahjong_rules.core.seat import Seat
from mahjong_rules.core.tile import Tile
from mahjong_rules.engine.action import Action, ActionType, AvailableActions

# Window placements: the discard as high, middle or low member of the run.
CHI_OFFSETS = (-1, 0, 1)


def available_actions(hand: Hand, discard_tile: Tile,
                      discard_seat: Seat) -> AvailableActions:
    """Every claim hand's owner may make on discard_tile. Never mutates hand."""
    actions = AvailableActions(seat=hand.seat)
    actions.can_chi = chi_candidates(hand, discard_tile, discard_seat)

    matching = [t for t in hand.closed_tiles if t == discard_tile]
    # Only pon excludes the hand's own discard.
    if len(matching) >= 2 and discard_seat != hand.seat:
        actions.can_pon.append(Action(
            ActionType.PON, hand.seat, discard_tile,
            tuple(matching[:2]) + (discard_tile,), discard_seat,
        ))
    if len(matching) >= 3:
        actions.can_kan.append(Action(
            ActionType.KAN, hand.seat, discard_tile,
            tuple(matching[:3]) + (discard_tile,), discard_seat,
        ))
    return actions


def chi_candidates(hand: Hand, discard_tile: Tile,
                   discard_seat: Seat) -> List[Action]:
    """Runs hand can complete with discard_tile, ordered by lowest rank.

    Only the seat right after the discarder may chi, and never on an honor.
    """
    if discard_seat != hand.seat.previous or discard_tile.is_honor:
        return []

    rank = discard_tile.effective_rank
    suit = discard_tile.suit
    candidates = []
    # Lowest window first: offset -1 puts the discard on top.
    for offset in CHI_OFFSETS:
        window = [rank + offset - 1, rank + offset, rank + offset + 1]
        if not all(1 <= r <= 9 for r in window):
            continue
        others = []
        for r in window:
            if r == rank:
                continue
            tile = hand.find_by_rank(suit, r)
            if tile is None:
                break
            others.append(tile)
        else:
            tiles = tuple(sorted(others + [discard_tile]))
            candidates.append(Action(
                ActionType.CHI, hand.seat, discard_tile, tiles, discard_seat))
    return candidates


def execute_claim(hand: Hand, action: Action) -> Meld:
    """Form the meld an available action describes."""
    if action.action_type == ActionType.SKIP:
        raise HandError("skip does not form a meld")
    if action.seat != hand.seat:
        raise HandError(f"action for {action.seat.name} applied to {hand.seat.name}")
    return hand.form_meld(action.meld_type, action.tiles,
                          action.tile, action.from_seat)
