"""Tests for hand.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_rules.core.errors import DealError, HandError, WallExhausted
from mahjong_rules.core.hand import Hand
from mahjong_rules.core.meld import Meld, MeldType
from mahjong_rules.core.seat import Seat
from mahjong_rules.core.tile import Tile, TileSuit, make_tiles_from_string
from mahjong_rules.core.wall import DrawPile

P3 = Tile(TileSuit.CIRCLES, 3)


def make_hand(s: str, seat: Seat = Seat.EAST, drawn: str = None) -> Hand:
    hand = Hand(seat)
    hand.closed_tiles = make_tiles_from_string(s)
    hand.sort_closed()
    if drawn:
        hand.draw_tile = make_tiles_from_string(drawn)[0]
    return hand


class TestDeal:
    def test_deal_sorts(self):
        pile = DrawPile.from_tiles(make_tiles_from_string("1z9m1p"))
        hand = Hand(Seat.EAST)
        for _ in range(3):
            hand.deal_from(pile)
        assert [t.name for t in hand.closed_tiles] == ["9m", "1p", "1z"]
        assert hand.draw_tile is None

    def test_deal_from_empty_pile(self):
        hand = Hand(Seat.SOUTH)
        with pytest.raises(DealError):
            hand.deal_from(DrawPile.from_tiles([]))


class TestDraw:
    def test_draw_sets_drawn_tile(self):
        pile = DrawPile.from_tiles(make_tiles_from_string("5s"))
        hand = make_hand("123m")
        tile = hand.draw_from(pile)
        assert tile == hand.draw_tile == Tile(TileSuit.BAMBOO, 5)
        assert len(hand.closed_tiles) == 3

    def test_second_draw_is_usage_error(self):
        pile = DrawPile.from_tiles(make_tiles_from_string("56s"))
        hand = make_hand("123m")
        hand.draw_from(pile)
        with pytest.raises(HandError):
            hand.draw_from(pile)
        assert pile.remaining == 1

    def test_draw_from_empty_pile(self):
        hand = make_hand("123m")
        with pytest.raises(WallExhausted):
            hand.draw_from(DrawPile.from_tiles([]))
        assert hand.draw_tile is None
        assert len(hand.closed_tiles) == 3


class TestDiscard:
    def test_discard_drawn_tile(self):
        hand = make_hand("123m456p", drawn="9s")
        before = list(hand.closed_tiles)
        tile = hand.discard(0)
        assert tile == Tile(TileSuit.BAMBOO, 9)
        assert hand.closed_tiles == before
        assert hand.draw_tile is None

    def test_discard_closed_tile_swaps_in_drawn(self):
        hand = make_hand("123m456p", drawn="1s")
        tile = hand.discard(2)
        assert tile == Tile(TileSuit.CHARACTERS, 2)
        assert [t.name for t in hand.closed_tiles] == ["1m", "3m", "4p", "5p", "6p", "1s"]
        assert hand.draw_tile is None

    def test_swap_keeps_size_for_every_position(self):
        base = "1123m334p678s244z"
        for pos in range(1, 14):
            hand = make_hand(base, drawn="7p")
            expected = hand.closed_tiles[pos - 1]
            assert hand.discard(pos) == expected
            assert len(hand.closed_tiles) == 13
            assert hand.draw_tile is None
            assert hand.closed_tiles == sorted(hand.closed_tiles)

    def test_discard_without_drawn_tile(self):
        hand = make_hand("123m")
        with pytest.raises(HandError):
            hand.discard(1)
        with pytest.raises(HandError):
            hand.discard(0)

    @pytest.mark.parametrize("selector", [-1, 4, 14])
    def test_discard_out_of_range(self, selector):
        hand = make_hand("123m", drawn="4m")
        with pytest.raises(HandError):
            hand.discard(selector)
        assert hand.draw_tile == Tile(TileSuit.CHARACTERS, 4)
        assert len(hand.closed_tiles) == 3

    def test_discard_non_int_selector(self):
        hand = make_hand("123m", drawn="4m")
        with pytest.raises(HandError):
            hand.discard("1")
        with pytest.raises(HandError):
            hand.discard(True)

    def test_record_discard(self):
        hand = make_hand("123m", drawn="4m")
        tile = hand.discard(0)
        hand.record_discard(tile)
        assert hand.discard_pool == [tile]


class TestPon:
    def test_pon(self):
        hand = make_hand("1123m334p678s244z", seat=Seat.EAST)
        meld = hand.pon(P3, Seat.SOUTH)
        assert len(hand.closed_tiles) == 11
        assert hand.melds == [meld]
        assert meld == Meld(MeldType.PON, (P3, P3, P3), P3, Seat.SOUTH)
        with pytest.raises(HandError):
            hand.pon(P3, Seat.EAST)

    def test_pon_needs_two(self):
        hand = make_hand("34p", seat=Seat.WEST)
        with pytest.raises(HandError):
            hand.pon(P3, Seat.SOUTH)
        assert hand.melds == []

    def test_pon_round_five_is_not_five(self):
        hand = make_hand("05p", seat=Seat.WEST)
        with pytest.raises(HandError):
            hand.pon(Tile(TileSuit.CIRCLES, 5), Seat.SOUTH)

    def test_own_discard_rejected_before_matching(self):
        hand = make_hand("33p", seat=Seat.NORTH)
        with pytest.raises(HandError):
            hand.pon(P3, Seat.NORTH)
        assert len(hand.closed_tiles) == 2


class TestFormMeld:
    def test_chi(self):
        hand = make_hand("46m9p", seat=Seat.SOUTH)
        called = Tile(TileSuit.CHARACTERS, 5)
        tiles = make_tiles_from_string("456m")
        meld = hand.form_meld(MeldType.CHI, tiles, called, Seat.EAST)
        assert [t.name for t in hand.closed_tiles] == ["9p"]
        assert meld.tiles == tuple(tiles)
        assert meld.from_seat == Seat.EAST

    def test_chi_with_round_five(self):
        hand = make_hand("06m", seat=Seat.SOUTH)
        called = Tile(TileSuit.CHARACTERS, 7)
        meld = hand.form_meld(MeldType.CHI, make_tiles_from_string("067m"), called, Seat.EAST)
        assert hand.closed_tiles == []
        assert [t.name for t in meld.tiles] == ["0m", "6m", "7m"]

    def test_kan(self):
        hand = make_hand("222s1z", seat=Seat.WEST)
        called = Tile(TileSuit.BAMBOO, 2)
        meld = hand.form_meld(MeldType.KAN, [called] * 4, called, Seat.NORTH)
        assert meld.is_kan
        assert [t.name for t in hand.closed_tiles] == ["1z"]

    def test_missing_tiles_leave_hand_unchanged(self):
        hand = make_hand("4m9p", seat=Seat.SOUTH)
        before = list(hand.closed_tiles)
        called = Tile(TileSuit.CHARACTERS, 5)
        with pytest.raises(HandError):
            hand.form_meld(MeldType.CHI, make_tiles_from_string("456m"), called, Seat.EAST)
        assert hand.closed_tiles == before
        assert hand.melds == []

    def test_bad_shapes(self):
        hand = make_hand("1224m11z", seat=Seat.SOUTH)
        m3 = Tile(TileSuit.CHARACTERS, 3)
        with pytest.raises(HandError):
            hand.form_meld(MeldType.CHI, make_tiles_from_string("234m1z"), m3, Seat.EAST)
        with pytest.raises(HandError):
            hand.form_meld(MeldType.CHI, make_tiles_from_string("124m"), m3, Seat.EAST)
        with pytest.raises(HandError):
            hand.form_meld(MeldType.PON, make_tiles_from_string("223m"), m3, Seat.EAST)
        z1 = Tile(TileSuit.HONORS, 1)
        with pytest.raises(HandError):
            hand.form_meld(MeldType.CHI, [z1, z1, z1], z1, Seat.EAST)
        with pytest.raises(HandError):
            hand.form_meld(MeldType.PON, make_tiles_from_string("222m"), m3, Seat.EAST)
        assert len(hand.closed_tiles) == 6

    def test_own_seat_rejected(self):
        hand = make_hand("22m", seat=Seat.SOUTH)
        m2 = Tile(TileSuit.CHARACTERS, 2)
        with pytest.raises(HandError):
            hand.form_meld(MeldType.PON, [m2] * 3, m2, Seat.SOUTH)

    def test_kan_from_own_seat_allowed(self):
        hand = make_hand("222m", seat=Seat.SOUTH)
        m2 = Tile(TileSuit.CHARACTERS, 2)
        meld = hand.form_meld(MeldType.KAN, [m2] * 4, m2, Seat.SOUTH)
        assert meld.from_seat == Seat.SOUTH
        assert hand.closed_tiles == []


class TestRender:
    def test_render_closed(self):
        hand = make_hand("4z1123m334p678s24z")
        assert hand.render() == "1123m 334p 678s 244z"

    def test_render_with_meld(self):
        hand = make_hand("1123m334p678s244z")
        hand.pon(P3, Seat.SOUTH)
        assert hand.render() == "1123m 4p 678s 244z [333p]S"

    def test_render_meld_brackets(self):
        hand = make_hand("46m222s", seat=Seat.SOUTH)
        hand.form_meld(MeldType.CHI, make_tiles_from_string("456m"),
                       Tile(TileSuit.CHARACTERS, 5), Seat.EAST)
        s2 = Tile(TileSuit.BAMBOO, 2)
        hand.form_meld(MeldType.KAN, [s2] * 4, s2, Seat.NORTH)
        assert hand.render() == "(456m)E {2222s}N"


class TestHandState:
    def test_total_tiles(self):
        hand = make_hand("1123m334p678s244z", drawn="9s")
        assert hand.total_tiles == 14
        hand.pon(P3, Seat.WEST)
        assert hand.total_tiles == 11 + 3 + 1

    def test_count(self):
        hand = make_hand("055p")
        assert hand.count(Tile(TileSuit.CIRCLES, 5)) == 2
        assert hand.count(Tile(TileSuit.CIRCLES, 0)) == 1

    def test_clone(self):
        hand = make_hand("123m", drawn="4m")
        clone = hand.clone()
        hand.discard(1)
        assert [t.name for t in clone.closed_tiles] == ["1m", "2m", "3m"]
        assert clone.draw_tile == Tile(TileSuit.CHARACTERS, 4)
