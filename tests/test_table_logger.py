"""Tests for table_logger.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import json

from mahjong_rules.core.seat import Seat
from mahjong_rules.core.tile import make_tiles_from_string
from mahjong_rules.core.wall import DrawPile
from mahjong_rules.core.errors import WallExhausted
from mahjong_rules.engine.event import EventBus
from mahjong_rules.engine.table import Table, TableConfig
from mahjong_rules.engine.table_logger import TableLogger


def play_short_round(tmp_path):
    bus = EventBus()
    config = TableConfig(hand_size=2, seed=None, log_dir=str(tmp_path))
    logger = TableLogger(config.to_dict(), config.log_dir)
    logger.subscribe_events(bus)

    # Dealt: East 1m 1z, South 4m 6m, West 5m 5m, North 3p 3p. Left: 5m 2p.
    pile = DrawPile.from_tiles(make_tiles_from_string("1m4m5m3p1z6m5m3p5m2p"))
    table = Table(config, bus, pile=pile)
    table.deal()
    table.draw(Seat.EAST)
    table.discard(Seat.EAST, 0)
    claims = table.claims_for(table.last_discard, Seat.EAST)
    table.claim(claims[Seat.WEST].can_pon[0])
    table.draw(Seat.SOUTH)
    table.discard(Seat.SOUTH, 1)
    try:
        table.draw(Seat.WEST)
    except WallExhausted:
        table.end_round()
    return logger, table


class TestTableLogger:
    def test_records_round(self, tmp_path):
        logger, table = play_short_round(tmp_path)
        assert len(logger.rounds) == 1
        rnd = logger.rounds[0]
        assert len(rnd["wall"]) == 10
        assert rnd["initial_hands"]["EAST"] == ["1m", "1z"]
        assert rnd["initial_hands"]["NORTH"] == ["3p", "3p"]
        actions = [a["action"] for a in rnd["actions"]]
        assert actions == ["draw", "discard", "claims_open", "pon", "draw", "discard"]
        assert rnd["actions"][1] == {
            "action": "discard", "seat": "EAST", "tile": "5m", "tsumogiri": True}
        assert rnd["actions"][3]["from_seat"] == "EAST"
        assert rnd["actions"][3]["tiles"] == ["5m", "5m", "5m"]
        assert rnd["result"]["is_draw"] is True

    def test_claim_options_logged(self, tmp_path):
        logger, _ = play_short_round(tmp_path)
        options = logger.rounds[0]["actions"][2]["options"]
        assert options == {"SOUTH": ["chi:456m"], "WEST": ["pon:555m"]}

    def test_save(self, tmp_path):
        logger, _ = play_short_round(tmp_path)
        path = logger.save()
        assert os.path.dirname(path) == str(tmp_path)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["session_id"] == logger.session_id
        assert data["config"]["hand_size"] == 2
        assert len(data["rounds"]) == 1
