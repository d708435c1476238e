"""Table logger - records a round's wall, hands and actions as JSON."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional

from mahjong_rules.core.seat import Seat
from mahjong_rules.core.tile import Tile
from mahjong_rules.engine.event import EventBus, EventType, GameEvent

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


def _tiles_str(tiles) -> List[str]:
    return [t.name for t in tiles]


class TableLogger:
    """Records round data to JSON log files."""

    def __init__(self, config_info: dict, log_dir: Optional[str] = None):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.config_info = config_info
        self.log_dir = log_dir or LOG_DIR

        self.rounds: List[dict] = []
        self._current_round: Optional[dict] = None

    def subscribe_events(self, event_bus: EventBus):
        """Subscribe to engine events for automatic logging."""
        event_bus.subscribe(EventType.ROUND_START, self._on_round_start)
        event_bus.subscribe(EventType.DEAL, self._on_deal)
        event_bus.subscribe(EventType.DRAW, self._on_draw)
        event_bus.subscribe(EventType.DISCARD, self._on_discard)
        event_bus.subscribe(EventType.CLAIMS_OPEN, self._on_claims_open)
        event_bus.subscribe(EventType.CHI, self._on_call)
        event_bus.subscribe(EventType.PON, self._on_call)
        event_bus.subscribe(EventType.KAN, self._on_call)
        event_bus.subscribe(EventType.ROUND_END, self._on_round_end)

    def save(self) -> str:
        """Write the complete log and return its path."""
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "config": self.config_info,
            "rounds": self.rounds,
        }

        os.makedirs(self.log_dir, exist_ok=True)
        filepath = os.path.join(self.log_dir, f"table_{self.session_id}.json")
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        return filepath

    # --- Event handlers ---

    def _on_round_start(self, event: GameEvent):
        round_data = {
            "round_id": uuid.uuid4().hex[:8],
            "wall": _tiles_str(event.data["wall"]),
            "initial_hands": {},
            "actions": [],
            "result": None,
        }
        self._current_round = round_data
        self.rounds.append(round_data)

    def _on_deal(self, event: GameEvent):
        if self._current_round is None:
            return
        for seat, tiles in event.data["hands"].items():
            self._current_round["initial_hands"][seat.name] = _tiles_str(tiles)

    def _log_action(self, action_type: str, player: Seat, **kwargs):
        """Log a table action."""
        if self._current_round is None:
            return

        entry = {"action": action_type, "seat": player.name}
        for key, val in kwargs.items():
            if isinstance(val, Tile):
                entry[key] = val.name
            elif isinstance(val, Seat):
                entry[key] = val.name
            elif isinstance(val, (list, tuple)) and val and isinstance(val[0], Tile):
                entry[key] = _tiles_str(val)
            else:
                entry[key] = val

        self._current_round["actions"].append(entry)

    def _on_draw(self, event: GameEvent):
        d = event.data
        self._log_action("draw", d["player"], tile=d["tile"])

    def _on_discard(self, event: GameEvent):
        d = event.data
        self._log_action("discard", d["player"],
                         tile=d["tile"], tsumogiri=d.get("is_tsumogiri", False))

    def _on_claims_open(self, event: GameEvent):
        d = event.data
        options = {
            seat.name: [a.action_type.value + ":" + "".join(_tiles_str(a.tiles))
                        for a in available.actions]
            for seat, available in d["claims"].items()
        }
        self._log_action("claims_open", d["player"], tile=d["tile"], options=options)

    def _on_call(self, event: GameEvent):
        d = event.data
        meld = d["meld"]
        self._log_action(meld.meld_type.value, d["player"],
                         tiles=list(meld.tiles), from_seat=meld.from_seat)

    def _on_round_end(self, event: GameEvent):
        if self._current_round is None:
            return
        result = event.data["result"]
        self._current_round["result"] = {
            "reason": result.reason,
            "is_draw": result.is_draw,
            "turns": result.turns,
            "remaining": result.remaining,
        }
        self._current_round = None
