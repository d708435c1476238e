"""Engine error types.

Every failure the engine can report derives from RuleError so a driver can
reject a move and re-prompt without knowing each case.
"""


class RuleError(Exception):
    """Base class for all rule engine failures."""


class TileError(RuleError, ValueError):
    """A suit/rank pairing that does not name a real tile."""


class WallExhausted(RuleError):
    """The draw pile ran out during normal play (round ends in a draw)."""


class DealError(RuleError):
    """The pile could not supply the initial deal."""


class HandError(RuleError):
    """An operation that is illegal for the hand's current state."""
