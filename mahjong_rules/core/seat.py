"""Seat positions and turn rotation."""

from enum import IntEnum


class Seat(IntEnum):
    EAST = 0    # 東
    SOUTH = 1   # 南
    WEST = 2    # 西
    NORTH = 3   # 北

    @property
    def kanji(self) -> str:
        return ['東', '南', '西', '北'][self.value]

    @property
    def marker(self) -> str:
        """One-letter marker used when rendering melds."""
        return self.name[0]

    @property
    def next(self) -> 'Seat':
        """The seat that plays after this one."""
        return Seat((self.value + 1) % 4)

    @property
    def previous(self) -> 'Seat':
        """The seat that played before this one (the only seat Chi may claim from)."""
        return Seat((self.value - 1) % 4)


SEATS = list(Seat)
