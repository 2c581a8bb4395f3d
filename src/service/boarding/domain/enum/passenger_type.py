"""Passenger Type Enum"""

from enum import StrEnum


class PassengerType(StrEnum):
    VIP = 'vip'
    ELDERLY = 'elderly'
    REGULAR = 'regular'
    STANDBY = 'standby'

    @property
    def priority_level(self) -> int:
        """Lower number boards first"""
        return _PRIORITY_LEVELS[self]


_PRIORITY_LEVELS = {
    PassengerType.VIP: 1,
    PassengerType.ELDERLY: 2,
    PassengerType.REGULAR: 3,
    PassengerType.STANDBY: 4,
}
