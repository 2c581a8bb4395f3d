"""Passenger Status Enum"""

from enum import StrEnum


class PassengerStatus(StrEnum):
    WAITING = 'waiting'
    BOARDING = 'boarding'  # Reserved: no operation moves a passenger into this state yet
    BOARDED = 'boarded'
