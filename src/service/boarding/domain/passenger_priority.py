"""
Passenger Priority

Boarding order over passengers:
1. priority class (vip < elderly < regular < standby)
2. arrival time, earliest first
3. registry insertion sequence, so simultaneous arrivals still have a fixed order
"""

from typing import Iterable

from src.platform.structure.binary_heap import BinaryHeap
from src.service.boarding.domain.entity.passenger_entity import Passenger, parse_passenger_type
from src.service.boarding.domain.enum.passenger_type import PassengerType


def get_priority_level(type: PassengerType | str) -> int:
    return parse_passenger_type(type).priority_level


def passenger_comparator(a: Passenger, b: Passenger) -> int:
    """Negative when `a` boards before `b`, positive when after, zero only for the same record"""
    priority_diff = a.type.priority_level - b.type.priority_level
    if priority_diff != 0:
        return priority_diff

    if a.arrival_time != b.arrival_time:
        return -1 if a.arrival_time < b.arrival_time else 1

    return (a.sequence > b.sequence) - (a.sequence < b.sequence)


def create_passenger_queue(passengers: Iterable[Passenger] = ()) -> BinaryHeap[Passenger]:
    return BinaryHeap(passenger_comparator, passengers)
