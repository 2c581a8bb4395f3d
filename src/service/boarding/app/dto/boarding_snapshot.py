"""
Boarding Snapshot DTO

Read-only copies of registry state handed to callers. Nothing returned here
shares mutable state with the registry.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

import attrs

from src.service.boarding.domain.entity.passenger_entity import Passenger
from src.service.boarding.domain.enum.passenger_type import PassengerType
from src.service.boarding.domain.value_object.seat_assignment import SeatAssignment


def copy_passenger(passenger: Passenger) -> Passenger:
    return attrs.evolve(passenger)


def copy_passengers(passengers: Iterable[Passenger]) -> Tuple[Passenger, ...]:
    return tuple(copy_passenger(p) for p in passengers)


@attrs.define(frozen=True)
class BoardingSnapshot:
    vehicle_id: str
    passengers: Tuple[Passenger, ...]
    seat_assignments: Tuple[SeatAssignment, ...]
    seat_catalog: Tuple[str, ...]
    available_seats: Tuple[str, ...]
    queue_size: int
    next_passenger: Optional[Passenger]
    boarding_order: Tuple[Passenger, ...]
    passengers_by_type: Mapping[PassengerType, Tuple[Passenger, ...]] = attrs.field(
        converter=MappingProxyType
    )
