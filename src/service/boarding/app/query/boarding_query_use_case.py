"""
Boarding Query Use Case

Read side of the boarding queue. Every method returns copies, so callers
holding a result cannot bypass the registry's invariants.
"""

from typing import Dict, Optional, Tuple

from src.service.boarding.app.dto import BoardingSnapshot, copy_passenger, copy_passengers
from src.service.boarding.domain.aggregate.boarding_registry_aggregate import BoardingRegistry
from src.service.boarding.domain.entity.passenger_entity import Passenger
from src.service.boarding.domain.enum.passenger_type import PassengerType
from src.service.boarding.domain.value_object.seat_assignment import SeatAssignment


class BoardingQueryUseCase:
    def __init__(self, registry: BoardingRegistry) -> None:
        self.registry = registry

    def list_passengers(self) -> Tuple[Passenger, ...]:
        return copy_passengers(self.registry.passengers)

    def list_seat_assignments(self) -> Tuple[SeatAssignment, ...]:
        # SeatAssignment is frozen
        return tuple(self.registry.seat_assignments)

    def seat_catalog(self) -> Tuple[str, ...]:
        return self.registry.seat_map.catalog

    def available_seats(self) -> Tuple[str, ...]:
        return tuple(self.registry.available_seats())

    def queue_size(self) -> int:
        return self.registry.queue_size

    def next_passenger(self) -> Optional[Passenger]:
        passenger = self.registry.next_passenger()
        return copy_passenger(passenger) if passenger else None

    def boarding_order(self) -> Tuple[Passenger, ...]:
        return copy_passengers(self.registry.boarding_order())

    def passengers_by_type(self) -> Dict[PassengerType, Tuple[Passenger, ...]]:
        return {
            type_: copy_passengers(group)
            for type_, group in self.registry.passengers_by_type().items()
        }

    def get_snapshot(self) -> BoardingSnapshot:
        return BoardingSnapshot(
            vehicle_id=self.registry.vehicle_id,
            passengers=self.list_passengers(),
            seat_assignments=self.list_seat_assignments(),
            seat_catalog=self.seat_catalog(),
            available_seats=self.available_seats(),
            queue_size=self.queue_size(),
            next_passenger=self.next_passenger(),
            boarding_order=self.boarding_order(),
            passengers_by_type=self.passengers_by_type(),
        )
