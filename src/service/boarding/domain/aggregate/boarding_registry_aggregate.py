"""
Boarding Registry Aggregate - Aggregate Root for one vehicle's boarding queue

[Business Invariants]
- A passenger holds at most one seat, a seat belongs to at most one passenger
- seat_assignments is rebuilt from passengers after every mutation that can
  change seat occupancy, so the two never diverge
- available seats and assigned seats partition the seat catalog
- status only moves waiting -> boarded; removal deletes from any status

Single writer: every mutating method runs to completion without yielding, so
callers never observe a half-applied change.
"""

from datetime import datetime, timezone
from functools import cmp_to_key
from itertools import count
from typing import Callable, Dict, Iterator, List, Optional

import attrs
import uuid_utils

from src.platform.logging.loguru_io import Logger
from src.service.boarding.domain.boarding_errors import (
    BoardingErrorMessage,
    EmptyQueueError,
    NoSeatAvailableError,
    PassengerNotFoundError,
    ValidationError,
)
from src.service.boarding.domain.entity.passenger_entity import Passenger
from src.service.boarding.domain.enum.passenger_type import PassengerType
from src.service.boarding.domain.passenger_priority import (
    create_passenger_queue,
    passenger_comparator,
)
from src.service.boarding.domain.value_object.seat_assignment import SeatAssignment
from src.service.boarding.domain.value_object.seat_map import SeatMap


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_passenger_id() -> str:
    return f'passenger_{uuid_utils.uuid7().hex}'


@attrs.define
class BoardingRegistry:
    vehicle_id: str
    seat_map: SeatMap
    clock: Callable[[], datetime] = utc_now
    id_factory: Callable[[], str] = generate_passenger_id
    passengers: List[Passenger] = attrs.field(factory=list)
    seat_assignments: List[SeatAssignment] = attrs.field(factory=list)
    _sequence: Iterator[int] = attrs.field(factory=lambda: count(1), init=False)

    # ==================== Derived views ====================

    def available_seats(self) -> List[str]:
        return self.seat_map.available_seats(self.seat_assignments)

    def waiting_passengers(self) -> List[Passenger]:
        return [p for p in self.passengers if p.is_waiting]

    @property
    def queue_size(self) -> int:
        return len(self.waiting_passengers())

    def next_passenger(self) -> Optional[Passenger]:
        """First waiting passenger in boarding order, or None"""
        return min(
            self.waiting_passengers(), key=cmp_to_key(passenger_comparator), default=None
        )

    def boarding_order(self) -> List[Passenger]:
        """All waiting passengers, drained from a priority heap"""
        queue = create_passenger_queue(self.waiting_passengers())
        ordered = []
        while (passenger := queue.extract_min()) is not None:
            ordered.append(passenger)
        return ordered

    def passengers_by_type(self) -> Dict[PassengerType, List[Passenger]]:
        groups: Dict[PassengerType, List[Passenger]] = {type_: [] for type_ in PassengerType}
        for passenger in self.passengers:
            groups[passenger.type].append(passenger)
        return groups

    def find_passenger(self, passenger_id: str) -> Optional[Passenger]:
        return next((p for p in self.passengers if p.id == passenger_id), None)

    def update_seat_assignments(self) -> None:
        self.seat_assignments = [
            SeatAssignment(
                seat_id=passenger.assigned_seat,
                passenger_id=passenger.id,
                passenger_name=passenger.name,
            )
            for passenger in self.passengers
            if passenger.assigned_seat
        ]

    # ==================== Mutations ====================

    @Logger.io
    def add_passenger(
        self,
        *,
        name: str,
        type: PassengerType | str,
        seat_preference: Optional[str] = None,
    ) -> Passenger:
        """
        Register a waiting passenger, seating them at once if they asked for a free seat

        Raises:
            ValidationError: Blank name, unknown type, or preferred seat taken/unknown
        """
        passenger = Passenger.create(
            id=self.id_factory(),
            name=name,
            type=type,
            arrival_time=self.clock(),
            vehicle_id=self.vehicle_id,
            sequence=next(self._sequence),
            seat_preference=seat_preference,
            queue_position=self.queue_size + 1,
        )

        if passenger.seat_preference and passenger.seat_preference not in self.available_seats():
            raise ValidationError(BoardingErrorMessage.SEAT_NOT_AVAILABLE)

        self.passengers.append(passenger)
        if passenger.seat_preference:
            passenger.assign_seat(passenger.seat_preference)
            self.update_seat_assignments()

        Logger.base.info(
            f'🧍 [ADD] {passenger.name} ({passenger.type}) joined vehicle {self.vehicle_id} '
            f'at position {passenger.queue_position}'
        )
        return passenger

    @Logger.io
    def board_next_passenger(self) -> Passenger:
        """
        Board the highest priority waiting passenger

        Raises:
            EmptyQueueError: Nobody is waiting
            NoSeatAvailableError: Next passenger has no seat and none are left
        """
        passenger = self.next_passenger()
        if passenger is None:
            raise EmptyQueueError()

        if passenger.assigned_seat is None:
            free_seats = self.available_seats()
            if not free_seats:
                raise NoSeatAvailableError()
            passenger.assign_seat(free_seats[0])

        passenger.mark_as_boarded(self.clock())
        self.update_seat_assignments()

        Logger.base.info(
            f'🚌 [BOARD] {passenger.name} boarded vehicle {self.vehicle_id} '
            f'in seat {passenger.assigned_seat}'
        )
        return passenger

    @Logger.io
    def remove_passenger(self, passenger_id: str) -> Passenger:
        """
        Delete a passenger in any status, releasing their seat

        Raises:
            PassengerNotFoundError: No passenger with that id
        """
        passenger = self.find_passenger(passenger_id)
        if passenger is None:
            raise PassengerNotFoundError(passenger_id)

        self.passengers.remove(passenger)
        self.update_seat_assignments()

        Logger.base.info(f'🗑️ [REMOVE] {passenger.name} left vehicle {self.vehicle_id}')
        return passenger

    @Logger.io
    def reset(self) -> None:
        self.passengers = []
        self.seat_assignments = []
        Logger.base.info(f'♻️ [RESET] Boarding queue cleared for vehicle {self.vehicle_id}')
