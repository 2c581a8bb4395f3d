from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.boarding.domain.boarding_errors import BoardingErrorMessage, ValidationError
from src.service.boarding.domain.enum.passenger_status import PassengerStatus
from src.service.boarding.domain.enum.passenger_type import PassengerType


def parse_passenger_type(value: PassengerType | str) -> PassengerType:
    try:
        return PassengerType(value)
    except ValueError:
        raise ValidationError(BoardingErrorMessage.INVALID_PASSENGER_TYPE)


@attrs.define
class Passenger:
    # Identity and ordering keys are fixed once the passenger exists
    id: str = attrs.field(on_setattr=attrs.setters.frozen)
    name: str
    type: PassengerType
    arrival_time: datetime = attrs.field(on_setattr=attrs.setters.frozen)
    vehicle_id: str = attrs.field(on_setattr=attrs.setters.frozen)
    # Insertion counter assigned by the registry; last-resort tie-break
    sequence: int = attrs.field(on_setattr=attrs.setters.frozen)
    seat_preference: Optional[str] = None
    assigned_seat: Optional[str] = None
    status: PassengerStatus = PassengerStatus.WAITING
    queue_position: Optional[int] = None
    boarding_time: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: str,
        name: str,
        type: PassengerType | str,
        arrival_time: datetime,
        vehicle_id: str,
        sequence: int,
        seat_preference: Optional[str] = None,
        queue_position: Optional[int] = None,
    ) -> 'Passenger':
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(BoardingErrorMessage.NAME_REQUIRED)

        return cls(
            id=id,
            name=name.strip(),
            type=parse_passenger_type(type),
            arrival_time=arrival_time,
            vehicle_id=vehicle_id,
            sequence=sequence,
            seat_preference=seat_preference or None,
            status=PassengerStatus.WAITING,
            queue_position=queue_position,
        )

    @property
    def is_waiting(self) -> bool:
        return self.status == PassengerStatus.WAITING

    @Logger.io
    def assign_seat(self, seat_id: str) -> None:
        if self.assigned_seat is not None:
            raise DomainError(f'Passenger {self.id} already holds seat {self.assigned_seat}')
        self.assigned_seat = seat_id

    @Logger.io
    def mark_as_boarded(self, boarded_at: datetime) -> None:
        """
        Transition waiting -> boarded

        Raises:
            DomainError: When the passenger is not waiting or holds no seat
        """
        if not self.is_waiting:
            raise DomainError(f'Passenger {self.id} is not waiting to board')
        if self.assigned_seat is None:
            raise DomainError(f'Passenger {self.id} cannot board without a seat')
        self.status = PassengerStatus.BOARDED
        self.boarding_time = boarded_at
