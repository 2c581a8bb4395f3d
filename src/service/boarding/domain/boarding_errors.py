"""Boarding domain errors."""

from enum import Enum

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError


class BoardingErrorMessage(Enum):
    NAME_REQUIRED = 'Passenger name is required'
    INVALID_PASSENGER_TYPE = 'Invalid passenger type'
    SEAT_NOT_AVAILABLE = 'Selected seat is not available'
    INVALID_SEAT_CATALOG = 'Invalid seat catalog'
    EMPTY_QUEUE = 'No passengers in queue'
    NO_SEAT_AVAILABLE = 'No available seats'
    PASSENGER_NOT_FOUND = 'Passenger not found'


class ValidationError(DomainError):
    def __init__(self, message: BoardingErrorMessage, detail: str | None = None) -> None:
        super().__init__(f'{message.value}: {detail}' if detail else message.value)


class EmptyQueueError(ConflictError):
    def __init__(self) -> None:
        super().__init__(BoardingErrorMessage.EMPTY_QUEUE.value)


class NoSeatAvailableError(ConflictError):
    def __init__(self) -> None:
        super().__init__(BoardingErrorMessage.NO_SEAT_AVAILABLE.value)


class PassengerNotFoundError(NotFoundError):
    def __init__(self, passenger_id: str) -> None:
        self.passenger_id = passenger_id
        super().__init__(BoardingErrorMessage.PASSENGER_NOT_FOUND.value)
