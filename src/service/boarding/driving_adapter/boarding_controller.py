"""
Boarding Controller - entry point for the presentation layer

Operations never raise. A failure stores the error in `last_error` / `error`
and returns None (or False for removal); the caller reads the error after a
failed call and clears it with clear_error().

Calls are expected one at a time. Each async operation finishes its
validate -> mutate -> refresh sequence before returning control.
"""

from typing import Dict, Optional, Tuple

from opentelemetry import trace

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.boarding.app.command.add_passenger_use_case import AddPassengerUseCase
from src.service.boarding.app.command.board_next_passenger_use_case import (
    BoardNextPassengerUseCase,
)
from src.service.boarding.app.command.remove_passenger_use_case import RemovePassengerUseCase
from src.service.boarding.app.command.reset_queue_use_case import ResetQueueUseCase
from src.service.boarding.app.dto import BoardingSnapshot, NewPassengerData
from src.service.boarding.app.query.boarding_query_use_case import BoardingQueryUseCase
from src.service.boarding.domain.entity.passenger_entity import Passenger
from src.service.boarding.domain.enum.passenger_type import PassengerType
from src.service.boarding.domain.value_object.seat_assignment import SeatAssignment


class BoardingController:
    def __init__(
        self,
        *,
        vehicle_id: str,
        add_passenger_use_case: AddPassengerUseCase,
        board_next_passenger_use_case: BoardNextPassengerUseCase,
        remove_passenger_use_case: RemovePassengerUseCase,
        reset_queue_use_case: ResetQueueUseCase,
        boarding_query_use_case: BoardingQueryUseCase,
    ) -> None:
        self.vehicle_id = vehicle_id
        self.add_passenger_use_case = add_passenger_use_case
        self.board_next_passenger_use_case = board_next_passenger_use_case
        self.remove_passenger_use_case = remove_passenger_use_case
        self.reset_queue_use_case = reset_queue_use_case
        self.boarding_query_use_case = boarding_query_use_case
        self.tracer = trace.get_tracer(__name__)

        self._is_loading = False
        self._last_error: Optional[Exception] = None
        self._error: Optional[str] = None

    # ==================== State ====================

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def last_error(self) -> Optional[Exception]:
        return self._last_error

    @property
    def passengers(self) -> Tuple[Passenger, ...]:
        return self.boarding_query_use_case.list_passengers()

    @property
    def seat_assignments(self) -> Tuple[SeatAssignment, ...]:
        return self.boarding_query_use_case.list_seat_assignments()

    @property
    def seat_catalog(self) -> Tuple[str, ...]:
        return self.boarding_query_use_case.seat_catalog()

    # ==================== Derived ====================

    @property
    def queue_size(self) -> int:
        return self.boarding_query_use_case.queue_size()

    @property
    def next_passenger(self) -> Optional[Passenger]:
        return self.boarding_query_use_case.next_passenger()

    @property
    def passengers_by_type(self) -> Dict[PassengerType, Tuple[Passenger, ...]]:
        return self.boarding_query_use_case.passengers_by_type()

    @property
    def available_seats(self) -> Tuple[str, ...]:
        return self.boarding_query_use_case.available_seats()

    @property
    def boarding_order(self) -> Tuple[Passenger, ...]:
        return self.boarding_query_use_case.boarding_order()

    def snapshot(self) -> BoardingSnapshot:
        return self.boarding_query_use_case.get_snapshot()

    # ==================== Operations ====================

    async def add_passenger(
        self,
        name: str,
        type: PassengerType | str,
        seat_preference: Optional[str] = None,
    ) -> Optional[Passenger]:
        return await self.add_passenger_from(
            NewPassengerData(name=name, type=type, seat_preference=seat_preference)
        )

    @Logger.io
    async def add_passenger_from(self, data: NewPassengerData) -> Optional[Passenger]:
        self._begin()
        with self.tracer.start_as_current_span(
            'controller.add_passenger',
            attributes={
                'vehicle.id': self.vehicle_id,
                'passenger.type': str(data.type),
                'seat.preference': data.seat_preference or '',
            },
        ):
            try:
                return self.add_passenger_use_case.add_passenger(data)
            except Exception as e:
                self._record_failure(e, fallback_message='Failed to add passenger')
                return None
            finally:
                self._is_loading = False

    @Logger.io
    async def board_next_passenger(self) -> Optional[Passenger]:
        self._begin()
        with self.tracer.start_as_current_span(
            'controller.board_next_passenger', attributes={'vehicle.id': self.vehicle_id}
        ):
            try:
                return self.board_next_passenger_use_case.board_next_passenger()
            except Exception as e:
                self._record_failure(e, fallback_message='Failed to board passenger')
                return None
            finally:
                self._is_loading = False

    @Logger.io
    async def remove_passenger(self, passenger_id: str) -> bool:
        self._begin()
        with self.tracer.start_as_current_span(
            'controller.remove_passenger',
            attributes={'vehicle.id': self.vehicle_id, 'passenger.id': str(passenger_id)},
        ):
            try:
                self.remove_passenger_use_case.remove_passenger(passenger_id)
                return True
            except Exception as e:
                self._record_failure(e, fallback_message='Failed to remove passenger')
                return False
            finally:
                self._is_loading = False

    @Logger.io
    async def reset_queue(self) -> None:
        self._begin()
        with self.tracer.start_as_current_span(
            'controller.reset_queue', attributes={'vehicle.id': self.vehicle_id}
        ):
            try:
                self.reset_queue_use_case.reset_queue()
            except Exception as e:
                self._record_failure(e, fallback_message='Failed to reset queue')
            finally:
                self._is_loading = False

    async def load_passengers(self) -> int:
        """In-memory registry: nothing to fetch, reports how many passengers are held"""
        return len(self.boarding_query_use_case.list_passengers())

    def clear_error(self) -> None:
        self._error = None
        self._last_error = None

    def _begin(self) -> None:
        self._is_loading = True
        self.clear_error()

    def _record_failure(self, e: Exception, *, fallback_message: str) -> None:
        self._last_error = e
        if isinstance(e, CustomBaseError):
            self._error = e.message
            return
        Logger.base.exception(f'{fallback_message} on vehicle {self.vehicle_id}: {e}')
        self._error = fallback_message
