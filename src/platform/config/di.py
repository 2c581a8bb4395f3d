"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/containers/declarative.html

One VehicleContainer per vehicle: its singletons (registry, use cases,
controller) are never shared with another vehicle.
"""

from datetime import datetime
from typing import Callable, Optional, Sequence

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.boarding.app.command.add_passenger_use_case import AddPassengerUseCase
from src.service.boarding.app.command.board_next_passenger_use_case import (
    BoardNextPassengerUseCase,
)
from src.service.boarding.app.command.remove_passenger_use_case import RemovePassengerUseCase
from src.service.boarding.app.command.reset_queue_use_case import ResetQueueUseCase
from src.service.boarding.app.query.boarding_query_use_case import BoardingQueryUseCase
from src.service.boarding.domain.aggregate.boarding_registry_aggregate import (
    BoardingRegistry,
    utc_now,
)
from src.service.boarding.domain.value_object.seat_map import SeatMap
from src.service.boarding.driving_adapter.boarding_controller import BoardingController


def build_default_seat_map(settings: Settings) -> SeatMap:
    return SeatMap.from_layout(rows=settings.SEAT_ROWS, letters=settings.SEAT_LETTERS)


class VehicleContainer(containers.DeclarativeContainer):
    vehicle_id = providers.Dependency(instance_of=str)
    seat_map = providers.Dependency(instance_of=SeatMap)
    clock = providers.Object(utc_now)

    boarding_registry = providers.Singleton(
        BoardingRegistry,
        vehicle_id=vehicle_id,
        seat_map=seat_map,
        clock=clock,
    )

    # Use cases (all bound to this vehicle's registry)
    add_passenger_use_case = providers.Singleton(AddPassengerUseCase, registry=boarding_registry)
    board_next_passenger_use_case = providers.Singleton(
        BoardNextPassengerUseCase, registry=boarding_registry
    )
    remove_passenger_use_case = providers.Singleton(
        RemovePassengerUseCase, registry=boarding_registry
    )
    reset_queue_use_case = providers.Singleton(ResetQueueUseCase, registry=boarding_registry)
    boarding_query_use_case = providers.Singleton(
        BoardingQueryUseCase, registry=boarding_registry
    )

    boarding_controller = providers.Singleton(
        BoardingController,
        vehicle_id=vehicle_id,
        add_passenger_use_case=add_passenger_use_case,
        board_next_passenger_use_case=board_next_passenger_use_case,
        remove_passenger_use_case=remove_passenger_use_case,
        reset_queue_use_case=reset_queue_use_case,
        boarding_query_use_case=boarding_query_use_case,
    )


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Seat catalog used when a vehicle does not bring its own
    default_seat_map = providers.Singleton(build_default_seat_map, settings=config_service)


container = Container()


def create_vehicle_container(
    vehicle_id: Optional[str] = None,
    seat_catalog: Optional[Sequence[str]] = None,
    *,
    clock: Optional[Callable[[], datetime]] = None,
) -> VehicleContainer:
    seat_map = (
        SeatMap(catalog=seat_catalog)
        if seat_catalog is not None
        else container.default_seat_map()
    )
    vehicle = VehicleContainer(
        vehicle_id=providers.Object(vehicle_id or container.config_service().DEFAULT_VEHICLE_ID),
        seat_map=providers.Object(seat_map),
    )
    if clock is not None:
        vehicle.clock.override(providers.Object(clock))
    return vehicle


def create_boarding_controller(
    vehicle_id: Optional[str] = None,
    seat_catalog: Optional[Sequence[str]] = None,
    *,
    clock: Optional[Callable[[], datetime]] = None,
) -> BoardingController:
    """Fresh controller over a fresh registry; the seat catalog defaults to settings"""
    return create_vehicle_container(vehicle_id, seat_catalog, clock=clock).boarding_controller()


def cleanup() -> None:
    container.reset_singletons()
