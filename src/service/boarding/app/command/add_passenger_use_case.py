from src.platform.logging.loguru_io import Logger
from src.service.boarding.app.dto import NewPassengerData, copy_passenger
from src.service.boarding.domain.aggregate.boarding_registry_aggregate import BoardingRegistry
from src.service.boarding.domain.entity.passenger_entity import Passenger


class AddPassengerUseCase:
    def __init__(self, registry: BoardingRegistry) -> None:
        self.registry = registry

    @Logger.io
    def add_passenger(self, data: NewPassengerData) -> Passenger:
        passenger = self.registry.add_passenger(
            name=data.name,
            type=data.type,
            seat_preference=data.seat_preference,
        )
        return copy_passenger(passenger)
