from src.platform.logging.loguru_io import Logger
from src.service.boarding.app.dto import copy_passenger
from src.service.boarding.domain.aggregate.boarding_registry_aggregate import BoardingRegistry
from src.service.boarding.domain.entity.passenger_entity import Passenger


class RemovePassengerUseCase:
    def __init__(self, registry: BoardingRegistry) -> None:
        self.registry = registry

    @Logger.io
    def remove_passenger(self, passenger_id: str) -> Passenger:
        return copy_passenger(self.registry.remove_passenger(passenger_id))
