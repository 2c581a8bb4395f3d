from src.platform.logging.loguru_io import Logger
from src.service.boarding.app.dto import copy_passenger
from src.service.boarding.domain.aggregate.boarding_registry_aggregate import BoardingRegistry
from src.service.boarding.domain.entity.passenger_entity import Passenger


class BoardNextPassengerUseCase:
    """
    Board Next Passenger Use Case

    Flow:
    1. Pick the highest priority waiting passenger
    2. Give them the first free seat in catalog order if they hold none
    3. Mark boarded and rebuild seat assignments

    Seat availability is checked before anything is written, so a failure
    leaves the passenger waiting and seatless.
    """

    def __init__(self, registry: BoardingRegistry) -> None:
        self.registry = registry

    @Logger.io
    def board_next_passenger(self) -> Passenger:
        return copy_passenger(self.registry.board_next_passenger())
