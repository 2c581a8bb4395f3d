from src.platform.logging.loguru_io import Logger
from src.service.boarding.domain.aggregate.boarding_registry_aggregate import BoardingRegistry


class ResetQueueUseCase:
    def __init__(self, registry: BoardingRegistry) -> None:
        self.registry = registry

    @Logger.io
    def reset_queue(self) -> None:
        self.registry.reset()
