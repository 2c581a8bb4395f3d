"""Boarding App DTOs"""

from src.service.boarding.app.dto.boarding_snapshot import (
    BoardingSnapshot,
    copy_passenger,
    copy_passengers,
)
from src.service.boarding.app.dto.new_passenger_data import NewPassengerData

__all__ = ['BoardingSnapshot', 'NewPassengerData', 'copy_passenger', 'copy_passengers']
