"""Boarding Domain Value Objects"""

from src.service.boarding.domain.value_object.seat_assignment import SeatAssignment
from src.service.boarding.domain.value_object.seat_map import SeatMap

__all__ = ['SeatAssignment', 'SeatMap']
