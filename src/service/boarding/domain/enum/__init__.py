"""Boarding Domain Enums"""

from src.service.boarding.domain.enum.passenger_status import PassengerStatus
from src.service.boarding.domain.enum.passenger_type import PassengerType

__all__ = ['PassengerStatus', 'PassengerType']
