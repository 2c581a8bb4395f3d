from typing import Optional

import attrs

from src.service.boarding.domain.enum.passenger_type import PassengerType


@attrs.define(frozen=True)
class NewPassengerData:
    """Input for registering a passenger"""

    name: str
    type: PassengerType | str
    seat_preference: Optional[str] = None
