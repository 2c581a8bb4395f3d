"""Seat assignment value object."""

import attrs


@attrs.define(frozen=True)
class SeatAssignment:
    """
    Seat Assignment (Value Object)

    Derived binding of one seat to one passenger. Always rebuilt from passenger
    state, never edited in place.
    """

    seat_id: str
    passenger_id: str
    passenger_name: str
