"""
Seat Map Value Object

Fixed, ordered seat catalog of one vehicle plus the derived availability view.
"""

from typing import Iterable, List, Sequence, Tuple

import attrs

from src.service.boarding.domain.boarding_errors import BoardingErrorMessage, ValidationError
from src.service.boarding.domain.value_object.seat_assignment import SeatAssignment


def build_seat_catalog(rows: int, letters: Sequence[str]) -> List[str]:
    """
    Row-major seat ids: rows=2, letters=['A', 'B'] -> ['1A', '1B', '2A', '2B']
    """
    return [f'{row}{letter}' for row in range(1, rows + 1) for letter in letters]


def available_seats(catalog: Sequence[str], assignments: Iterable[SeatAssignment]) -> List[str]:
    """Catalog entries not held by any assignment, in catalog order"""
    taken = {assignment.seat_id for assignment in assignments}
    return [seat for seat in catalog if seat not in taken]


def _to_catalog(seats: Iterable[str]) -> Tuple[str, ...]:
    return tuple(seats)


def _validate_catalog(instance: object, attribute: attrs.Attribute, value: Tuple[str, ...]) -> None:
    if not value:
        raise ValidationError(BoardingErrorMessage.INVALID_SEAT_CATALOG, 'catalog is empty')
    for seat in value:
        if not isinstance(seat, str) or not seat.strip():
            raise ValidationError(BoardingErrorMessage.INVALID_SEAT_CATALOG, 'blank seat id')
    if len(set(value)) != len(value):
        raise ValidationError(BoardingErrorMessage.INVALID_SEAT_CATALOG, 'duplicate seat id')


@attrs.define(frozen=True)
class SeatMap:
    catalog: Tuple[str, ...] = attrs.field(converter=_to_catalog, validator=_validate_catalog)

    @classmethod
    def from_layout(cls, *, rows: int, letters: Sequence[str]) -> 'SeatMap':
        return cls(catalog=build_seat_catalog(rows, letters))

    def available_seats(self, assignments: Iterable[SeatAssignment]) -> List[str]:
        return available_seats(self.catalog, assignments)

    def __contains__(self, seat_id: object) -> bool:
        return seat_id in self.catalog

    def __len__(self) -> int:
        return len(self.catalog)
