"""Pytest configuration for boarding tests"""

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from src.platform.config.di import create_boarding_controller
from src.service.boarding.domain.aggregate.boarding_registry_aggregate import BoardingRegistry
from src.service.boarding.domain.value_object.seat_map import SeatMap


BASE_TIME = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock: advances by `step` per call (step=0 freezes time)"""

    def __init__(self, start: datetime = BASE_TIME, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + self.step
        return current


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def frozen_clock() -> FakeClock:
    return FakeClock(step=timedelta(0))


@pytest.fixture
def two_seats() -> list[str]:
    return ['1A', '1B']


@pytest.fixture
def make_registry(clock: FakeClock) -> Callable[..., BoardingRegistry]:
    def _make(catalog: list[str], *, vehicle_id: str = 'bus-1', clock=clock) -> BoardingRegistry:
        return BoardingRegistry(vehicle_id=vehicle_id, seat_map=SeatMap(catalog=catalog), clock=clock)

    return _make


@pytest.fixture
def registry(make_registry, two_seats) -> BoardingRegistry:
    return make_registry(two_seats)


@pytest.fixture
def make_controller(clock: FakeClock):
    def _make(catalog: list[str], *, vehicle_id: str = 'bus-1', clock=clock):
        return create_boarding_controller(vehicle_id, catalog, clock=clock)

    return _make


@pytest.fixture
def controller(make_controller, two_seats):
    return make_controller(two_seats)
