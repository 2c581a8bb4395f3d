"""
Unit tests for BoardingController

Test Coverage:
1. Boarding scenarios end to end through the controller
2. Error channel: last_error / error set on failure, cleared by clear_error()
3. Read-only views: returned passengers are copies
4. Unexpected failures converted to generic messages
"""

from unittest.mock import MagicMock

import pytest

from src.service.boarding.app.dto import NewPassengerData
from src.service.boarding.domain.boarding_errors import (
    EmptyQueueError,
    NoSeatAvailableError,
    PassengerNotFoundError,
    ValidationError,
)
from src.service.boarding.domain.enum import PassengerStatus, PassengerType


pytestmark = pytest.mark.unit


class TestBoardingScenarios:
    @pytest.mark.asyncio
    async def test_vip_outranks_regular_with_preferred_seat(self, controller):
        # Given: Alice (VIP, no preference) and Bob (regular, wants 1A)
        alice = await controller.add_passenger('Alice', 'vip')
        bob = await controller.add_passenger('Bob', 'regular', '1A')
        assert alice is not None and bob is not None
        assert bob.assigned_seat == '1A'

        # When: Board next
        boarded = await controller.board_next_passenger()

        # Then: Alice boards first and takes the remaining seat
        assert boarded is not None
        assert boarded.id == alice.id
        assert boarded.assigned_seat == '1B'
        assert controller.available_seats == ()
        assert controller.next_passenger.id == bob.id

    @pytest.mark.asyncio
    async def test_identical_arrivals_have_stable_order(self, make_controller, frozen_clock):
        controller = make_controller(['1A', '1B'], clock=frozen_clock)
        first = await controller.add_passenger('Sam', 'standby')
        second = await controller.add_passenger('Sue', 'standby')

        assert first.arrival_time == second.arrival_time
        assert {controller.next_passenger.id for _ in range(10)} == {first.id}
        assert [p.id for p in controller.boarding_order] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_board_on_empty_queue(self, controller):
        result = await controller.board_next_passenger()

        assert result is None
        assert isinstance(controller.last_error, EmptyQueueError)
        assert controller.error == 'No passengers in queue'
        assert controller.is_loading is False

    @pytest.mark.asyncio
    async def test_no_seat_available_keeps_passenger_waiting(self, make_controller):
        controller = make_controller(['1A'])
        await controller.add_passenger('Alice', 'vip')
        await controller.board_next_passenger()
        bob = await controller.add_passenger('Bob', 'regular')

        result = await controller.board_next_passenger()

        assert result is None
        assert isinstance(controller.last_error, NoSeatAvailableError)
        assert controller.error == 'No available seats'
        waiting = [p for p in controller.passengers if p.id == bob.id]
        assert waiting[0].status == PassengerStatus.WAITING
        assert waiting[0].assigned_seat is None
        assert controller.queue_size == 1

    @pytest.mark.asyncio
    async def test_removing_boarded_passenger_frees_seat(self, make_controller):
        controller = make_controller(['1A'])
        alice = await controller.add_passenger('Alice', 'vip')
        await controller.board_next_passenger()
        assert controller.available_seats == ()

        assert await controller.remove_passenger(alice.id) is True

        bob = await controller.add_passenger('Bob', 'regular', '1A')
        assert bob is not None
        assert bob.assigned_seat == '1A'
        assert controller.error is None

    @pytest.mark.asyncio
    async def test_reset_restores_full_catalog(self, controller):
        await controller.add_passenger('Alice', 'vip', '1B')
        await controller.add_passenger('Bob', 'regular')
        await controller.board_next_passenger()

        await controller.reset_queue()

        assert controller.next_passenger is None
        assert controller.available_seats == controller.seat_catalog == ('1A', '1B')
        assert controller.passengers == ()
        assert controller.seat_assignments == ()
        assert controller.queue_size == 0


class TestErrorChannel:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'name, type_, seat, message',
        [
            ('', 'vip', None, 'Passenger name is required'),
            ('   ', 'vip', None, 'Passenger name is required'),
            ('Alice', 'captain', None, 'Invalid passenger type'),
            ('Alice', 'vip', '7Z', 'Selected seat is not available'),
        ],
    )
    async def test_add_validation_failures(self, controller, name, type_, seat, message):
        result = await controller.add_passenger(name, type_, seat)

        assert result is None
        assert isinstance(controller.last_error, ValidationError)
        assert controller.error == message
        assert controller.passengers == ()

    @pytest.mark.asyncio
    async def test_remove_unknown_passenger(self, controller):
        assert await controller.remove_passenger('passenger_nobody') is False
        assert isinstance(controller.last_error, PassengerNotFoundError)
        assert controller.error == 'Passenger not found'

    @pytest.mark.asyncio
    async def test_clear_error(self, controller):
        await controller.board_next_passenger()
        assert controller.error is not None

        controller.clear_error()

        assert controller.error is None
        assert controller.last_error is None

    @pytest.mark.asyncio
    async def test_successful_call_clears_previous_error(self, controller):
        await controller.board_next_passenger()

        await controller.add_passenger('Alice', 'vip')

        assert controller.error is None

    @pytest.mark.asyncio
    async def test_unexpected_failure_uses_generic_message(self, controller):
        controller.board_next_passenger_use_case = MagicMock()
        controller.board_next_passenger_use_case.board_next_passenger.side_effect = RuntimeError(
            'boom'
        )

        result = await controller.board_next_passenger()

        assert result is None
        assert isinstance(controller.last_error, RuntimeError)
        assert controller.error == 'Failed to board passenger'
        assert controller.is_loading is False


class TestReadOnlyViews:
    @pytest.mark.asyncio
    async def test_returned_passenger_is_a_copy(self, controller):
        added = await controller.add_passenger('Alice', 'vip')

        added.status = PassengerStatus.BOARDED
        added.assigned_seat = '1A'
        controller.passengers[0].name = 'Mallory'

        assert controller.passengers[0].status == PassengerStatus.WAITING
        assert controller.passengers[0].name == 'Alice'
        assert controller.available_seats == ('1A', '1B')

    @pytest.mark.asyncio
    async def test_passengers_by_type(self, make_controller):
        controller = make_controller(['1A', '1B', '1C'])
        await controller.add_passenger('R1', 'regular')
        await controller.add_passenger('V1', 'vip')
        await controller.add_passenger('R2', 'regular')

        groups = controller.passengers_by_type

        assert [p.name for p in groups[PassengerType.REGULAR]] == ['R1', 'R2']
        assert [p.name for p in groups[PassengerType.VIP]] == ['V1']
        assert groups[PassengerType.STANDBY] == ()

    @pytest.mark.asyncio
    async def test_snapshot(self, controller):
        await controller.add_passenger_from(
            NewPassengerData(name='Bob', type=PassengerType.REGULAR, seat_preference='1A')
        )
        await controller.add_passenger('Alice', 'vip')

        snapshot = controller.snapshot()

        assert snapshot.vehicle_id == 'bus-1'
        assert snapshot.queue_size == 2
        assert snapshot.next_passenger.name == 'Alice'
        assert [p.name for p in snapshot.boarding_order] == ['Alice', 'Bob']
        assert snapshot.available_seats == ('1B',)
        assert [a.seat_id for a in snapshot.seat_assignments] == ['1A']
        with pytest.raises(TypeError):
            snapshot.passengers_by_type[PassengerType.VIP] = ()

    @pytest.mark.asyncio
    async def test_load_passengers_reports_count(self, controller):
        await controller.add_passenger('Alice', 'vip')

        assert await controller.load_passengers() == 1
