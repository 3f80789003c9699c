"""
Tests for the room inventory.
"""

import pytest
from dataclasses import FrozenInstanceError
from models.errors import InvalidRoomNumber
from models.room import Room, RoomInventory, RoomType, room_type_for


class TestRoomPartition:
    """Tests for the Single/Double split."""

    def test_default_inventory_has_300_rooms(self):
        """Test default size."""
        inventory = RoomInventory()
        assert inventory.room_count == 300
        assert len(inventory) == 300

    def test_numbers_are_contiguous(self):
        """Test room numbers 1..N, ascending, no gaps or duplicates."""
        inventory = RoomInventory(300)
        numbers = [room.number for room in inventory.list_all()]
        assert numbers == list(range(1, 301))

    def test_300_room_split(self):
        """Test rooms 1-149 are Single and 150-300 Double."""
        rooms = RoomInventory(300).list_all()
        singles = [room.number for room in rooms if room.room_type is RoomType.SINGLE]
        doubles = [room.number for room in rooms if room.room_type is RoomType.DOUBLE]

        assert singles == list(range(1, 150))
        assert doubles == list(range(150, 301))

    @pytest.mark.parametrize('room_count', [1, 2, 3, 7, 10, 301])
    def test_singles_precede_doubles(self, room_count):
        """Test the split is a prefix of Singles followed by Doubles."""
        types = [room.room_type for room in RoomInventory(room_count).list_all()]
        first_double = types.index(RoomType.DOUBLE)
        assert all(t is RoomType.SINGLE for t in types[:first_double])
        assert all(t is RoomType.DOUBLE for t in types[first_double:])

    def test_room_type_for(self):
        """Test the type lookup at the boundary."""
        assert room_type_for(149, 300) is RoomType.SINGLE
        assert room_type_for(150, 300) is RoomType.DOUBLE
        assert room_type_for(1, 1) is RoomType.DOUBLE

    def test_labels(self):
        """Test display labels."""
        assert RoomType.SINGLE.label == 'Single'
        assert RoomType.DOUBLE.label == 'Double'

    def test_empty_inventory_rejected(self):
        """Test that zero rooms is not a valid inventory."""
        with pytest.raises(ValueError):
            RoomInventory(0)


class TestAvailability:
    """Tests for availability flags."""

    def test_rooms_start_available(self):
        """Test that every room is free initially."""
        inventory = RoomInventory(10)
        assert all(room.available for room in inventory.list_all())
        assert len(inventory.list_available()) == 10

    def test_set_available(self):
        """Test marking a room as booked."""
        inventory = RoomInventory(10)
        updated = inventory.set_available(3, False)

        assert updated == Room(3, RoomType.SINGLE, available=False)
        assert inventory.is_available(3) is False
        assert 3 not in [room.number for room in inventory.list_available()]

    @pytest.mark.parametrize('room_number', [0, -1, 11, 301])
    def test_out_of_range(self, room_number):
        """Test that unknown room numbers are rejected."""
        inventory = RoomInventory(10)
        with pytest.raises(InvalidRoomNumber) as exc_info:
            inventory.is_available(room_number)
        assert exc_info.value.room_number == room_number

        with pytest.raises(InvalidRoomNumber):
            inventory.set_available(room_number, False)

    def test_non_integer_room_number(self):
        """Test that booleans and strings are not room numbers."""
        inventory = RoomInventory(10)
        with pytest.raises(InvalidRoomNumber):
            inventory.is_available(True)
        with pytest.raises(InvalidRoomNumber):
            inventory.is_available('1')

    def test_listed_rooms_are_snapshots(self):
        """Test that a listed room does not change when the inventory does."""
        inventory = RoomInventory(10)
        before = inventory.get_room(5)
        inventory.set_available(5, False)

        assert before.available is True
        assert inventory.get_room(5).available is False
        with pytest.raises(FrozenInstanceError):
            before.available = False
