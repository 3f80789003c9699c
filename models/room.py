"""
Room inventory.
Fixed collection of rooms indexed by room number, with availability flags.
"""

from dataclasses import dataclass, replace
from enum import Enum

from models.errors import InvalidRoomNumber


class RoomType(Enum):
    """Room categories. The value is the display label."""

    SINGLE = 'Single'
    DOUBLE = 'Double'

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Room:
    """A bookable room. Instances are snapshots; the inventory swaps them."""

    number: int
    room_type: RoomType
    available: bool = True


def room_type_for(number: int, room_count: int) -> RoomType:
    """
    Get the type of a room from its position in the inventory.

    Rooms numbered below room_count // 2 are Single, the rest Double
    (1-149 Single and 150-300 Double for 300 rooms).

    Args:
        number: Room number (1-based)
        room_count: Total number of rooms

    Returns:
        RoomType
    """
    if number < room_count // 2:
        return RoomType.SINGLE
    return RoomType.DOUBLE


class RoomInventory:
    """Fixed-size room collection. Rooms live at index number - 1."""

    def __init__(self, room_count: int = 300):
        if room_count < 1:
            raise ValueError('An inventory needs at least one room')
        self._rooms = [
            Room(number=number, room_type=room_type_for(number, room_count))
            for number in range(1, room_count + 1)
        ]

    @property
    def room_count(self) -> int:
        return len(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def _index(self, room_number) -> int:
        # bool is an int subclass, True would silently mean room 1
        if (not isinstance(room_number, int) or isinstance(room_number, bool)
                or not 1 <= room_number <= len(self._rooms)):
            raise InvalidRoomNumber(room_number, len(self._rooms))
        return room_number - 1

    def get_room(self, room_number: int) -> Room:
        """
        Get the current state of a room.

        Raises:
            InvalidRoomNumber: If room_number is outside [1, N]
        """
        return self._rooms[self._index(room_number)]

    def is_available(self, room_number: int) -> bool:
        """
        Check if a room can be booked.

        Args:
            room_number: Room number (1-based)

        Returns:
            True if the room is free

        Raises:
            InvalidRoomNumber: If room_number is outside [1, N]
        """
        return self.get_room(room_number).available

    def set_available(self, room_number: int, available: bool) -> Room:
        """
        Set the availability flag of a room.

        Args:
            room_number: Room number (1-based)
            available: New availability flag

        Returns:
            The updated Room snapshot

        Raises:
            InvalidRoomNumber: If room_number is outside [1, N]
        """
        index = self._index(room_number)
        room = replace(self._rooms[index], available=bool(available))
        self._rooms[index] = room
        return room

    def list_all(self) -> list:
        """All rooms in ascending number order."""
        return list(self._rooms)

    def list_available(self) -> list:
        """Rooms that can still be booked, in ascending number order."""
        return [room for room in self._rooms if room.available]
