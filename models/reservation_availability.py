"""
Room allocation.
Checks availability and marks rooms as booked, one room at a time.
"""

import logging

from models.errors import RoomUnavailable

logger = logging.getLogger(__name__)


def try_allocate_one(inventory, room_number: int):
    """
    Book a single room if it is free.

    Args:
        inventory: RoomInventory
        room_number: Requested room number

    Returns:
        Room snapshot, already marked unavailable

    Raises:
        InvalidRoomNumber: If the room does not exist
        RoomUnavailable: If the room is already booked
    """
    if not inventory.is_available(room_number):
        logger.debug(f'Room {room_number} requested but already booked')
        raise RoomUnavailable(room_number)
    return inventory.set_available(room_number, False)


def allocate(inventory, room_numbers) -> list:
    """
    Book several rooms in the given order.

    Rooms are booked one by one. When a room fails, the rooms booked
    before it stay booked.

    Args:
        inventory: RoomInventory
        room_numbers: Room numbers in request order

    Returns:
        List of Room snapshots in request order

    Raises:
        InvalidRoomNumber: On the first room that does not exist
        RoomUnavailable: On the first room that is already booked
    """
    rooms = []
    for room_number in room_numbers:
        rooms.append(try_allocate_one(inventory, room_number))
    return rooms
