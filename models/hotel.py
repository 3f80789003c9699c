"""
Hotel booking service.
Single entry point used by the console: rooms, bookings and search.
"""

import logging
import random

from models.booking import compose_booking, validate_booking_request
from models.booking_ledger import BookingLedger
from models.pricing import PricingEngine
from models.reservation_availability import allocate, try_allocate_one
from models.reservation_id import ReservationIdGenerator
from models.room import RoomInventory
from models.settings import HotelSettings

logger = logging.getLogger(__name__)


class HotelService:
    """
    Owns the room inventory and the booking ledger of one hotel.

    Not thread-safe: allocation and id assignment are check-then-act.
    Guard calls with a lock if the service is ever shared between threads.
    """

    def __init__(self, settings: HotelSettings = None, inventory: RoomInventory = None,
                 pricing: PricingEngine = None, id_generator: ReservationIdGenerator = None,
                 ledger: BookingLedger = None):
        self.settings = settings or HotelSettings()
        rng = random.Random(self.settings.random_seed)

        self.inventory = inventory or RoomInventory(self.settings.room_count)
        self.pricing = pricing or PricingEngine(self.settings, rng=rng)
        self.id_generator = id_generator or ReservationIdGenerator(
            self.settings.reservation_id_min,
            self.settings.reservation_id_max,
            rng=rng,
        )
        self.ledger = ledger or BookingLedger()

    @classmethod
    def from_config(cls, config) -> 'HotelService':
        """Build a service from a Flask config mapping."""
        return cls(HotelSettings.from_mapping(config))

    # =========================================================================
    # ROOMS
    # =========================================================================

    @property
    def room_count(self) -> int:
        return self.inventory.room_count

    def list_rooms(self) -> list:
        """All rooms in ascending number order."""
        return self.inventory.list_all()

    def list_available_rooms(self) -> list:
        return self.inventory.list_available()

    def is_available(self, room_number: int) -> bool:
        return self.inventory.is_available(room_number)

    def try_allocate_room(self, room_number: int):
        """
        Book one room for a booking in progress.

        Used by the console to re-prompt for each room until a free one
        is chosen.

        Returns:
            Room snapshot

        Raises:
            InvalidRoomNumber: If the room does not exist
            RoomUnavailable: If the room is already booked
        """
        return try_allocate_one(self.inventory, room_number)

    # =========================================================================
    # BOOKINGS
    # =========================================================================

    def complete_booking(self, name: str, rooms, nights: int):
        """
        Create and store a booking for rooms that are already allocated.

        Args:
            name: Booker name
            rooms: Room snapshots from try_allocate_room
            nights: Number of nights

        Returns:
            The stored Booking
        """
        booking = compose_booking(
            name, rooms, nights,
            pricing=self.pricing,
            id_generator=self.id_generator,
            existing_ids=self.ledger.reservation_ids(),
        )
        self.ledger.append(booking)
        logger.info(
            f'Booking {booking.reservation_id} created for {booking.booker_name}: '
            f'rooms {booking.room_numbers}, {booking.nights} night(s), '
            f'discount {booking.discount}, total {booking.total_cost}'
        )
        return booking

    def create_booking(self, name: str, room_numbers, nights: int):
        """
        Book rooms by number and store the booking.

        Name, nights and the room list are checked before any room is
        touched. Rooms are then booked in order; if one fails, the ones
        before it remain booked.

        Args:
            name: Booker name
            room_numbers: Requested room numbers
            nights: Number of nights

        Returns:
            The stored Booking

        Raises:
            InvalidBookerName, InvalidNights, EmptyBookingRequest,
            InvalidRoomNumber, RoomUnavailable
        """
        room_numbers = list(room_numbers)
        validate_booking_request(name, nights, len(room_numbers))
        rooms = allocate(self.inventory, room_numbers)
        return self.complete_booking(name, rooms, nights)

    def list_bookings(self) -> list:
        """All bookings in creation order."""
        return self.ledger.list_all()

    def search_bookings(self, query: str) -> list:
        """Bookings whose booker name or reservation id equals query."""
        return self.ledger.find_exact(query)

    def get_booking(self, reservation_id: int):
        return self.ledger.get(reservation_id)
