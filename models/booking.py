"""
Booking records and booking composition.
"""

from dataclasses import dataclass
from decimal import Decimal

from models.errors import EmptyBookingRequest, InvalidBookerName, InvalidNights


@dataclass(frozen=True)
class Booking:
    """Immutable record of one reservation."""

    reservation_id: int
    booker_name: str
    nights: int
    discount: Decimal
    total_cost: Decimal
    rooms: tuple

    @property
    def room_numbers(self) -> list:
        return [room.number for room in self.rooms]

    def matches(self, query: str) -> bool:
        """True if query is exactly the booker name or the reservation id."""
        return self.booker_name == query or str(self.reservation_id) == query


def validate_booking_request(name: str, nights, room_count: int) -> None:
    """
    Check the parts of a booking request that do not touch the inventory.

    Args:
        name: Booker name
        nights: Number of nights
        room_count: Number of rooms requested

    Raises:
        InvalidBookerName: If name is blank
        InvalidNights: If nights is not an int >= 1
        EmptyBookingRequest: If no rooms were requested
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidBookerName(name)
    if not isinstance(nights, int) or isinstance(nights, bool) or nights < 1:
        raise InvalidNights(nights)
    if room_count < 1:
        raise EmptyBookingRequest()


def compose_booking(name: str, rooms, nights: int, pricing, id_generator, existing_ids) -> Booking:
    """
    Build a booking from rooms that are already allocated.

    The discount is drawn, the cost computed and a fresh reservation id
    assigned. The caller appends the result to the ledger.

    Args:
        name: Booker name
        rooms: Allocated Room snapshots
        nights: Number of nights
        pricing: PricingEngine
        id_generator: ReservationIdGenerator
        existing_ids: Reservation ids already in use

    Returns:
        Booking
    """
    rooms = tuple(rooms)
    validate_booking_request(name, nights, len(rooms))

    discount = pricing.random_discount()
    total_cost = pricing.total_cost(rooms, nights, discount)
    reservation_id = id_generator.next_id(existing_ids)

    return Booking(
        reservation_id=reservation_id,
        booker_name=name,
        nights=nights,
        discount=discount,
        total_cost=total_cost,
        rooms=rooms,
    )
