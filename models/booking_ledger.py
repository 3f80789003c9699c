"""
Booking ledger.
Ordered, append-only collection of every booking made in this process.
"""

from models.errors import DuplicateReservationId


class BookingLedger:
    """Bookings in creation order, with an id index for lookups."""

    def __init__(self):
        self._bookings = []
        self._by_id = {}

    def __len__(self) -> int:
        return len(self._bookings)

    def __iter__(self):
        return iter(self._bookings)

    def append(self, booking) -> None:
        """
        Add a booking at the end of the ledger.

        Raises:
            DuplicateReservationId: If the reservation id is already used
        """
        if booking.reservation_id in self._by_id:
            raise DuplicateReservationId(booking.reservation_id)
        self._bookings.append(booking)
        self._by_id[booking.reservation_id] = booking

    def get(self, reservation_id: int):
        """Get a booking by reservation id, or None."""
        return self._by_id.get(reservation_id)

    def reservation_ids(self) -> set:
        return set(self._by_id)

    def list_all(self) -> list:
        """All bookings in insertion order."""
        return list(self._bookings)

    def find_exact(self, query: str) -> list:
        """
        Find bookings by exact booker name or reservation id.

        Matching is case-sensitive and whole-value only: "Ali" does not
        match "Alice" and "1234" does not match 12345.

        Args:
            query: Search text as typed by the user

        Returns:
            Matching bookings in ledger order
        """
        return [booking for booking in self._bookings if booking.matches(query)]
