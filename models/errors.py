"""
Booking error types.
Every error is recoverable at the console by asking the user again.
"""


class BookingError(ValueError):
    """Base class for errors raised by the booking engine."""


class InvalidRoomNumber(BookingError):
    """Room number outside the inventory bounds."""

    def __init__(self, room_number, room_count: int):
        self.room_number = room_number
        self.room_count = room_count
        super().__init__(
            f'Room {room_number} does not exist (valid rooms: 1-{room_count})'
        )


class RoomUnavailable(BookingError):
    """Room is already booked."""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f'The room {room_number} is not available.')


class InvalidNights(BookingError):
    """Night count is not a positive integer."""

    def __init__(self, nights):
        self.nights = nights
        super().__init__(f'Number of nights must be at least 1, got {nights!r}')


class EmptyBookingRequest(BookingError):
    """A booking was requested without any rooms."""

    def __init__(self):
        super().__init__('A booking needs at least one room')


class InvalidBookerName(BookingError):
    """Booker name is empty or only whitespace."""

    def __init__(self, name):
        self.name = name
        super().__init__('The booker name is required')


class DuplicateReservationId(BookingError):
    """A booking with this reservation id is already in the ledger."""

    def __init__(self, reservation_id: int):
        self.reservation_id = reservation_id
        super().__init__(f'Reservation {reservation_id} already exists')


class ReservationIdsExhausted(BookingError):
    """Every reservation id in the configured range is taken."""

    def __init__(self, minimum: int, maximum: int):
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f'No free reservation ids left in the range {minimum}-{maximum}'
        )
