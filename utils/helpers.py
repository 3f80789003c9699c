"""
Console formatting helpers.
Builds the text shown for rooms and bookings.
"""

from decimal import Decimal

from utils.messages import get_message


COLUMN_WIDTH = 10
TABLE_RULE = '-' * 42
BOOKING_RULE = '-' * 29


def format_money(amount) -> str:
    """Format an amount with two decimals, e.g. 405.00."""
    return f'{Decimal(str(amount)):.2f}'


def format_discount(rate) -> str:
    """Format a discount rate as a percentage, e.g. 0.1 -> 10%."""
    percent = Decimal(str(rate)) * 100
    return f'{percent.normalize():f}%'


def format_room_table(rooms, pricing) -> list:
    """
    Build the room table.

    Args:
        rooms: Room snapshots
        pricing: PricingEngine used for the cost column

    Returns:
        List of lines
    """
    def row(*cells):
        return ''.join(f'{cell:<{COLUMN_WIDTH}}' for cell in cells).rstrip()

    lines = [
        get_message('rooms'),
        TABLE_RULE,
        row(get_message('type'), get_message('room_nr'), get_message('cost'), get_message('available')),
        TABLE_RULE,
    ]
    for room in rooms:
        lines.append(row(
            room.room_type.label,
            str(room.number),
            format_money(pricing.nightly_cost(room.room_type)),
            get_message('yes') if room.available else get_message('no'),
        ))
    return lines


def format_booking(booking, pricing) -> list:
    """
    Build the detail view of one booking.

    Args:
        booking: Booking
        pricing: PricingEngine used for per-room costs

    Returns:
        List of lines
    """
    lines = [
        f'Booking {booking.reservation_id}:',
        BOOKING_RULE,
        f'Reserved for: {booking.booker_name}',
        f'Number of nights: {booking.nights}',
        f'Discount: {format_discount(booking.discount)}',
        f'Total cost: {format_money(booking.total_cost)}',
        'Rooms:',
    ]
    for room in booking.rooms:
        lines.append(
            f'{room.room_type.label} Room: {room.number} '
            f'Cost: {format_money(pricing.nightly_cost(room.room_type))}'
        )
    return lines
