"""
Interactive booking console.
Reads menu choices and booking details and calls the hotel service.
"""

from enum import IntEnum

import click
from flask import current_app

from models.errors import BookingError, RoomUnavailable
from utils.helpers import format_booking, format_room_table
from utils.messages import get_message
from utils.validators import is_blank, parse_int, validate_number_range


class Action(IntEnum):
    """Menu entries, numbered as shown to the user."""

    SHOW_ROOMS = 1
    BOOK = 2
    SHOW_BOOKINGS = 3
    SEARCH_BOOKING = 4
    EXIT = 5


ACTION_LABELS = {
    Action.SHOW_ROOMS: 'action_show_rooms',
    Action.BOOK: 'action_add_booking',
    Action.SHOW_BOOKINGS: 'action_view_bookings',
    Action.SEARCH_BOOKING: 'action_search_bookings',
    Action.EXIT: 'action_quit',
}


class BookingConsole:
    """Menu loop around a HotelService."""

    def __init__(self, service):
        self.service = service
        self._handlers = {
            Action.SHOW_ROOMS: self.show_rooms,
            Action.BOOK: self.add_booking,
            Action.SHOW_BOOKINGS: self.show_bookings,
            Action.SEARCH_BOOKING: self.search_bookings,
        }

    def run(self):
        """Show the menu until the user quits."""
        self.print_welcome()
        while True:
            self.print_actions()
            action = self.read_number(get_message('select_action'))
            click.echo()

            if action == Action.EXIT:
                break

            handler = self._handlers.get(action)
            if handler is None:
                click.echo(get_message('unknown_action'))
                continue
            handler()

    # =========================================================================
    # INPUT
    # =========================================================================

    def read_line(self, text: str) -> str:
        """Read one line exactly as typed. An empty line is returned as ''."""
        return click.prompt(text, type=str, default='', show_default=False)

    def read_name(self, text: str) -> str:
        """Prompt until a line with something besides whitespace is entered."""
        value = self.read_line(text)
        while is_blank(value):
            value = self.read_line(text)
        return value

    def read_number(self, text: str) -> int:
        """Prompt until a whole number is entered."""
        number = parse_int(click.prompt(text, type=str))
        while number is None:
            number = parse_int(click.prompt(get_message('invalid_number'), type=str))
        return number

    def read_validated_number(self, text: str, min_value: int, max_value: int) -> int:
        """
        Prompt until a whole number in [min_value, max_value] is entered.

        Args:
            text: Prompt shown first
            min_value: Lowest accepted value
            max_value: Highest accepted value

        Returns:
            The accepted number
        """
        number = self.read_number(text)
        while not validate_number_range(number, min_value, max_value):
            click.echo(get_message('out_of_range', min=min_value, max=max_value))
            number = self.read_number(get_message('insert_valid_number'))
        return number

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def print_welcome(self):
        click.echo(get_message('welcome'))
        click.echo(get_message('welcome_rule'))
        click.echo()

    def print_actions(self):
        for action in Action:
            click.echo(f'{action.value}: {get_message(ACTION_LABELS[action])}')
        click.echo()

    def print_booking(self, booking):
        for line in format_booking(booking, self.service.pricing):
            click.echo(line)
        click.echo()

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def show_rooms(self):
        for line in format_room_table(self.service.list_rooms(), self.service.pricing):
            click.echo(line)
        click.echo()

    def show_bookings(self):
        bookings = self.service.list_bookings()
        if not bookings:
            click.echo(get_message('no_bookings'))
            click.echo()
            return
        for booking in bookings:
            self.print_booking(booking)

    def search_bookings(self):
        query = self.read_line(get_message('enter_search'))
        click.echo()
        matches = self.service.search_bookings(query)
        if not matches:
            click.echo(get_message('no_results'))
            click.echo()
            return
        for booking in matches:
            self.print_booking(booking)

    def add_booking(self):
        """
        Ask for the booking details, book the rooms and show the booking.

        Each room slot is asked again until a free room is chosen.
        The amount of rooms is capped by the rooms still available.
        """
        free_rooms = len(self.service.list_available_rooms())
        if free_rooms == 0:
            click.echo(get_message('no_rooms_available'))
            click.echo()
            return

        name = self.read_name(get_message('enter_name'))
        amount = self.read_validated_number(get_message('enter_room_amount'), 1, free_rooms)

        click.echo(get_message('enter_rooms'))
        rooms = []
        for index in range(1, amount + 1):
            rooms.append(self._read_free_room(index))

        nights = self.read_validated_number(
            get_message('enter_nights'), 1, self.service.settings.max_nights
        )

        try:
            booking = self.service.complete_booking(name, rooms, nights)
        except BookingError as e:
            current_app.logger.warning(f'Booking for {name} failed: {e}')
            click.echo(get_message('booking_failed', error=str(e)))
            click.echo()
            return

        click.echo()
        self.print_booking(booking)

    def _read_free_room(self, index: int):
        text = get_message('room_slot', index=index)
        while True:
            number = self.read_validated_number(text, 1, self.service.room_count)
            try:
                return self.service.try_allocate_room(number)
            except RoomUnavailable:
                click.echo(get_message('room_unavailable', number=number))
                text = get_message('choose_another_room')
