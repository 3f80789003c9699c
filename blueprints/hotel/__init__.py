"""
Hotel blueprint initialization.
Registers the command line interface of the booking console.

Commands (run with `flask --app app hotel <command>`):
- console - Interactive menu for rooms, bookings and search
- rooms   - Print the room table once
"""

import click
from flask import Blueprint

from extensions import hotel
from blueprints.hotel.console import BookingConsole
from utils.helpers import format_room_table

# CLI-only blueprint, no routes are registered
hotel_bp = Blueprint('hotel', __name__, cli_group='hotel')


@hotel_bp.cli.command('console')
def console_command():
    """Run the interactive booking console."""
    BookingConsole(hotel.service).run()


@hotel_bp.cli.command('rooms')
@click.option('--available', 'available_only', is_flag=True,
              help='Only list rooms that can still be booked.')
def rooms_command(available_only):
    """Print the room table."""
    service = hotel.service
    rooms = service.list_available_rooms() if available_only else service.list_rooms()
    for line in format_room_table(rooms, service.pricing):
        click.echo(line)
