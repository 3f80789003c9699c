"""
Centralized console messages.
All user-facing text in one place for consistency.
"""

MESSAGES = {
    # Banner and menu
    'welcome': 'Welcome to my Hotel Booking Program!',
    'welcome_rule': '++++++++++++++++++++++++++++++++++++++',
    'select_action': 'Select your action',
    'action_show_rooms': 'Show Rooms',
    'action_add_booking': 'Add Booking',
    'action_view_bookings': 'View Bookings',
    'action_search_bookings': 'Search Bookings',
    'action_quit': 'Quit',
    'unknown_action': 'This action does not exist! Please choose an existing action.',

    # Input validation
    'invalid_number': 'Invalid input; Please enter a numeric value',
    'out_of_range': 'The inserted value is not in the range {min}-{max}',
    'insert_valid_number': 'Please insert a valid numeric value',

    # Booking flow
    'enter_name': 'Enter your name',
    'enter_room_amount': 'Enter how many rooms you want to book',
    'enter_rooms': 'Enter which room you want to book.',
    'room_slot': 'Room Number {index}',
    'room_unavailable': 'The room {number} is not available.',
    'choose_another_room': 'Please choose another room',
    'no_rooms_available': 'Sorry, all rooms are booked.',
    'enter_nights': 'Enter the amount of nights you want to book the rooms',
    'booking_failed': 'The booking could not be created: {error}',

    # Search
    'enter_search': 'Enter the booking you are looking for',
    'no_results': 'No bookings found.',
    'no_bookings': 'There are no bookings yet.',

    # Table headers
    'rooms': 'Rooms:',
    'type': 'Type',
    'room_nr': 'Room Nr.',
    'cost': 'Cost',
    'available': 'Available',
    'yes': 'yes',
    'no': 'no',
}


def get_message(key: str, **kwargs) -> str:
    """
    Look up a console message and fill in its placeholders.

    Unknown keys raise KeyError so a typo never reaches the screen.

    Args:
        key: Key in MESSAGES
        **kwargs: Values for the {placeholders} of the message

    Returns:
        Message text
    """
    return MESSAGES[key].format(**kwargs)
