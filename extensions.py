"""
Flask extensions initialization.
Extensions are initialized here and then initialized with the app in app.py.
"""

from flask import current_app

from models.hotel import HotelService


class HotelExtension:
    """Keeps one HotelService per Flask app in app.extensions['hotel']."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """
        Build the hotel service from the app config.

        Args:
            app: Flask application
        """
        app.extensions['hotel'] = HotelService.from_config(app.config)

    @property
    def service(self) -> HotelService:
        """Hotel service of the current app."""
        return current_app.extensions['hotel']


# Initialize hotel extension
hotel = HotelExtension()
