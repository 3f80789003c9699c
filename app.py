"""
Hotel Booking - Room Reservation Console
Flask application factory and initialization
"""

import os
import logging
import click
from flask import Flask
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import extensions
from extensions import hotel


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    # Determine config
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # Create Flask app
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])

    # Configure logging before the hotel is built so startup is logged
    configure_logging(app)

    # Initialize extensions
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    hotel.init_app(app)
    app.logger.debug(
        f"Hotel ready with {app.extensions['hotel'].room_count} rooms"
    )


def register_blueprints(app):
    """Register Flask blueprints."""
    from blueprints.hotel import hotel_bp

    app.register_blueprint(hotel_bp)


def configure_logging(app):
    """Configure application logging."""
    engine_logger = logging.getLogger('models')

    if not app.debug and not app.testing:
        # Production logging
        if not os.path.exists(app.config['LOG_DIR']):
            os.mkdir(app.config['LOG_DIR'])

        file_handler = logging.FileHandler(
            os.path.join(app.config['LOG_DIR'], 'hotel_booking.log')
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        engine_logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        engine_logger.setLevel(logging.INFO)
        app.logger.info('Hotel Booking startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)
        engine_logger.setLevel(logging.DEBUG)


@click.command()
def main():
    """Run the interactive booking console."""
    from blueprints.hotel.console import BookingConsole

    app = create_app()
    with app.app_context():
        BookingConsole(hotel.service).run()


if __name__ == '__main__':
    main()
