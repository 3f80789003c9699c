"""
Application configuration classes.
Provides configuration for development, production, and testing environments.
"""

import os

from models.settings import HotelSettings


class Config:
    """Base configuration class with common settings."""

    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Room inventory
    ROOM_COUNT = int(os.environ.get('ROOM_COUNT', 300))

    # Nightly rates (kept as strings, parsed to Decimal by HotelSettings)
    SINGLE_ROOM_RATE = os.environ.get('SINGLE_ROOM_RATE', '100.00')
    DOUBLE_ROOM_RATE = os.environ.get('DOUBLE_ROOM_RATE', '150.00')

    # Discount rates drawn at random for every booking
    DISCOUNT_RATES = os.environ.get('DISCOUNT_RATES', '0.0,0.1,0.2')

    # Reservation numbers
    RESERVATION_ID_MIN = int(os.environ.get('RESERVATION_ID_MIN', 10000))
    RESERVATION_ID_MAX = int(os.environ.get('RESERVATION_ID_MAX', 99999))

    MAX_NIGHTS = int(os.environ.get('MAX_NIGHTS', 2147483647))

    # Unset means a fresh seed on every run
    RANDOM_SEED = os.environ.get('RANDOM_SEED')

    # Logging
    LOG_DIR = os.environ.get('LOG_DIR') or 'logs'

    # Application settings
    APP_NAME = 'Hotel Booking'
    APP_VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False

    @classmethod
    def validate(cls) -> None:
        """Validate that the hotel settings are consistent."""
        HotelSettings.from_mapping({
            key: getattr(cls, key) for key in dir(cls) if key.isupper()
        })


class TestConfig(Config):
    """Testing environment configuration."""

    TESTING = True
    DEBUG = True
    ROOM_COUNT = 300
    SINGLE_ROOM_RATE = '100.00'
    DOUBLE_ROOM_RATE = '150.00'
    DISCOUNT_RATES = '0.0,0.1,0.2'
    RANDOM_SEED = 1234
    SECRET_KEY = 'test-secret-key'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'test': TestConfig,
    'default': DevelopmentConfig
}
