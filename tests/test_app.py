"""
Test application factory and configuration.
"""

import pytest
from app import create_app
from config import ProductionConfig
from models.hotel import HotelService


class TestAppFactory:
    """Test Flask application factory."""

    def test_create_app_development(self):
        """Test app creation with development config."""
        app = create_app('development')
        assert app is not None
        assert app.config['DEBUG'] is True
        assert app.config['TESTING'] is False

    def test_create_app_test(self):
        """Test app creation with test config."""
        app = create_app('test')
        assert app is not None
        assert app.config['TESTING'] is True
        assert app.config['RANDOM_SEED'] == 1234

    def test_create_app_default(self):
        """Test app creation with default config."""
        app = create_app()
        assert app is not None

    def test_app_has_hotel_blueprint(self):
        """Test that the hotel blueprint is registered."""
        app = create_app('test')
        assert 'hotel' in app.blueprints

    def test_app_has_hotel_extension(self):
        """Test that the hotel service is initialized."""
        app = create_app('test')
        assert isinstance(app.extensions['hotel'], HotelService)
        assert app.extensions['hotel'].room_count == 300

    def test_each_app_gets_its_own_hotel(self):
        """Test that two apps never share bookings."""
        first = create_app('test')
        second = create_app('test')

        first.extensions['hotel'].create_booking('Alice', [1], 1)

        assert len(first.extensions['hotel'].list_bookings()) == 1
        assert second.extensions['hotel'].list_bookings() == []
        assert second.extensions['hotel'].is_available(1) is True

    def test_no_http_routes(self):
        """Test that only the static route exists."""
        app = create_app('test')
        endpoints = {rule.endpoint for rule in app.url_map.iter_rules()}
        assert endpoints <= {'static'}


class TestAppConfiguration:
    """Test application configuration."""

    def test_room_count_from_config(self):
        """Test that ROOM_COUNT sizes the inventory."""
        app = create_app('test')
        app.config['ROOM_COUNT'] = 10
        service = HotelService.from_config(app.config)
        assert service.room_count == 10

    def test_production_config_validates(self):
        """Test that the default production settings are consistent."""
        ProductionConfig.validate()

    def test_production_config_rejects_bad_rates(self, monkeypatch):
        """Test that inverted rates are rejected."""
        monkeypatch.setattr(ProductionConfig, 'SINGLE_ROOM_RATE', '200.00')
        with pytest.raises(ValueError):
            ProductionConfig.validate()
