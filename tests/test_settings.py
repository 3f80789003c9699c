"""
Tests for hotel settings.
"""

import pytest
from decimal import Decimal
from models.settings import HotelSettings, parse_discount_rates


class TestHotelSettings:
    """Tests for settings defaults and validation."""

    def test_defaults(self):
        """Test default values."""
        settings = HotelSettings()
        assert settings.room_count == 300
        assert settings.single_rate == Decimal('100')
        assert settings.double_rate == Decimal('150')
        assert settings.discount_rates == (Decimal('0.0'), Decimal('0.1'), Decimal('0.2'))
        assert settings.reservation_id_min == 10000
        assert settings.reservation_id_max == 99999

    def test_rates_are_normalized_to_decimal(self):
        """Test that strings and floats become Decimals."""
        settings = HotelSettings(single_rate='80.50', double_rate=120, discount_rates=[0.1, '0.2'])
        assert settings.single_rate == Decimal('80.50')
        assert settings.double_rate == Decimal('120')
        assert settings.discount_rates == (Decimal('0.1'), Decimal('0.2'))

    @pytest.mark.parametrize('kwargs', [
        {'room_count': 0},
        {'single_rate': 0},
        {'single_rate': 150, 'double_rate': 150},
        {'single_rate': 200},
        {'discount_rates': ()},
        {'discount_rates': (Decimal('1.0'),)},
        {'discount_rates': (Decimal('-0.1'),)},
        {'reservation_id_min': 10, 'reservation_id_max': 9},
        {'max_nights': 0},
        {'room_count': 10, 'reservation_id_min': 1, 'reservation_id_max': 9},
        {'single_rate': '33.333'},
        {'single_rate': '0.005', 'double_rate': '0.02'},
        {'single_rate': 'cheap'},
    ])
    def test_invalid_settings(self, kwargs):
        """Test that inconsistent settings are rejected."""
        with pytest.raises(ValueError):
            HotelSettings(**kwargs)

    def test_from_mapping(self):
        """Test reading Flask-style config keys."""
        settings = HotelSettings.from_mapping({
            'ROOM_COUNT': '20',
            'SINGLE_ROOM_RATE': '90.00',
            'DOUBLE_ROOM_RATE': '140.00',
            'DISCOUNT_RATES': '0.0, 0.15',
            'RANDOM_SEED': '7',
        })
        assert settings.room_count == 20
        assert settings.single_rate == Decimal('90.00')
        assert settings.discount_rates == (Decimal('0.0'), Decimal('0.15'))
        assert settings.random_seed == 7

    def test_from_mapping_defaults(self):
        """Test that missing keys fall back to defaults."""
        assert HotelSettings.from_mapping({}) == HotelSettings()

    def test_parse_discount_rates_skips_blanks(self):
        """Test trailing commas in the discount list."""
        assert parse_discount_rates('0.1,,0.2,') == (Decimal('0.1'), Decimal('0.2'))
