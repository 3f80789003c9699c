"""
Hotel engine settings.
Room count, nightly rates, discount set and reservation id range.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_ROOM_COUNT = 300
DEFAULT_SINGLE_RATE = Decimal('100.00')
DEFAULT_DOUBLE_RATE = Decimal('150.00')
DEFAULT_DISCOUNT_RATES = (Decimal('0.0'), Decimal('0.1'), Decimal('0.2'))
MIN_RESERVATION_ID = 10000
MAX_RESERVATION_ID = 99999
MAX_NIGHTS = 2147483647


def parse_decimal(value, field: str) -> Decimal:
    """
    Convert a config value to Decimal.

    Args:
        value: str, int, float or Decimal
        field: Setting name used in the error message

    Returns:
        Decimal value

    Raises:
        ValueError: If the value is not a number
    """
    if isinstance(value, Decimal):
        return value
    try:
        # str() keeps floats like 0.1 from turning into 0.1000000000000000055...
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValueError(f'{field} must be a number, got {value!r}')


def parse_discount_rates(value) -> tuple:
    """
    Parse the discount set from a comma separated string or a sequence.

    Args:
        value: "0.0,0.1,0.2" or an iterable of numbers

    Returns:
        Tuple of Decimal rates
    """
    if isinstance(value, str):
        value = [part for part in value.split(',') if part.strip()]
    return tuple(parse_decimal(rate, 'DISCOUNT_RATES') for rate in value)


@dataclass(frozen=True)
class HotelSettings:
    """Configuration for one hotel engine instance."""

    room_count: int = DEFAULT_ROOM_COUNT
    single_rate: Decimal = DEFAULT_SINGLE_RATE
    double_rate: Decimal = DEFAULT_DOUBLE_RATE
    discount_rates: tuple = DEFAULT_DISCOUNT_RATES
    reservation_id_min: int = MIN_RESERVATION_ID
    reservation_id_max: int = MAX_RESERVATION_ID
    max_nights: int = MAX_NIGHTS
    random_seed: int | None = None

    def __post_init__(self):
        # Normalize money values so callers may pass ints or strings
        object.__setattr__(self, 'single_rate', parse_decimal(self.single_rate, 'single_rate'))
        object.__setattr__(self, 'double_rate', parse_decimal(self.double_rate, 'double_rate'))
        object.__setattr__(self, 'discount_rates', parse_discount_rates(self.discount_rates))
        self.validate()

    def validate(self) -> None:
        """
        Check the settings are consistent.

        Raises:
            ValueError: On the first inconsistent value found
        """
        if self.room_count < 1:
            raise ValueError('room_count must be at least 1')
        if self.single_rate <= 0 or self.double_rate <= 0:
            raise ValueError('Nightly rates must be positive')
        for rate in (self.single_rate, self.double_rate):
            if rate != rate.quantize(Decimal('0.01')):
                raise ValueError(f'Nightly rate {rate} must be a whole number of cents')
        if self.single_rate >= self.double_rate:
            raise ValueError('single_rate must be lower than double_rate')
        if not self.discount_rates:
            raise ValueError('At least one discount rate is required')
        for rate in self.discount_rates:
            if rate < 0 or rate >= 1:
                raise ValueError(f'Discount rate {rate} must be in [0, 1)')
        if self.reservation_id_min < 0 or self.reservation_id_min > self.reservation_id_max:
            raise ValueError('Reservation id range is empty')
        # Every booking holds at least one room, so bookings never outnumber rooms
        if self.reservation_id_max - self.reservation_id_min + 1 < self.room_count:
            raise ValueError('Reservation id range must hold at least room_count ids')
        if self.max_nights < 1:
            raise ValueError('max_nights must be at least 1')

    @classmethod
    def from_mapping(cls, config) -> 'HotelSettings':
        """
        Build settings from a Flask config (or any mapping).

        Missing keys fall back to the defaults.

        Args:
            config: Mapping with ROOM_COUNT, SINGLE_ROOM_RATE, ... keys

        Returns:
            HotelSettings instance
        """
        seed = config.get('RANDOM_SEED')
        return cls(
            room_count=int(config.get('ROOM_COUNT', DEFAULT_ROOM_COUNT)),
            single_rate=config.get('SINGLE_ROOM_RATE', DEFAULT_SINGLE_RATE),
            double_rate=config.get('DOUBLE_ROOM_RATE', DEFAULT_DOUBLE_RATE),
            discount_rates=config.get('DISCOUNT_RATES', DEFAULT_DISCOUNT_RATES),
            reservation_id_min=int(config.get('RESERVATION_ID_MIN', MIN_RESERVATION_ID)),
            reservation_id_max=int(config.get('RESERVATION_ID_MAX', MAX_RESERVATION_ID)),
            max_nights=int(config.get('MAX_NIGHTS', MAX_NIGHTS)),
            random_seed=int(seed) if seed not in (None, '') else None,
        )
