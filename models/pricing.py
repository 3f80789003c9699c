"""
Pricing engine.
Nightly rates per room type, randomized discounts and booking totals.
"""

import random
from decimal import Decimal, ROUND_DOWN

from models.room import RoomType
from models.settings import HotelSettings


CENTS = Decimal('0.01')


def to_cents(amount: Decimal) -> Decimal:
    """
    Truncate an amount to whole cents.

    Rates are whole cents, so a truncated discounted total always stays
    below the undiscounted one.
    """
    return amount.quantize(CENTS, rounding=ROUND_DOWN)


class PricingEngine:
    """
    Computes booking costs from the configured rates.

    Money is kept as Decimal and totals are truncated to cents.
    """

    def __init__(self, settings: HotelSettings = None, rng: random.Random = None):
        self.settings = settings or HotelSettings()
        self._rng = rng or random.Random(self.settings.random_seed)
        self._rates = {
            RoomType.SINGLE: self.settings.single_rate,
            RoomType.DOUBLE: self.settings.double_rate,
        }

    @property
    def discount_rates(self) -> tuple:
        return self.settings.discount_rates

    def nightly_cost(self, room_type: RoomType) -> Decimal:
        """
        Get the nightly rate of a room type.

        Args:
            room_type: RoomType

        Returns:
            Rate per night
        """
        return self._rates[room_type]

    def random_discount(self) -> Decimal:
        """
        Draw a discount rate.

        Every rate in the configured set is equally likely
        (0%, 10% and 20% with the defaults).
        """
        return self._rng.choice(self.settings.discount_rates)

    def undiscounted_cost(self, rooms, nights: int) -> Decimal:
        """Sum of nightly rates times nights, before any discount."""
        nightly_total = sum((self.nightly_cost(room.room_type) for room in rooms), Decimal('0'))
        return nightly_total * nights

    def total_cost(self, rooms, nights: int, discount: Decimal) -> Decimal:
        """
        Calculate the total cost of a booking.

        Args:
            rooms: Room snapshots in the booking
            nights: Number of nights
            discount: Discount rate in [0, 1)

        Returns:
            (sum of nightly rates) * nights * (1 - discount), truncated to cents
        """
        discount = Decimal(str(discount))
        return to_cents(self.undiscounted_cost(rooms, nights) * (Decimal('1') - discount))
