"""
Reservation id generation.
Random ids in a fixed numeric range, redrawn on collision.
"""

import logging
import random

from models.errors import ReservationIdsExhausted
from models.settings import MIN_RESERVATION_ID, MAX_RESERVATION_ID

logger = logging.getLogger(__name__)


class ReservationIdGenerator:
    """Draws reservation ids uniformly from [minimum, maximum]."""

    def __init__(self, minimum: int = MIN_RESERVATION_ID, maximum: int = MAX_RESERVATION_ID,
                 rng: random.Random = None):
        if minimum > maximum:
            raise ValueError('Reservation id range is empty')
        self.minimum = minimum
        self.maximum = maximum
        self._rng = rng or random.Random()

    @property
    def capacity(self) -> int:
        return self.maximum - self.minimum + 1

    def next_id(self, existing_ids) -> int:
        """
        Generate an id not present in existing_ids.

        Retries until a free id is drawn. The range only runs out when
        every id in it is taken, which is checked before drawing.

        Args:
            existing_ids: Ids already in use

        Returns:
            New reservation id

        Raises:
            ReservationIdsExhausted: If no id in the range is free
        """
        existing_ids = set(existing_ids)
        taken = sum(1 for rid in existing_ids if self.minimum <= rid <= self.maximum)
        if taken >= self.capacity:
            raise ReservationIdsExhausted(self.minimum, self.maximum)

        candidate = self._rng.randint(self.minimum, self.maximum)
        while candidate in existing_ids:
            logger.debug(f'Reservation id {candidate} already taken, drawing again')
            candidate = self._rng.randint(self.minimum, self.maximum)
        return candidate
