"""
Momentum sub-signal sources
"""
import logging
import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from core.scoring import clamp_score, round_half_up

logger = logging.getLogger(__name__)


class MomentumSource(ABC):
    """
    Base interface for the price-momentum contribution to the index.
    """

    @abstractmethod
    def score(self) -> int:
        """
        Return a momentum score in [-100, 100].
        """
        raise NotImplementedError


class PlaceholderMomentumSource(MomentumSource):
    """
    Stand-in until real price history is wired up.
    Draws a mildly positive value uniformly from [low, high].
    """

    def __init__(self, low: int = 10, high: int = 49, rng: Optional[random.Random] = None):
        if low > high:
            raise ValueError(f"Momentum range is empty: [{low}, {high}]")
        self.low = low
        self.high = high
        self.rng = rng or random.Random()

    def score(self) -> int:
        return clamp_score(self.rng.randint(self.low, self.high))


class PriceHistoryMomentumSource(MomentumSource):
    """
    Momentum from realized returns over a price series (oldest first).
    A percent return is multiplied by `scale`, so with the default of 10
    a 5% move scores +/-50 and a 10% move saturates at +/-100.
    """

    def __init__(self, prices: Sequence[float], scale: float = 10.0):
        self.prices = list(prices)
        self.scale = scale

    def score(self) -> int:
        if len(self.prices) < 2:
            return 0

        first, last = self.prices[0], self.prices[-1]
        if first <= 0:
            logger.warning(f"Cannot compute momentum from non-positive base price {first}")
            return 0

        pct_return = (last - first) / first * 100
        return clamp_score(round_half_up(pct_return * self.scale))
