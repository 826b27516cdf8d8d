"""
Cosmetic metrics shown on slides.

Growth arrows, reliability scores and relationship flow values carry no
business meaning; they are decoration drawn fresh from a random source.
Pass a seeded ``random.Random`` to pin them in tests.
"""

import random

from trade_report.shared.formatting import format_percentage


class CosmeticMetrics:
    """Random source for decorative slide metrics."""

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self._rng = rng if rng is not None else random.Random(seed)

    def growth(self, spread: float = 40.0) -> float:
        """Year-over-year growth in ``[-spread/2, spread/2]`` percent."""
        return (self._rng.random() - 0.5) * spread

    def reliability_score(self) -> float:
        """Reliability score between 85 and 95."""
        return 85 + self._rng.random() * 10

    def quality_score(self) -> float:
        """Quality score between 8.5 and 10."""
        return 8.5 + self._rng.random() * 1.5

    def ratio(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)

    def count(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def flow_value(self, max_value: float) -> float:
        return self._rng.random() * max_value

    @staticmethod
    def format_trend(growth: float) -> str:
        """Render growth as an arrow plus absolute percentage (e.g. ``↗ 4.2%``)."""
        arrow = "↗" if growth > 0 else "↘"
        return f"{arrow} {format_percentage(abs(growth))}"
