"""Unit tests for decorative slide metrics."""

import random

from trade_report.rendering.cosmetics import CosmeticMetrics


class TestCosmeticMetrics:
    def test_seeded_sequences_repeat(self):
        first = CosmeticMetrics(seed=5)
        second = CosmeticMetrics(rng=random.Random(5))
        assert [first.growth() for _ in range(5)] == [second.growth() for _ in range(5)]

    def test_ranges(self):
        metrics = CosmeticMetrics(seed=1)
        for _ in range(200):
            assert -20.0 <= metrics.growth() <= 20.0
            assert 85.0 <= metrics.reliability_score() <= 95.0
            assert 8.5 <= metrics.quality_score() <= 10.0
            assert 5 <= metrics.count(5, 19) <= 19
            assert 0.0 <= metrics.flow_value(100.0) < 100.0

    def test_format_trend(self):
        assert CosmeticMetrics.format_trend(4.2) == "↗ 4.2%"
        assert CosmeticMetrics.format_trend(-3.25) == "↘ 3.3%"
        assert CosmeticMetrics.format_trend(0) == "↘ 0.0%"
