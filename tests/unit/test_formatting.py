"""Unit tests for currency, number and percentage formatting."""

import math
from decimal import Decimal

import pytest

_hyp = pytest.importorskip("hypothesis")
from hypothesis import given
from hypothesis import strategies as st

from trade_report.shared.formatting import (
    compute_share,
    format_currency,
    format_number,
    format_percentage,
)


class TestFormatCurrency:
    """Test whole-dollar currency formatting."""

    def test_grouping(self):
        assert format_currency(1245800000) == "$1,245,800,000"

    def test_average_transaction_value(self):
        """1,245,800,000 / 28,456 = 43,779.87 rounds to $43,780."""
        assert format_currency(1245800000 / 28456) == "$43,780"

    def test_half_rounds_away_from_zero(self):
        assert format_currency(0.5) == "$1"
        assert format_currency(2.5) == "$3"
        assert format_currency(Decimal("-2.5")) == "-$3"

    def test_negative_values(self):
        assert format_currency(-1234.5) == "-$1,235"

    def test_missing_values_render_as_zero(self):
        assert format_currency(None) == format_currency(0) == "$0"
        assert format_currency(float("nan")) == "$0"
        assert format_currency(float("inf")) == "$0"


class TestFormatNumber:
    def test_grouping(self):
        assert format_number(28456) == "28,456"

    def test_rounds_fractions(self):
        assert format_number(1234.5) == "1,235"

    def test_missing_values_render_as_zero(self):
        assert format_number(None) == format_number(0) == "0"


class TestFormatPercentage:
    def test_one_decimal_place(self):
        assert format_percentage(12.5) == "12.5%"
        assert format_percentage(187.3) == "187.3%"
        assert format_percentage(26) == "26.0%"

    def test_missing_values_render_as_zero(self):
        assert format_percentage(None) == format_percentage(0) == "0.0%"

    def test_negative_zero_is_normalized(self):
        assert format_percentage(-0.04) == "0.0%"


class TestComputeShare:
    def test_supplier_share(self):
        share = compute_share(245000000, 1245800000)
        assert share == pytest.approx(19.6661, rel=1e-4)
        assert format_percentage(share) == "19.7%"

    def test_zero_total(self):
        assert compute_share(5, 0) == 0.0
        assert compute_share(5, None) == 0.0

    def test_non_finite_entity_value(self):
        assert compute_share(float("nan"), 100) == 0.0

    @given(
        total=st.floats(min_value=0.01, max_value=1e12, allow_nan=False),
        fraction=st.floats(min_value=0.0, max_value=1.0),
    )
    def test_share_is_bounded(self, total, fraction):
        share = compute_share(total * fraction, total)
        assert math.isfinite(share)
        assert 0.0 <= share <= 100.0 + 1e-9

    @given(value=st.one_of(st.none(), st.floats(allow_nan=True, allow_infinity=True)))
    def test_formatters_are_total(self, value):
        assert format_currency(value).lstrip("-").startswith("$")
        assert format_percentage(value).endswith("%")
        assert format_number(value)
