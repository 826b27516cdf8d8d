"""Aggregation of raw trade data into the normalized report view."""

from .aggregator import TradeDataProcessor, normalize, validate_raw_input

__all__ = ["TradeDataProcessor", "normalize", "validate_raw_input"]
