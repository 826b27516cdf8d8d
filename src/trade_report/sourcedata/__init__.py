"""
Source data for report generation.

Provides the sample product dataset and loaders that turn plain dicts or
JSON files into validated RawInput models.

## Usage

    from trade_report.sourcedata import load_sample_input, load_raw_input

    raw = load_sample_input()
    raw = load_raw_input("data/product.json")
"""

from .loader import load_raw_input, load_sample_input, parse_raw_input
from .sample_product import SAMPLE_PRODUCT

__all__ = ["SAMPLE_PRODUCT", "load_raw_input", "load_sample_input", "parse_raw_input"]
