"""
Trade Report Generator

Builds a fixed 297-slide trade intelligence report for one product:
- Normalization of the product/trade dataset into a ranked, formatted view
- Synthetic shipment records, batched across report slides
- A static slide plan validated before any slide is rendered
"""

__version__ = "1.0.0"
__author__ = "Trade Report"
