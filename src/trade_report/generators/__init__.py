"""
Generators module for synthetic trade data.

This module contains the shipment record generator used to populate the
shipment records section of the report.
"""

from .transactions import (
    PORTS_BY_COUNTRY,
    TransactionRecordGenerator,
    generate_transaction_records,
)

__all__ = [
    "TransactionRecordGenerator",
    "generate_transaction_records",
    "PORTS_BY_COUNTRY",
]
