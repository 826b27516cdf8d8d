"""
Summary statistics for one batch of shipment records.

Averages are taken over the records actually present, so the short final
batch of a plan is summarized correctly.
"""

from collections.abc import Sequence
from decimal import Decimal

import pandas as pd
from pydantic import BaseModel, ConfigDict

from trade_report.shared.formatting import format_currency, format_number
from trade_report.shared.models import TransactionRecord


class BatchSummary(BaseModel):
    """Aggregates for a contiguous slice of shipment records."""

    model_config = ConfigDict(frozen=True)

    record_count: int
    total_value: Decimal
    total_quantity: int
    avg_unit_price: Decimal
    avg_quantity: float
    unique_suppliers: int
    unique_buyers: int
    unique_countries: int
    top_supplier_country: str | None
    top_buyer_country: str | None

    def formatted(self) -> dict[str, str]:
        return {
            "total_value": format_currency(self.total_value),
            "total_quantity": f"{format_number(self.total_quantity)} kg",
            "avg_unit_price": format_currency(self.avg_unit_price),
            "avg_quantity": f"{format_number(self.avg_quantity)} kg/record",
        }


def records_to_frame(records: Sequence[TransactionRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per record (columns follow TransactionRecord)."""
    columns = list(TransactionRecord.model_fields)
    return pd.DataFrame([record.model_dump() for record in records], columns=columns)


def _most_frequent(series: pd.Series) -> str | None:
    """Most frequent value; ties go to the value seen first."""
    if series.empty:
        return None
    counts = series.value_counts(sort=False)
    return str(counts.idxmax())


def summarize_batch(records: Sequence[TransactionRecord]) -> BatchSummary:
    """Compute value, quantity and coverage statistics for ``records``."""
    df = records_to_frame(records)
    record_count = len(df)

    # Decimal sums stay exact; pandas would coerce to float
    total_value = sum((record.total_value for record in records), Decimal("0"))
    total_quantity = int(df["quantity"].sum()) if record_count else 0

    avg_unit_price = total_value / total_quantity if total_quantity else Decimal("0")
    avg_quantity = total_quantity / record_count if record_count else 0.0

    countries = pd.concat([df["supplier_country"], df["buyer_country"]])

    return BatchSummary(
        record_count=record_count,
        total_value=total_value,
        total_quantity=total_quantity,
        avg_unit_price=avg_unit_price,
        avg_quantity=avg_quantity,
        unique_suppliers=int(df["supplier_name"].nunique()),
        unique_buyers=int(df["buyer_name"].nunique()),
        unique_countries=int(countries.nunique()),
        top_supplier_country=_most_frequent(df["supplier_country"]),
        top_buyer_country=_most_frequent(df["buyer_country"]),
    )
