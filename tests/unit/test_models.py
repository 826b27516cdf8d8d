"""Unit tests for raw input and view models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from trade_report.shared.models import (
    CountryFlow,
    RawInput,
    TradeEntity,
    TransactionRecord,
)


class TestRawInput:
    """Test loading of the product dataset."""

    def test_camel_case_keys(self, sample_raw):
        assert sample_raw.name == "Paclitaxel"
        assert sample_raw.hs_code == "2932999090"
        assert sample_raw.total_records == 28456
        assert sample_raw.total_value == 1245800000
        assert sample_raw.top_import_country.country == "United States"
        assert len(sample_raw.top_suppliers) == 15
        assert len(sample_raw.importing_countries) == 10
        assert len(sample_raw.exporting_countries) == 12

    def test_snake_case_keys(self):
        raw = RawInput(name="Widget", hs_code="1234", total_records=5)
        assert raw.hs_code == "1234"
        assert raw.total_records == 5

    def test_defaults_for_missing_fields(self):
        raw = RawInput()
        assert raw.name == "Unknown Product"
        assert raw.description == "Product description not available"
        assert raw.hs_code == "N/A"
        assert raw.category == "General"
        assert raw.top_suppliers == []
        assert raw.top_import_country.country == "Unknown"

    def test_empty_identity_strings_use_defaults(self):
        raw = RawInput.model_validate({"name": "", "hsCode": "  ", "category": None})
        assert raw.name == "Unknown Product"
        assert raw.hs_code == "N/A"
        assert raw.category == "General"

    def test_unknown_keys_are_ignored(self):
        raw = RawInput.model_validate({"name": "Widget", "unexpected": 1})
        assert not hasattr(raw, "unexpected")

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError):
            RawInput.model_validate({"totalValue": -1})


class TestRankedEntries:
    def test_country_flow_shipment_aliases(self):
        flow = CountryFlow.model_validate(
            {"country": "Japan", "value": 10, "share": 1.0, "shipmentCount": 7}
        )
        assert flow.shipments == 7

    def test_trade_entity_requires_name(self):
        with pytest.raises(ValidationError):
            TradeEntity(name="", country="USA", value=1)


class TestTransactionRecord:
    def test_record_is_frozen(self):
        record = TransactionRecord(
            id=1,
            date="2023-01-01",
            supplier_name="Acme",
            supplier_country="USA",
            buyer_name="Initech",
            buyer_country="Germany",
            quantity=10,
            unit_price=Decimal("2.50"),
            total_value=Decimal("25.00"),
            hs_code="N/A",
            loading_port="New York",
            discharge_port="Hamburg",
        )
        with pytest.raises(ValidationError):
            record.quantity = 11

    def test_id_is_one_based(self):
        with pytest.raises(ValidationError):
            TransactionRecord(
                id=0,
                date="2023-01-01",
                supplier_name="Acme",
                supplier_country="USA",
                buyer_name="Initech",
                buyer_country="Germany",
                quantity=1,
                unit_price=Decimal("1"),
                total_value=Decimal("1"),
                hs_code="N/A",
                loading_port="New York",
                discharge_port="Hamburg",
            )
