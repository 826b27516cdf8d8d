"""Unit tests for the sample dataset and dataset loaders."""

import json

import pytest

from trade_report.shared.exceptions import InvalidInputError
from trade_report.sourcedata import (
    SAMPLE_PRODUCT,
    load_raw_input,
    load_sample_input,
    parse_raw_input,
)


class TestSampleInput:
    def test_sample_loads(self):
        raw = load_sample_input()
        assert raw.name == "Paclitaxel"
        assert len(raw.top_buyers) == 15
        assert len(raw.price_history) == 12
        assert len(raw.volume_history) == 12

    def test_sample_dict_is_not_mutated(self):
        raw = load_sample_input()
        raw.top_suppliers.clear()
        assert len(SAMPLE_PRODUCT["topSuppliers"]) == 15


class TestLoadRawInput:
    def test_json_file(self, tmp_path):
        path = tmp_path / "product.json"
        path.write_text(json.dumps(SAMPLE_PRODUCT))
        assert load_raw_input(path).hs_code == "2932999090"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_raw_input(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "product.json"
        path.write_text("{")
        with pytest.raises(InvalidInputError, match="Invalid JSON"):
            load_raw_input(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "product.json"
        path.write_text("[]")
        with pytest.raises(InvalidInputError, match="JSON object"):
            load_raw_input(path)

    def test_validation_errors_are_wrapped(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_raw_input({"totalValue": -5})
        assert exc_info.value.validation_errors
        assert "greater than or equal to 0" in exc_info.value.validation_errors[0]
