"""
Pytest configuration and fixtures for trade report generator tests.

Provides the sample product dataset, small hand-built datasets and seeded
random sources.
"""

import copy
import json
import logging
import random
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for local test runs without installation
_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from trade_report.config.models import RecordsConfig, ReportConfig
from trade_report.shared.logging_config import PACKAGE_LOGGER, JsonLineHandler
from trade_report.shared.models import RawInput
from trade_report.sourcedata.sample_product import SAMPLE_PRODUCT


@pytest.fixture(autouse=True)
def restore_package_logging():
    """Undo log level and handler changes made by report runs."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if isinstance(handler, JsonLineHandler):
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def sample_product_data() -> dict:
    """The bundled Paclitaxel dataset as a mutable dict."""
    return copy.deepcopy(SAMPLE_PRODUCT)


@pytest.fixture
def sample_raw(sample_product_data) -> RawInput:
    """The bundled Paclitaxel dataset as a RawInput."""
    return RawInput.model_validate(sample_product_data)


@pytest.fixture
def small_raw() -> RawInput:
    """Small dataset with two suppliers and three buyers."""
    return RawInput.model_validate(
        {
            "name": "Widget",
            "hsCode": "8471300000",
            "avgPrice": 200.0,
            "totalRecords": 100,
            "totalValue": 1000000,
            "topSuppliers": [
                {"name": "Acme Corp", "country": "USA", "value": 400000},
                {"name": "Globex", "country": "India", "value": 250000},
            ],
            "topBuyers": [
                {"name": "Initech", "country": "Germany", "value": 300000},
                {"name": "Umbrella", "country": "UK", "value": 200000},
                {"name": "Hooli", "country": "USA", "value": 100000},
            ],
            "importingCountries": [
                {"country": "United States", "value": 500000, "share": 50.0, "shipments": 40},
                {"country": "Germany", "value": 300000, "share": 30.0, "shipments": 0},
            ],
        }
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def records_config() -> RecordsConfig:
    """Record settings for a short 25-record run."""
    return RecordsConfig(transaction_count=25, batch_size=10)


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data for testing."""
    return {
        "seed": 42,
        "records": {"transaction_count": 2340, "batch_size": 10},
        "plan": {"expected_slides": 297, "shipment_start_id": 67},
        "logging": {"level": "INFO"},
    }


@pytest.fixture
def seeded_config() -> ReportConfig:
    """Default report configuration with a fixed seed."""
    return ReportConfig(seed=42)


@pytest.fixture
def temp_config_file(sample_config_data) -> str:
    """Create a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".json", delete=False
    ) as temp_file:
        json.dump(sample_config_data, temp_file)
        temp_path = temp_file.name

    yield temp_path

    # Cleanup
    Path(temp_path).unlink(missing_ok=True)
