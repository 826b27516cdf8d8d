"""
Test configuration models and loaders for the trade report generator.
"""

import json

import pytest
from pydantic import ValidationError

from trade_report.config.models import (
    LoggingConfig,
    PlanConfig,
    RecordsConfig,
    ReportConfig,
)
from trade_report.config.settings import (
    config_search_paths,
    get_config_from_env,
    load_config,
    load_config_with_fallback,
)

_ENV_VARS = (
    "TRADE_REPORT_CONFIG_FILE",
    "TRADE_REPORT_SEED",
    "TRADE_REPORT_TRANSACTION_COUNT",
    "TRADE_REPORT_BATCH_SIZE",
    "TRADE_REPORT_EXPECTED_SLIDES",
    "TRADE_REPORT_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove trade report environment variables for the test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestRecordsConfig:
    """Test shipment record configuration validation."""

    def test_defaults(self):
        config = RecordsConfig()
        assert config.transaction_count == 2340
        assert config.batch_size == 10
        assert config.start_date == "2023-01-01"
        assert config.end_date == "2023-12-31"
        assert config.quantity_min == 100
        assert config.quantity_max == 10099

    def test_zero_transactions_allowed(self):
        assert RecordsConfig(transaction_count=0).transaction_count == 0

    def test_batch_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            RecordsConfig(batch_size=0)

    def test_invalid_date_format(self):
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            RecordsConfig(start_date="01/01/2023")

    def test_inverted_date_range(self):
        with pytest.raises(ValidationError, match="end_date"):
            RecordsConfig(start_date="2023-06-01", end_date="2023-01-01")

    def test_inverted_quantity_range(self):
        with pytest.raises(ValidationError, match="quantity_max"):
            RecordsConfig(quantity_min=500, quantity_max=100)


class TestPlanAndLoggingConfig:
    def test_plan_defaults(self):
        config = PlanConfig()
        assert config.expected_slides == 297
        assert config.shipment_start_id == 67

    def test_log_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestReportConfig:
    def test_defaults(self):
        config = ReportConfig()
        assert config.seed is None
        assert config.records.transaction_count == 2340
        assert config.plan.expected_slides == 297

    def test_from_file(self, temp_config_file):
        config = ReportConfig.from_file(temp_config_file)
        assert config.seed == 42
        assert config.records.batch_size == 10

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ReportConfig.from_file(tmp_path / "missing.json")

    def test_from_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            ReportConfig.from_file(path)

    def test_to_file_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        ReportConfig(seed=7).to_file(path)
        assert json.loads(path.read_text())["seed"] == 7
        assert ReportConfig.from_file(path).seed == 7


class TestSettings:
    def test_load_config_from_directory(self, tmp_path, sample_config_data):
        (tmp_path / "config.json").write_text(json.dumps(sample_config_data))
        assert load_config(tmp_path).seed == 42

    def test_load_config_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        with pytest.raises(FileNotFoundError, match="config.json"):
            load_config()

    def test_search_order(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        assert config_search_paths("report.json") == [
            tmp_path / "report.json",
            tmp_path / "config" / "report.json",
            tmp_path / "home" / ".config" / "trade_report" / "report.json",
        ]

    def test_load_config_from_user_dir(self, tmp_path, monkeypatch, sample_config_data):
        user_dir = tmp_path / "home" / ".config" / "trade_report"
        user_dir.mkdir(parents=True)
        (user_dir / "config.json").write_text(json.dumps(sample_config_data))
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        assert load_config().seed == 42

    def test_working_directory_wins(self, tmp_path, monkeypatch, sample_config_data):
        user_dir = tmp_path / "home" / ".config" / "trade_report"
        user_dir.mkdir(parents=True)
        (user_dir / "config.json").write_text(json.dumps({**sample_config_data, "seed": 1}))
        (tmp_path / "config.json").write_text(json.dumps(sample_config_data))
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        assert load_config().seed == 42

    def test_env_not_set(self, clean_env):
        assert get_config_from_env() is None

    def test_env_overrides(self, clean_env):
        clean_env.setenv("TRADE_REPORT_SEED", "11")
        clean_env.setenv("TRADE_REPORT_TRANSACTION_COUNT", "25")
        clean_env.setenv("TRADE_REPORT_LOG_LEVEL", "warning")

        config = get_config_from_env()

        assert config.seed == 11
        assert config.records.transaction_count == 25
        assert config.records.batch_size == 10
        assert config.logging.level == "WARNING"

    def test_env_config_file(self, clean_env, temp_config_file):
        clean_env.setenv("TRADE_REPORT_CONFIG_FILE", temp_config_file)
        assert get_config_from_env().seed == 42

    def test_env_invalid_value(self, clean_env):
        clean_env.setenv("TRADE_REPORT_BATCH_SIZE", "ten")
        with pytest.raises(ValueError, match="Invalid environment variable"):
            get_config_from_env()

    def test_fallback_to_defaults(self, clean_env):
        assert load_config_with_fallback() == ReportConfig()

    def test_fallback_prefers_explicit_path(self, clean_env, temp_config_file):
        clean_env.setenv("TRADE_REPORT_SEED", "11")
        assert load_config_with_fallback(temp_config_file).seed == 42
