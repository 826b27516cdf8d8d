"""
Configuration loading for the trade report generator.

A config file is looked up in the working directory, its ``config/``
subdirectory and the per-user ``~/.config/trade_report`` directory, in that
order. Environment variables and built-in defaults back it up.
"""

import os
from pathlib import Path

from .models import ReportConfig

USER_CONFIG_DIR = Path(".config") / "trade_report"


def config_search_paths(config_name: str = "config.json") -> list[Path]:
    """Candidate config file locations, most specific first."""
    cwd = Path.cwd()
    return [
        cwd / config_name,
        cwd / "config" / config_name,
        Path.home() / USER_CONFIG_DIR / config_name,
    ]


def load_config(
    config_path: str | Path | None = None, config_name: str = "config.json"
) -> ReportConfig:
    """
    Load a ReportConfig from a file.

    Args:
        config_path: Config file, or a directory holding ``config_name``.
            Searched for with ``config_search_paths`` when None.
        config_name: File name used for directories and the search

    Raises:
        FileNotFoundError: If no config file exists at the resolved location
        ValueError: If the file is not a valid configuration
    """
    if config_path is None:
        candidates = config_search_paths(config_name)
        config_path = next((path for path in candidates if path.is_file()), None)
        if config_path is None:
            searched = ", ".join(str(path) for path in candidates)
            raise FileNotFoundError(f"No '{config_name}' found (searched {searched})")

    path = Path(config_path)
    if path.is_dir():
        path = path / config_name
    return ReportConfig.from_file(path)


def get_config_from_env() -> ReportConfig | None:
    """
    Try to load configuration from environment variables.

    Returns:
        ReportConfig if environment variables are set, None otherwise
    """
    config_file_env = os.getenv("TRADE_REPORT_CONFIG_FILE")
    if config_file_env:
        return load_config(config_file_env)

    env_vars = [
        "TRADE_REPORT_SEED",
        "TRADE_REPORT_TRANSACTION_COUNT",
        "TRADE_REPORT_BATCH_SIZE",
        "TRADE_REPORT_EXPECTED_SLIDES",
        "TRADE_REPORT_LOG_LEVEL",
    ]

    env_values = {key: os.getenv(key) for key in env_vars}
    if not any(env_values.values()):
        return None

    defaults = ReportConfig()
    try:
        seed = env_values["TRADE_REPORT_SEED"]
        config_data = {
            "seed": int(seed) if seed else None,
            "records": {
                "transaction_count": int(
                    env_values["TRADE_REPORT_TRANSACTION_COUNT"]
                    or defaults.records.transaction_count
                ),
                "batch_size": int(
                    env_values["TRADE_REPORT_BATCH_SIZE"]
                    or defaults.records.batch_size
                ),
            },
            "plan": {
                "expected_slides": int(
                    env_values["TRADE_REPORT_EXPECTED_SLIDES"]
                    or defaults.plan.expected_slides
                ),
            },
            "logging": {
                "level": env_values["TRADE_REPORT_LOG_LEVEL"]
                or defaults.logging.level,
            },
        }

        return ReportConfig(**config_data)

    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid environment variable configuration: {e}")


def load_config_with_fallback(config_path: str | Path | None = None) -> ReportConfig:
    """
    Load configuration with fallback to environment variables and defaults.

    Priority order:
    1. Explicit config file path
    2. Environment variable TRADE_REPORT_CONFIG_FILE
    3. Individual environment variables
    4. Built-in defaults

    Args:
        config_path: Optional explicit path to config file

    Returns:
        ReportConfig: Loaded configuration

    Raises:
        FileNotFoundError: If an explicit config path does not exist
    """
    if config_path:
        return load_config(config_path)

    env_config = get_config_from_env()
    if env_config:
        return env_config

    return ReportConfig()
