"""Configuration models and loaders."""

from .models import LoggingConfig, PlanConfig, RecordsConfig, ReportConfig
from .settings import (
    config_search_paths,
    get_config_from_env,
    load_config,
    load_config_with_fallback,
)

__all__ = [
    "ReportConfig",
    "RecordsConfig",
    "PlanConfig",
    "LoggingConfig",
    "config_search_paths",
    "load_config",
    "get_config_from_env",
    "load_config_with_fallback",
]
