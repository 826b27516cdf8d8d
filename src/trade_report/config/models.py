"""
Configuration models for the trade report generator.

These models define the structure and validation for the report config.json
file: synthetic record volume, slide plan targets and logging.
"""

import json
import logging
from datetime import date
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class RecordsConfig(BaseModel):
    """Configuration for synthetic shipment record generation."""

    transaction_count: int = Field(
        2340, ge=0, description="Number of synthetic shipment records to generate"
    )
    batch_size: int = Field(
        10, gt=0, description="Number of shipment records shown per slide"
    )
    start_date: str = Field(
        "2023-01-01", description="Earliest shipment date (YYYY-MM-DD format)"
    )
    end_date: str = Field(
        "2023-12-31", description="Latest shipment date (YYYY-MM-DD format)"
    )
    quantity_min: int = Field(100, ge=0, description="Minimum shipment quantity (kg)")
    quantity_max: int = Field(
        10099, ge=0, description="Maximum shipment quantity (kg)"
    )
    price_variation: float = Field(
        0.3,
        ge=0.0,
        lt=2.0,
        description="Total width of the unit price band around the average price",
    )
    fallback_unit_price: float = Field(
        100.0,
        gt=0.0,
        description="Base unit price used when the product has no average price",
    )

    @field_validator("start_date", "end_date")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Validate ISO date format."""
        try:
            date.fromisoformat(v)
        except ValueError:
            raise ValueError("Dates must be in YYYY-MM-DD format")
        return v

    @model_validator(mode="after")
    def validate_ranges(self):
        """Ensure date and quantity ranges are not inverted."""
        if date.fromisoformat(self.end_date) < date.fromisoformat(self.start_date):
            raise ValueError("end_date must not be before start_date")
        if self.quantity_max < self.quantity_min:
            raise ValueError("quantity_max must be >= quantity_min")
        return self


class PlanConfig(BaseModel):
    """Configuration for the slide plan."""

    expected_slides: int = Field(
        297, gt=0, description="Exact number of slides the report must contain"
    )
    shipment_start_id: int = Field(
        67, gt=0, description="Slide id of the first shipment records slide"
    )


class LoggingConfig(BaseModel):
    """Configuration for structured logging."""

    level: str = Field("INFO", description="Root log level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate that the level is a known logging level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


class ReportConfig(BaseModel):
    """Main configuration model for the trade report generator."""

    seed: int | None = Field(
        None,
        ge=0,
        le=2**32 - 1,
        description="Random seed for reproducible records (None = unseeded)",
    )
    records: RecordsConfig = Field(default_factory=RecordsConfig)
    plan: PlanConfig = Field(default_factory=PlanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, file_path: str | Path) -> "ReportConfig":
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the configuration JSON file

        Returns:
            ReportConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the JSON is invalid or doesn't match the schema
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            with path.open("r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}")

        return cls(**data)

    def to_file(self, file_path: str | Path) -> None:
        """
        Save configuration to a JSON file.

        Args:
            file_path: Path where to save the configuration file
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w") as f:
            json.dump(self.model_dump(), f, indent=2)
