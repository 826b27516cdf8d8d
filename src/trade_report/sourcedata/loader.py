"""Loaders for the product/trade dataset."""

import copy
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from trade_report.shared.exceptions import InvalidInputError
from trade_report.shared.models import RawInput

from .sample_product import SAMPLE_PRODUCT


def parse_raw_input(data: dict[str, Any]) -> RawInput:
    """
    Validate a dataset dict into a RawInput.

    Raises:
        InvalidInputError: If the dict does not match the RawInput schema
    """
    try:
        return RawInput.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise InvalidInputError(
            "Product dataset failed validation", validation_errors=errors
        ) from e


def load_raw_input(file_path: str | Path) -> RawInput:
    """
    Load a dataset from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidInputError: If the JSON is malformed or fails validation
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Product dataset not found: {file_path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON in product dataset: {e}") from e

    if not isinstance(data, dict):
        raise InvalidInputError("Product dataset must be a JSON object")

    return parse_raw_input(data)


def load_sample_input() -> RawInput:
    """The bundled Paclitaxel sample as a RawInput."""
    return parse_raw_input(copy.deepcopy(SAMPLE_PRODUCT))
