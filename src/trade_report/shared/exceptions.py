"""
Custom exceptions for the trade report generator.

Every error raised here aborts the report run that triggers it. Each class
keeps the diagnostic context (slide id, rank, list length, expected and
actual counts) as attributes and folds it into the message.
"""

from typing import Any


class TradeReportException(Exception):
    """Base exception for all trade report errors."""

    pass


class InvalidInputError(TradeReportException):
    """Exception raised when the raw product dataset is malformed or incomplete."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        invalid_value: Any | None = None,
        validation_errors: list[str] | None = None,
    ):
        self.field = field
        self.invalid_value = invalid_value
        self.validation_errors = validation_errors or []

        error_parts = [message]

        if field:
            error_parts.append(f"Field: {field}")

        if invalid_value is not None:
            error_parts.append(f"Value: {invalid_value}")

        if validation_errors:
            error_parts.extend(
                [f"Validation error: {error}" for error in validation_errors]
            )

        super().__init__(" | ".join(error_parts))


class RankNotFoundError(TradeReportException):
    """Exception raised when a slide references a rank beyond a ranked list."""

    def __init__(
        self,
        list_name: str,
        rank: int,
        length: int,
        slide_id: int | None = None,
    ):
        self.list_name = list_name
        self.rank = rank
        self.length = length
        self.slide_id = slide_id

        message = (
            f"Rank {rank} not found in '{list_name}' "
            f"(list has {length} entries)"
        )

        if slide_id is not None:
            message = f"Slide {slide_id}: {message}"

        super().__init__(message)


class StructureDeviationError(TradeReportException):
    """Exception raised when the slide count deviates from the declared target."""

    def __init__(self, expected: int, actual: int, stage: str = "plan"):
        self.expected = expected
        self.actual = actual
        self.stage = stage

        super().__init__(
            f"Structure deviation detected during {stage}: "
            f"expected {expected} slides, got {actual}"
        )


class UnknownSlideKindError(TradeReportException):
    """Exception raised when no renderer is registered for a slide kind."""

    def __init__(self, kind: Any, slide_id: int | None = None):
        self.kind = kind
        self.slide_id = slide_id

        message = f"No renderer registered for slide kind '{getattr(kind, 'value', kind)}'"

        if slide_id is not None:
            message = f"Slide {slide_id}: {message}"

        super().__init__(message)
