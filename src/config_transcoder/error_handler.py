"""Error handling implementation for the Config Transcoder."""

import logging
import os
import pathlib
from typing import Optional

from .types import (
    ConvertResult,
    ErrorType,
    FormatTag,
    TranscodeError,
    ValidationError,
    ValidationResult,
)


class ErrorHandler:
    """
    Error handler for conversion operations.

    Validates inputs before parsing and turns failures into failed
    ConvertResult values. Nothing is retried.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, text: str, format_tag: FormatTag) -> ValidationResult:
        """
        Cheap pre-parse checks of a source document.

        Args:
            text: Document text
            format_tag: Format the text is expected to be in

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not text.strip():
            if format_tag == FormatTag.JSON:
                errors.append(ValidationError(
                    type=ErrorType.PARSE,
                    message="JSON document is empty",
                    location="input"
                ))
            else:
                warnings.append(f"{format_tag.value} document is empty")

        if text.startswith("\ufeff"):
            warnings.append("Document starts with a byte order mark")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def validate_directory_path(self, path: str) -> ValidationResult:
        """
        Validate an output directory path.

        Args:
            path: Directory path to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not path:
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message="Directory path cannot be empty",
                location="path"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            resolved_path = pathlib.Path(path).resolve()

            if resolved_path.exists():
                if not resolved_path.is_dir():
                    errors.append(ValidationError(
                        type=ErrorType.PATH,
                        message="Path exists but is not a directory",
                        location="path"
                    ))
                elif not os.access(resolved_path, os.R_OK | os.W_OK):
                    errors.append(ValidationError(
                        type=ErrorType.PATH,
                        message="Directory is not readable/writable",
                        location="path"
                    ))

        except (OSError, ValueError) as e:
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message=f"Invalid directory path: {str(e)}",
                location="path"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def handle_error(self, error: TranscodeError) -> ConvertResult:
        """
        Turn a conversion error into a failed result.

        Args:
            error: TranscodeError raised during conversion

        Returns:
            Failed ConvertResult carrying the error message
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")
        return ConvertResult.failed(str(error))

    def handle_unexpected(self, error: Exception) -> ConvertResult:
        """Report an exception that is not a TranscodeError."""
        self.logger.exception(f"Unexpected error during conversion: {error}")
        return ConvertResult.failed(f"Unexpected error: {error}")

    def raise_if_invalid(self, result: ValidationResult, error_type: ErrorType) -> None:
        """
        Log warnings and raise on validation errors.

        Raises:
            TranscodeError: If the validation result is not valid
        """
        for warning in result.warnings:
            self.logger.warning(warning)
        if not result.is_valid:
            raise TranscodeError(
                "; ".join(error.message for error in result.errors),
                error_type,
                context={"locations": [error.location for error in result.errors]}
            )
