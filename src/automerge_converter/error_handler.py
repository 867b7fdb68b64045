"""Error handling implementation for the Automerge converter."""

import logging
from typing import Optional
from .types import (
    ConversionError,
    ErrorResponse,
    ErrorType,
    ValidationIssue,
    ValidationResult,
)
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Error handler for converter operations.

    Validates JSON input text and maps conversion and filesystem errors to
    a suggested action for the user.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationIssue(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def handle_conversion_error(self, error: Exception) -> ErrorResponse:
        """
        Describe how to respond to a conversion or filesystem error.

        Args:
            error: ConversionError or OSError raised by a conversion

        Returns:
            ErrorResponse with recovery information
        """
        if isinstance(error, OSError):
            error_type = ErrorType.FILESYSTEM
        elif isinstance(error, ConversionError):
            error_type = error.error_type
        else:
            error_type = None

        self.logger.error(f"Conversion error: {error_type.value if error_type else 'unknown'} - {error}")

        if error_type == ErrorType.VALIDATION:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Remove dates, patterns, functions and other non-JSON values, "
                                 "or convert them to strings before encoding."
            )
        elif error_type == ErrorType.ENCODE:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check that the root is a JSON object, that the actor id is a hex string "
                                 "and that the data has no circular references."
            )
        elif error_type == ErrorType.DECODE:
            return ErrorResponse(
                can_recover=False,
                suggested_action="The input is not an Automerge document. "
                                 "Check that the file is complete and was written by a compatible encoder."
            )
        elif error_type == ErrorType.FILESYSTEM:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check that the path exists, that the directory is writable "
                                 "and that file permissions allow access."
            )
        elif error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Fix the JSON syntax at the reported line and column."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )
