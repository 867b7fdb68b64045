"""JSON parser with input validation."""

import json
import logging
from typing import Optional
from .types import ConversionError, ErrorType, JsonValue
from .error_handler import ErrorHandler


class JSONParser:
    """Parses JSON text into plain values ready for encoding."""

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> JsonValue:
        """
        Parse JSON text.

        Args:
            json_string: JSON string to parse

        Returns:
            Parsed value

        Raises:
            ConversionError: With ErrorType.SYNTAX if the text is not valid JSON
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            messages = [
                f"{error.message} ({error.location})" if error.location else error.message
                for error in validation_result.errors
            ]
            raise ConversionError(
                f"Invalid JSON input: {'; '.join(messages)}",
                ErrorType.SYNTAX,
                context={"errors": validation_result.errors}
            )

        for warning in validation_result.warnings:
            self.logger.warning(warning)

        data = json.loads(json_string)
        self.logger.debug(f"Parsed JSON with root type: {type(data).__name__}")
        return data
