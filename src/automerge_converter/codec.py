"""Document codec: the boundary between JSON values and binary documents."""

import logging
from typing import Any, Optional
from .types import (
    ConversionError,
    ConversionOptions,
    CrdtEngineInterface,
    DecodeError,
    DocumentCodecInterface,
    EncodeError,
    JsonValue,
    ValidationError,
)
from .utils.validation import ValidationUtils


INVALID_SHAPE_MESSAGE = "Invalid JSON object: must be a plain object or array"


class DocumentCodec(DocumentCodecInterface):
    """
    Encodes JSON values into binary documents and decodes them back.

    The codec holds no per-call state, so a single instance can be shared
    between threads. All document semantics live in the engine; the codec
    only runs the optional shape check and turns engine failures into
    EncodeError or DecodeError.
    """

    def __init__(self, engine: Optional[CrdtEngineInterface] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the codec.

        Args:
            engine: CRDT engine implementation (defaults to AutomergeEngine)
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        if engine is None:
            from .engines import AutomergeEngine
            engine = AutomergeEngine(self.logger)
        self.engine = engine

    def encode(self, value: Any, options: Optional[ConversionOptions] = None) -> bytes:
        """
        Encode a JSON value into a binary document.

        Args:
            value: JSON value to encode
            options: Conversion options (actor, validate_json)

        Returns:
            Bytes of the saved document

        Raises:
            ValidationError: If validation was requested and the value is not plain JSON
            EncodeError: If the engine cannot create or save the document
        """
        options = options or ConversionOptions()

        if options.validate_json and not ValidationUtils.is_valid_json(value):
            detail = ValidationUtils.describe_invalid(value)
            raise ValidationError(INVALID_SHAPE_MESSAGE, context={"detail": detail})

        try:
            doc = self.engine.create(value, options.actor)
            binary = self.engine.serialize(doc)
        except ConversionError:
            raise
        except Exception as e:
            raise EncodeError(f"Failed to encode document: {e}", context={"actor": options.actor}) from e

        self.logger.debug(f"Encoded document ({len(binary)} bytes, actor={options.actor})")
        return binary

    def decode(self, binary: bytes, options: Optional[ConversionOptions] = None) -> JsonValue:
        """
        Decode a binary document into a JSON value.

        Args:
            binary: Document bytes
            options: Conversion options (actor)

        Returns:
            Materialized JSON view of the document

        Raises:
            DecodeError: If the bytes are empty or the engine cannot load them
        """
        options = options or ConversionOptions()

        if not binary:
            raise DecodeError("Failed to decode document: input is empty", context={"size": 0})

        try:
            doc = self.engine.deserialize(binary, options.actor)
            value = self.engine.materialize(doc)
        except ConversionError as e:
            if isinstance(e, DecodeError):
                raise
            raise DecodeError(str(e), context=e.context) from e
        except Exception as e:
            raise DecodeError(
                f"Failed to decode document: {e}",
                context={"size": len(binary)}
            ) from e

        self.logger.debug(f"Decoded document ({len(binary)} bytes)")
        return value
