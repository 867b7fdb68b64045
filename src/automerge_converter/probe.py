"""Safe checks for untrusted binary documents."""

import logging
from typing import Optional
from .codec import DocumentCodec
from .types import ConversionOptions, DecodeError, DecodeResult


class BinaryProbe:
    """Turns decode failures into results so callers can branch on validity."""

    def __init__(self, codec: Optional[DocumentCodec] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.codec = codec or DocumentCodec(logger=self.logger)

    def try_decode(self, binary: bytes, options: Optional[ConversionOptions] = None) -> DecodeResult:
        """
        Decode without raising.

        Args:
            binary: Document bytes
            options: Conversion options

        Returns:
            DecodeResult holding either the value or the DecodeError
        """
        try:
            value = self.codec.decode(binary, options)
        except DecodeError as e:
            self.logger.debug(f"Binary rejected: {e}")
            return DecodeResult(success=False, error=e)
        return DecodeResult(success=True, value=value)

    def is_valid_binary(self, binary: bytes) -> bool:
        """Return True if the engine can materialize a document from binary."""
        return self.try_decode(binary).success

    def check_compatibility(self, binary: bytes) -> bool:
        """
        Check that binary survives a load/save/load cycle unchanged.

        This is what a document store does on import: it loads the bytes,
        keeps its own saved copy and opens that copy later.

        Args:
            binary: Document bytes

        Returns:
            True if the reloaded document materializes to the same value
        """
        first = self.try_decode(binary)
        if not first.success:
            return False

        engine = self.codec.engine
        try:
            resaved = engine.serialize(engine.deserialize(binary))
        except Exception as e:
            self.logger.warning(f"Compatibility check failed while re-saving: {e}")
            return False

        second = self.try_decode(resaved)
        return second.success and second.value == first.value
