"""Core type definitions for the Automerge converter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    VALIDATION = "validation"
    ENCODE = "encode"
    DECODE = "decode"
    FILESYSTEM = "filesystem"


@dataclass
class ConversionOptions:
    """Options shared by encode and decode."""
    actor: Optional[str] = None
    validate_json: bool = False


@dataclass
class ValidationIssue:
    """Validation issue details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationIssue]
    warnings: List[str] = field(default_factory=list)


@dataclass
class DecodeResult:
    """Outcome of a decode attempt that never raises."""
    success: bool
    value: Any = None
    error: Optional["DecodeError"] = None


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class ConversionError(Exception):
    """Base exception for conversion failures."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class ValidationError(ConversionError):
    """Raised when a value fails shape validation before encoding."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.VALIDATION, context)


class EncodeError(ConversionError):
    """Raised when the engine cannot build or save a document."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.ENCODE, context)


class DecodeError(ConversionError):
    """Raised when bytes cannot be loaded as a document."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.DECODE, context)


# Abstract base classes for interfaces

class CrdtEngineInterface(ABC):
    """
    Abstract interface for the CRDT engine.

    The converter never looks inside engine documents; it only creates,
    saves, loads and materializes them through these four calls.
    """

    @abstractmethod
    def create(self, value: Any, actor: Optional[str] = None) -> Any:
        """Create a fresh document seeded with value."""
        pass

    @abstractmethod
    def serialize(self, doc: Any) -> bytes:
        """Save a document to bytes."""
        pass

    @abstractmethod
    def deserialize(self, binary: bytes, actor: Optional[str] = None) -> Any:
        """Load a document from bytes."""
        pass

    @abstractmethod
    def materialize(self, doc: Any) -> JsonValue:
        """Return the plain JSON view of a document."""
        pass


class DocumentCodecInterface(ABC):
    """Abstract interface for the JSON/binary codec."""

    @abstractmethod
    def encode(self, value: Any, options: Optional[ConversionOptions] = None) -> bytes:
        """Encode a JSON value into a binary document."""
        pass

    @abstractmethod
    def decode(self, binary: bytes, options: Optional[ConversionOptions] = None) -> JsonValue:
        """Decode a binary document into a JSON value."""
        pass
