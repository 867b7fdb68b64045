"""
Automerge Converter - Convert between JSON values and Automerge binary documents.

Plain JSON data can be saved as an Automerge document and later re-opened
as a collaborative document, or read back as JSON.
"""

__version__ = "1.0.0"

from .codec import DocumentCodec
from .converter import (
    AutomergeConverter,
    automerge_to_json,
    check_repo_compatibility,
    json_to_automerge,
    json_to_repo_compatible,
    read_automerge_as_json,
    validate_automerge_binary,
    write_json_as_automerge,
)
from .probe import BinaryProbe
from .types import (
    ConversionError,
    ConversionOptions,
    CrdtEngineInterface,
    DecodeError,
    DecodeResult,
    EncodeError,
    ValidationError,
)
from .utils.validation import ValidationUtils

__all__ = [
    "AutomergeConverter",
    "DocumentCodec",
    "BinaryProbe",
    "ValidationUtils",
    "ConversionOptions",
    "CrdtEngineInterface",
    "DecodeResult",
    "ConversionError",
    "ValidationError",
    "EncodeError",
    "DecodeError",
    "json_to_automerge",
    "automerge_to_json",
    "json_to_repo_compatible",
    "validate_automerge_binary",
    "check_repo_compatibility",
    "write_json_as_automerge",
    "read_automerge_as_json",
]
