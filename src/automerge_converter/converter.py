"""Main converter between JSON values and Automerge binary documents."""

import asyncio
import logging
from concurrent.futures import Executor
from pathlib import Path
from typing import Any, Optional, Union
from .types import ConversionOptions, CrdtEngineInterface, JsonValue
from .codec import DocumentCodec
from .probe import BinaryProbe
from .io import FileReader, FileWriter
from .profiler import PerformanceProfiler


class AutomergeConverter:
    """
    Converts JSON values to Automerge documents and back.

    Wraps the codec, the binary probe and the file reader/writer. File
    operations are async: the blocking read or write runs in an executor
    so independent conversions can proceed concurrently.
    """

    def __init__(self, engine: Optional[CrdtEngineInterface] = None,
                 logger: Optional[logging.Logger] = None,
                 executor: Optional[Executor] = None):
        """
        Initialize the converter.

        Args:
            engine: CRDT engine implementation (defaults to AutomergeEngine)
            logger: Optional logger instance
            executor: Executor for file I/O (None uses the event loop default)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.executor = executor

        self.codec = DocumentCodec(engine, self.logger)
        self.probe = BinaryProbe(self.codec, self.logger)
        self.file_reader = FileReader(self.logger)
        self.file_writer = FileWriter(self.logger)
        self.profiler = PerformanceProfiler(self.logger)

    def json_to_automerge(self, value: Any, options: Optional[ConversionOptions] = None) -> bytes:
        """
        Convert a JSON value to Automerge binary format.

        Args:
            value: The JSON value to convert
            options: Optional conversion settings

        Returns:
            Bytes of the saved Automerge document
        """
        with self.profiler.profile_operation("json_to_automerge") as session:
            binary = self.codec.encode(value, options)
            session.output_size = len(binary)
        return binary

    def automerge_to_json(self, binary: bytes, options: Optional[ConversionOptions] = None) -> JsonValue:
        """
        Convert Automerge binary format to a JSON value.

        Args:
            binary: The Automerge binary data
            options: Optional conversion settings

        Returns:
            The JSON value held by the document
        """
        with self.profiler.profile_operation("automerge_to_json", len(binary)):
            value = self.codec.decode(binary, options)
        return value

    def json_to_repo_compatible(self, value: Any, options: Optional[ConversionOptions] = None) -> bytes:
        """Create a binary that a document repository can import directly."""
        # Repositories import the same bytes a plain save produces.
        return self.json_to_automerge(value, options)

    def validate_automerge_binary(self, binary: bytes) -> bool:
        """Return True if binary can be loaded as a document."""
        return self.probe.is_valid_binary(binary)

    def check_repo_compatibility(self, binary: bytes) -> bool:
        """Return True if binary survives a load/save/load cycle unchanged."""
        return self.probe.check_compatibility(binary)

    async def write_json_as_automerge(self, value: Any, file_path: Union[str, Path],
                                      options: Optional[ConversionOptions] = None) -> int:
        """
        Convert a JSON value and write the binary to a file.

        Args:
            value: The JSON value to write
            file_path: Path where to write the binary file
            options: Optional conversion settings

        Returns:
            Number of bytes written
        """
        binary = self.json_to_automerge(value, options)
        loop = asyncio.get_running_loop()
        written = await loop.run_in_executor(
            self.executor, self.file_writer.write_bytes, file_path, binary
        )
        self.logger.info(f"Wrote Automerge document ({written} bytes) to {file_path}")
        return written

    async def read_automerge_as_json(self, file_path: Union[str, Path],
                                     options: Optional[ConversionOptions] = None) -> JsonValue:
        """
        Read an Automerge binary file and convert it to JSON.

        Args:
            file_path: Path to the Automerge binary file
            options: Optional conversion settings

        Returns:
            The JSON value held by the document
        """
        loop = asyncio.get_running_loop()
        binary = await loop.run_in_executor(self.executor, self.file_reader.read_bytes, file_path)
        value = self.automerge_to_json(binary, options)
        self.logger.info(f"Read Automerge document ({len(binary)} bytes) from {file_path}")
        return value


_default_converter: Optional[AutomergeConverter] = None


def get_converter() -> AutomergeConverter:
    """Get the shared converter backed by the Automerge engine."""
    global _default_converter
    if _default_converter is None:
        _default_converter = AutomergeConverter()
    return _default_converter


def json_to_automerge(value: Any, options: Optional[ConversionOptions] = None) -> bytes:
    return get_converter().json_to_automerge(value, options)


def automerge_to_json(binary: bytes, options: Optional[ConversionOptions] = None) -> JsonValue:
    return get_converter().automerge_to_json(binary, options)


def json_to_repo_compatible(value: Any, options: Optional[ConversionOptions] = None) -> bytes:
    return get_converter().json_to_repo_compatible(value, options)


def validate_automerge_binary(binary: bytes) -> bool:
    return get_converter().validate_automerge_binary(binary)


def check_repo_compatibility(binary: bytes) -> bool:
    return get_converter().check_repo_compatibility(binary)


async def write_json_as_automerge(value: Any, file_path: Union[str, Path],
                                  options: Optional[ConversionOptions] = None) -> int:
    return await get_converter().write_json_as_automerge(value, file_path, options)


async def read_automerge_as_json(file_path: Union[str, Path],
                                 options: Optional[ConversionOptions] = None) -> JsonValue:
    return await get_converter().read_automerge_as_json(file_path, options)
