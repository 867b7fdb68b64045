"""File reader for binary documents and JSON text."""

import logging
from pathlib import Path
from typing import Optional, Union


class FileReader:
    """
    Reads converter input from the filesystem.

    OSError subclasses (FileNotFoundError, PermissionError,
    IsADirectoryError) propagate unchanged to the caller.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def read_bytes(self, path: Union[str, Path]) -> bytes:
        """
        Read a file as bytes.

        Args:
            path: File path

        Returns:
            File contents
        """
        data = Path(path).read_bytes()
        self.logger.debug(f"Read {len(data)} bytes from {path}")
        return data

    def read_text(self, path: Union[str, Path]) -> str:
        """Read a UTF-8 text file."""
        text = Path(path).read_text(encoding='utf-8')
        self.logger.debug(f"Read {len(text)} characters from {path}")
        return text
