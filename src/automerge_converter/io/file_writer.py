"""File writer for binary documents and JSON output."""

import logging
from pathlib import Path
from typing import Optional, Union


class FileWriter:
    """
    Writes converter output to the filesystem.

    The destination directory must already exist; nothing is created on the
    caller's behalf. Concurrent writes to the same path are not serialized,
    the last completed write wins.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write_bytes(self, path: Union[str, Path], data: bytes) -> int:
        """
        Write bytes to a file, replacing any existing content.

        Args:
            path: Destination file path
            data: Bytes to write

        Returns:
            Number of bytes written

        Raises:
            OSError: If the directory is missing or not writable
        """
        file_path = Path(path)
        written = file_path.write_bytes(data)
        self.logger.debug(f"Wrote {written} bytes to {file_path}")
        return written

    def write_text(self, path: Union[str, Path], text: str) -> int:
        """
        Write UTF-8 text to a file.

        Returns:
            Number of bytes written
        """
        return self.write_bytes(path, text.encode('utf-8'))
