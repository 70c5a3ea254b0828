"""File reader for configuration sources."""

import logging
from pathlib import Path
from typing import Optional, Union

from ..types import ErrorType, TranscodeError


class FileReader:
    """Reads configuration sources as text."""

    def __init__(self, encoding: str = "utf-8", logger: Optional[logging.Logger] = None):
        """
        Initialize the file reader.

        Args:
            encoding: Text encoding of source files
            logger: Optional logger instance
        """
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    def read_text(self, path: Union[str, Path]) -> str:
        """
        Read a whole source file.

        Args:
            path: File to read

        Returns:
            Decoded file content

        Raises:
            TranscodeError: If the file cannot be opened, read or decoded
        """
        file_path = Path(path)
        try:
            content = file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise TranscodeError(
                f"Cannot read {file_path}: {e}",
                ErrorType.INPUT_UNREADABLE,
                context={"path": str(file_path)}
            ) from e
        self.logger.debug(f"Read {len(content)} characters from {file_path}")
        return content
