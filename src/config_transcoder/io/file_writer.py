"""File writer utilities for conversion output."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..types import ErrorType, TranscodeError


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


# Sampled once at import; os.umask has no read-only form.
_FILE_MODE = 0o666 & ~_current_umask()


class FileWriter:
    """
    File writer for conversion output.

    Handles directory management and atomic writes: content goes to a
    temporary file next to the destination and is renamed into place, so a
    failed write never leaves a partial output file.
    """

    def __init__(self, encoding: str = "utf-8", logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            encoding: Text encoding of output files
            logger: Optional logger instance
        """
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    def ensure_directory_exists(self, directory: Union[str, Path]) -> Path:
        """
        Ensure that a directory exists, creating it if necessary.

        Args:
            directory: Path to directory

        Returns:
            The directory as a Path

        Raises:
            TranscodeError: If directory creation fails
        """
        directory_path = Path(directory)
        try:
            directory_path.mkdir(parents=True, exist_ok=True)

            # Check if directory is writable
            if not os.access(directory_path, os.W_OK):
                raise TranscodeError(
                    f"Directory {directory_path} is not writable",
                    ErrorType.PATH,
                    context={"path": str(directory_path)}
                )

        except OSError as e:
            raise TranscodeError(
                f"Failed to create directory {directory_path}: {str(e)}",
                ErrorType.PATH,
                context={"path": str(directory_path)}
            ) from e
        return directory_path

    def write_text(self, path: Union[str, Path], content: str) -> Path:
        """
        Write text to a file atomically.

        Args:
            path: Destination file
            content: Full file content

        Returns:
            The destination as a Path

        Raises:
            TranscodeError: If the content cannot be written
        """
        file_path = Path(path)
        temp_name = None
        try:
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{file_path.name}.", suffix=".tmp", dir=str(file_path.parent)
            )
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
            os.chmod(temp_name, _FILE_MODE)
            os.replace(temp_name, file_path)
            temp_name = None
        except (OSError, UnicodeEncodeError) as e:
            raise TranscodeError(
                f"Failed to write {file_path}: {e}",
                ErrorType.OUTPUT_WRITE,
                context={"path": str(file_path)}
            ) from e
        finally:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)

        self.logger.debug(f"Wrote {len(content)} characters to {file_path}")
        return file_path
