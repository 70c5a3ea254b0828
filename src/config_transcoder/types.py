"""Core type definitions for the Config Transcoder."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .values import Value


class FormatTag(Enum):
    """Enumeration of supported configuration formats."""
    YAML = "yaml"
    PROPERTIES = "properties"
    JSON = "json"

    @classmethod
    def from_extension(cls, extension: str) -> Optional["FormatTag"]:
        """
        Map a file extension to its format tag.

        Args:
            extension: Extension with or without the leading dot

        Returns:
            Matching FormatTag, or None for unknown extensions
        """
        ext = extension.lower().lstrip(".")
        if ext == "yml":
            ext = "yaml"
        for tag in cls:
            if tag.value == ext:
                return tag
        return None


class ValueKind(Enum):
    """Enumeration of value model kinds."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    TAGGED = "tagged"


class ErrorType(Enum):
    """Enumeration of error types."""
    INPUT_UNREADABLE = "input_unreadable"
    PARSE = "parse"
    UNSUPPORTED = "unsupported"
    SERIALIZATION = "serialization"
    OUTPUT_WRITE = "output_write"
    PATH = "path"


@dataclass
class FlatEntry:
    """One leaf of a flattened tree."""
    key: str
    value: str


@dataclass
class ConvertOptions:
    """Options for a single file conversion."""
    output_format: str


@dataclass
class ConvertResult:
    """Result of a file conversion."""
    success: bool
    output_path: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self):
        if self.output_path is not None and self.error is not None:
            raise ValueError("ConvertResult cannot carry both an output path and an error")

    @classmethod
    def ok(cls, output_path: str) -> "ConvertResult":
        return cls(success=True, output_path=output_path)

    @classmethod
    def failed(cls, error: str) -> "ConvertResult":
        return cls(success=False, error=error)


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


class TranscodeError(Exception):
    """Custom exception for conversion errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class FormatCodecInterface(ABC):
    """Abstract interface for a configuration format codec."""

    format_tag: FormatTag

    @abstractmethod
    def parse(self, text: str) -> "Value":
        """Parse document text into a value tree."""
        pass

    @abstractmethod
    def serialize(self, value: "Value") -> str:
        """Render a value tree as document text."""
        pass


class ConfigTranscoderInterface(ABC):
    """Abstract interface for the Config Transcoder."""

    @abstractmethod
    def convert_file(self, input_path: str, output_dir: str, options: ConvertOptions) -> ConvertResult:
        """Convert one configuration file into the requested format."""
        pass

    @abstractmethod
    async def convert_files(
        self,
        input_paths: List[str],
        output_dir: str,
        options: ConvertOptions
    ) -> List[ConvertResult]:
        """Convert several files independently."""
        pass
