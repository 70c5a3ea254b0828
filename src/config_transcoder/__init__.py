"""
Config Transcoder - Convert configuration files between YAML, properties and JSON.

YAML and JSON convert into each other structurally. The properties format
is reached by flattening the tree into dotted keys and read back by
unflattening with type inference.
"""

from .flatten import Flattener, flatten
from .router import TranscodingRouter, detect_format, supported_output_formats
from .transcoder import ConfigTranscoder
from .types import ConvertOptions, ConvertResult, ErrorType, FlatEntry, FormatTag, TranscodeError, ValueKind
from .unflatten import Unflattener, unflatten
from .values import Value

__version__ = "1.0.0"
__all__ = [
    "ConfigTranscoder",
    "ConvertOptions",
    "ConvertResult",
    "ErrorType",
    "FlatEntry",
    "Flattener",
    "FormatTag",
    "TranscodeError",
    "TranscodingRouter",
    "Unflattener",
    "Value",
    "ValueKind",
    "detect_format",
    "flatten",
    "supported_output_formats",
    "unflatten",
]
