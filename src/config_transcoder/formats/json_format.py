"""JSON (nested-object format) codec."""

import json
import logging
import math
from typing import Optional

from ..types import ErrorType, FormatCodecInterface, FormatTag, TranscodeError
from ..values import Value


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def _finite_or_null(data):
    """Replace NaN and infinite floats with None throughout plain data."""
    if isinstance(data, float) and not math.isfinite(data):
        return None
    if isinstance(data, dict):
        return {key: _finite_or_null(child) for key, child in data.items()}
    if isinstance(data, list):
        return [_finite_or_null(item) for item in data]
    return data


class JSONCodec(FormatCodecInterface):
    """
    Codec for JSON documents.

    Object member order is kept in both directions. ``NaN`` and
    ``Infinity`` are rejected on read; non-finite numbers are written as
    ``null``.
    """

    format_tag = FormatTag.JSON

    def __init__(self, indent: Optional[int] = 2, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON codec.

        Args:
            indent: Indentation for output; None writes compact JSON
            logger: Optional logger instance
        """
        self.indent = indent
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, text: str) -> Value:
        """
        Parse a JSON document.

        Raises:
            TranscodeError: If the text is empty or not valid JSON
        """
        if not text.strip():
            raise TranscodeError("JSON parsing failed: document is empty", ErrorType.PARSE)
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise TranscodeError(
                f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}",
                ErrorType.PARSE,
                context={"format": self.format_tag.value}
            ) from e
        except ValueError as e:
            raise TranscodeError(f"JSON parsing failed: {e}", ErrorType.PARSE) from e
        return Value.from_native(data)

    def serialize(self, value: Value) -> str:
        """
        Render a tree as JSON text without a trailing newline.

        Raises:
            TranscodeError: If the tree holds values with no JSON form
                (timestamps, binary)
        """
        separators = None if self.indent is not None else (",", ":")
        try:
            return json.dumps(
                _finite_or_null(value.to_native()),
                indent=self.indent,
                separators=separators,
                ensure_ascii=False,
                allow_nan=False
            )
        except (TypeError, ValueError) as e:
            raise TranscodeError(
                f"JSON serialization failed: {e}",
                ErrorType.SERIALIZATION,
                context={"format": self.format_tag.value}
            ) from e
