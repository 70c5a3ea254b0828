"""Type inference for untyped flat-line values."""

import logging
import re
from typing import Optional

from .escaping import unescape_value
from .values import Value

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT = re.compile(
    r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII
)


class ScalarTypeDetector:
    """
    Recovers typed scalars from flat-line text.

    The flat-line format stores every value as text, so a string that looks
    like a boolean or a number comes back retyped (``"007"`` becomes the
    integer 7). That widening is inherent to the format.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the detector.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def infer(self, raw: str) -> Value:
        """
        Infer the typed value of a raw flat-line value.

        Order: empty -> Null, true/false (any case) -> Bool, 64-bit integer
        -> Number(int), float -> Number(float), anything else -> String
        after unescaping.

        Args:
            raw: Value text exactly as read from the line

        Returns:
            Scalar Value
        """
        if raw == "":
            return Value.null()

        lowered = raw.lower()
        if lowered == "true":
            return Value.boolean(True)
        if lowered == "false":
            return Value.boolean(False)

        integer = self._parse_int64(raw)
        if integer is not None:
            return Value.number(integer)

        if _FLOAT.fullmatch(raw):
            return Value.number(float(raw))

        return Value.string(unescape_value(raw))

    @staticmethod
    def _parse_int64(raw: str) -> Optional[int]:
        if not _INTEGER.fullmatch(raw):
            return None
        number = int(raw)
        if number < INT64_MIN or number > INT64_MAX:
            return None
        return number


_default_detector = ScalarTypeDetector()


def infer_scalar(raw: str) -> Value:
    """Infer a scalar with the shared default detector."""
    return _default_detector.infer(raw)
