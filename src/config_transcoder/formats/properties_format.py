"""Flat-line (properties) format codec."""

import logging
from collections.abc import Mapping
from typing import Dict, Iterable, Optional, Tuple, Union

from ..escaping import escape_key, escape_value
from ..flatten import Flattener
from ..types import FlatEntry, FormatCodecInterface, FormatTag
from ..unflatten import Unflattener
from ..values import Value

_DELIMITERS = ("=", ":")
_COMMENT_MARKERS = ("#", "!")


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Split one trimmed content line into key and raw value.

    The key ends at the first unescaped ``=`` or ``:``. Inside the key a
    backslash takes the next character literally; leading spaces are
    skipped. The value is everything after the delimiter, escapes intact.

    Args:
        line: Content line, already trimmed

    Returns:
        (key, value) both trimmed, or None when the key is empty
    """
    key_chars = []
    value = ""
    escaped = False
    for position, char in enumerate(line):
        if escaped:
            key_chars.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _DELIMITERS:
            value = line[position + 1:]
            break
        elif char == " " and not key_chars:
            continue
        else:
            key_chars.append(char)

    key = "".join(key_chars).strip()
    if not key:
        return None
    return key, value.strip()


class PropertiesCodec(FormatCodecInterface):
    """
    Codec for ``key=value`` line files.

    Reading rebuilds nested mappings from dotted keys and infers scalar
    types from the text. Writing flattens the tree and emits the entries
    sorted by key, one per line, without a trailing newline.
    """

    format_tag = FormatTag.PROPERTIES

    def __init__(self, flattener: Optional[Flattener] = None,
                 unflattener: Optional[Unflattener] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the properties codec.

        Args:
            flattener: Optional Flattener used on write
            unflattener: Optional Unflattener used on read
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.flattener = flattener or Flattener(self.logger)
        self.unflattener = unflattener or Unflattener(logger=self.logger)

    def parse_entries(self, text: str) -> Dict[str, str]:
        """
        Read raw entries from properties text.

        Blank lines and lines starting with ``#`` or ``!`` are skipped,
        lines with an empty key are discarded and a repeated key keeps its
        last value.

        Args:
            text: Properties document

        Returns:
            Insertion-ordered dict of key -> raw value text
        """
        entries: Dict[str, str] = {}
        for number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip()
            if not line or line.startswith(_COMMENT_MARKERS):
                continue
            parsed = parse_line(line)
            if parsed is None:
                self.logger.debug(f"Skipping line {number}: empty key")
                continue
            key, value = parsed
            entries[key] = value
        return entries

    def parse(self, text: str) -> Value:
        """Parse properties text into a mapping tree."""
        return self.unflattener.unflatten(self.parse_entries(text))

    def write_entries(self, entries: Union[Mapping[str, str], Iterable[FlatEntry]]) -> str:
        """
        Render entries as properties text.

        Args:
            entries: Mapping of key -> text, or FlatEntry items (a repeated
                key keeps its last value)

        Returns:
            Sorted ``key=value`` lines joined by newlines
        """
        if isinstance(entries, Mapping):
            pairs = dict(entries)
        else:
            pairs = {entry.key: entry.value for entry in entries}
        return "\n".join(
            f"{escape_key(key)}={escape_value(pairs[key])}"
            for key in sorted(pairs)
        )

    def serialize(self, value: Value) -> str:
        """Flatten a tree and render it as sorted properties text."""
        return self.write_entries(self.flattener.flatten(value))
