"""Unflattening decoder: dotted key-path entries back to a value tree."""

import logging
from typing import Mapping, Optional

from .keypath import split_key
from .type_inference import ScalarTypeDetector
from .types import ValueKind
from .values import Value


class Unflattener:
    """
    Rebuilds nested mappings from flat key -> text entries.

    Only mappings are rebuilt: ``list[0]`` stays a literal mapping key.
    When two keys disagree about whether a segment is a leaf or a
    container, the entry processed last decides.
    """

    def __init__(self, detector: Optional[ScalarTypeDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the unflattener.

        Args:
            detector: Optional ScalarTypeDetector used for leaf values
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.detector = detector or ScalarTypeDetector(self.logger)

    def unflatten(self, entries: Mapping[str, str]) -> Value:
        """
        Build a mapping tree from flat entries.

        Args:
            entries: Flat key -> raw value text, in processing order

        Returns:
            Root MAPPING value
        """
        root = Value.mapping()
        for flat_key, raw in entries.items():
            self._insert(root, flat_key, raw)
        self.logger.debug(f"Unflattened {len(entries)} entries into {len(root.data)} top-level keys")
        return root

    def _insert(self, root: Value, flat_key: str, raw: str) -> None:
        segments = split_key(flat_key)
        node = root
        for segment in segments[:-1]:
            child = node.data.get(segment)
            if child is None or child.kind != ValueKind.MAPPING:
                if child is not None:
                    self.logger.debug(f"Replacing {child.kind.value} at '{segment}' with a mapping for '{flat_key}'")
                child = Value.mapping()
                node.data[segment] = child
            node = child
        node.data[segments[-1]] = self.detector.infer(raw)


def unflatten(entries: Mapping[str, str], logger: Optional[logging.Logger] = None) -> Value:
    """Unflatten entries with a default Unflattener."""
    return Unflattener(logger=logger).unflatten(entries)
