"""Flattening encoder: value tree to dotted key-path entries."""

import logging
from typing import Dict, List, Optional

from .keypath import extend_key, index_key
from .types import FlatEntry, ValueKind
from .values import Value, render_number


def render_scalar(value: Value) -> Optional[str]:
    """
    Render a scalar leaf as flat-line text.

    Args:
        value: Leaf value

    Returns:
        Text for NULL/BOOL/NUMBER/STRING leaves, None for any other kind
    """
    if value.kind == ValueKind.NULL:
        return ""
    if value.kind == ValueKind.BOOL:
        return "true" if value.data else "false"
    if value.kind == ValueKind.NUMBER:
        return render_number(value.data)
    if value.kind == ValueKind.STRING:
        return value.data
    return None


class Flattener:
    """
    Walks a value tree and emits one FlatEntry per scalar leaf.

    Entries come out in pre-order, following each mapping's declared key
    order. Empty containers emit nothing, so empty-container-ness does not
    survive flattening. String values are emitted raw; escaping belongs to
    the flat-line writer.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the flattener.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def flatten(self, tree: Value) -> List[FlatEntry]:
        """
        Flatten a value tree.

        Args:
            tree: Root of the tree

        Returns:
            Ordered list of FlatEntry
        """
        entries: List[FlatEntry] = []
        self._flatten_node(tree, "", entries)
        self.logger.debug(f"Flattened tree into {len(entries)} entries")
        return entries

    def flatten_to_dict(self, tree: Value) -> Dict[str, str]:
        """Flatten a tree into an insertion-ordered key -> text dict."""
        return {entry.key: entry.value for entry in self.flatten(tree)}

    def _flatten_node(self, node: Value, prefix: str, entries: List[FlatEntry]) -> None:
        if node.kind == ValueKind.MAPPING:
            for key, child in node.data.items():
                self._flatten_node(child, extend_key(prefix, key), entries)
        elif node.kind == ValueKind.SEQUENCE:
            for position, item in enumerate(node.data):
                self._flatten_node(item, index_key(prefix, position), entries)
        elif node.kind in (ValueKind.NULL, ValueKind.BOOL, ValueKind.NUMBER, ValueKind.STRING):
            entries.append(FlatEntry(key=prefix, value=render_scalar(node)))
        elif node.kind == ValueKind.TAGGED:
            self.logger.debug(
                f"Dropping leaf at '{prefix}': {type(node.data).__name__} has no flat-line representation"
            )
        else:
            raise ValueError(f"Unknown value kind: {node.kind!r}")


def flatten(tree: Value, logger: Optional[logging.Logger] = None) -> List[FlatEntry]:
    """Flatten a value tree with a default Flattener."""
    return Flattener(logger).flatten(tree)
