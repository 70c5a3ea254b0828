"""Dotted key-path encoding for flattened configuration trees.

A flat key joins mapping keys with ``.`` and appends sequence positions as
``[i]`` directly to the preceding segment, e.g. ``servers[0].host``.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Union

_INDEX_SUFFIX = re.compile(r"\[(\d+)\]\Z")


@dataclass(frozen=True)
class KeySegment:
    """Step into a mapping by key."""
    name: str


@dataclass(frozen=True)
class IndexSegment:
    """Step into a sequence by position."""
    index: int


PathSegment = Union[KeySegment, IndexSegment]


def extend_key(prefix: str, name: str) -> str:
    """Append a mapping key; top-level keys get no leading dot."""
    if not prefix:
        return name
    return f"{prefix}.{name}"


def index_key(prefix: str, index: int) -> str:
    """Append a sequence position as a bracketed suffix."""
    return f"{prefix}[{index}]"


def encode_path(segments: Iterable[PathSegment]) -> str:
    """
    Encode path segments into a single flat key.

    Args:
        segments: Key and index segments from the root down

    Returns:
        Flat key such as ``a.b[0].c``
    """
    key = ""
    for segment in segments:
        if isinstance(segment, IndexSegment):
            key = index_key(key, segment.index)
        else:
            key = extend_key(key, segment.name)
    return key


def split_key(flat_key: str) -> List[str]:
    """
    Split a flat key on dots only.

    Bracketed positions stay part of the segment text, so ``list[0]`` is a
    plain mapping key for the unflattening decoder.
    """
    return flat_key.split(".")


def decode_path(flat_key: str) -> List[PathSegment]:
    """
    Decode a flat key into key and index segments.

    Args:
        flat_key: Key produced by the flattening encoder

    Returns:
        List of KeySegment/IndexSegment in root-to-leaf order
    """
    segments: List[PathSegment] = []
    for part in split_key(flat_key):
        name = part
        indices: List[int] = []
        # Peel trailing [i] groups off the segment text.
        while True:
            match = _INDEX_SUFFIX.search(name)
            if match is None:
                break
            indices.insert(0, int(match.group(1)))
            name = name[:match.start()]
        if name or not indices:
            segments.append(KeySegment(name))
        segments.extend(IndexSegment(i) for i in indices)
    return segments
