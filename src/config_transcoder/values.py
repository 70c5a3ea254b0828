"""Value model shared by the tree and nested-object formats."""

import math
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .types import ErrorType, TranscodeError, ValueKind

Number = Union[int, float]

SCALAR_KINDS = frozenset({ValueKind.NULL, ValueKind.BOOL, ValueKind.NUMBER, ValueKind.STRING})
CONTAINER_KINDS = frozenset({ValueKind.MAPPING, ValueKind.SEQUENCE})


def render_number(number: Number) -> str:
    """
    Render a number as canonical decimal text.

    Integers keep every digit. Floats use the shortest text that reads back
    to the same float; non-finite floats use the YAML spellings.
    """
    if isinstance(number, float):
        if math.isnan(number):
            return ".nan"
        if math.isinf(number):
            return ".inf" if number > 0 else "-.inf"
        return repr(number)
    return str(number)


class Value:
    """
    Tagged value of a configuration tree.

    Mapping payloads are insertion-ordered dicts of ``str -> Value`` and
    sequence payloads are lists of ``Value``. Every child is owned by
    exactly one container; trees are built fresh for each conversion.
    """

    __slots__ = ("kind", "data")

    def __init__(self, kind: ValueKind, data: Any = None):
        self.kind = kind
        self.data = data

    @classmethod
    def null(cls) -> "Value":
        return cls(ValueKind.NULL)

    @classmethod
    def boolean(cls, flag: bool) -> "Value":
        return cls(ValueKind.BOOL, bool(flag))

    @classmethod
    def number(cls, number: Number) -> "Value":
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            raise TypeError(f"Number value expects int or float, got {type(number).__name__}")
        return cls(ValueKind.NUMBER, number)

    @classmethod
    def string(cls, text: str) -> "Value":
        return cls(ValueKind.STRING, text)

    @classmethod
    def mapping(cls, items: Optional[Union[Dict[str, "Value"], Iterable[Tuple[str, "Value"]]]] = None) -> "Value":
        """Create a mapping; later duplicates of a key replace earlier ones."""
        data: Dict[str, Value] = {}
        if items is not None:
            pairs = items.items() if isinstance(items, dict) else items
            for key, child in pairs:
                if not isinstance(key, str):
                    raise TypeError(f"Mapping keys must be str, got {type(key).__name__}")
                data[key] = child
        return cls(ValueKind.MAPPING, data)

    @classmethod
    def sequence(cls, items: Optional[Iterable["Value"]] = None) -> "Value":
        return cls(ValueKind.SEQUENCE, list(items) if items is not None else [])

    @classmethod
    def tagged(cls, payload: Any) -> "Value":
        """Wrap a parser object that has no place in the core model (dates, binary, sets)."""
        return cls(ValueKind.TAGGED, payload)

    @classmethod
    def from_native(cls, obj: Any) -> "Value":
        """
        Build a value tree from plain Python data as returned by a parser.

        Args:
            obj: dict/list/scalar structure

        Returns:
            Equivalent Value tree

        Raises:
            TranscodeError: If a mapping key cannot be represented as text
        """
        if obj is None:
            return cls.null()
        if isinstance(obj, bool):
            return cls.boolean(obj)
        if isinstance(obj, (int, float)):
            return cls.number(obj)
        if isinstance(obj, str):
            return cls.string(obj)
        if isinstance(obj, dict):
            return cls.mapping((cls._native_key(key), cls.from_native(child)) for key, child in obj.items())
        if isinstance(obj, (list, tuple)):
            return cls.sequence(cls.from_native(item) for item in obj)
        return cls.tagged(obj)

    @staticmethod
    def _native_key(key: Any) -> str:
        if isinstance(key, str):
            return key
        if key is None:
            return "null"
        if isinstance(key, bool):
            return "true" if key else "false"
        if isinstance(key, (int, float)):
            return render_number(key)
        raise TranscodeError(
            f"Unsupported mapping key of type {type(key).__name__}: {key!r}",
            ErrorType.PARSE,
            context={"key": repr(key)}
        )

    def to_native(self) -> Any:
        """Convert back to plain Python data (dict/list/scalars)."""
        if self.kind == ValueKind.MAPPING:
            return {key: child.to_native() for key, child in self.data.items()}
        if self.kind == ValueKind.SEQUENCE:
            return [item.to_native() for item in self.data]
        return self.data

    @property
    def is_scalar(self) -> bool:
        return self.kind in SCALAR_KINDS

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    def get(self, key: str) -> Optional["Value"]:
        """Look up a mapping child; None when absent or not a mapping."""
        if self.kind != ValueKind.MAPPING:
            return None
        return self.data.get(key)

    def keys(self) -> List[str]:
        if self.kind != ValueKind.MAPPING:
            return []
        return list(self.data.keys())

    def __iter__(self) -> Iterator[Any]:
        """Iterate (key, child) pairs of a mapping or the elements of a sequence."""
        if self.kind == ValueKind.MAPPING:
            return iter(self.data.items())
        if self.kind == ValueKind.SEQUENCE:
            return iter(self.data)
        return iter(())

    def walk(self) -> Iterator["Value"]:
        """Yield this node and every descendant in pre-order."""
        yield self
        children = self.data.values() if self.kind == ValueKind.MAPPING else (
            self.data if self.kind == ValueKind.SEQUENCE else ()
        )
        for child in children:
            yield from child.walk()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.kind == other.kind and self.data == other.data

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self) -> str:
        if self.kind == ValueKind.NULL:
            return "Value.null()"
        return f"Value({self.kind.value}, {self.data!r})"
