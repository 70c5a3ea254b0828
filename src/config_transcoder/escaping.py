"""Escape rules of the flat-line (properties) format."""

_KEY_ESCAPES = (
    ("\\", "\\\\"),
    ("=", "\\="),
    (":", "\\:"),
    (" ", "\\ "),
)

_VALUE_ESCAPES = (
    ("\\", "\\\\"),
    ("\n", "\\n"),
    ("\r", "\\r"),
)

_UNESCAPES = {"n": "\n", "r": "\r", "t": "\t"}


def escape_key(key: str) -> str:
    """Escape backslash, ``=``, ``:`` and space in a key."""
    for raw, escaped in _KEY_ESCAPES:
        key = key.replace(raw, escaped)
    return key


def escape_value(value: str) -> str:
    """
    Escape backslash, newline and carriage return in a value.

    Tabs are written as-is even though ``unescape_value`` understands
    ``\\t``.
    """
    for raw, escaped in _VALUE_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def unescape_value(value: str) -> str:
    """
    Decode backslash escapes in a value.

    ``\\n``, ``\\r`` and ``\\t`` become control characters; any other
    escaped character is kept literally. A trailing lone backslash is
    dropped.
    """
    if "\\" not in value:
        return value
    result = []
    chars = iter(value)
    for char in chars:
        if char != "\\":
            result.append(char)
            continue
        following = next(chars, None)
        if following is not None:
            result.append(_UNESCAPES.get(following, following))
    return "".join(result)
