"""YAML (tree format) codec backed by PyYAML."""

import logging
from typing import Optional

import yaml

from ..types import ErrorType, FormatCodecInterface, FormatTag, TranscodeError
from ..values import Value

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ConfigLoader(yaml.SafeLoader):
    """Safe loader that reads plain date-like scalars as strings."""


ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class YAMLCodec(FormatCodecInterface):
    """
    Codec for YAML documents.

    Uses the safe loader and dumper only. Unquoted dates stay strings; an
    explicit ``!!timestamp`` tag still yields a tagged value. Mapping order
    is kept on write unless ``sort_keys`` is set; comments and layout are
    not preserved.
    """

    format_tag = FormatTag.YAML

    def __init__(self, sort_keys: bool = False, logger: Optional[logging.Logger] = None):
        """
        Initialize the YAML codec.

        Args:
            sort_keys: Sort mapping keys when dumping
            logger: Optional logger instance
        """
        self.sort_keys = sort_keys
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, text: str) -> Value:
        """
        Parse a single YAML document.

        Raises:
            TranscodeError: If the document is not valid YAML
        """
        try:
            data = yaml.load(text, Loader=ConfigLoader)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            location = f" at line {mark.line + 1}, column {mark.column + 1}" if mark else ""
            problem = getattr(e, "problem", None) or str(e)
            raise TranscodeError(
                f"YAML parsing failed: {problem}{location}",
                ErrorType.PARSE,
                context={"format": self.format_tag.value}
            ) from e
        return Value.from_native(data)

    def serialize(self, value: Value) -> str:
        """
        Dump a tree as block-style YAML.

        Raises:
            TranscodeError: If the tree holds a value YAML cannot represent
        """
        try:
            return yaml.safe_dump(
                value.to_native(),
                default_flow_style=False,
                sort_keys=self.sort_keys,
                allow_unicode=True
            )
        except yaml.YAMLError as e:
            raise TranscodeError(
                f"YAML serialization failed: {e}",
                ErrorType.SERIALIZATION,
                context={"format": self.format_tag.value}
            ) from e
