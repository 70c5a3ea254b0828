"""Routing of (source, target) format pairs to converters."""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from .formats import JSONCodec, PropertiesCodec, YAMLCodec
from .types import ErrorType, FormatCodecInterface, FormatTag, TranscodeError

Converter = Callable[[str], str]

_DEFAULT_CODECS = {
    FormatTag.YAML: YAMLCodec,
    FormatTag.PROPERTIES: PropertiesCodec,
    FormatTag.JSON: JSONCodec,
}

# Output extensions offered per input extension.
_OUTPUT_EXTENSIONS: Dict[str, List[str]] = {
    "yaml": ["properties", "json"],
    "yml": ["properties", "json"],
    "properties": ["yaml", "yml", "json"],
    "json": ["yaml", "yml", "properties"],
}


def detect_format(path: Union[str, Path]) -> Optional[FormatTag]:
    """Detect a configuration format from the file extension only."""
    return FormatTag.from_extension(Path(path).suffix)


def supported_output_formats(path: Union[str, Path]) -> List[str]:
    """
    List the output extensions a configuration file can be converted to.

    Args:
        path: Input file path

    Returns:
        Output extensions, empty for files that are not configuration files
    """
    return list(_OUTPUT_EXTENSIONS.get(Path(path).suffix.lower().lstrip("."), []))


class TranscodingRouter:
    """
    Fixed table of the six cross-format conversions.

    yaml <-> json carry the tree through unchanged. Conversions to or from
    properties go through flattening or unflattening in PropertiesCodec.
    Identity pairs are not in the table.
    """

    def __init__(self, codecs: Optional[Dict[FormatTag, FormatCodecInterface]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the router.

        Args:
            codecs: Optional codec per format; defaults are built for the rest
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.codecs: Dict[FormatTag, FormatCodecInterface] = dict(codecs or {})
        for tag, codec_class in _DEFAULT_CODECS.items():
            if tag not in self.codecs:
                self.codecs[tag] = codec_class(logger=self.logger)

        self._table: Dict[Tuple[FormatTag, FormatTag], Converter] = {
            (FormatTag.YAML, FormatTag.JSON): self._pipeline(FormatTag.YAML, FormatTag.JSON),
            (FormatTag.JSON, FormatTag.YAML): self._pipeline(FormatTag.JSON, FormatTag.YAML),
            (FormatTag.YAML, FormatTag.PROPERTIES): self._pipeline(FormatTag.YAML, FormatTag.PROPERTIES),
            (FormatTag.JSON, FormatTag.PROPERTIES): self._pipeline(FormatTag.JSON, FormatTag.PROPERTIES),
            (FormatTag.PROPERTIES, FormatTag.YAML): self._pipeline(FormatTag.PROPERTIES, FormatTag.YAML),
            (FormatTag.PROPERTIES, FormatTag.JSON): self._pipeline(FormatTag.PROPERTIES, FormatTag.JSON),
        }

    @property
    def pairs(self) -> List[Tuple[FormatTag, FormatTag]]:
        """All supported (source, target) pairs."""
        return list(self._table)

    def route(self, source: Union[str, FormatTag], target: Union[str, FormatTag]) -> Converter:
        """
        Look up the converter for a format pair.

        Args:
            source: Input format name or tag
            target: Output format name or tag

        Returns:
            Callable taking source text and returning target text

        Raises:
            TranscodeError: If the pair is not supported
        """
        source_name = source.value if isinstance(source, FormatTag) else str(source).lower()
        target_name = target.value if isinstance(target, FormatTag) else str(target).lower()
        source_tag = FormatTag.from_extension(source_name)
        target_tag = FormatTag.from_extension(target_name)
        converter = self._table.get((source_tag, target_tag))
        if converter is None:
            raise TranscodeError(
                f"Unsupported conversion: {source_name} -> {target_name}",
                ErrorType.UNSUPPORTED,
                context={"source": source_name, "target": target_name}
            )
        return converter

    def transcode(self, text: str, source: Union[str, FormatTag], target: Union[str, FormatTag]) -> str:
        """Convert document text between two formats in memory."""
        return self.route(source, target)(text)

    def _pipeline(self, source: FormatTag, target: FormatTag) -> Converter:
        source_codec = self.codecs[source]
        target_codec = self.codecs[target]

        def convert(text: str) -> str:
            tree = source_codec.parse(text)
            self.logger.debug(f"Parsed {source.value} document, writing {target.value}")
            return target_codec.serialize(tree)

        return convert
