"""Format codecs for the supported configuration formats."""

from .json_format import JSONCodec
from .properties_format import PropertiesCodec
from .yaml_format import YAMLCodec

__all__ = ["JSONCodec", "PropertiesCodec", "YAMLCodec"]
