"""Core infrastructure: exceptions, configuration and BOM-aware file I/O."""

from erb_num2name.core.config import (
    ConvertConfig,
    SpacePolicy,
    build_config,
    load_config_file,
)
from erb_num2name.core.exceptions import (
    ConfigError,
    ConversionError,
    Num2NameError,
    TableError,
    TableParseError,
)

__all__ = [
    "ConvertConfig",
    "SpacePolicy",
    "build_config",
    "load_config_file",
    "Num2NameError",
    "ConfigError",
    "TableError",
    "TableParseError",
    "ConversionError",
]
