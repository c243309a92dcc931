"""Core layer: configuration, structured logging, and the exception hierarchy.

Depends only on the standard library, ``pydantic`` and ``pyyaml``. Every
other layer may import from here.

Attributes:
    InspectorConfig: Pydantic configuration loaded from YAML.
        See [InspectorConfig][decodenote.core.config.InspectorConfig].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][decodenote.core.logger.Logger].
    DecodeError: Base of the identifier codec failures.
        See [decodenote.core.exceptions][].
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][decodenote.core.yaml.load_yaml].
"""

from .config import (
    DEFAULT_MAX_IDENTIFIER_LENGTH,
    CodecConfig,
    DisplayConfig,
    InspectorConfig,
    LoggingConfig,
)
from .exceptions import (
    ConfigurationError,
    DecodeError,
    DecodeNoteError,
    InvalidEncodingError,
    InvalidHexError,
    TruncatedPayloadError,
    UnknownPrefixError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs, setup_logging
from .yaml import load_yaml


__all__ = [
    "DEFAULT_MAX_IDENTIFIER_LENGTH",
    "CodecConfig",
    "ConfigurationError",
    "DecodeError",
    "DecodeNoteError",
    "DisplayConfig",
    "InspectorConfig",
    "InvalidEncodingError",
    "InvalidHexError",
    "Logger",
    "LoggingConfig",
    "StructuredFormatter",
    "TruncatedPayloadError",
    "UnknownPrefixError",
    "format_kv_pairs",
    "load_yaml",
    "setup_logging",
]
