"""Inspector configuration models.

All settings have defaults, so an empty YAML file (or no file at all) gives
a working configuration. Loading goes through
[load_yaml()][decodenote.core.yaml.load_yaml] and Pydantic validation;
every failure surfaces as a
[ConfigurationError][decodenote.core.exceptions.ConfigurationError].

Examples:
    ```yaml
    # decodenote.yaml
    codec:
      max_length: 2048
    display:
      truncate_length: 12
    logging:
      level: DEBUG
      json_output: true
    ```

See Also:
    [Inspector][decodenote.inspector.report.Inspector]: The facade that
        consumes this configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError
from .yaml import load_yaml


# Bech32 itself allows 90 characters; NIP-19 payloads with relay hints need more
DEFAULT_MAX_IDENTIFIER_LENGTH = 1023


class CodecConfig(BaseModel):
    """Identifier codec settings.

    Attributes:
        max_length: Longest bech32 text accepted, in characters. The
            90-character limit of plain bech32 is too short for ``nprofile``
            and ``nevent`` identifiers carrying several relay hints.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_length: int = Field(default=DEFAULT_MAX_IDENTIFIER_LENGTH, ge=90, le=4096)


class DisplayConfig(BaseModel):
    """Report rendering settings.

    Attributes:
        truncate_length: Characters kept at each end of shortened ids.
        reveal_secrets: Include decoded ``nsec`` keys in reports instead of
            a mask.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    truncate_length: int = Field(default=8, ge=1, le=32)
    reveal_secrets: bool = Field(default=False)


class LoggingConfig(BaseModel):
    """Logging settings applied by the CLI.

    Attributes:
        level: Root log level.
        json_output: Emit JSON lines instead of key=value pairs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")
    json_output: bool = Field(default=False)


class InspectorConfig(BaseModel):
    """Top-level configuration for the inspector facade and CLI.

    See Also:
        [CodecConfig][decodenote.core.config.CodecConfig],
        [DisplayConfig][decodenote.core.config.DisplayConfig],
        [LoggingConfig][decodenote.core.config.LoggingConfig]: Embedded
            sections.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    codec: CodecConfig = Field(default_factory=CodecConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If the dictionary does not match the schema.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML, or
                does not match the schema.
        """
        try:
            data = load_yaml(config_path)
        except FileNotFoundError as e:
            raise ConfigurationError(str(e)) from e
        return cls.from_dict(data)
