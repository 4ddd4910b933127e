"""Application configuration models.

Configuration is read from an optional YAML file and validated by Pydantic.
Every field has a default, so an empty or missing file yields a working
configuration that uses the packaged catalog.

Examples:
    ```yaml
    catalog_path: ./my-kinds.yaml
    logging:
      level: DEBUG
      json_output: true
    ```

See Also:
    [load_yaml()][nostrkinds.core.yaml.load_yaml]: YAML parsing.
    [nostrkinds.__main__][]: CLI that applies flag overrides on top.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError
from .yaml import load_yaml


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LoggingConfig(BaseModel):
    """Logging output settings.

    Attributes:
        level: Root log level.
        json_output: Emit JSON objects instead of key=value lines.
        max_value_length: Truncation limit for individual logged values.
    """

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = "INFO"
    json_output: bool = False
    max_value_length: int = Field(default=1000, ge=50, le=100_000)


class AppConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        catalog_path: Catalog YAML to load instead of the packaged one.
        logging: [LoggingConfig][nostrkinds.core.config.LoggingConfig].
    """

    model_config = ConfigDict(extra="forbid")

    catalog_path: Path | None = None
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
            raise ConfigurationError(f"invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or does not match the schema.
        """
        try:
            data = load_yaml(config_path)
        except (OSError, TypeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"cannot load config {config_path}: {e}") from e
        return cls.from_dict(data)
