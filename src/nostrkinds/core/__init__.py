"""Core layer: configuration, logging, YAML loading and exceptions.

Depends on nothing else in the package and is used by the catalog,
validation and CLI layers.

Attributes:
    AppConfig: Pydantic configuration model with YAML factory.
        See [AppConfig][nostrkinds.core.config.AppConfig].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][nostrkinds.core.logger.Logger].
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
    NostrKindsError: Root of the exception hierarchy.
"""

from .config import AppConfig, LoggingConfig
from .exceptions import (
    CatalogError,
    ConfigurationError,
    ContractViolationError,
    NostrKindsError,
    SampleError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "AppConfig",
    "CatalogError",
    "ConfigurationError",
    "ContractViolationError",
    "Logger",
    "LoggingConfig",
    "NostrKindsError",
    "SampleError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
