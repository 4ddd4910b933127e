"""YAML loading for configuration and catalog files.

Uses ``yaml.safe_load`` so neither file type can instantiate arbitrary
Python objects. Used by
[AppConfig.from_yaml()][nostrkinds.core.config.AppConfig.from_yaml] and
[load_registry()][nostrkinds.catalog.registry.load_registry].

Examples:
    ```python
    from nostrkinds.core.yaml import load_yaml

    config = load_yaml("config/nostrkinds.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML mapping file.

    Args:
        path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed content as a nested dictionary. Returns an empty dict if the
        file exists but contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.
        TypeError: If the top-level YAML value is not a mapping.

    Warning:
        This function does not validate the structure of the returned
        dictionary. Callers pass the result to a Pydantic model for schema
        validation.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with file_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data
