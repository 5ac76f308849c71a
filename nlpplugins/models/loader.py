"""Plugin configuration loader with YAML parsing."""

from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml
from pydantic import ValidationError

from nlpplugins.core.exceptions import ConfigLoadError, ConfigurationError
from nlpplugins.core.schema import Schema
from nlpplugins.models.nlp_config import NLPConfig


def load_config(
    path: str,
    cli_vars: Dict[str, str] | None = None,
    resolve: bool = False,
) -> Tuple[NLPConfig, Optional[Schema]]:
    """
    Load a plugin configuration and its optional input schema from YAML.

    The file holds a ``properties`` mapping and, optionally, an
    ``inputSchema`` with a ``columns`` list.

    Args:
        path: Path to the YAML file
        cli_vars: Variables passed via CLI (e.g., --vars key=value)
        resolve: Render late-bound properties before returning

    Returns:
        Tuple of the config and the input schema (None when absent)

    Raises:
        ConfigLoadError: If the file is missing, not valid YAML, or malformed
        MacroResolutionError: If resolve is set and a template cannot be rendered
    """
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigLoadError(
            f"Config file not found: {path}", context={"path": str(path)}
        )
    except yaml.YAMLError as e:
        raise ConfigLoadError(
            f"Invalid YAML in config file: {e}", context={"path": str(path)}
        ) from e

    if not isinstance(data, dict) or not isinstance(data.get("properties"), dict):
        raise ConfigLoadError(
            "Config file must contain a 'properties' mapping",
            context={"path": str(path)},
        )

    schema_data = data.get("inputSchema")
    if schema_data is not None and not isinstance(schema_data, dict):
        raise ConfigLoadError(
            "'inputSchema' must be a mapping with a 'columns' list",
            context={"path": str(path), "type": type(schema_data).__name__},
        )

    try:
        config = NLPConfig.from_properties(data["properties"])
        input_schema = Schema.from_dict(schema_data) if schema_data else None
    except (ValidationError, ConfigurationError, TypeError) as e:
        raise ConfigLoadError(
            f"Config validation failed: {e}", context={"path": str(path)}
        ) from e

    if resolve:
        config = config.resolve(cli_vars, plugin_name=data.get("name", ""))

    return config, input_schema
