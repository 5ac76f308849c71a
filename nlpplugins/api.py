"""Public Python API for nlpplugins.

This module provides the main entry points for loading and validating NLP
transform plugin configurations.
"""

import logging
from typing import Any, Optional

from nlpplugins.core.failures import FailureCollector
from nlpplugins.models.loader import load_config
from nlpplugins.models.nlp_config import NLPConfig

logger = logging.getLogger(__name__)


def from_yaml(path: str) -> NLPConfig:
    """Load a plugin configuration from a YAML file.

    Late-bound properties are left unresolved.

    Args:
        path: Path to the configuration YAML file

    Returns:
        NLPConfig instance

    Raises:
        ConfigLoadError: If the file is missing, invalid YAML, or malformed

    Example:
        >>> config = from_yaml("examples/sentiment.yaml")
        >>> config.source_field
        'text'
    """
    config, _ = load_config(path)
    return config


def validate_config(
    config: NLPConfig, input_schema: Optional[Any] = None
) -> FailureCollector:
    """Validate a configuration and return the collector holding any failures.

    Args:
        config: Configuration to validate
        input_schema: Schema of the records reaching the plugin, if known

    Returns:
        FailureCollector; empty when the configuration is valid

    Example:
        >>> collector = validate_config(config, schema)
        >>> collector.get_or_raise()
    """
    collector = FailureCollector()
    config.validate(input_schema, collector)
    if len(collector):
        logger.warning(
            "Configuration validation found problems",
            extra={"context": {"failures": len(collector)}},
        )
    else:
        logger.info("Configuration is valid")
    return collector
