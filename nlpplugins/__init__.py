"""NLP Plugins - configuration for natural-language API transforms.

Declares the properties of a pipeline transform that sends a text field to a
natural-language API, validates them against the input record schema and
exposes typed accessors.
"""

__version__ = "0.1.0"

# Public API
from nlpplugins.api import from_yaml, validate_config

# Exceptions
from nlpplugins.core.exceptions import (
    ConfigLoadError,
    ConfigurationError,
    MacroResolutionError,
    NLPPluginError,
    ValidationFailedError,
)
from nlpplugins.core.failures import FailureCollector, ValidationFailure
from nlpplugins.core.schema import Column, Schema

# Configuration model
from nlpplugins.models.encoding import EncodingType
from nlpplugins.models.error_handling import ErrorHandling
from nlpplugins.models.nlp_config import NLPConfig

__all__ = [
    # Version
    "__version__",
    # Public API
    "from_yaml",
    "validate_config",
    # Configuration
    "NLPConfig",
    "EncodingType",
    "ErrorHandling",
    "Schema",
    "Column",
    "FailureCollector",
    "ValidationFailure",
    # Exceptions
    "NLPPluginError",
    "ConfigurationError",
    "MacroResolutionError",
    "ConfigLoadError",
    "ValidationFailedError",
]
