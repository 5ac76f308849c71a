"""Core building blocks: exceptions, logging, schemas and failure collection."""

from nlpplugins.core.exceptions import (
    ConfigLoadError,
    ConfigurationError,
    MacroResolutionError,
    NLPPluginError,
    ValidationFailedError,
)
from nlpplugins.core.failures import FailureCollector, ValidationFailure
from nlpplugins.core.schema import Column, FieldLookup, Schema, has_field

__all__ = [
    "NLPPluginError",
    "ConfigurationError",
    "MacroResolutionError",
    "ConfigLoadError",
    "ValidationFailedError",
    "FailureCollector",
    "ValidationFailure",
    "Column",
    "Schema",
    "FieldLookup",
    "has_field",
]
