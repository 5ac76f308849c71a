"""Plugin configuration models."""

from nlpplugins.models.encoding import EncodingType
from nlpplugins.models.error_handling import PROPERTY_ERROR_HANDLING, ErrorHandling
from nlpplugins.models.loader import load_config
from nlpplugins.models.nlp_config import (
    AUTO_DETECT,
    PROPERTY_ENCODING,
    PROPERTY_LANGUAGE_CODE,
    PROPERTY_SERVICE_ACCOUNT_FILE_PATH,
    PROPERTY_SOURCE_FIELD,
    NLPConfig,
)

__all__ = [
    "NLPConfig",
    "EncodingType",
    "ErrorHandling",
    "load_config",
    "AUTO_DETECT",
    "PROPERTY_SOURCE_FIELD",
    "PROPERTY_ENCODING",
    "PROPERTY_LANGUAGE_CODE",
    "PROPERTY_ERROR_HANDLING",
    "PROPERTY_SERVICE_ACCOUNT_FILE_PATH",
]
