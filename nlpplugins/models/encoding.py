"""Text encoding types understood by the natural-language API."""

from enum import Enum
from typing import Optional

from nlpplugins.core.exceptions import ConfigurationError


class EncodingType(str, Enum):
    """Encoding used to compute text offsets in API responses."""

    NONE = "NONE"
    UTF8 = "UTF8"
    UTF16 = "UTF16"
    UTF32 = "UTF32"

    @classmethod
    def parse(cls, value: Optional[str]) -> "EncodingType":
        """Decode a raw property value.

        Matching is exact and case-sensitive. A missing value means NONE;
        an empty string is not a supported encoding.

        Raises:
            ConfigurationError: If the value names no supported encoding.
        """
        if value is None:
            return cls.NONE
        encoding = _ENCODINGS.get(value)
        if encoding is None:
            supported = ", ".join(_ENCODINGS)
            raise ConfigurationError(
                f"Type of encoding specified '{value}' is not supported. "
                f"Supported values are {supported}.",
                context={"value": value},
            )
        return encoding


_ENCODINGS: dict[str, EncodingType] = {member.value: member for member in EncodingType}
