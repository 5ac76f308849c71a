"""Strategies for records whose API call fails."""

from enum import Enum

from nlpplugins.core.exceptions import ConfigurationError

PROPERTY_ERROR_HANDLING = "errorHandling"


class ErrorHandling(str, Enum):
    SKIP = "skip"
    SEND_TO_ERROR = "send-to-error-port"
    FAIL_PIPELINE = "fail-pipeline"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: str) -> "ErrorHandling":
        """Decode a raw property value, ignoring case.

        Raises:
            ConfigurationError: If the value names no supported strategy.
        """
        strategy = _STRATEGIES.get(value.lower()) if value is not None else None
        if strategy is None:
            raise ConfigurationError(
                f"Unsupported value for '{PROPERTY_ERROR_HANDLING}': '{value}'",
                context={"supported": ", ".join(_STRATEGIES)},
            )
        return strategy


_STRATEGIES: dict[str, ErrorHandling] = {
    member.value.lower(): member for member in ErrorHandling
}

_LABELS: dict[ErrorHandling, str] = {
    ErrorHandling.SKIP: "Skip on error",
    ErrorHandling.SEND_TO_ERROR: "Send to error port",
    ErrorHandling.FAIL_PIPELINE: "Fail pipeline",
}
