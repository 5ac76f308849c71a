"""Structured validation failures and their collector."""

import logging
from typing import Iterator, Optional

from pydantic import BaseModel

from nlpplugins.core.exceptions import ValidationFailedError

logger = logging.getLogger(__name__)


class ValidationFailure(BaseModel):
    message: str
    corrective_action: Optional[str] = None
    config_property: Optional[str] = None

    def with_config_property(self, name: str) -> "ValidationFailure":
        """Attach the configuration property this failure refers to."""
        self.config_property = name
        logger.debug(
            "Validation failure assigned to property",
            extra={"failure": self.model_dump(exclude_none=True)},
        )
        return self


class FailureCollector:
    """Accumulates validation failures without interrupting control flow.

    Callers add every problem they find and decide afterwards, usually via
    get_or_raise(), whether the collected failures abort the pipeline.
    """

    def __init__(self) -> None:
        self._failures: list[ValidationFailure] = []

    def add_failure(
        self, message: str, corrective_action: Optional[str] = None
    ) -> ValidationFailure:
        failure = ValidationFailure(
            message=message, corrective_action=corrective_action
        )
        self._failures.append(failure)
        logger.debug(
            "Validation failure added",
            extra={"failure": failure.model_dump(exclude_none=True)},
        )
        return failure

    @property
    def failures(self) -> list[ValidationFailure]:
        return list(self._failures)

    def get_or_raise(self) -> None:
        """Raise ValidationFailedError if any failure was collected.

        Raises:
            ValidationFailedError: Carrying every collected failure.
        """
        if not self._failures:
            return
        count = len(self._failures)
        noun = "failure" if count == 1 else "failures"
        for failure in self._failures:
            logger.error(
                "Configuration rejected",
                extra={"failure": failure.model_dump(exclude_none=True)},
            )
        raise ValidationFailedError(
            f"Plugin configuration has {count} validation {noun}",
            failures=self._failures,
        )

    def __len__(self) -> int:
        return len(self._failures)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(list(self._failures))
