"""Tests for failure collection."""

import logging

import pytest

from nlpplugins.core.exceptions import ValidationFailedError
from nlpplugins.core.failures import FailureCollector, ValidationFailure


class TestFailureCollector:
    """Tests for FailureCollector."""

    def test_starts_empty(self, collector):
        assert len(collector) == 0
        assert collector.failures == []
        collector.get_or_raise()

    def test_add_failure_with_property(self, collector):
        failure = collector.add_failure("bad value", "use another").with_config_property(
            "encoding"
        )
        assert isinstance(failure, ValidationFailure)
        assert collector.failures == [
            ValidationFailure(
                message="bad value",
                corrective_action="use another",
                config_property="encoding",
            )
        ]

    def test_failures_returns_copy(self, collector):
        collector.add_failure("one")
        collector.failures.clear()
        assert len(collector) == 1

    def test_get_or_raise(self, collector):
        collector.add_failure("one").with_config_property("sourceField")
        collector.add_failure("two").with_config_property("encoding")

        with pytest.raises(ValidationFailedError) as exc_info:
            collector.get_or_raise()

        error = exc_info.value
        assert error.message == "Plugin configuration has 2 validation failures"
        assert [f.message for f in error.failures] == ["one", "two"]
        assert error.context == {"failures": 2}

    def test_single_failure_message(self):
        collector = FailureCollector()
        collector.add_failure("only")
        with pytest.raises(ValidationFailedError, match="1 validation failure"):
            collector.get_or_raise()

    def test_failure_without_property_is_logged(self, collector, caplog):
        with caplog.at_level(logging.DEBUG, logger="nlpplugins"):
            collector.add_failure("schema unavailable", "connect an input stage")

        [record] = caplog.records
        assert record.levelno == logging.DEBUG
        assert record.failure == {
            "message": "schema unavailable",
            "corrective_action": "connect an input stage",
        }

    def test_rejected_failures_logged_as_errors(self, collector, caplog):
        collector.add_failure("one").with_config_property("encoding")
        with caplog.at_level(logging.ERROR, logger="nlpplugins"):
            with pytest.raises(ValidationFailedError):
                collector.get_or_raise()

        assert [r.failure["config_property"] for r in caplog.records] == ["encoding"]
