"""Structured logging configuration for nlpplugins.

Records may carry these extras, all rendered as key=value pairs:

- plugin_name: plugin the record belongs to (set by configure_logging)
- config_property: property being checked or decoded
- failure: a ValidationFailure dump (message, config_property, corrective_action)
- context: any further key/value pairs
"""

import logging
import sys
from typing import Any, Optional

try:
    from json_log_formatter import JSONFormatter
except ImportError:
    JSONFormatter = None  # type: ignore


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    plugin_name: Optional[str] = None,
) -> None:
    """Configure logging for nlpplugins.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use key=value format
        plugin_name: Optional plugin name added to every record
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("nlpplugins")
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    if json_format:
        if JSONFormatter is None:
            raise ImportError(
                "json-log-formatter is required for JSON logging. "
                "Install it with: pip install json-log-formatter"
            )
        formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()

    if plugin_name:
        handler.addFilter(PluginNameFilter(plugin_name))

    handler.setFormatter(formatter)
    logger.addHandler(handler)


class PluginNameFilter(logging.Filter):
    """Stamps records that carry no plugin name with a fixed one."""

    def __init__(self, plugin_name: str):
        super().__init__()
        self.plugin_name = plugin_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "plugin_name"):
            record.plugin_name = self.plugin_name
        return True


class StructuredFormatter(logging.Formatter):
    """Renders a record as ``[LEVEL] key=value ... message``.

    A failure extra is flattened so that the offending property, its message
    and any corrective action appear on the same line.
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = [f"[{record.levelname}]"]

        if hasattr(record, "plugin_name"):
            parts.append(f"plugin={record.plugin_name}")

        failure = getattr(record, "failure", None) or {}
        config_property = failure.get("config_property") or getattr(
            record, "config_property", None
        )
        if config_property:
            parts.append(f"property={config_property}")

        if "message" in failure:
            parts.append(f"failure={_quote(failure['message'])}")
        if failure.get("corrective_action"):
            parts.append(f"action={_quote(failure['corrective_action'])}")

        for key, value in getattr(record, "context", {}).items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)


def _quote(value: Any) -> str:
    text = str(value)
    return f'"{text}"' if " " in text else text
