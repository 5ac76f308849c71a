"""Late-bound property values written as Jinja2-style templates.

A property whose raw value contains a template expression is unresolved until
it is rendered. Supported expressions:

- {{ env_var('VAR_NAME') }} - environment variable lookup
- {{ var('VAR_NAME') }} - CLI variable lookup
- {{ plugin.name }} - plugin metadata
"""

import os
import re
from typing import Any, Dict, Optional

from nlpplugins.core.exceptions import MacroResolutionError

MACRO_PATTERN = re.compile(r"\{\{\s*([^}]+)\s*\}\}")
_FUNC_PATTERN = re.compile(r"(\w+)\(['\"]([^'\"]+)['\"]\)")


def contains_macro(value: Any) -> bool:
    """Return True if value is a string holding a template expression."""
    return isinstance(value, str) and MACRO_PATTERN.search(value) is not None


def render_macros(
    properties: Dict[str, Any],
    cli_vars: Dict[str, str] | None = None,
    plugin_name: str = "",
) -> Dict[str, Any]:
    """
    Render templates in a raw property mapping.

    Args:
        properties: Property name to raw value (may contain templates)
        cli_vars: Variables passed via CLI (e.g., --vars key=value)
        plugin_name: Value for {{ plugin.name }}

    Returns:
        New mapping with every template rendered

    Raises:
        MacroResolutionError: If a variable is missing or an expression is invalid
    """
    context = {
        "plugin": {"name": plugin_name},
        "env_var": lambda key: _get_env_var(key),
        "var": lambda key: _get_cli_var(key, cli_vars or {}),
    }
    return {
        key: render_string(value, context) if isinstance(value, str) else value
        for key, value in properties.items()
    }


def _get_env_var(key: str) -> str:
    """Get environment variable or raise error if not found."""
    value = os.environ.get(key)
    if value is None:
        raise MacroResolutionError(
            f"Environment variable '{key}' not found",
            context={"key": key},
        )
    return value


def _get_cli_var(key: str, cli_vars: Dict[str, str]) -> str:
    """Get CLI variable or raise error if not found."""
    if key not in cli_vars:
        raise MacroResolutionError(
            f"CLI variable '{key}' not provided",
            context={"key": key, "available": list(cli_vars.keys())},
        )
    return cli_vars[key]


def render_string(text: str, context: Optional[Dict[str, Any]] = None) -> str:
    """Render every template expression in a single string."""
    context = context or {}

    def replace(match):
        expr = match.group(1).strip()
        try:
            func_match = _FUNC_PATTERN.match(expr)
            if func_match:
                func_name, arg = func_match.group(1), func_match.group(2)
                if func_name in context and callable(context[func_name]):
                    return str(context[func_name](arg))
                raise MacroResolutionError(
                    f"Unknown function: {func_name}",
                    context={"expression": expr, "available": list(context.keys())},
                )

            result = context
            for part in expr.split("."):
                result = result[part]
            return str(result)
        except (KeyError, TypeError) as e:
            raise MacroResolutionError(
                f"Template rendering failed: {expr}",
                context={"expression": expr, "error": str(e)},
            ) from e

    return MACRO_PATTERN.sub(replace, text)
