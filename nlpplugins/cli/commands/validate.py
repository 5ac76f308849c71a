"""CLI command for validating plugin configurations."""

import sys

import click

from nlpplugins.api import validate_config
from nlpplugins.core.exceptions import NLPPluginError
from nlpplugins.core.logging import configure_logging
from nlpplugins.models.loader import load_config
from nlpplugins.models.nlp_config import (
    PROPERTY_ENCODING,
    PROPERTY_LANGUAGE_CODE,
    NLPConfig,
)


@click.command()
@click.argument("config_path", type=click.Path(exists=True))
@click.option(
    "--vars",
    multiple=True,
    help="CLI variables in key=value format (can be used multiple times)",
)
@click.option(
    "--resolve",
    is_flag=True,
    help="Render late-bound properties before validating",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: WARNING)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def validate(
    config_path: str, vars: tuple, resolve: bool, log_level: str, json_logs: bool
):
    """Validate a plugin configuration YAML file.

    Checks:
    - YAML syntax and property names
    - Source field presence in the input schema (when given)
    - Error handling strategy and encoding values

    Examples:

        nlpplugins validate sentiment.yaml
        nlpplugins validate sentiment.yaml --resolve --vars field=body
    """
    configure_logging(level=log_level, json_format=json_logs)

    cli_vars = {}
    for var in vars:
        if "=" not in var:
            click.echo(f"Error: Invalid variable format: {var}. Use key=value", err=True)
            sys.exit(1)
        key, value = var.split("=", 1)
        cli_vars[key] = value

    try:
        config, input_schema = load_config(
            config_path, cli_vars=cli_vars or None, resolve=resolve
        )
    except NLPPluginError as e:
        click.echo(f"✗ Configuration could not be loaded: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"✗ Unexpected error: {e}", err=True)
        sys.exit(1)

    collector = validate_config(config, input_schema)
    if len(collector):
        click.echo(f"✗ Configuration has {len(collector)} problem(s):", err=True)
        for failure in collector:
            click.echo(f"  [{failure.config_property}] {failure.message}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")
    _echo_summary(config)


def _echo_summary(config: NLPConfig) -> None:
    click.echo(f"  Source field: {config.source_field}")
    if config.contains_macro(PROPERTY_ENCODING):
        click.echo(f"  Encoding: {config.encoding} (unresolved)")
    else:
        click.echo(f"  Encoding: {config.get_encoding_type().value}")
    if config.contains_macro(PROPERTY_LANGUAGE_CODE):
        click.echo(f"  Language: {config.language_code} (unresolved)")
    else:
        click.echo(f"  Language: {config.language_code or 'auto-detect'}")
    click.echo(f"  Error handling: {config.get_error_handling().label}")
    click.echo(
        f"  Credentials: {config.get_service_account_file_path() or 'default'}"
    )
