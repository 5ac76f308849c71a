"""CLI command for listing plugin properties."""

import click

from nlpplugins.models.nlp_config import NLPConfig


@click.command("properties")
def list_properties():
    """List the configurable plugin properties.

    Macro-enabled properties accept templates such as
    {{ env_var('NAME') }} that are resolved later.
    """
    click.echo("Plugin Properties:")
    for prop in NLPConfig.describe_properties():
        flags = ["required" if prop["required"] else "optional"]
        if prop["macro"]:
            flags.append("macro")
        click.echo(f"  - {prop['name']} ({', '.join(flags)})")
        click.echo(f"      {prop['description']}")
