"""Main CLI entry point for nlpplugins."""

import click

from nlpplugins import __version__
from nlpplugins.cli.commands.properties import list_properties
from nlpplugins.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """NLP Plugins - validate NLP transform plugin configurations."""
    pass


main.add_command(validate)
main.add_command(list_properties)


if __name__ == "__main__":
    main()
