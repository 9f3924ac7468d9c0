"""
This module contains the CLI command to list the exit codes of a validation.

Examples:
    $ fastaval codes
"""

import click

import fastaval
from fastaval.lib.util_obj import EXIT_CODE_DESCRIPTIONS


@click.command(
    "codes",
    context_settings=fastaval.CTX_SETTINGS,
    short_help="List validation exit codes",
)
def main():
    """List the exit codes returned by `fastaval validate`."""

    click.echo("fastaval validate checks your fasta file and exits with:")
    for code, description in sorted(EXIT_CODE_DESCRIPTIONS.items()):
        if code >= 200:
            click.echo("\tOver 200:")
            click.echo(f"\t\t{description}")
        else:
            click.echo(f"\t{int(code)}: {description}")


if __name__ == "__main__":
    main()
