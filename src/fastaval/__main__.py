import click

import fastaval
from . import commands


@click.group("fastaval", context_settings=fastaval.CTX_SETTINGS)
@click.version_option(fastaval.VERSION, "-V", "--version")
def cli():
    """Check and validate FASTA files."""


for itemname in dir(commands):
    item = getattr(commands, itemname)
    if isinstance(item, click.Command):
        cli.add_command(item)


if __name__ == "__main__":
    cli(prog_name="fastaval")  # pragma: no cover
