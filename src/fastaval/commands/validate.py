"""
This module contains the CLI command to validate a FASTA file.

Examples:
    $ fastaval validate reads.fasta
    $ fastaval validate -v reads.fasta.gz
    $ fastaval validate --max-line-length 1000 --overlong truncate reads.fa
"""

import click

import fastaval
from fastaval.lib.config import OVERLONG_POLICIES, load_settings
from fastaval.lib.error import DataInvalidError, UnsupportedError
from fastaval.lib.util_obj import ExitCode
from fastaval.lib.validator import check_file


@click.command(
    "validate",
    context_settings=fastaval.CTX_SETTINGS,
    short_help="Validate a FASTA file",
)
@click.argument("file", type=click.Path())
@click.option("-v", "--verbose", is_flag=True, help="Print the reason of a failure to stderr")
@click.option(
    "--max-line-length",
    type=click.IntRange(min=1),
    help="Longest accepted line, terminator excluded",
)
@click.option(
    "--overlong",
    "overlong_lines",
    type=click.Choice(OVERLONG_POLICIES, case_sensitive=False),
    help="Fail on (error) or truncate (truncate) lines over the maximum length",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=lambda: fastaval.CONFIG_PATH,
    show_default="user config file",
    help="Config file to read settings from",
)
@click.pass_context
def main(
    ctx: click.Context,
    file: str,
    verbose: bool,
    max_line_length: int,
    overlong_lines: str,
    config_path: str,
):
    """
    Validate a FASTA file, plain or gzip-compressed (name ending in .gz).

    The exit status tells the first problem found, see `fastaval codes`.

    FILE: Path of the FASTA file.
    """

    try:
        settings = load_settings(
            config_path,
            max_line_length=max_line_length,
            overlong_lines=overlong_lines,
        )
    except (UnsupportedError, DataInvalidError, OSError) as e:
        click.echo(f"[ERROR] {config_path}: {e}", err=True)
        ctx.exit(int(ExitCode.INTERNAL_ERROR))

    result = check_file(file, verbose=verbose, settings=settings)
    if verbose and result.valid:
        click.echo(f"{file}: valid FASTA file", err=True)
    ctx.exit(result.exit_code)


if __name__ == "__main__":
    main()
