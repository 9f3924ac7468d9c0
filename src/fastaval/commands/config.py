"""
This module contains the CLI command to get and set configurations of the program.

Known keys:
    validate.max_line_length: Longest accepted line, terminator excluded.
    validate.overlong_lines: "error" or "truncate".

Examples:
    $ fastaval config get --key validate.max_line_length
    $ fastaval config set --key validate.overlong_lines --value truncate
    $ fastaval config unset --key validate.max_line_length
    $ fastaval config list
"""

from pathlib import Path

import click

import fastaval
from fastaval.lib.config import KNOWN_KEYS, Config, parse_setting
from fastaval.lib.error import DataInvalidError, UnsupportedError


@click.group(
    "config",
    context_settings=fastaval.CTX_SETTINGS,
    short_help="Get and set configurations",
)
def main():
    """Configuration management commands."""


def _load_config() -> Config:
    cfg = Config()
    try:
        cfg.load_from_file(fastaval.CONFIG_PATH)
    except FileNotFoundError:
        cfg_path = Path(fastaval.CONFIG_PATH)
        cfg_path.parent.mkdir(parents=True, exist_ok=True)
        cfg.save_to_file(fastaval.CONFIG_PATH)
    except DataInvalidError as e:
        raise click.ClickException(str(e))
    return cfg


def _known_key(ctx, param, value: str) -> str:
    if value not in KNOWN_KEYS:
        raise click.BadParameter(f"must be one of {', '.join(KNOWN_KEYS)}")
    return value


@main.command("get")
@click.option("--key", "key_to_get", required=True, callback=_known_key, help="Configuration key to get")
def get(key_to_get: str):
    value = _load_config().get_nested_value(key_to_get)
    if value is not None:
        click.echo(value)


@main.command("set")
@click.option("--key", required=True, callback=_known_key, help="Configuration key to set")
@click.option("--value", required=True, help="Value to set")
def set(key: str, value: str):
    try:
        parsed = parse_setting(key, value)
    except UnsupportedError as e:
        raise click.BadParameter(str(e), param_hint="--value")
    cfg = _load_config()
    cfg.set_nested_value(key, parsed)
    cfg.save_to_file(fastaval.CONFIG_PATH)


@main.command("unset")
@click.option("--key", "key_to_unset", required=True, callback=_known_key, help="Configuration key to unset")
def unset(key_to_unset: str):
    cfg = _load_config()
    cfg.unset_nested_value(key_to_unset)
    cfg.save_to_file(fastaval.CONFIG_PATH)


@main.command("list")
def list():
    for key, value in _load_config().iter_items():
        click.echo(f"{key}: {value}" if key else value)


if __name__ == "__main__":
    main()
