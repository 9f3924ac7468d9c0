"""
A module for configuration objects.

Classes:
    Config: A class to manipulate the configuration data object.
    ValidatorSettings: Settings that control how lines are read.

Functions:
    load_settings: Build validator settings from a config file.
"""

import json
import os
from typing import Any, NamedTuple, Optional

import yaml

from fastaval.lib.error import DataInvalidError, UnsupportedError

DEFAULT_MAX_LINE_LENGTH = 1024 * 1024
OVERLONG_ERROR = "error"
OVERLONG_TRUNCATE = "truncate"
OVERLONG_POLICIES = (OVERLONG_ERROR, OVERLONG_TRUNCATE)

KEY_MAX_LINE_LENGTH = "validate.max_line_length"
KEY_OVERLONG_LINES = "validate.overlong_lines"
KNOWN_KEYS = (KEY_MAX_LINE_LENGTH, KEY_OVERLONG_LINES)


def _format_of(filepath: str) -> str:
    ext = os.path.splitext(filepath)[1].lower()
    return "json" if ext == ".json" else "yaml"


class Config:
    """
    A class to manipulate the configuration data object.

    Attributes:
        data (Any): The configuration data.
    """

    def __init__(self, config: Any = None):
        self.data = config if config is not None else {}

    def load_from_file(self, filepath: str, format: Optional[str] = None) -> Any:
        """
        Load configurations from config file.

        Args:
            filepath (str): Path to the config file.
            format (str): "yaml" or "json", guessed from the file suffix when
                not given.

        Returns:
            Any: Configurations loaded from the file, `{}` for an empty file.

        Raises:
            FileNotFoundError: If the config file is not found.
            UnsupportedError: If the format is neither YAML nor JSON.
            DataInvalidError: If the file cannot be parsed or is not a mapping.
        """
        format = format or _format_of(filepath)
        if format not in ("yaml", "json"):
            raise UnsupportedError(f"Unsupported config file format: {format}")
        try:
            with open(filepath, "r") as file:
                if format == "yaml":
                    config = yaml.safe_load(file)
                else:
                    text = file.read()
                    config = json.loads(text) if text.strip() else None
        except FileNotFoundError:
            raise FileNotFoundError(f"Config file {filepath} not found.")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise DataInvalidError(f"Config file {filepath} is malformed: {e}")
        if config is not None and not isinstance(config, dict):
            raise DataInvalidError(f"Config file {filepath} must hold a mapping.")
        self.data = config if config is not None else {}
        return self.data

    def save_to_file(self, filepath: str, format: Optional[str] = None):
        """
        Save configurations to config file.

        Args:
            filepath (str): Path to the config file.
            format (str): "yaml" or "json", guessed from the file suffix when
                not given.
        """
        format = format or _format_of(filepath)
        if format not in ("yaml", "json"):
            raise UnsupportedError(f"Unsupported config file format: {format}")
        with open(filepath, "w") as file:
            if format == "yaml":
                yaml.safe_dump(self.data, file, indent=4)
            else:
                json.dump(self.data, file, indent=4)

    def get_nested_value(self, key: str) -> Any:
        """
        Get a nested value from configuration.

        Args:
            key (str): Nested key string delimited by `.`.

        Returns:
            Any: The value of the nested key, or `None` if not found.
        """
        nested_config = self.data
        for k in key.split("."):
            if isinstance(nested_config, dict) and k in nested_config:
                nested_config = nested_config[k]
            else:
                return None
        return nested_config

    def set_nested_value(self, key: str, value: Any):
        """
        Set a nested value in configuration, creating parent tables as needed.

        Raises:
            TypeError: If a parent key already holds a non-table value.
        """
        keys = key.split(".")
        nested_config = self.data
        for i, k in enumerate(keys[:-1]):
            if k not in nested_config:
                nested_config[k] = {}
            nested_config = nested_config[k]
            if not isinstance(nested_config, dict):
                raise TypeError(
                    f"Nested config {'.'.join(keys[: i + 1])} is not a dictionary."
                )
        nested_config[keys[-1]] = value

    def unset_nested_value(self, key: str):
        """Unset a nested value in configuration, ignoring missing keys."""

        keys = key.split(".")
        nested_config = self.data
        for k in keys[:-1]:
            if not isinstance(nested_config, dict) or k not in nested_config:
                return
            nested_config = nested_config[k]
        if isinstance(nested_config, dict) and keys[-1] in nested_config:
            del nested_config[keys[-1]]

    def iter_items(self, config: Any = None, prefix: str = ""):
        """Yield `(dotted_key, value)` for every leaf of the configuration."""

        config = self.data if config is None and not prefix else config
        if isinstance(config, dict):
            for key, value in config.items():
                current_key = f"{prefix}.{key}" if prefix else key
                yield from self.iter_items(value, current_key)
        else:
            yield prefix, config


class ValidatorSettings(NamedTuple):
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    overlong_lines: str = OVERLONG_ERROR


def parse_setting(key: str, value: Any) -> Any:
    """
    Convert and check a raw setting value.

    Raises:
        UnsupportedError: If the key is unknown or the value is out of range.
    """
    if key == KEY_MAX_LINE_LENGTH:
        try:
            length = int(value)
        except (TypeError, ValueError):
            raise UnsupportedError(f"{key} must be an integer, got {value!r}")
        if length <= 0:
            raise UnsupportedError(f"{key} must be positive, got {length}")
        return length
    if key == KEY_OVERLONG_LINES:
        policy = str(value).lower()
        if policy not in OVERLONG_POLICIES:
            raise UnsupportedError(
                f"{key} must be one of {', '.join(OVERLONG_POLICIES)}, got {value!r}"
            )
        return policy
    raise UnsupportedError(f"Unknown configuration key: {key}")


def load_settings(filepath: Optional[str] = None, **overrides) -> ValidatorSettings:
    """
    Build validator settings from defaults, a config file and overrides.

    Args:
        filepath (str): Config file to read; a missing file means defaults.
        **overrides: `max_line_length` / `overlong_lines` values that take
            precedence over the file, `None` values are ignored.

    Returns:
        ValidatorSettings: The merged settings.
    """
    values = ValidatorSettings()._asdict()
    if filepath and os.path.exists(filepath):
        cfg = Config()
        cfg.load_from_file(filepath)
        for key in KNOWN_KEYS:
            raw = cfg.get_nested_value(key)
            if raw is not None:
                values[key.split(".")[-1]] = parse_setting(key, raw)
    for name, raw in overrides.items():
        if raw is not None:
            values[name] = parse_setting(f"validate.{name}", raw)
    return ValidatorSettings(**values)
