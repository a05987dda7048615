"""Comet SDK configuration."""

import logging
import os
from typing import Any, Dict, Optional

import yaml

from comet.exceptions import ConfigurationException


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _check_indent(value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationException(f"indent must be an integer or None, got {value!r}")
    if value < 0:
        raise ConfigurationException("indent must be >= 0")


def _check_flag(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ConfigurationException(f"{name} must be a boolean, got {value!r}")


def _check_section(name: str, value: Any) -> None:
    if not isinstance(value, dict):
        raise ConfigurationException(
            f"'{name}' configuration must be a mapping, got {type(value).__name__}"
        )


def _check_json_config(value: Any) -> None:
    if not isinstance(value, JsonConfig):
        raise ConfigurationException(f"json must be a JsonConfig, got {type(value).__name__}")


def _normalize_log_level(value: Any) -> str:
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        raise ConfigurationException(f"log_level must be one of {LOG_LEVELS}, got {value!r}")
    return value.upper()


class JsonConfig:
    """Output options for JSON text produced by ``to_json``."""

    def __init__(
        self,
        indent: Optional[int] = None,
        sort_keys: bool = False,
        ensure_ascii: bool = False,
        compact: bool = True,
    ):
        self._indent = indent
        self._sort_keys = sort_keys
        self._ensure_ascii = ensure_ascii
        self._compact = compact
        self._validate()

    def _validate(self) -> None:
        _check_indent(self._indent)
        _check_flag("sort_keys", self._sort_keys)
        _check_flag("ensure_ascii", self._ensure_ascii)
        _check_flag("compact", self._compact)

    @property
    def indent(self) -> Optional[int]:
        """Get the indent width, or None for single-line output."""
        return self._indent

    @indent.setter
    def indent(self, value: Optional[int]) -> None:
        _check_indent(value)
        self._indent = value

    @property
    def sort_keys(self) -> bool:
        """Whether object keys are sorted instead of kept in wire order."""
        return self._sort_keys

    @sort_keys.setter
    def sort_keys(self, value: bool) -> None:
        _check_flag("sort_keys", value)
        self._sort_keys = value

    @property
    def ensure_ascii(self) -> bool:
        """Whether non-ASCII characters are escaped."""
        return self._ensure_ascii

    @ensure_ascii.setter
    def ensure_ascii(self, value: bool) -> None:
        _check_flag("ensure_ascii", value)
        self._ensure_ascii = value

    @property
    def compact(self) -> bool:
        """Whether single-line output omits whitespace after separators."""
        return self._compact

    @compact.setter
    def compact(self, value: bool) -> None:
        _check_flag("compact", value)
        self._compact = value

    def dumps_kwargs(self) -> Dict[str, Any]:
        """Get keyword arguments for :func:`json.dumps`."""
        kwargs: Dict[str, Any] = {
            "sort_keys": self._sort_keys,
            "ensure_ascii": self._ensure_ascii,
        }
        if self._indent is not None:
            kwargs["indent"] = self._indent
        elif self._compact:
            kwargs["separators"] = (",", ":")
        return kwargs

    @classmethod
    def from_dict(cls, data: dict) -> "JsonConfig":
        """Create JsonConfig from a dictionary."""
        _check_section("json", data)
        return cls(
            indent=data.get("indent"),
            sort_keys=data.get("sort_keys", False),
            ensure_ascii=data.get("ensure_ascii", False),
            compact=data.get("compact", True),
        )


class ClientConfig:
    """Top-level SDK configuration.

    Example:
        Load from YAML::

            config = ClientConfig.from_yaml("comet.yml")
            text = record.to_json(config.json)
    """

    def __init__(self, json: JsonConfig = None, log_level: str = "WARNING"):
        if json is None:
            json = JsonConfig()
        _check_json_config(json)
        self._json = json
        self._log_level = _normalize_log_level(log_level)

    @property
    def json(self) -> JsonConfig:
        """Get the JSON output configuration."""
        return self._json

    @json.setter
    def json(self, value: JsonConfig) -> None:
        _check_json_config(value)
        self._json = value

    @property
    def log_level(self) -> str:
        """Get the log level name."""
        return self._log_level

    @log_level.setter
    def log_level(self, value: str) -> None:
        self._log_level = _normalize_log_level(value)

    @property
    def logging_level(self) -> int:
        """Get the log level as a :mod:`logging` constant."""
        return getattr(logging, self._log_level)

    @classmethod
    def from_dict(cls, data: dict) -> "ClientConfig":
        """Create ClientConfig from a dictionary."""
        _check_section("comet", data)
        config = cls()

        if "json" in data:
            json_data = data["json"]
            config.json = JsonConfig.from_dict({} if json_data is None else json_data)

        if "log_level" in data:
            config.log_level = data["log_level"]

        return config

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ClientConfig":
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            ClientConfig instance.

        Raises:
            ConfigurationException: If the file cannot be read or parsed.
        """
        if not os.path.exists(yaml_path):
            raise ConfigurationException(f"Configuration file not found: {yaml_path}")

        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Failed to parse YAML: {e}", cause=e)
        except IOError as e:
            raise ConfigurationException(f"Failed to read configuration file: {e}", cause=e)

        return cls._from_document(data)

    @classmethod
    def from_yaml_string(cls, yaml_content: str) -> "ClientConfig":
        """Load configuration from a YAML string.

        Args:
            yaml_content: YAML configuration as a string.

        Returns:
            ClientConfig instance.

        Raises:
            ConfigurationException: If the YAML cannot be parsed.
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Failed to parse YAML: {e}", cause=e)

        return cls._from_document(data)

    @classmethod
    def _from_document(cls, data: Any) -> "ClientConfig":
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigurationException("Configuration document must be a mapping")

        if "comet" in data:
            data = {} if data["comet"] is None else data["comet"]

        return cls.from_dict(data)
