"""
Configuration management for code generation.

Handles loading the plugin options sqlc forwards from the `options` block of
`sqlc.yaml`, providing validation for generator settings.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Module the generated files import `BoundQuery` and `Query` from
    types_path: str

    # Unrecognized settings, kept for forward compatibility
    custom: Dict[str, Any] = field(default_factory=dict)


def load_config(options: Union[bytes, str, Mapping[str, Any], None]) -> GeneratorConfig:
    """
    Load generator configuration from plugin options.

    Args:
        options: Raw option bytes as sent by sqlc, a JSON string, or an
            already decoded mapping

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the options are absent, not valid JSON, or invalid
    """
    if isinstance(options, (bytes, bytearray)):
        try:
            options = bytes(options).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigError(f"faulty plugin settings encoding: {e}") from e

    if isinstance(options, str):
        if not options.strip():
            raise ConfigError("missing plugin settings (expected an options block)")
        try:
            options = json.loads(options)
        except json.JSONDecodeError as e:
            raise ConfigError(f"malformed plugin settings: {e}") from e

    if options is None:
        raise ConfigError("missing plugin settings (expected an options block)")

    if not isinstance(options, Mapping):
        raise ConfigError("malformed plugin settings: expected a JSON object")

    return _dict_to_config(dict(options))


def _dict_to_config(config_dict: Dict[str, Any]) -> GeneratorConfig:
    """Convert dictionary to GeneratorConfig instance."""
    types_path = config_dict.pop("types_path", None)
    _validate_types_path(types_path)

    for key in config_dict:
        logger.warning("Ignoring unknown plugin setting: %s", key)

    return GeneratorConfig(types_path=types_path, custom=config_dict)


def _validate_types_path(types_path: Any) -> None:
    if types_path is None:
        raise ConfigError("malformed plugin settings: missing field `types_path`")
    if not isinstance(types_path, str) or not types_path.strip():
        raise ConfigError(
            "malformed plugin settings: `types_path` must be a non-empty string"
        )
    # Embedded verbatim in a double-quoted import specifier
    if '"' in types_path or "\n" in types_path:
        raise ConfigError(
            f"malformed plugin settings: invalid `types_path` {types_path!r}"
        )
