"""Parser configuration.

Settings come from YAML files and environment variables. The parsing core
never reads either itself; callers load a :class:`ParserConfig` and pass
it in.
"""

import logging
import os
from pathlib import Path
from typing import Any

import msgspec
import yaml

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


class ParserConfig(
    msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=True
):
    """Options controlling how a document is assembled.

    Attributes:
        predefined_months: Resolve ``jan`` .. ``dec`` when no user variable
            of that name exists.
        lowercase_tags: Lowercase tag keys in the resulting bibliographies.
    """

    predefined_months: bool = True
    lowercase_tags: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParserConfig":
        """Build a config from a plain mapping."""
        try:
            return msgspec.convert(data, cls)
        except msgspec.ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}")

    @classmethod
    def from_file(cls, path: Path) -> "ParserConfig":
        """Load configuration from a YAML file."""
        return cls.from_dict(read_yaml(path))


def read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from ``path``."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except OSError as e:
        raise ValueError(f"Error reading config file: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def get_config_paths() -> list[Path]:
    """Get configuration paths in precedence order (last wins)."""
    xdg_config_home = Path(
        os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    )
    return [
        xdg_config_home / "bibscan" / "config.yaml",
        Path(".bibscan.yaml"),
        Path("bibscan.yaml"),
    ]


def env_overrides() -> dict[str, bool]:
    """Read overrides from ``BIBSCAN_*`` environment variables."""
    overrides = {}
    for field in ParserConfig.__struct_fields__:
        value = os.environ.get(f"BIBSCAN_{field.upper()}")
        if value is not None:
            overrides[field] = value.strip().lower() in TRUTHY
    return overrides


def load_config(path: Path | None = None) -> ParserConfig:
    """Load configuration from default files, ``path`` and the environment.

    ``path``, when given, is merged after the default locations.
    """
    data: dict[str, Any] = {}

    paths = get_config_paths()
    if path is not None:
        paths.append(path)

    for candidate in paths:
        if candidate.exists():
            logger.debug("Loading configuration from %s", candidate)
            data.update(read_yaml(candidate))

    data.update(env_overrides())
    return ParserConfig.from_dict(data)
