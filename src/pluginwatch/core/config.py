"""Registry configuration.

Defaults target the WordPress.org plugin directory as mirrored by WPackagist.
Values can be overridden in the `[tool.pluginwatch]` table of the project's
pyproject.toml and, on top of that, through environment variables.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import tomlkit

ENV_API_BASE_URL = "PLUGINWATCH_API_BASE_URL"
ENV_SITE_BASE_URL = "PLUGINWATCH_SITE_BASE_URL"
ENV_TIMEOUT = "PLUGINWATCH_TIMEOUT"


@dataclass(frozen=True)
class RegistryConfig:
    """Immutable registry settings, loaded once at the CLI entry point."""

    package_kind: str = "wordpress-plugin"
    mirror_prefix: str = "wpackagist-plugin/"
    api_base_url: str = "https://api.wordpress.org"
    site_base_url: str = "https://wordpress.org"
    platform_name: str = "WordPress"
    registry_name: str = "WordPress.org"
    timeout_seconds: float = 10.0
    maintenance_years: int = 2
    compatibility_window: int = 3

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_STR_KEYS = {
    "package_kind",
    "mirror_prefix",
    "api_base_url",
    "site_base_url",
    "platform_name",
    "registry_name",
}
_INT_KEYS = {"maintenance_years", "compatibility_window"}
_FLOAT_KEYS = {"timeout_seconds"}


def _coerce(key: str, value: Any) -> Any:
    if key in _STR_KEYS:
        if not isinstance(value, str) or not value:
            raise ValueError(f"'{key}' must be a non-empty string")
        if key.endswith("_url"):
            return value.rstrip("/")
        return value
    if key in _INT_KEYS:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"'{key}' must be a non-negative integer")
        return value
    if key in _FLOAT_KEYS:
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"'{key}' must be a number") from None
        if number <= 0:
            raise ValueError(f"'{key}' must be greater than zero")
        return number
    raise ValueError(f"Unknown configuration key '{key}'")


def config_from_mapping(data: Mapping[str, Any]) -> RegistryConfig:
    """Build a RegistryConfig from a `[tool.pluginwatch]`-shaped mapping.

    Raises:
        ValueError: If a key is unknown or a value has the wrong type
    """
    values = {key: _coerce(key, value) for key, value in data.items()}
    return RegistryConfig(**values)


def read_pyproject_table(project_dir: Path) -> dict[str, Any]:
    """Return the `[tool.pluginwatch]` table of project_dir/pyproject.toml, or {}."""
    pyproject_path = project_dir / "pyproject.toml"
    if not pyproject_path.exists():
        return {}

    data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    table = data.get("tool", {}).get("pluginwatch", {})
    if not isinstance(table, dict):
        raise ValueError(f"[tool.pluginwatch] in {pyproject_path} must be a table")
    return table


def load_config(project_dir: Path, env: Mapping[str, str] | None = None) -> RegistryConfig:
    """Load configuration from pyproject.toml and the environment.

    Args:
        project_dir: Directory whose pyproject.toml may carry `[tool.pluginwatch]`
        env: Environment mapping (defaults to os.environ)

    Returns:
        RegistryConfig with file values applied over defaults and
        environment overrides applied last
    """
    if env is None:
        env = os.environ

    data = dict(read_pyproject_table(project_dir))
    if env.get(ENV_API_BASE_URL):
        data["api_base_url"] = env[ENV_API_BASE_URL]
    if env.get(ENV_SITE_BASE_URL):
        data["site_base_url"] = env[ENV_SITE_BASE_URL]
    if env.get(ENV_TIMEOUT):
        data["timeout_seconds"] = env[ENV_TIMEOUT]

    return config_from_mapping(data)


def write_config_to_pyproject(project_dir: Path, config: RegistryConfig) -> Path:
    """Write config into the `[tool.pluginwatch]` table of pyproject.toml.

    Creates the file if missing. Existing formatting and comments are
    preserved using tomlkit.

    Returns:
        Path to the written pyproject.toml
    """
    pyproject_path = project_dir / "pyproject.toml"

    if pyproject_path.exists():
        with pyproject_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)
    else:
        doc = tomlkit.document()

    if "tool" not in doc:
        doc["tool"] = tomlkit.table()  # type: ignore[index]

    table = tomlkit.table()
    for key, value in config.to_dict().items():
        table[key] = value
    doc["tool"]["pluginwatch"] = table  # type: ignore[index]

    with pyproject_path.open("w", encoding="utf-8") as f:
        tomlkit.dump(doc, f)
    return pyproject_path
