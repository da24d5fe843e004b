"""Package naming conventions and registry URLs.

WPackagist mirrors the WordPress Plugin Directory under the reserved
`wpackagist-plugin/` vendor name. Stripping that prefix yields the slug the
registry knows the plugin by.
"""

from pluginwatch.core.config import RegistryConfig
from pluginwatch.core.types import PackageRef


def is_tracked_plugin(config: RegistryConfig, ref: PackageRef) -> bool:
    """Return True if ref is a plugin sourced from the registry mirror."""
    return ref.kind == config.package_kind and ref.name.startswith(config.mirror_prefix)


def slug_of(config: RegistryConfig, ref: PackageRef) -> str:
    """Return the registry slug for ref. Names without the prefix are returned as-is."""
    return ref.name.removeprefix(config.mirror_prefix)


def metadata_url(config: RegistryConfig, ref: PackageRef) -> str:
    """Return the plugin-info endpoint for ref.

    Example:
        >>> ref = PackageRef("wpackagist-plugin/akismet", "wordpress-plugin", "5.0")
        >>> metadata_url(RegistryConfig(), ref)
        'https://api.wordpress.org/plugins/info/1.0/akismet.json'
    """
    return f"{config.api_base_url}/plugins/info/1.0/{slug_of(config, ref)}.json"


def changelog_url(config: RegistryConfig, ref: PackageRef) -> str:
    """Return the public changelog page for ref."""
    return f"{config.site_base_url}/plugins/{slug_of(config, ref)}/#developers"


def platform_version_url(config: RegistryConfig) -> str:
    return f"{config.api_base_url}/core/version-check/1.7/"
