"""Tests for package naming conventions and registry URLs."""

import pytest

from pluginwatch.core.config import RegistryConfig
from pluginwatch.core.naming import (
    changelog_url,
    is_tracked_plugin,
    metadata_url,
    platform_version_url,
    slug_of,
)
from pluginwatch.core.types import PackageRef

CONFIG = RegistryConfig()


@pytest.mark.parametrize(
    ("name", "kind", "expected"),
    [
        ("wpackagist-plugin/akismet", "wordpress-plugin", True),
        ("wpackagist-plugin/akismet", "wordpress-theme", False),
        ("wpackagist-plugin/akismet", "library", False),
        ("wpackagist-theme/twentytwenty", "wordpress-plugin", False),
        ("akismet", "wordpress-plugin", False),
        ("vendor/wpackagist-plugin/akismet", "wordpress-plugin", False),
        ("", "", False),
    ],
)
def test_is_tracked_plugin(name: str, kind: str, expected: bool) -> None:
    assert is_tracked_plugin(CONFIG, PackageRef(name=name, kind=kind, version="1.0")) is expected


def test_is_tracked_plugin_uses_configured_convention() -> None:
    config = RegistryConfig(package_kind="registry-plugin", mirror_prefix="mirror-plugin/")
    ref = PackageRef(name="mirror-plugin/akismet", kind="registry-plugin", version="1.0")

    assert is_tracked_plugin(config, ref)
    assert not is_tracked_plugin(CONFIG, ref)


def test_slug_of_strips_prefix() -> None:
    ref = PackageRef(name="wpackagist-plugin/akismet", kind="wordpress-plugin", version="1.0")
    assert slug_of(CONFIG, ref) == "akismet"


def test_slug_of_without_prefix_is_unchanged() -> None:
    ref = PackageRef(name="akismet", kind="wordpress-plugin", version="1.0")
    assert slug_of(CONFIG, ref) == "akismet"


def test_slug_of_only_strips_leading_prefix() -> None:
    ref = PackageRef(
        name="wpackagist-plugin/wpackagist-plugin/x", kind="wordpress-plugin", version="1.0"
    )
    assert slug_of(CONFIG, ref) == "wpackagist-plugin/x"


def test_metadata_url() -> None:
    ref = PackageRef(name="wpackagist-plugin/akismet", kind="wordpress-plugin", version="1.0")
    assert metadata_url(CONFIG, ref) == "https://api.wordpress.org/plugins/info/1.0/akismet.json"


def test_changelog_url() -> None:
    ref = PackageRef(name="wpackagist-plugin/akismet", kind="wordpress-plugin", version="1.0")
    assert changelog_url(CONFIG, ref) == "https://wordpress.org/plugins/akismet/#developers"


def test_urls_follow_configured_registry() -> None:
    config = RegistryConfig(
        api_base_url="https://api.example-registry.org",
        site_base_url="https://example-registry.org",
    )
    ref = PackageRef(name="wpackagist-plugin/akismet", kind="wordpress-plugin", version="1.0")

    assert metadata_url(config, ref) == (
        "https://api.example-registry.org/plugins/info/1.0/akismet.json"
    )
    assert changelog_url(config, ref).endswith("/plugins/akismet/#developers")
    assert platform_version_url(config) == (
        "https://api.example-registry.org/core/version-check/1.7/"
    )
