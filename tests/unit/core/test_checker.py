"""Tests for PluginStatusChecker.

All registry traffic goes through FakeHttpClient and the clock is frozen with
FakeTime at 2024-06-15 12:00 UTC.
"""

from datetime import UTC, datetime

import pytest

from pluginwatch.core.checker import PluginStatusChecker, parse_metadata
from pluginwatch.core.config import RegistryConfig
from pluginwatch.core.errors import RegistryResponseError, RegistryUnreachableError
from pluginwatch.core.types import Found, NotFound, PackageRef, TransportError, Verdict
from tests.fakes.http import FakeHttpClient
from tests.fakes.time import FakeTime
from tests.test_utils.registry import (
    VERSION_CHECK_URL,
    info_url,
    plugin_info,
    plugin_ref,
    version_check,
)


def make_checker(responses: dict, config: RegistryConfig | None = None) -> PluginStatusChecker:
    return PluginStatusChecker(
        config or RegistryConfig(), FakeHttpClient(responses=responses), FakeTime()
    )


# ===========================
# fetch_metadata
# ===========================


def test_fetch_metadata_parses_found_response() -> None:
    checker = make_checker(
        {info_url("akismet"): plugin_info(last_updated="2024-05-01 9:30am GMT", tested="6.5.3")}
    )

    metadata = checker.fetch_metadata(info_url("akismet"))

    assert metadata.slug == "akismet"
    assert metadata.found
    assert metadata.last_updated == datetime(2024, 5, 1, 9, 30, tzinfo=UTC)
    assert metadata.tested == "6.5.3"


def test_fetch_metadata_404_is_not_found() -> None:
    checker = make_checker({info_url("gone"): NotFound()})

    metadata = checker.fetch_metadata(info_url("gone"))

    assert not metadata.found
    assert metadata.last_updated is None
    assert metadata.tested is None


def test_fetch_metadata_transport_error_raises() -> None:
    checker = make_checker({info_url("akismet"): TransportError(detail="ConnectTimeout")})

    with pytest.raises(RegistryUnreachableError) as exc_info:
        checker.fetch_metadata(info_url("akismet"))

    assert exc_info.value.url == info_url("akismet")
    assert exc_info.value.detail == "ConnectTimeout"


@pytest.mark.parametrize(
    "body",
    [b"<html>oops</html>", b"null", b"[]", b'"text"', b"\xff\xfe", b""],
)
def test_malformed_body_is_not_found(body: bytes) -> None:
    metadata = parse_metadata("akismet", body)

    assert not metadata.found
    assert metadata.last_updated is None
    assert metadata.tested is None


def test_error_payload_is_not_found() -> None:
    metadata = parse_metadata("gone", b'{"error": "Plugin not found."}')
    assert not metadata.found


def test_partial_data_keeps_found() -> None:
    metadata = parse_metadata("akismet", b'{"name": "Akismet", "tested": ""}')

    assert metadata.found
    assert metadata.last_updated is None
    assert metadata.tested is None


# ===========================
# is_available
# ===========================


def test_is_available_true_when_found() -> None:
    checker = make_checker({info_url("akismet"): plugin_info(name="Akismet")})
    assert checker.is_available(plugin_ref("akismet"))


def test_is_available_false_on_404_without_exception() -> None:
    checker = make_checker({info_url("codestyling-localization"): NotFound()})
    assert checker.is_available(plugin_ref("codestyling-localization")) is False


def test_is_available_timeout_raises_not_false() -> None:
    checker = make_checker({info_url("akismet"): TransportError(detail="ReadTimeout: timed out")})

    with pytest.raises(RegistryUnreachableError):
        checker.is_available(plugin_ref("akismet"))


# ===========================
# is_actively_maintained
# ===========================


def test_maintained_one_day_inside_window() -> None:
    checker = make_checker({info_url("a"): plugin_info(last_updated="2022-06-16 12:00pm GMT")})
    assert checker.is_actively_maintained(plugin_ref("a"))


def test_not_maintained_one_day_outside_window() -> None:
    checker = make_checker({info_url("a"): plugin_info(last_updated="2022-06-14 12:00pm GMT")})
    assert not checker.is_actively_maintained(plugin_ref("a"))


def test_not_maintained_exactly_at_threshold() -> None:
    checker = make_checker({info_url("a"): plugin_info(last_updated="2022-06-15 12:00pm GMT")})
    assert not checker.is_actively_maintained(plugin_ref("a"))


def test_not_maintained_when_last_updated_missing() -> None:
    checker = make_checker({info_url("a"): plugin_info(tested="6.5")})
    assert not checker.is_actively_maintained(plugin_ref("a"))


def test_not_maintained_when_not_found() -> None:
    checker = make_checker({info_url("a"): NotFound()})
    assert not checker.is_actively_maintained(plugin_ref("a"))


def test_maintenance_window_is_configurable() -> None:
    checker = make_checker(
        {info_url("a"): plugin_info(last_updated="2023-01-01")},
        config=RegistryConfig(maintenance_years=1),
    )
    assert not checker.is_actively_maintained(plugin_ref("a"))


# ===========================
# is_compatible_with_recent
# ===========================


def test_compatible_when_three_releases_reach_current() -> None:
    checker = make_checker({info_url("a"): plugin_info(tested="4.0")})
    assert checker.is_compatible_with_recent(plugin_ref("a"), "4.3")


def test_incompatible_when_current_is_further_ahead() -> None:
    checker = make_checker({info_url("a"): plugin_info(tested="4.0")})
    assert not checker.is_compatible_with_recent(plugin_ref("a"), "4.4")


def test_compatible_ignores_patch_components() -> None:
    checker = make_checker({info_url("a"): plugin_info(tested="6.4.2")})
    assert checker.is_compatible_with_recent(plugin_ref("a"), "6.7.1")


def test_compatible_across_major_carry() -> None:
    checker = make_checker({info_url("a"): plugin_info(tested="5.9")})

    assert checker.is_compatible_with_recent(plugin_ref("a"), "6.2")
    assert not checker.is_compatible_with_recent(plugin_ref("a"), "6.3")


def test_incompatible_when_tested_missing() -> None:
    checker = make_checker({info_url("a"): plugin_info(last_updated="2024-01-01")})
    assert not checker.is_compatible_with_recent(plugin_ref("a"), "6.5")


def test_incompatible_when_tested_unparseable() -> None:
    checker = make_checker({info_url("a"): plugin_info(tested="latest")})
    assert not checker.is_compatible_with_recent(plugin_ref("a"), "6.5")


def test_incompatible_when_not_found() -> None:
    checker = make_checker({info_url("a"): NotFound()})
    assert not checker.is_compatible_with_recent(plugin_ref("a"), "6.5")


# ===========================
# current_platform_version
# ===========================


def test_current_platform_version_reads_first_offer() -> None:
    checker = make_checker({VERSION_CHECK_URL: version_check("6.5.4")})
    assert checker.current_platform_version() == "6.5.4"


def test_current_platform_version_is_fetched_once() -> None:
    http = FakeHttpClient(responses={VERSION_CHECK_URL: version_check("6.5.4")})
    checker = PluginStatusChecker(RegistryConfig(), http, FakeTime())

    checker.current_platform_version()
    checker.current_platform_version()

    assert http.requested_urls == [VERSION_CHECK_URL]
    assert checker.cached_platform_version == "6.5.4"


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b"{}",
        b'{"offers": []}',
        b'{"offers": [{"current": ""}]}',
        b'{"offers": [{"current": "six"}]}',
    ],
)
def test_current_platform_version_malformed(body: bytes) -> None:
    checker = make_checker({VERSION_CHECK_URL: Found(body=body)})

    with pytest.raises(RegistryResponseError):
        checker.current_platform_version()


def test_current_platform_version_unreachable() -> None:
    checker = make_checker({VERSION_CHECK_URL: TransportError(detail="HTTP 503")})

    with pytest.raises(RegistryUnreachableError):
        checker.current_platform_version()


# ===========================
# check
# ===========================


def test_check_skips_untracked_packages_without_network() -> None:
    http = FakeHttpClient()
    checker = PluginStatusChecker(RegistryConfig(), http, FakeTime())

    verdict = checker.check(PackageRef(name="monolog/monolog", kind="library", version="3.0"))

    assert verdict is None
    assert http.requested_urls == []


def test_check_healthy_plugin() -> None:
    checker = make_checker(
        {
            info_url("akismet"): plugin_info(last_updated="2024-05-01 9:30am GMT", tested="6.5"),
            VERSION_CHECK_URL: version_check("6.5.4"),
        }
    )

    verdict = checker.check(plugin_ref("akismet"))

    assert verdict == Verdict(available=True, actively_maintained=True, compatible_with_recent=True)


def test_check_unavailable_plugin_skips_platform_lookup() -> None:
    http = FakeHttpClient(responses={info_url("gone"): NotFound()})
    checker = PluginStatusChecker(RegistryConfig(), http, FakeTime())

    verdict = checker.check(plugin_ref("gone"))

    assert verdict == Verdict(
        available=False, actively_maintained=False, compatible_with_recent=False
    )
    assert http.requested_urls == [info_url("gone")]


def test_check_fetches_metadata_once_per_package() -> None:
    http = FakeHttpClient(
        responses={
            info_url("akismet"): plugin_info(last_updated="2019-01-01", tested="5.0"),
        }
    )
    checker = PluginStatusChecker(RegistryConfig(), http, FakeTime())

    verdict = checker.check(plugin_ref("akismet"), current_platform_version="6.5")

    assert verdict == Verdict(
        available=True, actively_maintained=False, compatible_with_recent=False
    )
    assert http.requested_urls == [info_url("akismet")]


def test_cached_metadata_does_not_fetch() -> None:
    http = FakeHttpClient(responses={info_url("akismet"): plugin_info(tested="6.5")})
    checker = PluginStatusChecker(RegistryConfig(), http, FakeTime())

    assert checker.cached_metadata(plugin_ref("akismet")) is None
    assert http.requested_urls == []

    checker.is_available(plugin_ref("akismet"))
    cached = checker.cached_metadata(plugin_ref("akismet"))

    assert cached is not None
    assert cached.tested == "6.5"
    assert http.requested_urls == [info_url("akismet")]
