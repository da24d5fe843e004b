"""Plugin status evaluation against the registry.

PluginStatusChecker answers three independent questions about a plugin
installed through the registry mirror:

- is it still listed in the registry?
- has it been updated within the maintenance window (two years by default)?
- has it been tested against one of the last few platform releases?

Each predicate needs the plugin's registry metadata. Metadata is fetched once
per package and cached for the lifetime of the checker, which callers scope to
a single host event or CLI invocation.
"""

import json
import logging

from pluginwatch.core import naming
from pluginwatch.core.config import RegistryConfig
from pluginwatch.core.errors import RegistryResponseError, RegistryUnreachableError
from pluginwatch.core.http.abc import HttpClient
from pluginwatch.core.time.abc import Time
from pluginwatch.core.timestamps import parse_registry_timestamp, subtract_years
from pluginwatch.core.types import Found, NotFound, PackageRef, PluginMetadata, Verdict
from pluginwatch.core.versions import compare_versions, increment_version, truncate_version

logger = logging.getLogger(__name__)


def _slug_from_url(url: str) -> str:
    return url.rstrip("/").rsplit("/", 1)[-1].removesuffix(".json")


def parse_metadata(slug: str, body: bytes) -> PluginMetadata:
    """Parse a plugin-info response body.

    A body that is not a JSON object, or that carries the registry's `error`
    key, is treated as "not found". Unusable optional fields are dropped.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("Malformed metadata for %s", slug)
        return PluginMetadata.not_found(slug)

    if not isinstance(data, dict) or "error" in data:
        return PluginMetadata.not_found(slug)

    tested = data.get("tested")
    if not isinstance(tested, str) or not tested.strip():
        tested = None

    return PluginMetadata(
        slug=slug,
        found=True,
        last_updated=parse_registry_timestamp(data.get("last_updated")),
        tested=tested.strip() if tested is not None else None,
    )


class PluginStatusChecker:
    """Evaluates registry status predicates for mirror-sourced plugins."""

    def __init__(self, config: RegistryConfig, http: HttpClient, time: Time) -> None:
        self._config = config
        self._http = http
        self._time = time
        self._metadata_cache: dict[str, PluginMetadata] = {}
        self._platform_version: str | None = None

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def cached_platform_version(self) -> str | None:
        """Platform version fetched so far, None if it was never looked up."""
        return self._platform_version

    def is_tracked_plugin(self, ref: PackageRef) -> bool:
        return naming.is_tracked_plugin(self._config, ref)

    def slug_of(self, ref: PackageRef) -> str:
        return naming.slug_of(self._config, ref)

    def metadata_url(self, ref: PackageRef) -> str:
        return naming.metadata_url(self._config, ref)

    def changelog_url(self, ref: PackageRef) -> str:
        return naming.changelog_url(self._config, ref)

    def fetch_metadata(self, url: str) -> PluginMetadata:
        """Fetch and parse plugin metadata from url.

        A 404 is a valid answer and yields found=False.

        Raises:
            RegistryUnreachableError: On any transport failure or non-404 error status
        """
        slug = _slug_from_url(url)
        result = self._http.fetch(url)

        match result:
            case Found(body=body):
                return parse_metadata(slug, body)
            case NotFound():
                logger.debug("Registry has no plugin %s", slug)
                return PluginMetadata.not_found(slug)
            case _:
                raise RegistryUnreachableError(url, result.detail)

    def metadata_for(self, ref: PackageRef) -> PluginMetadata:
        """Return metadata for ref, fetching it on first use."""
        url = self.metadata_url(ref)
        cached = self._metadata_cache.get(url)
        if cached is not None:
            logger.debug("Metadata cache hit for %s", url)
            return cached

        metadata = self.fetch_metadata(url)
        self._metadata_cache[url] = metadata
        return metadata

    def cached_metadata(self, ref: PackageRef) -> PluginMetadata | None:
        """Return metadata already fetched for ref, without touching the network."""
        return self._metadata_cache.get(self.metadata_url(ref))

    def is_available(self, ref: PackageRef) -> bool:
        """Return True if the registry still lists ref.

        Callers must check is_tracked_plugin(ref) first.
        """
        return self.metadata_for(ref).found

    def is_actively_maintained(self, ref: PackageRef) -> bool:
        """Return True if ref was updated within the maintenance window.

        The window is measured in calendar years back from now; the last
        update must fall strictly after that point.
        """
        metadata = self.metadata_for(ref)
        if not metadata.found or metadata.last_updated is None:
            return False

        threshold = subtract_years(self._time.now(), self._config.maintenance_years)
        return metadata.last_updated > threshold

    def is_compatible_with_recent(self, ref: PackageRef, current_platform_version: str) -> bool:
        """Return True if ref was tested close enough to the current platform release.

        The tested version is advanced by compatibility_window minor releases
        and must then reach the current version (both truncated to major.minor).
        """
        metadata = self.metadata_for(ref)
        if not metadata.found or metadata.tested is None:
            return False

        try:
            reach = increment_version(
                truncate_version(metadata.tested), self._config.compatibility_window
            )
        except ValueError:
            logger.debug("Unparseable tested version %r for %s", metadata.tested, ref.name)
            return False

        return compare_versions(reach, truncate_version(current_platform_version)) >= 0

    def current_platform_version(self) -> str:
        """Return the latest platform release advertised by the registry.

        Raises:
            RegistryUnreachableError: If the version endpoint cannot be reached
            RegistryResponseError: If the response lacks offers[0].current
        """
        if self._platform_version is not None:
            return self._platform_version

        url = naming.platform_version_url(self._config)
        result = self._http.fetch(url)
        match result:
            case Found(body=body):
                pass
            case NotFound():
                raise RegistryResponseError(url, "version endpoint returned 404")
            case _:
                raise RegistryUnreachableError(url, result.detail)

        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise RegistryResponseError(url, "body is not valid JSON") from None

        offers = data.get("offers") if isinstance(data, dict) else None
        if not isinstance(offers, list) or not offers or not isinstance(offers[0], dict):
            raise RegistryResponseError(url, "missing offers")
        current = offers[0].get("current")
        if not isinstance(current, str) or not current:
            raise RegistryResponseError(url, "missing offers[0].current")

        try:
            truncate_version(current)
        except ValueError:
            raise RegistryResponseError(url, f"invalid version {current!r}") from None

        self._platform_version = current
        return current

    def check(
        self, ref: PackageRef, current_platform_version: str | None = None
    ) -> Verdict | None:
        """Evaluate all three predicates for ref.

        Returns None without touching the network when ref is not a tracked
        plugin. When current_platform_version is omitted it is looked up.

        Raises:
            RegistryUnreachableError: If the registry cannot be reached
            RegistryResponseError: If the platform version lookup is malformed
        """
        if not self.is_tracked_plugin(ref):
            return None

        available = self.is_available(ref)
        if not available:
            verdict = Verdict(
                available=False, actively_maintained=False, compatible_with_recent=False
            )
        else:
            if current_platform_version is None:
                current_platform_version = self.current_platform_version()
            verdict = Verdict(
                available=True,
                actively_maintained=self.is_actively_maintained(ref),
                compatible_with_recent=self.is_compatible_with_recent(
                    ref, current_platform_version
                ),
            )

        logger.debug("Verdict for %s: %s", ref.name, verdict)
        return verdict
