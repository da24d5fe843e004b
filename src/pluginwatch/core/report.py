"""Per-package status reports for the CLI."""

import logging
from dataclasses import dataclass, field

from pluginwatch.core.checker import PluginStatusChecker
from pluginwatch.core.errors import PluginWatchError
from pluginwatch.core.types import PackageRef

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageReport:
    """Status of one package.

    Predicate fields are None when the package is not tracked or when the
    registry could not answer; `errors` then says why.
    """

    ref: PackageRef
    tracked: bool
    available: bool | None = None
    actively_maintained: bool | None = None
    compatible_with_recent: bool | None = None
    changelog_url: str | None = None
    errors: tuple[str, ...] = field(default=())

    @property
    def healthy(self) -> bool:
        return bool(
            self.available
            and self.actively_maintained
            and self.compatible_with_recent
            and not self.errors
        )


def build_report(
    checker: PluginStatusChecker, ref: PackageRef, platform_version: str | None
) -> PackageReport:
    """Evaluate ref through checker.check, recording registry failures instead of raising them.

    When only the platform version lookup fails, the predicates that do not
    depend on it are still reported.

    Args:
        checker: Checker scoped to the current invocation
        ref: Package to evaluate
        platform_version: Current platform version, or None to look it up
    """
    try:
        verdict = checker.check(ref, platform_version)
    except PluginWatchError as e:
        logger.debug("Registry lookup for %s failed: %s", ref.name, e)
        return _partial_report(checker, ref, checker.changelog_url(ref), e)

    if verdict is None:
        return PackageReport(ref=ref, tracked=False)

    return PackageReport(
        ref=ref,
        tracked=True,
        available=verdict.available,
        actively_maintained=verdict.actively_maintained,
        compatible_with_recent=verdict.compatible_with_recent,
        changelog_url=checker.changelog_url(ref),
    )


def _partial_report(
    checker: PluginStatusChecker, ref: PackageRef, changelog: str, error: PluginWatchError
) -> PackageReport:
    if checker.cached_metadata(ref) is None:
        return PackageReport(ref=ref, tracked=True, changelog_url=changelog, errors=(str(error),))

    # Only the platform version lookup failed; the metadata predicates are answered from cache
    return PackageReport(
        ref=ref,
        tracked=True,
        available=checker.is_available(ref),
        actively_maintained=checker.is_actively_maintained(ref),
        changelog_url=changelog,
        errors=(str(error),),
    )
