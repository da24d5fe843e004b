"""Pydantic models for JSON output schemas.

These models validate the documents emitted by `--format json` so scripts
consuming them can rely on a stable structure.
"""

from pydantic import BaseModel, ConfigDict

from pluginwatch.core.report import PackageReport


class PackageStatus(BaseModel):
    """Status of a single package.

    Attributes:
        name: Package name as given to the host (e.g. "wpackagist-plugin/akismet")
        version: Package version ("" when unknown)
        tracked: Whether the package comes from the registry mirror
        available: Whether the registry still lists the plugin (None if unknown)
        actively_maintained: Whether it was updated within the maintenance window
        compatible_with_recent: Whether it was tested against recent platform releases
        changelog_url: Registry changelog page (None for untracked packages)
        errors: Registry errors encountered while checking
    """

    model_config = ConfigDict(strict=True)

    name: str
    version: str
    tracked: bool
    available: bool | None
    actively_maintained: bool | None
    compatible_with_recent: bool | None
    changelog_url: str | None
    errors: list[str]

    @staticmethod
    def from_report(report: PackageReport) -> "PackageStatus":
        return PackageStatus(
            name=report.ref.name,
            version=report.ref.version,
            tracked=report.tracked,
            available=report.available,
            actively_maintained=report.actively_maintained,
            compatible_with_recent=report.compatible_with_recent,
            changelog_url=report.changelog_url,
            errors=list(report.errors),
        )


class StatusCommandResponse(BaseModel):
    """JSON response schema for `pluginwatch check` and `pluginwatch scan`.

    Attributes:
        platform_version: Platform version the compatibility check compared
            against (None if it was never needed or could not be fetched)
        packages: One entry per evaluated package
    """

    model_config = ConfigDict(strict=True)

    platform_version: str | None
    packages: list[PackageStatus]
