"""Check command implementation - registry status of individual packages."""

import click

from pluginwatch.cli.json_output import emit_json, json_error_boundary
from pluginwatch.cli.json_schemas import PackageStatus, StatusCommandResponse
from pluginwatch.cli.output import user_output
from pluginwatch.cli.rendering import report_warnings
from pluginwatch.core.checker import PluginStatusChecker
from pluginwatch.core.context import PluginWatchContext
from pluginwatch.core.report import PackageReport, build_report
from pluginwatch.core.types import PackageRef
from pluginwatch.core.user_feedback import SuppressedFeedback
from pluginwatch.core.versions import truncate_version


def validate_platform_version(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> str | None:
    """Click callback rejecting platform versions that are not dotted numbers."""
    if value is None:
        return None
    try:
        truncate_version(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a dotted version like 6.4") from None
    return value


def emit_reports(
    ctx: PluginWatchContext,
    checker: PluginStatusChecker,
    reports: list[PackageReport],
    platform_version: str | None,
    format: str,
) -> None:
    """Emit reports as JSON on stdout or as warnings through ctx.feedback."""
    if format == "json":
        response = StatusCommandResponse(
            platform_version=platform_version or checker.cached_platform_version,
            packages=[PackageStatus.from_report(report) for report in reports],
        )
        emit_json(response.model_dump(mode="json"))
        return

    for report in reports:
        if not report.tracked:
            continue
        warnings = report_warnings(checker, report)
        for warning in warnings:
            ctx.feedback.warning(warning)
        if not warnings:
            ctx.feedback.info(f"{report.ref.name}: ok")


@click.command("check")
@click.argument("names", nargs=-1, required=True)
@click.option("--kind", default=None, help="Package type (defaults to the configured plugin type)")
@click.option("--version", "package_version", default="", help="Package version, informational")
@click.option(
    "--wp-version",
    "platform_version",
    default=None,
    callback=validate_platform_version,
    help="Compare against this platform version instead of looking it up",
)
@click.option(
    "--format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text or json)",
)
@json_error_boundary
@click.pass_obj
def check_cmd(
    ctx: PluginWatchContext,
    names: tuple[str, ...],
    kind: str | None,
    package_version: str,
    platform_version: str | None,
    format: str,
) -> None:
    """Check registry status of one or more packages.

    Warnings never change the exit code: an unavailable, stale or untested
    plugin is reported, not rejected.
    """
    if format == "json":
        ctx = ctx.with_feedback(SuppressedFeedback())

    package_kind = kind if kind is not None else ctx.config.package_kind
    checker = ctx.new_checker()
    reports: list[PackageReport] = []
    for name in names:
        ref = PackageRef(name=name, kind=package_kind, version=package_version)
        report = build_report(checker, ref, platform_version)
        if not report.tracked and format == "text":
            user_output(f"{name}: not a registry plugin, skipped")
        reports.append(report)

    emit_reports(ctx, checker, reports, platform_version, format)
