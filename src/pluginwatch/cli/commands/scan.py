"""Scan command implementation - check every plugin pinned in composer.lock."""

from pathlib import Path

import click
from rich.console import Console

from pluginwatch.cli.commands.check import emit_reports, validate_platform_version
from pluginwatch.cli.json_output import json_error_boundary
from pluginwatch.cli.output import user_output
from pluginwatch.cli.rendering import render_report_table
from pluginwatch.core.context import PluginWatchContext
from pluginwatch.core.lockfile import read_lock_packages
from pluginwatch.core.report import build_report
from pluginwatch.core.user_feedback import SuppressedFeedback


@click.command("scan")
@click.argument("lock_file", type=click.Path(path_type=Path), required=False)
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
def scan_cmd(
    ctx: PluginWatchContext,
    lock_file: Path | None,
    platform_version: str | None,
    format: str,
) -> None:
    """Check all registry plugins pinned in a composer.lock.

    LOCK_FILE defaults to composer.lock in the current directory.
    """
    if format == "json":
        ctx = ctx.with_feedback(SuppressedFeedback())

    lock_path = lock_file if lock_file is not None else ctx.cwd / "composer.lock"
    if not lock_path.exists():
        if format == "json":
            raise FileNotFoundError(f"Lock file not found at {lock_path}")
        user_output(f"Error: Lock file not found at {lock_path}")
        raise SystemExit(1)

    try:
        refs = read_lock_packages(lock_path)
    except ValueError as e:
        if format == "json":
            raise
        user_output(f"Error: {e}")
        raise SystemExit(1) from None

    checker = ctx.new_checker()
    tracked = [ref for ref in refs if checker.is_tracked_plugin(ref)]

    if not tracked and format == "text":
        user_output(f"No registry plugins found in {lock_path}")
        return

    reports = [build_report(checker, ref, platform_version) for ref in tracked]

    if format == "text":
        Console(stderr=True).print(render_report_table(reports))

    emit_reports(ctx, checker, reports, platform_version, format)

    if format == "text":
        flagged = sum(1 for report in reports if not report.healthy)
        user_output(f"{flagged} of {len(reports)} plugins need attention")
