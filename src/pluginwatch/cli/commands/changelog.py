"""Changelog command implementation."""

import click

from pluginwatch.cli.output import machine_output, user_output
from pluginwatch.core.context import PluginWatchContext
from pluginwatch.core.types import PackageRef


@click.command("changelog")
@click.argument("names", nargs=-1, required=True)
@click.option("--kind", default=None, help="Package type (defaults to the configured plugin type)")
@click.pass_obj
def changelog_cmd(ctx: PluginWatchContext, names: tuple[str, ...], kind: str | None) -> None:
    """Print changelog URLs of registry plugins."""
    package_kind = kind if kind is not None else ctx.config.package_kind
    checker = ctx.new_checker()
    for name in names:
        ref = PackageRef(name=name, kind=package_kind, version="")
        if not checker.is_tracked_plugin(ref):
            user_output(f"{name}: not a registry plugin, skipped")
            continue
        machine_output(checker.changelog_url(ref))
