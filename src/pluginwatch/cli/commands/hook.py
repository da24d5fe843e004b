"""Hook commands - replay host lifecycle events through the dispatcher."""

import click

from pluginwatch.cli.output import machine_output
from pluginwatch.core.context import PluginWatchContext
from pluginwatch.core.types import PackageRef
from pluginwatch.hooks.dispatcher import EventDispatcher, subscriptions
from pluginwatch.hooks.events import (
    InstallOperation,
    Operation,
    PackageEvent,
    PackageEvents,
    UpdateOperation,
)

EVENT_CHOICES = [event.value for event in PackageEvents]


@click.command("hook")
@click.argument("event_name", type=click.Choice(EVENT_CHOICES))
@click.argument("name")
@click.option("--kind", default=None, help="Package type (defaults to the configured plugin type)")
@click.option("--version", "package_version", default="", help="Version being installed")
@click.option(
    "--from-version",
    default=None,
    help="Version being replaced (update events only, defaults to --version)",
)
@click.pass_obj
def hook_cmd(
    ctx: PluginWatchContext,
    event_name: str,
    name: str,
    kind: str | None,
    package_version: str,
    from_version: str | None,
) -> None:
    """Dispatch one package event as the dependency manager would.

    \b
    Examples:
      pluginwatch hook pre-package-install wpackagist-plugin/akismet --version 5.3
      pluginwatch hook post-package-update wpackagist-plugin/akismet --version 5.3
    """
    event = PackageEvents(event_name)
    package_kind = kind if kind is not None else ctx.config.package_kind
    target = PackageRef(name=name, kind=package_kind, version=package_version)

    operation: Operation
    if event == PackageEvents.PRE_PACKAGE_INSTALL:
        operation = InstallOperation(package=target)
    else:
        initial_version = from_version if from_version is not None else package_version
        initial = PackageRef(name=name, kind=package_kind, version=initial_version)
        operation = UpdateOperation(initial=initial, target=target)

    EventDispatcher().dispatch(ctx, PackageEvent(name=event, operation=operation))


@click.command("hooks")
def hooks_cmd() -> None:
    """List registered hooks in dispatch order."""
    dispatcher = EventDispatcher()
    for event in PackageEvents:
        for sub in dispatcher.listeners(event):
            machine_output(f"{event.value}\t{sub.priority}\t{sub.handler_name}")
