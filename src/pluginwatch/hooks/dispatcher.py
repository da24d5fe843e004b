"""Subscription table and an in-process dispatcher for hook handlers.

The host dependency manager owns the real dispatch loop. It only needs the
table returned by subscriptions(): (event, priority, handler) entries where
a higher priority runs first. EventDispatcher implements the same ordering
so the CLI and tests can replay host events.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from pluginwatch.core.context import PluginWatchContext
from pluginwatch.hooks.events import PackageEvent, PackageEvents
from pluginwatch.hooks.handlers import (
    HookContext,
    check_availability,
    check_compatibility,
    check_maintenance_status,
    print_changelog_link,
)

logger = logging.getLogger(__name__)

Handler = Callable[[HookContext, PackageEvent], None]


@dataclass(frozen=True)
class Subscription:
    event: PackageEvents
    priority: int
    handler: Handler

    @property
    def handler_name(self) -> str:
        return getattr(self.handler, "__name__", repr(self.handler))


def subscriptions() -> list[Subscription]:
    """Return the hooks registered with the host, in registration order."""
    return [
        Subscription(PackageEvents.PRE_PACKAGE_INSTALL, 0, check_availability),
        Subscription(PackageEvents.PRE_PACKAGE_UPDATE, 0, check_availability),
        Subscription(PackageEvents.PRE_PACKAGE_UPDATE, 1, check_maintenance_status),
        Subscription(PackageEvents.PRE_PACKAGE_UPDATE, 0, check_compatibility),
        Subscription(PackageEvents.POST_PACKAGE_UPDATE, 0, print_changelog_link),
    ]


class EventDispatcher:
    """Invokes subscribed handlers for an event, highest priority first.

    Handlers with equal priority run in registration order.
    """

    def __init__(self, table: Sequence[Subscription] | None = None) -> None:
        self._table = list(table) if table is not None else subscriptions()

    def listeners(self, event: PackageEvents) -> list[Subscription]:
        matching = [sub for sub in self._table if sub.event == event]
        # sorted() is stable, so registration order survives among equal priorities
        return sorted(matching, key=lambda sub: -sub.priority)

    def dispatch(self, ctx: PluginWatchContext, event: PackageEvent) -> None:
        """Run every listener for event with a checker scoped to this event."""
        hook = HookContext(feedback=ctx.feedback, checker=ctx.new_checker())
        for sub in self.listeners(event.name):
            logger.debug("Dispatching %s to %s", event.name.value, sub.handler_name)
            sub.handler(hook, event)
