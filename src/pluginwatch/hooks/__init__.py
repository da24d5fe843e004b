"""Hooks invoked by the host dependency manager around package operations."""

from pluginwatch.hooks.dispatcher import EventDispatcher, Subscription, subscriptions
from pluginwatch.hooks.events import (
    InstallOperation,
    PackageEvent,
    PackageEvents,
    UpdateOperation,
    package_of,
)

__all__ = [
    "EventDispatcher",
    "InstallOperation",
    "PackageEvent",
    "PackageEvents",
    "Subscription",
    "UpdateOperation",
    "package_of",
    "subscriptions",
]
