"""Host lifecycle events and the operations they carry.

These mirror the small part of the dependency manager's object model the
hooks depend on: an event name plus an install or update operation.
"""

from dataclasses import dataclass
from enum import Enum

from pluginwatch.core.types import PackageRef


class PackageEvents(str, Enum):
    """Package lifecycle events fired by the host."""

    PRE_PACKAGE_INSTALL = "pre-package-install"
    PRE_PACKAGE_UPDATE = "pre-package-update"
    POST_PACKAGE_UPDATE = "post-package-update"


@dataclass(frozen=True)
class InstallOperation:
    package: PackageRef


@dataclass(frozen=True)
class UpdateOperation:
    initial: PackageRef
    target: PackageRef


Operation = InstallOperation | UpdateOperation


@dataclass(frozen=True)
class PackageEvent:
    """A lifecycle event for a single package operation."""

    name: PackageEvents
    operation: Operation


def package_of(event: PackageEvent) -> PackageRef | None:
    """Return the package an event is about.

    For updates this is the target of the update, i.e. the version about to
    be (or just) installed.
    """
    operation = event.operation
    if isinstance(operation, InstallOperation):
        return operation.package
    if isinstance(operation, UpdateOperation):
        return operation.target
    return None
