"""Event handlers that turn checker verdicts into user-facing warnings.

Handlers never raise registry problems into the host: an unreachable
registry is reported as a warning and the install or update proceeds.
"""

import logging
from dataclasses import dataclass

from pluginwatch.core.checker import PluginStatusChecker
from pluginwatch.core.errors import PluginWatchError
from pluginwatch.core.types import PackageRef
from pluginwatch.core.user_feedback import UserFeedback
from pluginwatch.hooks.events import PackageEvent, package_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HookContext:
    """What a handler needs for one dispatched event."""

    feedback: UserFeedback
    checker: PluginStatusChecker


def unavailable_reason(checker: PluginStatusChecker) -> str:
    platform = checker.config.platform_name
    return f"does not seem to be available in the {platform} Plugin Directory anymore"


def stale_reason(checker: PluginStatusChecker) -> str:
    years = checker.config.maintenance_years
    return (
        f"has not been updated in over {_spell(years)} years. "
        "Please double-check before using it"
    )


def incompatible_reason(checker: PluginStatusChecker) -> str:
    config = checker.config
    return (
        f"has not been tested with the last {config.compatibility_window} major releases "
        f"of {config.platform_name}"
    )


def plugin_warning(ref: PackageRef, reason: str) -> str:
    return f"The plugin {ref.name} {reason}."


def unreachable_warning(checker: PluginStatusChecker, aspect: str) -> str:
    return f"Could not reach {checker.config.registry_name} to verify plugin {aspect} status."


_NUMBER_WORDS = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five"}


def _spell(number: int) -> str:
    return _NUMBER_WORDS.get(number, str(number))


def _tracked_package(hook: HookContext, event: PackageEvent) -> PackageRef | None:
    ref = package_of(event)
    if ref is None or not hook.checker.is_tracked_plugin(ref):
        return None
    return ref


def check_availability(hook: HookContext, event: PackageEvent) -> None:
    """Warn when a plugin is no longer listed in the registry.

    Plugins disappear from the directory when they are closed for guideline
    violations, abandoned by their developer, or pulled for security issues.
    """
    ref = _tracked_package(hook, event)
    if ref is None:
        return

    try:
        available = hook.checker.is_available(ref)
    except PluginWatchError as e:
        logger.debug("Availability check for %s failed: %s", ref.name, e)
        hook.feedback.warning(unreachable_warning(hook.checker, "availability"))
        return

    if not available:
        hook.feedback.warning(plugin_warning(ref, unavailable_reason(hook.checker)))


def check_maintenance_status(hook: HookContext, event: PackageEvent) -> None:
    """Warn when a plugin has not been updated within the maintenance window."""
    ref = _tracked_package(hook, event)
    if ref is None:
        return

    try:
        maintained = hook.checker.is_actively_maintained(ref)
    except PluginWatchError as e:
        logger.debug("Maintenance check for %s failed: %s", ref.name, e)
        hook.feedback.warning(unreachable_warning(hook.checker, "maintenance"))
        return

    if not maintained:
        hook.feedback.warning(plugin_warning(ref, stale_reason(hook.checker)))


def check_compatibility(hook: HookContext, event: PackageEvent) -> None:
    """Warn when a plugin was not tested against recent platform releases."""
    ref = _tracked_package(hook, event)
    if ref is None:
        return

    try:
        current = hook.checker.current_platform_version()
        compatible = hook.checker.is_compatible_with_recent(ref, current)
    except PluginWatchError as e:
        logger.debug("Compatibility check for %s failed: %s", ref.name, e)
        hook.feedback.warning(unreachable_warning(hook.checker, "compatibility"))
        return

    if not compatible:
        hook.feedback.warning(plugin_warning(ref, incompatible_reason(hook.checker)))


def print_changelog_link(hook: HookContext, event: PackageEvent) -> None:
    """Point at the plugin's changelog after it has been updated."""
    ref = _tracked_package(hook, event)
    if ref is None:
        return

    hook.feedback.info(f"    Changelog: {hook.checker.changelog_url(ref)}")
