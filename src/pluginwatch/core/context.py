"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from pluginwatch.core.checker import PluginStatusChecker
from pluginwatch.core.config import RegistryConfig, load_config
from pluginwatch.core.http.abc import HttpClient
from pluginwatch.core.http.real import RealHttpClient
from pluginwatch.core.time.abc import Time
from pluginwatch.core.time.real import RealTime
from pluginwatch.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback


@dataclass(frozen=True)
class PluginWatchContext:
    """Immutable context holding all dependencies for pluginwatch operations.

    Created at the CLI entry point and threaded through commands and hook
    handlers. Frozen to prevent accidental modification at runtime.
    """

    config: RegistryConfig
    http: HttpClient
    time: Time
    feedback: UserFeedback
    cwd: Path

    def new_checker(self) -> PluginStatusChecker:
        """Create a checker whose metadata cache lives as long as the caller keeps it.

        Hook dispatch creates one checker per event; CLI commands create one
        per invocation.
        """
        return PluginStatusChecker(self.config, self.http, self.time)

    def with_feedback(self, feedback: UserFeedback) -> "PluginWatchContext":
        return PluginWatchContext(
            config=self.config,
            http=self.http,
            time=self.time,
            feedback=feedback,
            cwd=self.cwd,
        )

    @staticmethod
    def for_test(
        config: RegistryConfig | None = None,
        http: HttpClient | None = None,
        time: Time | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
    ) -> "PluginWatchContext":
        """Create test context with fake implementations for unspecified values.

        Example:
            >>> http = FakeHttpClient(responses={url: Found(body=b"{}")})
            >>> ctx = PluginWatchContext.for_test(http=http)
        """
        from tests.fakes.http import FakeHttpClient
        from tests.fakes.time import FakeTime
        from tests.fakes.user_feedback import FakeUserFeedback

        if config is None:
            config = RegistryConfig()

        if http is None:
            http = FakeHttpClient()

        if time is None:
            time = FakeTime()

        if feedback is None:
            feedback = FakeUserFeedback()

        return PluginWatchContext(
            config=config,
            http=http,
            time=time,
            feedback=feedback,
            cwd=cwd or Path("/test/default/cwd"),
        )


def create_context(*, quiet: bool = False, cwd: Path | None = None) -> PluginWatchContext:
    """Create production context with real implementations.

    Args:
        quiet: If True, suppress info and warning output (used for JSON output)
        cwd: Project directory to load configuration from (defaults to Path.cwd())

    Raises:
        ValueError: If the project configuration is invalid
    """
    if cwd is None:
        cwd = Path.cwd()

    config = load_config(cwd)
    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()

    return PluginWatchContext(
        config=config,
        http=RealHttpClient(timeout_seconds=config.timeout_seconds),
        time=RealTime(),
        feedback=feedback,
        cwd=cwd,
    )
