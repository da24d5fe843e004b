"""Exceptions raised by the registry checker."""


class PluginWatchError(Exception):
    """Base class for pluginwatch errors."""


class RegistryUnreachableError(PluginWatchError):
    """Raised when the registry could not be reached.

    Covers DNS failures, timeouts, connection resets and any HTTP error
    status other than 404. A 404 is a valid "not found" answer and never
    produces this error.
    """

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"Could not fetch {url}: {detail}")


class RegistryResponseError(PluginWatchError):
    """Raised when a response that must be well-formed is not."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"Unexpected response from {url}: {detail}")
