"""Abstract HTTP fetch capability for registry lookups."""

from abc import ABC, abstractmethod

from pluginwatch.core.types import FetchResult


class HttpClient(ABC):
    """Abstract interface for fetching registry documents.

    Implementations never raise for transport problems. Every outcome is
    reported as a FetchResult:
    - Found: 2xx response with its body
    - NotFound: the server answered 404
    - TransportError: anything else (DNS, timeout, reset, other HTTP status)
    """

    @abstractmethod
    def fetch(self, url: str) -> FetchResult:
        """Issue a single GET request.

        Args:
            url: Absolute URL to fetch

        Returns:
            Tagged result of the request
        """
        ...
