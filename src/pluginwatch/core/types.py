"""Value types shared by the checker, the HTTP integration and the hooks."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PackageRef:
    """A dependency under consideration, as reported by the host."""

    name: str
    kind: str
    version: str


@dataclass(frozen=True)
class PluginMetadata:
    """Parsed registry response for one plugin.

    found=False models the registry's "no such plugin" answer. Absent optional
    fields model partial data and always lead to the conservative verdict.
    """

    slug: str
    found: bool
    last_updated: datetime | None = None
    tested: str | None = None

    @staticmethod
    def not_found(slug: str) -> "PluginMetadata":
        return PluginMetadata(slug=slug, found=False)


@dataclass(frozen=True)
class Verdict:
    """Outcome of the three status predicates for one package."""

    available: bool
    actively_maintained: bool
    compatible_with_recent: bool


# Tagged result of a single GET against the registry.


@dataclass(frozen=True)
class Found:
    body: bytes


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class TransportError:
    detail: str


FetchResult = Found | NotFound | TransportError
