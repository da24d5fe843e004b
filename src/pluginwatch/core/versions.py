"""Dotted version helpers for the compatibility check.

`increment_version` is a coarse "N releases ahead" heuristic rather than
semantic versioning: the minor component carries into the major one after 9
regardless of the platform's actual release cadence. Compatibility verdicts
depend on this carry, so it must stay as is.
"""


def _parse_components(version: str) -> list[int]:
    stripped = version.strip()
    if not stripped:
        raise ValueError("Empty version string")
    try:
        return [int(part) for part in stripped.split(".")]
    except ValueError:
        raise ValueError(f"Invalid version string: {version!r}") from None


def _major_minor(version: str) -> tuple[int, int]:
    components = _parse_components(version)
    major = components[0]
    minor = components[1] if len(components) > 1 else 0
    return major, minor


def truncate_version(version: str) -> str:
    """Truncate a dotted version to `major.minor`.

    Example:
        >>> truncate_version("6.4.2")
        '6.4'
        >>> truncate_version("6")
        '6.0'
    """
    major, minor = _major_minor(version)
    return f"{major}.{minor}"


def increment_version(version: str, steps: int) -> str:
    """Step a version forward `steps` minor releases, patch ignored.

    Example:
        >>> increment_version("1.2.3", 1)
        '1.3'
        >>> increment_version("1.9", 1)
        '2.0'
    """
    major, minor = _major_minor(version)
    for _ in range(steps):
        if minor < 9:
            minor += 1
        else:
            minor = 0
            major += 1
    return f"{major}.{minor}"


def compare_versions(left: str, right: str) -> int:
    """Compare two dotted versions component by component.

    Missing components count as 0, so "4.3" == "4.3.0".

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right
    """
    left_parts = _parse_components(left)
    right_parts = _parse_components(right)
    width = max(len(left_parts), len(right_parts))
    left_parts += [0] * (width - len(left_parts))
    right_parts += [0] * (width - len(right_parts))

    if left_parts < right_parts:
        return -1
    if left_parts > right_parts:
        return 1
    return 0
