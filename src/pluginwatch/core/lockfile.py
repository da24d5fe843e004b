"""Reading installed packages from a composer.lock file."""

import json
from pathlib import Path

from pluginwatch.core.types import PackageRef

LOCK_SECTIONS = ("packages", "packages-dev")


def read_lock_packages(lock_path: Path) -> list[PackageRef]:
    """Return every package pinned in a composer.lock file.

    Args:
        lock_path: Path to composer.lock

    Returns:
        Packages from the `packages` and `packages-dev` sections, in file order

    Raises:
        FileNotFoundError: If lock_path does not exist
        ValueError: If the file is not a valid lock document
    """
    if not lock_path.exists():
        raise FileNotFoundError(f"Lock file not found at {lock_path}")

    try:
        data = json.loads(lock_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{lock_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{lock_path} does not contain a JSON object")

    refs: list[PackageRef] = []
    for section in LOCK_SECTIONS:
        entries = data.get(section) or []
        if not isinstance(entries, list):
            raise ValueError(f"'{section}' in {lock_path} must be a list")
        for entry in entries:
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                raise ValueError(f"Malformed entry in '{section}' of {lock_path}")
            refs.append(
                PackageRef(
                    name=entry["name"],
                    kind=str(entry.get("type", "library")),
                    version=str(entry.get("version", "")),
                )
            )
    return refs
