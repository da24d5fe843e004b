"""Parsing of registry timestamps and calendar arithmetic."""

from datetime import UTC, datetime

# The plugin-info API reports times like "2017-03-01 4:05pm GMT".
_FORMATS = (
    "%Y-%m-%d %I:%M%p",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
)
_ZONE_SUFFIXES = (" GMT", " UTC")


def parse_registry_timestamp(value: object) -> datetime | None:
    """Parse a registry timestamp into an aware UTC datetime.

    Returns None for anything that is not a recognizable timestamp string.
    Naive values are taken to be UTC.
    """
    if not isinstance(value, str):
        return None

    text = value.strip()
    for suffix in _ZONE_SUFFIXES:
        if text.upper().endswith(suffix):
            text = text[: -len(suffix)].rstrip()
            break
    if not text:
        return None

    parsed: datetime | None = None
    for fmt in _FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
            break
        except ValueError:
            continue

    if parsed is None:
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def subtract_years(moment: datetime, years: int) -> datetime:
    """Move moment back by whole calendar years, keeping month and day.

    February 29 has no counterpart in common years and overflows into
    March 1, like a calendar "-N years" modification does.
    """
    target_year = moment.year - years
    try:
        return moment.replace(year=target_year)
    except ValueError:
        return moment.replace(year=target_year, month=3, day=1)
