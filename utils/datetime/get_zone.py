from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def get_zone(timezone: str) -> ZoneInfo:
    """Resolve an IANA timezone name, raising ValueError for unknown zones."""
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {timezone!r}") from e
