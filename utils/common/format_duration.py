def format_duration(minutes: int) -> str:
    """
    Format a duration in minutes as words.

    Examples:
        45 -> "45 minutes"
        60 -> "1 hour"
        90 -> "1 hour 30 minutes"
    """
    hours, remaining_minutes = divmod(minutes, 60)

    minute_part = ""
    if remaining_minutes > 0:
        minute_part = f"{remaining_minutes} minute{'s' if remaining_minutes > 1 else ''}"

    if hours > 0:
        return f"{hours} hour{'s' if hours > 1 else ''} {minute_part}".strip()
    return minute_part or "0 minutes"
