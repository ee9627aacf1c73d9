from datetime import date


def format_long_date(day: date) -> str:
    """Format a date as e.g. "Monday, March 3, 2025"."""
    return f"{day.strftime('%A')}, {day.strftime('%B')} {day.day}, {day.year}"
