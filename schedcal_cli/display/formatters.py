"""Pure formatting functions for display output."""

from datetime import datetime, timedelta


def format_datetime(dt: datetime) -> str:
    """Format a naive timestamp for listing.

    Args:
        dt: Datetime to format.

    Returns:
        Formatted string (e.g., "2024-01-01 19:00:00").
    """
    return str(dt)


def format_duration(delta: timedelta) -> str:
    """Format a duration compactly.

    Args:
        delta: Duration to format.

    Returns:
        Formatted string (e.g., "45m", "1h 09m", "2d 3h 00m").
    """
    total_minutes = int(delta.total_seconds()) // 60
    days, remainder = divmod(total_minutes, 24 * 60)
    hours, minutes = divmod(remainder, 60)

    if days:
        return f"{days}d {hours}h {minutes:02d}m"
    if hours:
        return f"{hours}h {minutes:02d}m"
    return f"{minutes}m"
