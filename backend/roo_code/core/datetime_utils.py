"""
Timezone-aware timestamps for database rows (ISO 8601 with offset).
"""

from datetime import datetime, timezone


def get_now_with_timezone() -> datetime:
    """Current time as a timezone-aware datetime in the local timezone."""
    return datetime.now(timezone.utc).astimezone()
