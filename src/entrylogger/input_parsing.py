"""Resolve convenience tokens typed at the prompt into literal field values."""

from datetime import date, datetime, timedelta

from .core.entry import format_entry_date


def resolve_date(raw: str, today: date | None = None) -> str:
    """Turn "today"/"yesterday" into dd-mon-yy; pass anything else through."""
    today = today or date.today()
    match raw:
        case "today":
            return format_entry_date(today)
        case "yesterday":
            return format_entry_date(today - timedelta(days=1))
        case _:
            return raw


def bucket_for_hour(hour: int) -> str:
    """Time bucket containing an hour of the day (0-23)."""
    if hour < 6:
        return "latenight"
    elif hour < 12:
        return "morning"
    elif hour < 18:
        return "afternoon"
    else:
        return "night"


def resolve_time(raw: str, now: datetime | None = None) -> str:
    """Turn "now" into the current time bucket; pass anything else through."""
    if raw != "now":
        return raw
    now = now or datetime.now()
    return bucket_for_hour(now.hour)
