"""Date and time helpers for searches in Japan Standard Time."""

from datetime import datetime, timedelta, timezone

# Japan has no daylight saving time
JST = timezone(timedelta(hours=9), "JST")

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
ACCEPTED_FORMATS = (DATETIME_FORMAT, "%Y-%m-%d %H:%M")


def japan_now(now: datetime | None = None) -> str:
    """Current time in Japan as 'YYYY-MM-DD HH:MM:SS'."""
    moment = (now or datetime.now(JST)).astimezone(JST)
    return moment.strftime(DATETIME_FORMAT)


def parse_search_datetime(text: str) -> datetime:
    """Parse 'YYYY-MM-DD HH:MM:SS' or 'YYYY-MM-DD HH:MM'.

    Raises:
        ValueError: If the text matches neither format
    """
    for fmt in ACCEPTED_FORMATS:
        try:
            return datetime.strptime(text.strip(), fmt)
        except ValueError:
            continue
    raise ValueError(
        f"Invalid datetime '{text}'. Use YYYY-MM-DD HH:MM:SS or YYYY-MM-DD HH:MM"
    )
