"""Timestamp suffix formatting."""

from datetime import datetime


def format_timestamp(fmt: str, now: datetime | None = None) -> str:
    """Render a token pattern such as ``YYYYMMDD-HHmmss`` for the given time.

    Supported tokens: YYYY, MM (month), DD, HH, mm (minute), ss. Each token is
    substituted once; any other text is kept as-is.
    """
    moment = now or datetime.now()
    return (
        fmt.replace("YYYY", f"{moment.year:04d}", 1)
        .replace("MM", f"{moment.month:02d}", 1)
        .replace("DD", f"{moment.day:02d}", 1)
        .replace("HH", f"{moment.hour:02d}", 1)
        .replace("mm", f"{moment.minute:02d}", 1)
        .replace("ss", f"{moment.second:02d}", 1)
    )
