from datetime import date, datetime, timezone


def now_utc() -> datetime:
    return datetime.now(tz=timezone.utc)


def month_start(d: date) -> date:
    return date(d.year, d.month, 1)
