from datetime import datetime, time, timedelta, timezone as dt_tz

UTC = dt_tz.utc


def utc_now():
    return datetime.now(UTC)


def to_utc(dt):
    """Return an aware UTC datetime. Naive values are taken to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_naive_utc(dt):
    return to_utc(dt).replace(tzinfo=None)


def start_of_day_utc(dt):
    return datetime.combine(to_utc(dt).date(), time.min, tzinfo=UTC)


def days(n):
    return timedelta(days=n)


def to_iso(dt):
    return None if dt is None else to_utc(dt).isoformat()


def from_iso(value):
    if value is None:
        return None
    # fromisoformat() only learned the "Z" suffix in 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(value))
