from datetime import datetime, timezone


def utcnow():
    return datetime.now(timezone.utc)


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive (SQLite drops tzinfo on the way back).
    """
    if ts is None:
        return None
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def isoformat(ts):
    return normalize_ts(ts).isoformat() if ts else None
