from flask import request, abort
from dateutil.parser import parse
from .dates import normalize_ts


def client_unmodified_since():
    """Parsed If-Unmodified-Since header, or None when the client sent none."""
    raw = request.headers.get("If-Unmodified-Since")
    if not raw:
        return None

    try:
        return normalize_ts(parse(raw))
    except (ValueError, OverflowError):
        abort(400, description="Invalid If-Unmodified-Since header")


def enforce_optimistic_lock(page):
    """Abort with 409 when the page changed after the client's copy."""
    client_ts = client_unmodified_since()
    if client_ts is None or page.updated_at is None:
        return

    # HTTP dates carry whole seconds only
    if normalize_ts(page.updated_at).replace(microsecond=0) > client_ts:
        abort(409, description="Page was modified by another editor")
