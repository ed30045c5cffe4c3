from datetime import datetime, timezone

SALT_FORMAT = "%Y%m%d%H%M%S"
PAID_AT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def UtcTime(fmt=SALT_FORMAT, now=None):
    """
    Format the current UTC time.

    :param fmt: strftime format, fixed-width numeric salt by default
    :param now: datetime to format instead of the wall clock (naive values are taken as UTC)
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(fmt)


def is_absolute_url(url_or_path):
    return url_or_path.startswith("http")


def join_endpoint(endpoint, url_or_path):
    """Append a relative resource path to the endpoint; absolute URLs pass through."""
    if is_absolute_url(url_or_path):
        return url_or_path
    return endpoint + url_or_path
