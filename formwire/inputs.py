"""Default values for date and datetime-local inputs."""

from datetime import date, datetime


def date_to_input_value(value: date | datetime | None = None) -> str:
    """Format ``value`` for ``<input type="date">`` (``YYYY-MM-DD``).

    Aware datetimes are converted to local time first. ``None`` means today.
    """
    if value is None:
        return date.today().isoformat()
    if isinstance(value, datetime):
        return _local(value).date().isoformat()
    return value.isoformat()


def datetime_to_input_value(value: datetime | None = None) -> str:
    """Format ``value`` for ``<input type="datetime-local">``.

    Returns ``YYYY-MM-DDTHH:MM:SS.mmm`` in local time. ``None`` means now.
    """
    if value is None:
        value = datetime.now()
    return _local(value).replace(tzinfo=None).isoformat(timespec="milliseconds")


def _local(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone()
