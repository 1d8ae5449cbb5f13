from datetime import datetime

from project_tracker.dates import parse_datetime
from project_tracker.exceptions import ValidationError
from project_tracker.models.base import ProjectStatus, normalize_status


def _label(status: str) -> str:
    return " ".join(word.capitalize() for word in status.split(" "))


def validate_end_date(status: str, raw_end_date: str | None = None) -> datetime | None:
    """Enforce the status/end-date coupling and return the end date to store.

    Completed projects must carry an end date, in-progress ones must not.
    An empty string counts as no end date. Format checking is left to the
    request validators; an unparsable string raises ValueError here.
    """
    status = normalize_status(status)
    end_date = parse_datetime(raw_end_date) if raw_end_date else None

    if status == ProjectStatus.completed.value and end_date is None:
        raise ValidationError("End date is required when status is " + _label(status))
    if status == ProjectStatus.in_progress.value and end_date is not None:
        raise ValidationError("End date is not allowed when status is " + _label(status))
    return end_date
