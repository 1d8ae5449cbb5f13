import re
from datetime import datetime, timezone

# Extended ISO-8601 only: YYYY-MM-DD with an optional THH:MM[:SS[.ffffff]][Z|±HH:MM].
_EXTENDED_ISO = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?(Z|[+-]\d{2}:\d{2})?)?"
)


def parse_datetime(value: str) -> datetime:
    """Parse an extended-format ISO-8601 date or date-time string.

    Date-only values resolve to midnight and naive values are taken as UTC.
    Raises ValueError for anything else, including the basic (20250101),
    week-date and space-separated forms that fromisoformat would accept.
    """
    value = value.strip()
    if not _EXTENDED_ISO.fullmatch(value):
        raise ValueError(f"Not an extended ISO-8601 date-time: {value!r}")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
