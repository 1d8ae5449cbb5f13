from datetime import datetime, timezone

import pytest

from project_tracker.exceptions import ValidationError
from project_tracker.services.status_date_rule import validate_end_date


def test_completed_with_end_date_returns_parsed_date():
    result = validate_end_date("completed", "2025-12-31T00:00:00Z")
    assert result == datetime(2025, 12, 31, tzinfo=timezone.utc)


def test_completed_without_end_date_fails():
    with pytest.raises(ValidationError) as exc_info:
        validate_end_date("completed", None)
    assert exc_info.value.message == "End date is required when status is Completed"
    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "VALIDATION_ERROR"


def test_in_progress_without_end_date_returns_none():
    assert validate_end_date("in progress", None) is None


def test_in_progress_with_end_date_fails():
    with pytest.raises(ValidationError) as exc_info:
        validate_end_date("in progress", "2025-12-31")
    assert exc_info.value.message == "End date is not allowed when status is In Progress"


def test_empty_string_counts_as_no_end_date():
    assert validate_end_date("in progress", "") is None
    with pytest.raises(ValidationError):
        validate_end_date("completed", "")


def test_status_is_case_insensitive():
    assert validate_end_date("In Progress") is None
    with pytest.raises(ValidationError, match="required when status is Completed"):
        validate_end_date("COMPLETED", None)


def test_naive_end_date_is_treated_as_utc():
    result = validate_end_date("completed", "2025-06-01T12:30:00")
    assert result.tzinfo == timezone.utc
    assert result.hour == 12


def test_date_only_end_date():
    result = validate_end_date("completed", "2025-12-31")
    assert result == datetime(2025, 12, 31, tzinfo=timezone.utc)
