import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from project_tracker.dates import parse_datetime
from project_tracker.models.base import ProjectStatus


def _clean_text(value: Any, empty_message: str) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "Input should be a valid string")
    value = value.strip()
    if not value:
        raise PydanticCustomError("empty_string", empty_message)
    return value


def _parse_status(value: Any) -> ProjectStatus:
    if isinstance(value, str):
        try:
            return ProjectStatus(value)
        except ValueError:
            pass
    raise PydanticCustomError("invalid_status", "Invalid status")


def _parse_start_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return parse_datetime(value)
        except ValueError:
            pass
    raise PydanticCustomError("invalid_date", "Invalid start date format")


def _check_end_date(value: Any) -> str | None:
    # Kept as the raw string; the status rule decides whether it belongs.
    if value is None or value == "":
        return value
    if isinstance(value, str):
        try:
            parse_datetime(value)
            return value
        except ValueError:
            pass
    raise PydanticCustomError("invalid_date", "Invalid end date format")


class ProjectCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    description: str
    status: ProjectStatus
    start_date: datetime
    end_date: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        return _clean_text(value, "Name is required")

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, value: Any) -> str:
        return _clean_text(value, "Description is required")

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, value: Any) -> ProjectStatus:
        return _parse_status(value)

    @field_validator("start_date", mode="before")
    @classmethod
    def check_start_date(cls, value: Any) -> datetime:
        return _parse_start_date(value)

    @field_validator("end_date", mode="before")
    @classmethod
    def check_end_date(cls, value: Any) -> str | None:
        return _check_end_date(value)


class ProjectUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    description: str | None = None
    status: ProjectStatus | None = None
    start_date: datetime | None = None
    end_date: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        return _clean_text(value, "Name cannot be empty")

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, value: Any) -> str:
        return _clean_text(value, "Description cannot be empty")

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, value: Any) -> ProjectStatus:
        return _parse_status(value)

    @field_validator("start_date", mode="before")
    @classmethod
    def check_start_date(cls, value: Any) -> datetime:
        return _parse_start_date(value)

    @field_validator("end_date", mode="before")
    @classmethod
    def check_end_date(cls, value: Any) -> str | None:
        return _check_end_date(value)


class ProjectRead(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: uuid.UUID
    name: str
    description: str
    status: str
    start_date: datetime
    end_date: datetime | None
    created_at: datetime
    updated_at: datetime


class FieldError(BaseModel):
    field: str
    message: str


PayloadT = TypeVar("PayloadT", ProjectCreate, ProjectUpdate)


@dataclass
class ValidationResult(Generic[PayloadT]):
    data: PayloadT | None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def field_errors(errors: list[dict[str, Any]]) -> list[FieldError]:
    """Flatten pydantic error dicts into field/message pairs.

    A leading "body" location (added by FastAPI for request bodies) is dropped.
    """
    result = []
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        path = ".".join(str(part) for part in loc) or "body"
        result.append(FieldError(field=path, message=err.get("msg", "Invalid value")))
    return result


def _validate(model: type[PayloadT], payload: Any) -> ValidationResult[PayloadT]:
    try:
        data = model.model_validate(payload)
    except PydanticValidationError as exc:
        return ValidationResult(data=None, errors=field_errors(exc.errors()))
    return ValidationResult(data=data)


def validate_create_payload(payload: Any) -> ValidationResult[ProjectCreate]:
    return _validate(ProjectCreate, payload)


def validate_update_payload(payload: Any) -> ValidationResult[ProjectUpdate]:
    return _validate(ProjectUpdate, payload)
