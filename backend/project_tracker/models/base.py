import enum

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def normalize_status(value: str) -> str:
    """Canonical (lowercase) form of a status string."""
    return value.lower()


class ProjectStatus(str, enum.Enum):
    in_progress = "in progress"
    completed = "completed"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            canonical = normalize_status(value)
            for member in cls:
                if member.value == canonical:
                    return member
        return None
