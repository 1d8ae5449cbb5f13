from typing import Any


class ProjectTrackerError(Exception):
    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(ProjectTrackerError):
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(400, "VALIDATION_ERROR", message, details)


class NotFoundError(ProjectTrackerError):
    def __init__(self, message: str = "Project not found"):
        super().__init__(404, "NOT_FOUND", message)


class ConfigurationError(ProjectTrackerError):
    def __init__(self, message: str):
        super().__init__(500, "CONFIGURATION_ERROR", message)
