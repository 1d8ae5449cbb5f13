from project_tracker.models.base import Base, ProjectStatus, normalize_status
from project_tracker.models.project import Project

__all__ = ["Base", "Project", "ProjectStatus", "normalize_status"]
