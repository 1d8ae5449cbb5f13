import math
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from project_tracker.models.base import ProjectStatus, normalize_status


def _status_of(project: Any) -> str:
    if isinstance(project, Mapping):
        return project["status"]
    return project.status


def _percentage(count: int, total: int) -> float:
    # Half-up to two decimals; round() rounds half to even.
    return math.floor(count / total * 100 * 100 + 0.5) / 100


def aggregate(projects: Iterable[Any]) -> dict:
    """Count projects per canonical status.

    Groups keep first-seen order. Status values are not validated here, so a
    stored spelling outside the enumeration becomes its own group.
    """
    counts = Counter(normalize_status(_status_of(p)) for p in projects)
    total = sum(counts.values())

    if total == 0:
        return {
            "total_projects": 0,
            "projects_by_status": [],
            "completed_projects": 0,
            "in_progress_projects": 0,
        }

    return {
        "total_projects": total,
        "projects_by_status": [
            {"status": status, "count": count, "percentage": _percentage(count, total)}
            for status, count in counts.items()
        ],
        "completed_projects": counts.get(ProjectStatus.completed.value, 0),
        "in_progress_projects": counts.get(ProjectStatus.in_progress.value, 0),
    }
