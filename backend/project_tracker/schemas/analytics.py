from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StatusSummary(BaseModel):
    status: str
    count: int
    percentage: float


class GraphicsData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_projects: int
    projects_by_status: list[StatusSummary]
    completed_projects: int
    in_progress_projects: int


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: str
    total_projects: int
    generated_at: datetime
