import uuid

from fastapi import APIRouter, Depends

from project_tracker.api.deps import get_gemini_api_key, get_project_store, get_summarizer
from project_tracker.db.project_store import SqlProjectStore
from project_tracker.schemas.analytics import AnalysisResponse, GraphicsData
from project_tracker.schemas.errors import ERROR_RESPONSES
from project_tracker.services import analytics_service
from project_tracker.services.summarizer import Summarizer

router = APIRouter(prefix="/analytics", tags=["analytics"], responses=ERROR_RESPONSES)


@router.get("/graphics", response_model=GraphicsData)
async def get_graphics(store: SqlProjectStore = Depends(get_project_store)):
    """Project counts and percentages grouped by status."""
    return await analytics_service.get_graphics_data(store)


@router.get("/{project_id}", response_model=AnalysisResponse)
async def get_analysis(
    project_id: uuid.UUID,
    store: SqlProjectStore = Depends(get_project_store),
    api_key: str | None = Depends(get_gemini_api_key),
    summarizer: Summarizer | None = Depends(get_summarizer),
):
    """AI-generated executive summary of a single project."""
    return await analytics_service.generate_analysis(
        store, project_id, api_key, summarizer=summarizer
    )
