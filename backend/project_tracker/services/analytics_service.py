import logging
import uuid
from datetime import datetime, timezone

from project_tracker.db.project_store import ProjectStore
from project_tracker.exceptions import ConfigurationError, NotFoundError
from project_tracker.models.project import Project
from project_tracker.services.status_aggregator import aggregate
from project_tracker.services.summarizer import GeminiSummarizer, Summarizer

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT = """Analyze the following project description and generate
a brief professional executive summary (maximum 100 words) that includes:
- Analysis of project scope and objectives
- Key points and notable elements
- Current status evaluation
- Observations and recommendations if applicable

Project: {name}
Status: {status}
Description: {description}

Provide a concise and professional summary only one paragraph in English."""


def build_analysis_prompt(project: Project) -> str:
    return ANALYSIS_PROMPT.format(
        name=project.name,
        status=project.status,
        description=project.description,
    )


async def get_graphics_data(store: ProjectStore) -> dict:
    return aggregate(await store.find_all())


async def generate_analysis(
    store: ProjectStore,
    project_id: uuid.UUID,
    api_key: str | None,
    summarizer: Summarizer | None = None,
) -> dict:
    if not api_key:
        raise ConfigurationError("API key not configured")

    project = await store.find_by_id(project_id)
    if not project:
        logger.warning("Analysis requested for missing project %s", project_id)
        raise NotFoundError("Project not found")

    if summarizer is None:
        summarizer = GeminiSummarizer(api_key)
    summary = await summarizer.summarize(build_analysis_prompt(project))

    return {
        "summary": summary,
        "total_projects": 1,
        "generated_at": datetime.now(timezone.utc),
    }
