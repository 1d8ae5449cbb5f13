import os

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from project_tracker.db.project_store import SqlProjectStore
from project_tracker.db.session import get_session
from project_tracker.services.summarizer import Summarizer


async def get_project_store(session: AsyncSession = Depends(get_session)) -> SqlProjectStore:
    return SqlProjectStore(session)


def get_gemini_api_key() -> str | None:
    # Read per request so a key added to the environment is picked up.
    return os.environ.get("GEMINI_API_KEY")


def get_summarizer() -> Summarizer | None:
    """Override point for tests; None lets the service build a Gemini client."""
    return None
