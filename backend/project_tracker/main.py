import logging
import os
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from project_tracker.api.routes.analytics import router as analytics_router
from project_tracker.api.routes.projects import router as projects_router
from project_tracker.exceptions import ProjectTrackerError
from project_tracker.schemas.project import field_errors

logger = logging.getLogger(__name__)

CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


app = FastAPI(
    title="Project Tracker",
    description="Track projects by status and date range, with status "
    "statistics and AI-generated project summaries.",
)

app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in CORS_ORIGINS if origin.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def _error_response(request: Request, status_code: int, code: str, message: str, details: dict):
    return JSONResponse(
        status_code=status_code,
        headers={"X-Request-ID": _get_request_id(request)},
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details,
                "request_id": _get_request_id(request),
            }
        },
    )


@app.exception_handler(ProjectTrackerError)
async def project_tracker_error_handler(
    request: Request, exc: ProjectTrackerError
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s: %s", exc.code, exc.message)
    return _error_response(request, exc.status_code, exc.code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [e.model_dump() for e in field_errors(list(exc.errors()))]
    return _error_response(
        request, 400, "VALIDATION_ERROR", "Request validation failed", {"errors": errors}
    )


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception")
    return _error_response(
        request, 500, "INTERNAL_ERROR", "An internal error occurred", {}
    )


app.include_router(projects_router)
app.include_router(analytics_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
