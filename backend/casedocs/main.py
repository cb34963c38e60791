"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount router under /v1 prefix
  - Expose health check endpoint

Collaborators:
  - routes.router: page highlights and search endpoints
  - RequestContextMiddleware: Request ID and logging context
  - exception_handlers: RFC 7807 error responses

Notes:
  - Settings are validated in the lifespan hook, not at import time
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .container import get_page_chunk_repository
from .exception_handlers import register_exception_handlers
from .logger import logger
from .middleware import RequestContextMiddleware
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings."""
    settings = get_settings()
    logger.info(
        "Case document API starting up",
        extra={
            "app_env": settings.app_env,
            "default_align": settings.default_align,
            "seeded": bool(settings.page_chunks_seed_path),
        },
    )
    yield
    logger.info("Case document API shutting down")


def _get_allowed_origins() -> list[str]:
    """Get CORS origins from settings, with fallback for import-time errors."""
    try:
        return get_settings().get_allowed_origins_list()
    except Exception:
        return ["http://localhost:3000"]


app = FastAPI(
    title="Case Document Viewer API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "documents", "description": "Document pages and highlight overlays"},
        {"name": "search", "description": "Keyword search over case chunks"},
    ],
)

app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_allowed_origins(),
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
)

app.include_router(router, prefix="/v1")

register_exception_handlers(app)


@app.get("/healthz")
def healthz(request: Request):
    """
    R: Health check for orchestration.

    Returns:
        ok: True when the chunk index answers
        chunks: "available" or "unavailable"
        request_id: Correlation ID for this request
    """
    status = "unavailable"
    try:
        if get_page_chunk_repository().ping():
            status = "available"
    except Exception as e:
        logger.warning("Health check: chunk index unavailable", extra={"error": str(e)})

    return {
        "ok": status == "available",
        "chunks": status,
        "request_id": getattr(request.state, "request_id", None),
    }
