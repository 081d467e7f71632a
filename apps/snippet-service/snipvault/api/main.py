"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from snipvault import __version__
from snipvault.api.snippets import router as snippets_router
from snipvault.api.support import router as support_router
from snipvault.errors import SnippetServiceError

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="SnipVault Snippet Service",
    description="API for creating, listing, editing and deleting personal code snippets.",
    version=__version__,
)

app.router.redirect_slashes = False


def _cors_origins():
    raw = os.getenv("CORS_ALLOWED_ORIGINS")
    if not raw:
        return ["http://localhost", "http://localhost:3000", "http://localhost:8000"]
    return [o.strip() for o in raw.split(",") if o.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SnippetServiceError)
async def snippet_service_error_handler(request: Request, exc: SnippetServiceError):
    return JSONResponse(exc.payload, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies and non-numeric or out-of-range ids are client errors, reported as 400.
    errors = exc.errors()
    fields = [".".join(str(p) for p in e.get("loc", ()) if p != "body") for e in errors]
    logger.info("request_rejected: path=%s fields=%s", request.url.path, fields)
    return JSONResponse(
        {"detail": "Invalid request", "fields": [f for f in fields if f]},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error: path=%s", request.url.path)
    return JSONResponse({"detail": "Internal server error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


app.include_router(snippets_router)
app.include_router(support_router)
