"""
App assembly entry point.

Re-exports the FastAPI `app` from `snipvault.api.main` so the service can be
started with `uvicorn app:app` from this directory.
"""

from snipvault.api.main import app  # noqa: F401
