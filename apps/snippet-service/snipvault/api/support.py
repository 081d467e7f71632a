"""
Build information and liveness endpoints.
"""
from __future__ import annotations

import logging
import os

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.responses import JSONResponse

from snipvault import __version__
from snipvault.db.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["support"])


@router.get("/build-info")
def get_build_info():
    """Return build and deployment information for the running service."""
    return {
        "build_sha": os.getenv("BUILD_SHA") or None,
        "build_timestamp": os.getenv("BUILD_TIMESTAMP") or None,
        "service_name": "snippet-service",
        "version": os.getenv("VERSION", __version__),
    }


@router.get("/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("health_check_failed")
        return JSONResponse({"status": "unavailable"}, status_code=503)
    return {"status": "ok"}
