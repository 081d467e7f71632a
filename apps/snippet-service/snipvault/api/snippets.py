"""
Snippet API endpoints.

Create, list, view, update, and delete the caller's snippets. Every route
sits behind the router-level authentication guard; ownership is enforced
by the service layer.
"""
from typing import Annotated, List
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from snipvault.db import models, schemas
from snipvault.db.database import get_db
from snipvault.api.deps import get_current_user
from snipvault.services import snippets as snippet_service

# Ids live in a 32-bit INTEGER column; anything outside it cannot exist.
MAX_SNIPPET_ID = 2**31 - 1
SnippetId = Annotated[int, Path(ge=1, le=MAX_SNIPPET_ID)]

router = APIRouter(
    prefix="/api",
    tags=["snippets"],
    dependencies=[Depends(get_current_user)],
)


@router.post("/new", response_model=schemas.Snippet, status_code=status.HTTP_201_CREATED)
def create_snippet_endpoint(
    snippet: schemas.SnippetCreate,
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),
):
    return snippet_service.create_snippet(db, user, snippet)


@router.get("/dashboard", response_model=List[schemas.Snippet])
def list_snippets_endpoint(
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),
):
    return snippet_service.list_snippets(db, user)


@router.get("/new/{snippet_id}", response_model=schemas.Snippet)
def get_snippet_endpoint(
    snippet_id: SnippetId,
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),
):
    return snippet_service.get_snippet(db, user, snippet_id)


@router.put("/new/{snippet_id}", response_model=schemas.Snippet)
def update_snippet_endpoint(
    snippet_id: SnippetId,
    snippet: schemas.SnippetUpdate,
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),
):
    return snippet_service.update_snippet(db, user, snippet_id, snippet)


@router.delete("/new/{snippet_id}", response_model=schemas.SnippetDeleted)
def delete_snippet_endpoint(
    snippet_id: SnippetId,
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),
):
    snippet_service.delete_snippet(db, user, snippet_id)
    return {"message": "Snippet deleted successfully"}


@router.get("/tags", response_model=List[schemas.TagUsage])
def list_tags_endpoint(
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),
):
    """Tags attached to the caller's snippets, most used first."""
    return snippet_service.list_tag_usage(db, user)
