"""
CRUD facade over the per-domain repositories.

The service layer imports this module only, so storage queries can move
between repositories without touching callers.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from . import models, schemas
from .repositories import snippets as repo_snippets
from .repositories import tags as repo_tags


# CRUD for Snippet
def create_snippet(db: Session, snippet: schemas.SnippetCreate, *, owner_id: int) -> models.Snippet:
    return repo_snippets.create_snippet(db, snippet, owner_id=owner_id)


def get_snippet(db: Session, snippet_id: int) -> Optional[models.Snippet]:
    return repo_snippets.get_snippet(db, snippet_id)


def get_snippets_for_owner(db: Session, owner_id: int) -> List[models.Snippet]:
    return repo_snippets.get_snippets_for_owner(db, owner_id)


def update_snippet(db: Session, db_snippet: models.Snippet, snippet: schemas.SnippetUpdate) -> models.Snippet:
    return repo_snippets.update_snippet(db, db_snippet, snippet)


def delete_snippet(db: Session, db_snippet: models.Snippet) -> None:
    repo_snippets.delete_snippet(db, db_snippet)


# CRUD for Tag
def get_or_create_tag(db: Session, name: str) -> models.Tag:
    return repo_tags.get_or_create_tag(db, name)


def get_tag_by_name(db: Session, name: str) -> Optional[models.Tag]:
    return repo_tags.get_tag_by_name(db, name)


def get_owner_tag_usage(db: Session, owner_id: int) -> List[dict]:
    return repo_tags.get_owner_tag_usage(db, owner_id)
