"""
Snippet service operations.

Each function is one request's worth of work: authorize, call the storage
facade, and translate storage failures into InternalError. Storage errors
are logged here and never reach the caller verbatim.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from snipvault.api.permissions import load_owned_snippet
from snipvault.db import crud, models, schemas
from snipvault.errors import InternalError

logger = logging.getLogger(__name__)


@contextmanager
def _storage_guard(db: Session, operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        logger.exception("snippet_storage_failure: operation=%s", operation)
        raise InternalError()


def _to_schema(db_snippet: models.Snippet) -> schemas.Snippet:
    return schemas.Snippet.model_validate(db_snippet, from_attributes=True)


def create_snippet(db: Session, user: models.User, payload: schemas.SnippetCreate) -> schemas.Snippet:
    with _storage_guard(db, "create"):
        created = crud.create_snippet(db, payload, owner_id=user.id)
        result = _to_schema(created)
    logger.info("snippet_created: id=%s owner_id=%s tags=%d", result.id, user.id, len(result.tags))
    return result


def list_snippets(db: Session, user: models.User) -> List[schemas.Snippet]:
    with _storage_guard(db, "list"):
        return [_to_schema(s) for s in crud.get_snippets_for_owner(db, user.id)]


def get_snippet(db: Session, user: models.User, snippet_id: int) -> schemas.Snippet:
    with _storage_guard(db, "get"):
        return _to_schema(load_owned_snippet(db, snippet_id, user))


def update_snippet(
    db: Session,
    user: models.User,
    snippet_id: int,
    payload: schemas.SnippetUpdate,
) -> schemas.Snippet:
    with _storage_guard(db, "update"):
        db_snippet = load_owned_snippet(db, snippet_id, user)
        updated = crud.update_snippet(db, db_snippet, payload)
        result = _to_schema(updated)
    logger.info("snippet_updated: id=%s fields=%s", snippet_id, sorted(payload.changes()))
    return result


def delete_snippet(db: Session, user: models.User, snippet_id: int) -> None:
    with _storage_guard(db, "delete"):
        db_snippet = load_owned_snippet(db, snippet_id, user)
        crud.delete_snippet(db, db_snippet)
    logger.info("snippet_deleted: id=%s owner_id=%s", snippet_id, user.id)


def list_tag_usage(db: Session, user: models.User) -> List[schemas.TagUsage]:
    with _storage_guard(db, "list_tags"):
        return [schemas.TagUsage(**row) for row in crud.get_owner_tag_usage(db, user.id)]
