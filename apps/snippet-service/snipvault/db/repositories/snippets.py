"""
Snippet repository functions.

Implements snippet insert, lookup, owner listing, partial update and hard
delete. Callers own the transaction boundary via `db.commit()` here; errors
propagate to the service layer which rolls back.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from snipvault.db import models, schemas
from snipvault.db.repositories import tags as repo_tags
from snipvault.utils.tags import normalize_tag_names



def _with_tags(query):
    return query.options(
        joinedload(models.Snippet.snippet_tags).joinedload(models.SnippetTag.tag)
    )


def create_snippet(db: Session, snippet: schemas.SnippetCreate, *, owner_id: int) -> models.Snippet:
    db_snippet = models.Snippet(
        heading=snippet.heading,
        code=snippet.code,
        language=snippet.language,
        owner_id=owner_id,
    )
    db.add(db_snippet)
    db.flush()

    for position, name in enumerate(normalize_tag_names(snippet.tags)):
        tag = repo_tags.get_or_create_tag(db, name)
        db.add(models.SnippetTag(snippet_id=db_snippet.id, tag_id=tag.id, position=position))

    db.commit()
    db.refresh(db_snippet)
    return db_snippet


def get_snippet(db: Session, snippet_id: int) -> Optional[models.Snippet]:
    return _with_tags(db.query(models.Snippet)).filter(models.Snippet.id == snippet_id).first()


def get_snippets_for_owner(db: Session, owner_id: int) -> List[models.Snippet]:
    query = _with_tags(db.query(models.Snippet)).filter(models.Snippet.owner_id == owner_id)
    query = query.order_by(models.Snippet.created_at.desc(), models.Snippet.id.desc())
    return query.all()


def update_snippet(db: Session, db_snippet: models.Snippet, snippet: schemas.SnippetUpdate) -> models.Snippet:
    for key, value in snippet.changes().items():
        setattr(db_snippet, key, value)
    db.commit()
    db.refresh(db_snippet)
    return db_snippet


def delete_snippet(db: Session, db_snippet: models.Snippet) -> None:
    # Association rows cascade through the relationship; Tag rows are kept.
    db.delete(db_snippet)
    db.commit()
