"""
Tag repository functions.

Implements get-or-create by name (savepoint-guarded against concurrent
inserts of the same name) and owner-scoped usage listing.
"""
from __future__ import annotations

from typing import List

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from snipvault.db import models


def get_tag_by_name(db: Session, name: str):
    return db.query(models.Tag).filter(models.Tag.name == name).first()


def get_or_create_tag(db: Session, name: str) -> models.Tag:
    tag = get_tag_by_name(db, name)
    if tag:
        return tag
    try:
        with db.begin_nested():
            tag = models.Tag(name=name)
            db.add(tag)
            db.flush()
    except IntegrityError:
        # A concurrent request inserted the same name first.
        tag = get_tag_by_name(db, name)
        if tag is None:
            raise
    return tag


def get_owner_tag_usage(db: Session, owner_id: int) -> List[dict]:
    rows = (
        db.query(models.Tag.id, models.Tag.name, func.count(models.Snippet.id).label('cnt'))
        .join(models.SnippetTag, models.SnippetTag.tag_id == models.Tag.id)
        .join(models.Snippet, models.Snippet.id == models.SnippetTag.snippet_id)
        .filter(models.Snippet.owner_id == owner_id)
        .group_by(models.Tag.id, models.Tag.name)
        .order_by(func.count(models.Snippet.id).desc(), models.Tag.name.asc())
        .all()
    )
    return [{'id': r[0], 'name': r[1], 'count': int(r[2])} for r in rows]
