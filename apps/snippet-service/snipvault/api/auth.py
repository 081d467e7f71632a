"""
Identity resolution from the authenticating reverse proxy.

The proxy (oauth2-proxy) verifies the user and forwards identity headers;
this module normalizes them and upserts the matching user row.
"""
import logging
from typing import Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from snipvault.db import models

logger = logging.getLogger(__name__)


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    cleaned = email.strip().lower()
    return cleaned or None


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str],
    x_auth_request_email: Optional[str],
    x_forwarded_user: Optional[str],
    x_forwarded_email: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    user = x_auth_request_user or x_forwarded_user
    email = _normalize_email(x_auth_request_email or x_forwarded_email)
    return user, email


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def get_or_create_user(db: Session, email: str, display_name: Optional[str] = None) -> models.User:
    user = get_user_by_email(db, email)
    if user:
        return user
    try:
        with db.begin_nested():
            user = models.User(
                email=email,
                display_name=display_name or email.split("@")[0],
                external_subject=display_name,
            )
            db.add(user)
            db.flush()
    except IntegrityError:
        # First requests from the same user raced; keep the row that won.
        user = get_user_by_email(db, email)
        if user is None:
            raise
        return user
    db.commit()
    db.refresh(user)
    logger.info("user_created: id=%s email=%s", user.id, user.email)
    return user
