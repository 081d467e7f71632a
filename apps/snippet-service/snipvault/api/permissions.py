"""
Ownership checks for snippet access control.

Key helpers:
- is_owner(snippet, user)
- load_owned_snippet(db, snippet_id, user)
"""
import logging

from sqlalchemy.orm import Session

from snipvault.db import crud, models
from snipvault.errors import Forbidden, NotFound

logger = logging.getLogger(__name__)


def is_owner(snippet, user) -> bool:
    if snippet is None or user is None:
        return False
    return getattr(snippet, "owner_id", None) == getattr(user, "id", None)


def load_owned_snippet(db: Session, snippet_id: int, user: models.User) -> models.Snippet:
    """Return the snippet if `user` owns it.

    Raises NotFound when no row backs `snippet_id` and Forbidden when the
    row belongs to someone else. Existence is checked first.
    """
    snippet = crud.get_snippet(db, snippet_id)
    if snippet is None:
        raise NotFound()
    if not is_owner(snippet, user):
        logger.warning("snippet_access_denied: snippet_id=%s user_id=%s", snippet_id, user.id)
        raise Forbidden()
    return snippet
