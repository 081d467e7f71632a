"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes from one import point.
"""

from .base import Base, now_utc  # re-export

from .users import User
from .tags import Tag
from .snippets import Snippet, SnippetTag

__all__ = [
    # base
    "Base",
    "now_utc",
    # users
    "User",
    # snippets/tags
    "Tag",
    "Snippet",
    "SnippetTag",
]
