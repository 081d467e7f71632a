"""
Domain-split Pydantic schemas re-exported from one import point.
"""

from .tags import TagBase, Tag, TagUsage
from .snippets import (
    SnippetBase,
    SnippetCreate,
    SnippetUpdate,
    Snippet,
    SnippetDeleted,
)

__all__ = [
    # Tags
    "TagBase",
    "Tag",
    "TagUsage",
    # Snippets
    "SnippetBase",
    "SnippetCreate",
    "SnippetUpdate",
    "Snippet",
    "SnippetDeleted",
]
