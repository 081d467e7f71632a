"""Form state for composing a new snippet."""
from __future__ import annotations

import logging
from typing import List, Optional

from snipvault.client.api_client import SnippetApiClient
from snipvault.client.dashboard import InvalidTransition
from snipvault.db import schemas
from snipvault.errors import SnippetServiceError, ValidationError
from snipvault.utils.tags import MAX_TAG_LENGTH, normalize_tag_name

logger = logging.getLogger(__name__)


class SnippetComposer:
    def __init__(self, api: SnippetApiClient) -> None:
        self.api = api
        self.heading = ""
        self.code = ""
        self.language = ""
        self.tags: List[str] = []
        self.current_tag = ""
        self.is_submitting = False
        self.last_error: Optional[SnippetServiceError] = None

    def add_tag(self, name: Optional[str] = None) -> bool:
        """Add `name` (or the pending tag input); blanks and repeats are ignored.

        Names longer than MAX_TAG_LENGTH are refused with a ValidationError
        recorded on `last_error`.
        """
        tag = normalize_tag_name(self.current_tag if name is None else name)
        if tag is None or tag in self.tags:
            return False
        if len(tag) > MAX_TAG_LENGTH:
            self.last_error = ValidationError(f"Tag names are limited to {MAX_TAG_LENGTH} characters")
            return False
        self.tags.append(tag)
        if name is None:
            self.current_tag = ""
        return True

    def remove_tag(self, name: str) -> None:
        self.tags = [t for t in self.tags if t != name]

    def missing_fields(self) -> List[str]:
        return [f for f in ("heading", "code", "language") if not getattr(self, f).strip()]

    def submit(self) -> Optional[schemas.Snippet]:
        """Create the snippet from the staged fields.

        `is_submitting` stays set while the request is in flight, so a submit
        triggered re-entrantly (for example from a UI callback fired during
        the request) raises InvalidTransition instead of posting twice.
        """
        if self.is_submitting:
            raise InvalidTransition("submission already in progress")
        missing = self.missing_fields()
        if missing:
            self.last_error = ValidationError(f"Missing required fields: {', '.join(missing)}")
            return None
        self.is_submitting = True
        try:
            created = self.api.create_snippet(self.heading, self.code, self.language, self.tags)
        except SnippetServiceError as exc:
            logger.error("snippet_create_failed: %s", exc.message)
            self.last_error = exc
            return None
        finally:
            self.is_submitting = False
        self.last_error = None
        logger.info("snippet_created: id=%s", created.id)
        return created
