"""
Presentation state for the snippet dashboard.

`DashboardController` holds what the browser dashboard shows: the list
fetch lifecycle, the selected snippet, the copy indicator, and the edit and
delete flows. Rendering is left to the caller; every state is a plain
attribute or property.
"""
from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from snipvault.client.api_client import SnippetApiClient
from snipvault.db import schemas
from snipvault.errors import SnippetServiceError
from snipvault.utils.feature_flags import FeatureFlagValues, get_feature_flags

logger = logging.getLogger(__name__)

PLACEHOLDER_CARDS = 6
PREVIEW_CHARS = 100
COPY_FEEDBACK_SECONDS = 2.0
EDITABLE_FIELDS = ("heading", "code", "language")


class InvalidTransition(RuntimeError):
    pass


class DashboardStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass
class SnippetCard:
    id: int
    heading: str
    preview: str
    language: str
    tags: List[str]
    highlight_language: Optional[str] = None


@dataclass
class EditDraft:
    heading: str
    code: str
    language: str


class InMemoryClipboard:
    def __init__(self) -> None:
        self.text: Optional[str] = None

    def write(self, text: str) -> None:
        self.text = text


def code_preview(code: str) -> str:
    return f"{code[:PREVIEW_CHARS]}..."


class DashboardController:
    def __init__(
        self,
        api: SnippetApiClient,
        *,
        flags: Optional[FeatureFlagValues] = None,
        clipboard=None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.api = api
        self.flags = flags if flags is not None else get_feature_flags()
        self.clipboard = clipboard or InMemoryClipboard()
        self._clock = clock

        self.status = DashboardStatus.IDLE
        self.snippets: List[schemas.Snippet] = []
        self.error: Optional[str] = None
        self.selected: Optional[schemas.Snippet] = None
        self.draft: Optional[EditDraft] = None
        self.last_action_error: Optional[SnippetServiceError] = None
        self._copied_at: Optional[float] = None

    # List lifecycle ---------------------------------------------------------

    def load(self) -> None:
        """Fetch the owner's snippets. A failed fetch is terminal."""
        if self.status in (DashboardStatus.LOADING, DashboardStatus.ERROR):
            raise InvalidTransition(f"cannot load from {self.status.value}")
        self.status = DashboardStatus.LOADING
        try:
            snippets = self.api.list_snippets()
        except SnippetServiceError as exc:
            logger.error("dashboard_load_failed: %s", exc.message)
            self.error = exc.message
            self.status = DashboardStatus.ERROR
            return
        self.snippets = snippets
        self.status = DashboardStatus.LOADED

    @property
    def placeholder_count(self) -> int:
        return PLACEHOLDER_CARDS if self.status is DashboardStatus.LOADING else 0

    @property
    def is_empty(self) -> bool:
        return self.status is DashboardStatus.LOADED and not self.snippets

    @property
    def show_empty_illustration(self) -> bool:
        return self.is_empty and self.flags["empty_state_illustration"]

    def cards(self) -> List[SnippetCard]:
        highlight = self.flags["syntax_highlighting"]
        return [
            SnippetCard(
                id=s.id,
                heading=s.heading,
                preview=code_preview(s.code),
                language=s.language,
                tags=[t.name for t in s.tags],
                highlight_language=s.language.lower() if highlight else None,
            )
            for s in self.snippets
        ]

    # Detail view ------------------------------------------------------------

    def open(self, snippet_id: int) -> schemas.Snippet:
        if self.status is not DashboardStatus.LOADED:
            raise InvalidTransition("snippets are not loaded")
        snippet = self._find(snippet_id)
        if snippet is None:
            raise KeyError(snippet_id)
        self.selected = snippet
        self.draft = None
        self._copied_at = None
        return snippet

    def close(self) -> None:
        self.selected = None
        self.draft = None
        self._copied_at = None

    def copy_code(self) -> bool:
        if self.selected is None or not self.selected.code:
            return False
        self.clipboard.write(self.selected.code)
        self._copied_at = self._clock()
        return True

    @property
    def copied(self) -> bool:
        if self._copied_at is None:
            return False
        if self._clock() - self._copied_at >= COPY_FEEDBACK_SECONDS:
            self._copied_at = None
            return False
        return True

    # Edit -------------------------------------------------------------------

    @property
    def editing(self) -> bool:
        return self.draft is not None

    def start_edit(self) -> EditDraft:
        if not self.flags["edit_mode"]:
            raise InvalidTransition("edit mode is disabled")
        if self.selected is None:
            raise InvalidTransition("no snippet selected")
        self.draft = EditDraft(
            heading=self.selected.heading,
            code=self.selected.code,
            language=self.selected.language,
        )
        return self.draft

    def stage(self, **fields: str) -> None:
        if self.draft is None:
            raise InvalidTransition("not editing")
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"not editable: {', '.join(sorted(unknown))}")
        for key, value in fields.items():
            setattr(self.draft, key, value)

    def cancel_edit(self) -> None:
        self.draft = None

    def save(self) -> Optional[schemas.Snippet]:
        """Send the changed fields; returns the updated snippet or None on failure."""
        if self.draft is None or self.selected is None:
            raise InvalidTransition("not editing")
        changes = {
            key: getattr(self.draft, key)
            for key in EDITABLE_FIELDS
            if getattr(self.draft, key) != getattr(self.selected, key)
        }
        if not changes:
            self.draft = None
            return self.selected
        try:
            updated = self.api.update_snippet(self.selected.id, **changes)
        except SnippetServiceError as exc:
            logger.error("snippet_update_failed: id=%s %s", self.selected.id, exc.message)
            self.last_action_error = exc
            return None
        self.last_action_error = None
        self._replace(updated)
        self.selected = updated
        self.draft = None
        return updated

    # Delete -----------------------------------------------------------------

    def delete_selected(self, confirm: Callable[[schemas.Snippet], bool]) -> bool:
        if self.selected is None:
            raise InvalidTransition("no snippet selected")
        if not confirm(self.selected):
            return False
        snippet_id = self.selected.id
        try:
            self.api.delete_snippet(snippet_id)
        except SnippetServiceError as exc:
            logger.error("snippet_delete_failed: id=%s %s", snippet_id, exc.message)
            self.last_action_error = exc
            return False
        self.last_action_error = None
        self.snippets = [s for s in self.snippets if s.id != snippet_id]
        self.close()
        return True

    def _find(self, snippet_id: int) -> Optional[schemas.Snippet]:
        for s in self.snippets:
            if s.id == snippet_id:
                return s
        return None

    def _replace(self, updated: schemas.Snippet) -> None:
        self.snippets = [updated if s.id == updated.id else s for s in self.snippets]
