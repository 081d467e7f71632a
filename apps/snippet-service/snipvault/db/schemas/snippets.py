from datetime import datetime
from typing import Annotated, List, Optional
from pydantic import BaseModel, ConfigDict, StringConstraints

from snipvault.utils.tags import MAX_TAG_LENGTH

from .tags import Tag


HeadingText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
LanguageText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
CodeText = Annotated[str, StringConstraints(min_length=1)]
TagName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=MAX_TAG_LENGTH)]


class SnippetBase(BaseModel):
    heading: HeadingText
    code: CodeText
    language: LanguageText


class SnippetCreate(SnippetBase):
    tags: Optional[List[TagName]] = None


class SnippetUpdate(BaseModel):
    """Partial update; unset or null fields are left untouched."""

    heading: Optional[HeadingText] = None
    code: Optional[CodeText] = None
    language: Optional[LanguageText] = None

    def changes(self) -> dict:
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class Snippet(BaseModel):
    id: int
    heading: str
    code: str
    language: str
    owner_id: int
    tags: List[Tag] = []
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class SnippetDeleted(BaseModel):
    message: str
