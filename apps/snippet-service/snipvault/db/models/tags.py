from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Tag(Base):
    __tablename__ = 'tags'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    # Tags outlive the snippets they are attached to; only association rows cascade.
    snippet_tags = relationship("SnippetTag", back_populates="tag")
