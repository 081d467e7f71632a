from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Snippet(Base):
    __tablename__ = 'snippets'
    id = Column(Integer, primary_key=True, autoincrement=True)
    heading = Column(String(255), nullable=False)
    code = Column(Text, nullable=False)
    language = Column(String(100), nullable=False)
    owner_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    owner = relationship("User")
    snippet_tags = relationship(
        "SnippetTag",
        back_populates="snippet",
        cascade="all, delete-orphan",
        order_by="SnippetTag.position",
    )

    @property
    def tags(self):
        return [st.tag for st in self.snippet_tags]

    __table_args__ = (
        Index('idx_snippets_owner_id', 'owner_id'),
        Index('idx_snippets_owner_created', 'owner_id', 'created_at'),
    )


class SnippetTag(Base):
    __tablename__ = 'snippet_tags'
    snippet_id = Column(Integer, ForeignKey('snippets.id', ondelete='CASCADE'), primary_key=True)
    tag_id = Column(Integer, ForeignKey('tags.id'), primary_key=True)
    position = Column(Integer, nullable=False, default=0)

    snippet = relationship("Snippet", back_populates="snippet_tags")
    tag = relationship("Tag", back_populates="snippet_tags")
