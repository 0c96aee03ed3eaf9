# catalog/sa/models/story.py
from sqlalchemy import Integer, String, Boolean, Text, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Story(Base, TimestampMixin):
    __tablename__ = 'story'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    library_id: Mapped[int] = mapped_column(ForeignKey('library.id', ondelete='CASCADE'), nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    copyright: Mapped[str | None] = mapped_column(String(50), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    library = relationship('Library', back_populates='stories')
    authors_stories = relationship('AuthorStory', back_populates='story', cascade='all, delete-orphan')
    series_stories = relationship('SeriesStory', back_populates='story', cascade='all, delete-orphan')
    volumes_stories = relationship('VolumeStory', back_populates='story', cascade='all, delete-orphan')

    # Convenience relationships
    authors = relationship('Author', secondary='authors_stories', viewonly=True)
    series = relationship('Series', secondary='series_stories', viewonly=True)
    volumes = relationship('Volume', secondary='volumes_stories', viewonly=True)

    __table_args__ = (
        UniqueConstraint('library_id', 'name', name='uix_story_library_name'),
        Index('idx_story_library_id', 'library_id'),
    )
