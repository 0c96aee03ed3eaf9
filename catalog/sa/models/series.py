# catalog/sa/models/series.py
from sqlalchemy import Integer, String, Boolean, Text, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class SeriesStory(Base, TimestampMixin):
    """Association model for stories in a series"""
    __tablename__ = 'series_stories'

    series_id: Mapped[int] = mapped_column(ForeignKey('series.id', ondelete='CASCADE'), primary_key=True)
    story_id: Mapped[int] = mapped_column(ForeignKey('story.id', ondelete='CASCADE'), primary_key=True)
    ordinal: Mapped[int | None] = mapped_column(Integer, nullable=True)  # Caller assigned, never renumbered

    # Relationships
    series = relationship('Series', back_populates='series_stories')
    story = relationship('Story', back_populates='series_stories')

class Series(Base, TimestampMixin):
    __tablename__ = 'series'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    library_id: Mapped[int] = mapped_column(ForeignKey('library.id', ondelete='CASCADE'), nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    copyright: Mapped[str | None] = mapped_column(String(50), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    library = relationship('Library', back_populates='series')
    authors_series = relationship('AuthorSeries', back_populates='series', cascade='all, delete-orphan')
    series_stories = relationship(
        'SeriesStory',
        back_populates='series',
        cascade='all, delete-orphan',
        order_by=lambda: [SeriesStory.ordinal.asc().nulls_last(), SeriesStory.story_id],
    )

    # Convenience relationships
    authors = relationship('Author', secondary='authors_series', viewonly=True)
    stories = relationship('Story', secondary='series_stories', viewonly=True)

    __table_args__ = (
        UniqueConstraint('library_id', 'name', name='uix_series_library_name'),
        Index('idx_series_library_id', 'library_id'),
    )
