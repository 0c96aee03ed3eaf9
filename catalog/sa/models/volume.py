# catalog/sa/models/volume.py
from sqlalchemy import Integer, String, Boolean, Text, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class VolumeStory(Base, TimestampMixin):
    """Association model for stories published in a volume"""
    __tablename__ = 'volumes_stories'

    volume_id: Mapped[int] = mapped_column(ForeignKey('volume.id', ondelete='CASCADE'), primary_key=True)
    story_id: Mapped[int] = mapped_column(ForeignKey('story.id', ondelete='CASCADE'), primary_key=True)

    # Relationships
    volume = relationship('Volume', back_populates='volumes_stories')
    story = relationship('Story', back_populates='volumes_stories')

class Volume(Base, TimestampMixin):
    __tablename__ = 'volume'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    library_id: Mapped[int] = mapped_column(ForeignKey('library.id', ondelete='CASCADE'), nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    copyright: Mapped[str | None] = mapped_column(String(50), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True)
    google_id: Mapped[str | None] = mapped_column(String(255), nullable=True)  # External catalog identifier
    location: Mapped[str | None] = mapped_column(String(50), nullable=True)  # See VolumeLocation
    type: Mapped[str] = mapped_column(String(50), nullable=False, default='Single')  # See VolumeType
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    library = relationship('Library', back_populates='volumes')
    authors_volumes = relationship('AuthorVolume', back_populates='volume', cascade='all, delete-orphan')
    volumes_stories = relationship('VolumeStory', back_populates='volume', cascade='all, delete-orphan')

    # Convenience relationships
    authors = relationship('Author', secondary='authors_volumes', viewonly=True)
    stories = relationship('Story', secondary='volumes_stories', viewonly=True)

    __table_args__ = (
        UniqueConstraint('library_id', 'name', name='uix_volume_library_name'),
        Index('idx_volume_library_id', 'library_id'),
        Index('idx_volume_isbn', 'isbn'),
    )
