# catalog/sa/models/author.py
from sqlalchemy import Integer, String, Boolean, Text, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class AuthorSeries(Base, TimestampMixin):
    """Association model for authors of a series"""
    __tablename__ = 'authors_series'

    author_id: Mapped[int] = mapped_column(ForeignKey('author.id', ondelete='CASCADE'), primary_key=True)
    series_id: Mapped[int] = mapped_column(ForeignKey('series.id', ondelete='CASCADE'), primary_key=True)
    principal: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    author = relationship('Author', back_populates='authors_series')
    series = relationship('Series', back_populates='authors_series')

class AuthorStory(Base, TimestampMixin):
    """Association model for authors of a story"""
    __tablename__ = 'authors_stories'

    author_id: Mapped[int] = mapped_column(ForeignKey('author.id', ondelete='CASCADE'), primary_key=True)
    story_id: Mapped[int] = mapped_column(ForeignKey('story.id', ondelete='CASCADE'), primary_key=True)
    principal: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    author = relationship('Author', back_populates='authors_stories')
    story = relationship('Story', back_populates='authors_stories')

class AuthorVolume(Base, TimestampMixin):
    """Association model for authors of a volume"""
    __tablename__ = 'authors_volumes'

    author_id: Mapped[int] = mapped_column(ForeignKey('author.id', ondelete='CASCADE'), primary_key=True)
    volume_id: Mapped[int] = mapped_column(ForeignKey('volume.id', ondelete='CASCADE'), primary_key=True)
    principal: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    author = relationship('Author', back_populates='authors_volumes')
    volume = relationship('Volume', back_populates='authors_volumes')

class Author(Base, TimestampMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    library_id: Mapped[int] = mapped_column(ForeignKey('library.id', ondelete='CASCADE'), nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    library = relationship('Library', back_populates='authors')
    authors_series = relationship('AuthorSeries', back_populates='author', cascade='all, delete-orphan')
    authors_stories = relationship('AuthorStory', back_populates='author', cascade='all, delete-orphan')
    authors_volumes = relationship('AuthorVolume', back_populates='author', cascade='all, delete-orphan')

    # Convenience relationships
    series = relationship('Series', secondary='authors_series', viewonly=True)
    stories = relationship('Story', secondary='authors_stories', viewonly=True)
    volumes = relationship('Volume', secondary='authors_volumes', viewonly=True)

    __table_args__ = (
        # Names are deliberately not unique within a Library
        Index('idx_author_library_name', 'library_id', 'last_name', 'first_name'),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
