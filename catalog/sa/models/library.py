# catalog/sa/models/library.py
from sqlalchemy import Integer, String, Boolean, Text, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Library(Base, TimestampMixin):
    """Top level tenant. Every other catalog entity belongs to exactly one Library."""
    __tablename__ = 'library'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    scope: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)  # Used in "{scope}:admin" tokens
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    authors = relationship('Author', back_populates='library', cascade='all, delete-orphan')
    series = relationship('Series', back_populates='library', cascade='all, delete-orphan')
    stories = relationship('Story', back_populates='library', cascade='all, delete-orphan')
    volumes = relationship('Volume', back_populates='library', cascade='all, delete-orphan')

    __table_args__ = (
        Index('idx_library_active', 'active'),
    )
