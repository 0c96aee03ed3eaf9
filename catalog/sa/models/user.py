# catalog/sa/models/user.py
from datetime import datetime, UTC
from sqlalchemy import Integer, String, Boolean, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class User(Base, TimestampMixin):
    """A global (not per-Library) user, authorized through its scope tokens."""
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)  # Hashed by the caller's hasher
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    scope: Mapped[str] = mapped_column(String(1024), nullable=False, default='')  # Space delimited tokens
    google_books_api_key: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    access_tokens = relationship('AccessToken', back_populates='user', cascade='all, delete-orphan')
    refresh_tokens = relationship('RefreshToken', back_populates='user', cascade='all, delete-orphan')

class AccessToken(Base, TimestampMixin):
    __tablename__ = 'access_token'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    token: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    expires: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    scope: Mapped[str] = mapped_column(String(1024), nullable=False, default='')
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id', ondelete='CASCADE'), nullable=False)

    # Relationships
    user = relationship('User', back_populates='access_tokens')

    __table_args__ = (
        Index('idx_access_token_user_id', 'user_id'),
    )

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(UTC)
        expires = self.expires
        # SQLite hands back naive datetimes
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=UTC)
        return expires <= now

class RefreshToken(Base, TimestampMixin):
    __tablename__ = 'refresh_token'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    token: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    access_token: Mapped[str] = mapped_column(String(255), nullable=False)
    expires: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id', ondelete='CASCADE'), nullable=False)

    # Relationships
    user = relationship('User', back_populates='refresh_tokens')

    __table_args__ = (
        Index('idx_refresh_token_user_id', 'user_id'),
    )
