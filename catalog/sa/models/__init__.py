# catalog/sa/models/__init__.py
from .base import Base, TimestampMixin
from .library import Library
from .author import Author, AuthorSeries, AuthorStory, AuthorVolume
from .series import Series, SeriesStory
from .story import Story
from .volume import Volume, VolumeStory
from .user import User, AccessToken, RefreshToken

__all__ = [
    'Base',
    'TimestampMixin',
    'Library',
    'Author',
    'AuthorSeries',
    'AuthorStory',
    'AuthorVolume',
    'Series',
    'SeriesStory',
    'Story',
    'Volume',
    'VolumeStory',
    'User',
    'AccessToken',
    'RefreshToken'
]
