# catalog/sa/__init__.py
from .database import Database
from .models import (
    Base, Library, Author, Series, Story, Volume, User,
    AuthorSeries, AuthorStory, AuthorVolume, SeriesStory, VolumeStory,
    AccessToken, RefreshToken
)

__all__ = [
    'Database',
    'Base',
    'Library',
    'Author',
    'Series',
    'Story',
    'Volume',
    'User',
    'AuthorSeries',
    'AuthorStory',
    'AuthorVolume',
    'SeriesStory',
    'VolumeStory',
    'AccessToken',
    'RefreshToken'
]
