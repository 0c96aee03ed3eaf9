# api/schemas/__init__.py
from .library import Library, LibraryCreate
from .catalog import (
    Author, AuthorCreate, Series, SeriesCreate,
    Story, StoryCreate, Volume, VolumeCreate
)
from .user import User, UserCreate, AccessToken

__all__ = [
    'Library', 'LibraryCreate',
    'Author', 'AuthorCreate', 'Series', 'SeriesCreate',
    'Story', 'StoryCreate', 'Volume', 'VolumeCreate',
    'User', 'UserCreate', 'AccessToken',
]
