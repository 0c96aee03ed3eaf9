# catalog/sa/repositories/__init__.py
from .library import LibraryRepository
from .author import AuthorRepository
from .series import SeriesRepository
from .story import StoryRepository
from .volume import VolumeRepository
from .user import UserRepository

__all__ = [
    'LibraryRepository',
    'AuthorRepository',
    'SeriesRepository',
    'StoryRepository',
    'VolumeRepository',
    'UserRepository'
]
