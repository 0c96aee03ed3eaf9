# api/schemas/catalog.py
"""Request and response bodies for the entities owned by a Library.

Request bodies are full records: a field left out is reset to its default,
and the repositories reject missing required fields with a 400.
"""
from typing import List, Optional
from pydantic import BaseModel
from .base import CatalogSchema
from .summary import AuthorLink, LibrarySummary, SeriesLink, StoryLink, VolumeLink

# Authors

class AuthorCreate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    active: Optional[bool] = None
    notes: Optional[str] = None

class Author(CatalogSchema):
    LINKS = {'authors_series': 'series', 'authors_stories': 'stories', 'authors_volumes': 'volumes'}

    id: int
    library_id: int
    first_name: str
    last_name: str
    active: bool
    notes: Optional[str] = None
    library: Optional[LibrarySummary] = None
    series: Optional[List[SeriesLink]] = None
    stories: Optional[List[StoryLink]] = None
    volumes: Optional[List[VolumeLink]] = None

# Series

class SeriesCreate(BaseModel):
    name: Optional[str] = None
    copyright: Optional[str] = None
    active: Optional[bool] = None
    notes: Optional[str] = None

class Series(CatalogSchema):
    LINKS = {'authors_series': 'authors', 'series_stories': 'stories'}

    id: int
    library_id: int
    name: str
    copyright: Optional[str] = None
    active: bool
    notes: Optional[str] = None
    library: Optional[LibrarySummary] = None
    authors: Optional[List[AuthorLink]] = None
    stories: Optional[List[StoryLink]] = None

# Stories

class StoryCreate(SeriesCreate):
    pass

class Story(CatalogSchema):
    LINKS = {'authors_stories': 'authors', 'series_stories': 'series', 'volumes_stories': 'volumes'}

    id: int
    library_id: int
    name: str
    copyright: Optional[str] = None
    active: bool
    notes: Optional[str] = None
    library: Optional[LibrarySummary] = None
    authors: Optional[List[AuthorLink]] = None
    series: Optional[List[SeriesLink]] = None
    volumes: Optional[List[VolumeLink]] = None

# Volumes

class VolumeCreate(BaseModel):
    name: Optional[str] = None
    copyright: Optional[str] = None
    isbn: Optional[str] = None
    google_id: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    read: Optional[bool] = None
    active: Optional[bool] = None
    notes: Optional[str] = None

class Volume(CatalogSchema):
    LINKS = {'authors_volumes': 'authors', 'volumes_stories': 'stories'}

    id: int
    library_id: int
    name: str
    copyright: Optional[str] = None
    isbn: Optional[str] = None
    google_id: Optional[str] = None
    location: Optional[str] = None
    type: str
    read: bool
    active: bool
    notes: Optional[str] = None
    library: Optional[LibrarySummary] = None
    authors: Optional[List[AuthorLink]] = None
    stories: Optional[List[StoryLink]] = None
