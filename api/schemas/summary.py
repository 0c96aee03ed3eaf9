# api/schemas/summary.py
"""Flat representations used when one catalog entity is nested in another"""
from typing import Optional
from .base import CatalogSchema

class LibrarySummary(CatalogSchema):
    id: int
    name: str
    scope: str
    active: bool

class AuthorSummary(CatalogSchema):
    id: int
    library_id: int
    first_name: str
    last_name: str
    active: bool

class SeriesSummary(CatalogSchema):
    id: int
    library_id: int
    name: str
    active: bool

class StorySummary(CatalogSchema):
    id: int
    library_id: int
    name: str
    active: bool

class VolumeSummary(CatalogSchema):
    id: int
    library_id: int
    name: str
    location: Optional[str] = None
    type: Optional[str] = None
    active: bool

# Links carry the metadata stored on the join row

class AuthorLink(AuthorSummary):
    ENDPOINT = 'author'
    principal: bool = False

class SeriesLink(SeriesSummary):
    ENDPOINT = 'series'
    principal: Optional[bool] = None
    ordinal: Optional[int] = None

class StoryLink(StorySummary):
    ENDPOINT = 'story'
    principal: Optional[bool] = None
    ordinal: Optional[int] = None

class VolumeLink(VolumeSummary):
    ENDPOINT = 'volume'
    principal: Optional[bool] = None
