# api/schemas/library.py
from typing import List, Optional
from pydantic import BaseModel
from .base import CatalogSchema
from .summary import AuthorSummary, SeriesSummary, StorySummary, VolumeSummary

class LibraryBase(BaseModel):
    name: Optional[str] = None
    scope: Optional[str] = None
    active: Optional[bool] = None
    notes: Optional[str] = None

class LibraryCreate(LibraryBase):
    pass

class Library(CatalogSchema):
    id: int
    name: str
    scope: str
    active: bool
    notes: Optional[str] = None
    authors: Optional[List[AuthorSummary]] = None
    series: Optional[List[SeriesSummary]] = None
    stories: Optional[List[StorySummary]] = None
    volumes: Optional[List[VolumeSummary]] = None
