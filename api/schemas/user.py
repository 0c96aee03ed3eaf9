# api/schemas/user.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel
from .base import CatalogSchema

class UserCreate(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    active: Optional[bool] = None
    scope: Optional[str] = None
    google_books_api_key: Optional[str] = None

class AccessToken(CatalogSchema):
    token: str
    expires: datetime
    scope: Optional[str] = None

class RefreshToken(CatalogSchema):
    token: str
    expires: datetime

class User(CatalogSchema):
    """A user as returned to clients; the password never leaves the server"""
    id: int
    username: str
    name: str
    active: bool
    scope: Optional[str] = None
    google_books_api_key: Optional[str] = None
    access_tokens: Optional[List[AccessToken]] = None
    refresh_tokens: Optional[List[RefreshToken]] = None
