# api/deps.py
"""Request dependencies: the calling user and the scope checks made on them"""
import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from catalog.authorizations import authorized_admin, authorized_regular, authorized_superuser
from catalog.errors import Forbidden
from catalog.sa.database import get_db
from catalog.sa.models import Library, User
from catalog.sa.repositories import LibraryRepository, UserRepository

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to an active user, or answer 401"""
    user = UserRepository(db).by_access_token(credentials.credentials) if credentials else None
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing, invalid or expired access token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user

def require_superuser(user: User, context: str) -> None:
    if not authorized_superuser(user):
        logger.warning("Denied %s to User %s: superuser required", context, user.username)
        raise Forbidden("Required scope not authorized", context)

def require_admin(user: User, library: Library, context: str) -> None:
    if not authorized_admin(user, library):
        logger.warning("Denied %s on Library %s to User %s: admin required", context, library.id, user.username)
        raise Forbidden("Required scope not authorized", context, library.id)

def require_regular(user: User, library: Library, context: str) -> None:
    if not authorized_regular(user, library):
        logger.warning("Denied %s on Library %s to User %s: regular required", context, library.id, user.username)
        raise Forbidden("Required scope not authorized", context, library.id)

def library_for_read(library_id: int, user: User, db: Session, context: str) -> Library:
    """Find a library the user may read from"""
    library = LibraryRepository(db).find(library_id)
    require_regular(user, library, context)
    return library

def library_for_write(library_id: int, user: User, db: Session, context: str) -> Library:
    """Find a library the user may change the contents of"""
    library = LibraryRepository(db).find(library_id)
    require_admin(user, library, context)
    return library
