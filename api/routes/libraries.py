# api/routes/libraries.py

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from catalog.authorizations import readable_library_scopes
from catalog.sa.database import get_db
from catalog.sa.models import User
from catalog.sa.repositories import LibraryRepository
from catalog.sa.repositories.options import LibraryAllOptions, LibraryFindOptions
from api.deps import get_current_user, require_regular, require_superuser
from api.routes.params import library_all_options, library_find_options
from api.schemas import Library, LibraryCreate

router = APIRouter(prefix="/libraries", tags=["libraries"])

@router.get("", response_model=List[Library])
def get_libraries(
    options: LibraryAllOptions = Depends(library_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    List the libraries the caller may read, ordered by name.

    Superusers see every library. A page shorter than ``limit`` is the last one.
    """
    options.scopes = readable_library_scopes(user)
    return LibraryRepository(db).all(options)

@router.post("", response_model=Library, status_code=status.HTTP_201_CREATED)
def create_library(
    library: LibraryCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    require_superuser(user, "create_library")
    return LibraryRepository(db).insert(library.model_dump(exclude_unset=True))

@router.get("/exact/{name}", response_model=Library)
def get_library_by_name(
    name: str,
    options: LibraryFindOptions = Depends(library_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library = LibraryRepository(db).exact(name, options)
    require_regular(user, library, "get_library_by_name")
    return library

@router.get("/{library_id}", response_model=Library)
def get_library(
    library_id: int,
    options: LibraryFindOptions = Depends(library_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library = LibraryRepository(db).find(library_id, options)
    require_regular(user, library, "get_library")
    return library

@router.put("/{library_id}", response_model=Library)
def update_library(
    library_id: int,
    library: LibraryCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    require_superuser(user, "update_library")
    return LibraryRepository(db).update(library_id, library.model_dump(exclude_unset=True))

@router.delete("/{library_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_library(
    library_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Remove a library and everything it owns"""
    require_superuser(user, "delete_library")
    LibraryRepository(db).remove(library_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
