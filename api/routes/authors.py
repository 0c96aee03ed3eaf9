# api/routes/authors.py

from typing import List
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from catalog.parents import Parent, ParentKind, stories_of
from catalog.sa.database import get_db
from catalog.sa.models import User
from catalog.sa.repositories import AuthorRepository, SeriesRepository, VolumeRepository
from catalog.sa.repositories.options import AuthorAllOptions, AuthorFindOptions, SeriesAllOptions, StoryAllOptions, VolumeAllOptions
from api.deps import get_current_user, library_for_read, library_for_write
from api.routes.params import author_all_options, author_find_options, series_all_options, story_all_options, volume_all_options
from api.schemas import Author, AuthorCreate, Series, Story, Volume

router = APIRouter(prefix="/libraries/{library_id}/authors", tags=["authors"])

@router.get("", response_model=List[Author])
def get_authors(
    library_id: int,
    options: AuthorAllOptions = Depends(author_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the authors of a library ordered by last name, then first name"""
    library_for_read(library_id, user, db, "get_authors")
    return AuthorRepository(db).all(library_id, options)

@router.post("", response_model=Author, status_code=status.HTTP_201_CREATED)
def create_author(
    library_id: int,
    author: AuthorCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "create_author")
    return AuthorRepository(db).insert(library_id, author.model_dump(exclude_unset=True))

@router.get("/exact/{first_name}/{last_name}", response_model=Author)
def get_author_by_name(
    library_id: int,
    first_name: str,
    last_name: str,
    options: AuthorFindOptions = Depends(author_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the author with exactly this name; the oldest one wins if there are several"""
    library_for_read(library_id, user, db, "get_author_by_name")
    return AuthorRepository(db).exact(library_id, first_name, last_name, options)

@router.get("/{author_id}", response_model=Author)
def get_author(
    library_id: int,
    author_id: int,
    options: AuthorFindOptions = Depends(author_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_author")
    return AuthorRepository(db).find(library_id, author_id, options)

@router.put("/{author_id}", response_model=Author)
def update_author(
    library_id: int,
    author_id: int,
    author: AuthorCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "update_author")
    return AuthorRepository(db).update(library_id, author_id, author.model_dump(exclude_unset=True))

@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(
    library_id: int,
    author_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "delete_author")
    AuthorRepository(db).remove(library_id, author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Children

@router.get("/{author_id}/series", response_model=List[Series])
def get_author_series(
    library_id: int,
    author_id: int,
    options: SeriesAllOptions = Depends(series_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_author_series")
    return SeriesRepository(db).by_author(library_id, author_id, options)

@router.get("/{author_id}/stories", response_model=List[Story])
def get_author_stories(
    library_id: int,
    author_id: int,
    options: StoryAllOptions = Depends(story_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_author_stories")
    return stories_of(db, Parent(ParentKind.AUTHOR, library_id, author_id), options)

@router.get("/{author_id}/volumes", response_model=List[Volume])
def get_author_volumes(
    library_id: int,
    author_id: int,
    options: VolumeAllOptions = Depends(volume_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_author_volumes")
    return VolumeRepository(db).by_author(library_id, author_id, options)

# Associations

@router.post("/{author_id}/series/{series_id}", response_model=Author)
def connect_author_series(
    library_id: int,
    author_id: int,
    series_id: int,
    principal: bool = Query(False, description="Whether this author is a principal author of the series"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "connect_author_series")
    return AuthorRepository(db).series_connect(library_id, author_id, series_id, principal)

@router.delete("/{author_id}/series/{series_id}", response_model=Author)
def disconnect_author_series(
    library_id: int,
    author_id: int,
    series_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "disconnect_author_series")
    return AuthorRepository(db).series_disconnect(library_id, author_id, series_id)

@router.post("/{author_id}/stories/{story_id}", response_model=Author)
def connect_author_story(
    library_id: int,
    author_id: int,
    story_id: int,
    principal: bool = Query(False, description="Whether this author is a principal author of the story"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "connect_author_story")
    return AuthorRepository(db).story_connect(library_id, author_id, story_id, principal)

@router.delete("/{author_id}/stories/{story_id}", response_model=Author)
def disconnect_author_story(
    library_id: int,
    author_id: int,
    story_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "disconnect_author_story")
    return AuthorRepository(db).story_disconnect(library_id, author_id, story_id)

@router.post("/{author_id}/volumes/{volume_id}", response_model=Author)
def connect_author_volume(
    library_id: int,
    author_id: int,
    volume_id: int,
    principal: bool = Query(False, description="Whether this author is a principal author of the volume"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "connect_author_volume")
    return AuthorRepository(db).volume_connect(library_id, author_id, volume_id, principal)

@router.delete("/{author_id}/volumes/{volume_id}", response_model=Author)
def disconnect_author_volume(
    library_id: int,
    author_id: int,
    volume_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "disconnect_author_volume")
    return AuthorRepository(db).volume_disconnect(library_id, author_id, volume_id)
