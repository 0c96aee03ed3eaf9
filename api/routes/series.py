# api/routes/series.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from catalog.parents import Parent, ParentKind, stories_of
from catalog.sa.database import get_db
from catalog.sa.models import User
from catalog.sa.repositories import AuthorRepository, SeriesRepository
from catalog.sa.repositories.options import AuthorAllOptions, SeriesAllOptions, SeriesFindOptions, StoryAllOptions
from api.deps import get_current_user, library_for_read, library_for_write
from api.routes.params import author_all_options, series_all_options, series_find_options, story_all_options
from api.schemas import Author, Series, SeriesCreate, Story

router = APIRouter(prefix="/libraries/{library_id}/series", tags=["series"])

@router.get("", response_model=List[Series])
def get_series_list(
    library_id: int,
    options: SeriesAllOptions = Depends(series_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_series_list")
    return SeriesRepository(db).all(library_id, options)

@router.post("", response_model=Series, status_code=status.HTTP_201_CREATED)
def create_series(
    library_id: int,
    series: SeriesCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "create_series")
    return SeriesRepository(db).insert(library_id, series.model_dump(exclude_unset=True))

@router.get("/exact/{name}", response_model=Series)
def get_series_by_name(
    library_id: int,
    name: str,
    options: SeriesFindOptions = Depends(series_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_series_by_name")
    return SeriesRepository(db).exact(library_id, name, options)

@router.get("/{series_id}", response_model=Series)
def get_series(
    library_id: int,
    series_id: int,
    options: SeriesFindOptions = Depends(series_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_series")
    return SeriesRepository(db).find(library_id, series_id, options)

@router.put("/{series_id}", response_model=Series)
def update_series(
    library_id: int,
    series_id: int,
    series: SeriesCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "update_series")
    return SeriesRepository(db).update(library_id, series_id, series.model_dump(exclude_unset=True))

@router.delete("/{series_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_series(
    library_id: int,
    series_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "delete_series")
    SeriesRepository(db).remove(library_id, series_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Children

@router.get("/{series_id}/authors", response_model=List[Author])
def get_series_authors(
    library_id: int,
    series_id: int,
    options: AuthorAllOptions = Depends(author_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_series_authors")
    return AuthorRepository(db).by_series(library_id, series_id, options)

@router.get("/{series_id}/stories", response_model=List[Story])
def get_series_stories(
    library_id: int,
    series_id: int,
    options: StoryAllOptions = Depends(story_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the stories of a series in reading order (by ordinal, unnumbered last)"""
    library_for_read(library_id, user, db, "get_series_stories")
    return stories_of(db, Parent(ParentKind.SERIES, library_id, series_id), options)

# Associations

@router.post("/{series_id}/stories/{story_id}", response_model=Series)
def connect_series_story(
    library_id: int,
    series_id: int,
    story_id: int,
    ordinal: Optional[int] = Query(None, description="Position of the story within the series"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "connect_series_story")
    return SeriesRepository(db).story_connect(library_id, series_id, story_id, ordinal)

@router.delete("/{series_id}/stories/{story_id}", response_model=Series)
def disconnect_series_story(
    library_id: int,
    series_id: int,
    story_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "disconnect_series_story")
    return SeriesRepository(db).story_disconnect(library_id, series_id, story_id)
