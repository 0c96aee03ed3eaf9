# api/routes/stories.py

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from catalog.parents import Parent, stories_of
from catalog.sa.database import get_db
from catalog.sa.models import User
from catalog.sa.repositories import AuthorRepository, SeriesRepository, StoryRepository, VolumeRepository
from catalog.sa.repositories.options import (
    AuthorAllOptions, SeriesAllOptions, StoryAllOptions, StoryFindOptions, VolumeAllOptions
)
from api.deps import get_current_user, library_for_read, library_for_write
from api.routes.params import (
    author_all_options, series_all_options, story_all_options, story_find_options, volume_all_options
)
from api.schemas import Author, Series, Story, StoryCreate, Volume

router = APIRouter(prefix="/libraries/{library_id}/stories", tags=["stories"])

@router.get("", response_model=List[Story])
def get_stories(
    library_id: int,
    options: StoryAllOptions = Depends(story_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_stories")
    return stories_of(db, Parent.library(library_id), options)

@router.post("", response_model=Story, status_code=status.HTTP_201_CREATED)
def create_story(
    library_id: int,
    story: StoryCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "create_story")
    return StoryRepository(db).insert(library_id, story.model_dump(exclude_unset=True))

@router.get("/exact/{name}", response_model=Story)
def get_story_by_name(
    library_id: int,
    name: str,
    options: StoryFindOptions = Depends(story_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_story_by_name")
    return StoryRepository(db).exact(library_id, name, options)

@router.get("/{story_id}", response_model=Story)
def get_story(
    library_id: int,
    story_id: int,
    options: StoryFindOptions = Depends(story_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_story")
    return StoryRepository(db).find(library_id, story_id, options)

@router.put("/{story_id}", response_model=Story)
def update_story(
    library_id: int,
    story_id: int,
    story: StoryCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "update_story")
    return StoryRepository(db).update(library_id, story_id, story.model_dump(exclude_unset=True))

@router.delete("/{story_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_story(
    library_id: int,
    story_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "delete_story")
    StoryRepository(db).remove(library_id, story_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Children

@router.get("/{story_id}/authors", response_model=List[Author])
def get_story_authors(
    library_id: int,
    story_id: int,
    options: AuthorAllOptions = Depends(author_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_story_authors")
    return AuthorRepository(db).by_story(library_id, story_id, options)

@router.get("/{story_id}/series", response_model=List[Series])
def get_story_series(
    library_id: int,
    story_id: int,
    options: SeriesAllOptions = Depends(series_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_story_series")
    return SeriesRepository(db).by_story(library_id, story_id, options)

@router.get("/{story_id}/volumes", response_model=List[Volume])
def get_story_volumes(
    library_id: int,
    story_id: int,
    options: VolumeAllOptions = Depends(volume_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_story_volumes")
    return VolumeRepository(db).by_story(library_id, story_id, options)
