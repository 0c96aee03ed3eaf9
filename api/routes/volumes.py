# api/routes/volumes.py

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from catalog.parents import Parent, ParentKind, stories_of
from catalog.sa.database import get_db
from catalog.sa.models import User
from catalog.sa.repositories import AuthorRepository, VolumeRepository
from catalog.sa.repositories.options import AuthorAllOptions, StoryAllOptions, VolumeAllOptions, VolumeFindOptions
from api.deps import get_current_user, library_for_read, library_for_write
from api.routes.params import author_all_options, story_all_options, volume_all_options, volume_find_options
from api.schemas import Author, Story, Volume, VolumeCreate

router = APIRouter(prefix="/libraries/{library_id}/volumes", tags=["volumes"])

@router.get("", response_model=List[Volume])
def get_volumes(
    library_id: int,
    options: VolumeAllOptions = Depends(volume_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_volumes")
    return VolumeRepository(db).all(library_id, options)

@router.post("", response_model=Volume, status_code=status.HTTP_201_CREATED)
def create_volume(
    library_id: int,
    volume: VolumeCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Create a volume. ``location`` and ``type`` must be one of the known
    values (e.g. Kindle, Box / Single, Anthology) or the request fails with 400.
    """
    library_for_write(library_id, user, db, "create_volume")
    return VolumeRepository(db).insert(library_id, volume.model_dump(exclude_unset=True))

@router.get("/exact/{name}", response_model=Volume)
def get_volume_by_name(
    library_id: int,
    name: str,
    options: VolumeFindOptions = Depends(volume_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_volume_by_name")
    return VolumeRepository(db).exact(library_id, name, options)

@router.get("/{volume_id}", response_model=Volume)
def get_volume(
    library_id: int,
    volume_id: int,
    options: VolumeFindOptions = Depends(volume_find_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_volume")
    return VolumeRepository(db).find(library_id, volume_id, options)

@router.put("/{volume_id}", response_model=Volume)
def update_volume(
    library_id: int,
    volume_id: int,
    volume: VolumeCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "update_volume")
    return VolumeRepository(db).update(library_id, volume_id, volume.model_dump(exclude_unset=True))

@router.delete("/{volume_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_volume(
    library_id: int,
    volume_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "delete_volume")
    VolumeRepository(db).remove(library_id, volume_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Children

@router.get("/{volume_id}/authors", response_model=List[Author])
def get_volume_authors(
    library_id: int,
    volume_id: int,
    options: AuthorAllOptions = Depends(author_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_volume_authors")
    return AuthorRepository(db).by_volume(library_id, volume_id, options)

@router.get("/{volume_id}/stories", response_model=List[Story])
def get_volume_stories(
    library_id: int,
    volume_id: int,
    options: StoryAllOptions = Depends(story_all_options),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_read(library_id, user, db, "get_volume_stories")
    return stories_of(db, Parent(ParentKind.VOLUME, library_id, volume_id), options)

# Associations

@router.post("/{volume_id}/stories/{story_id}", response_model=Volume)
def connect_volume_story(
    library_id: int,
    volume_id: int,
    story_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "connect_volume_story")
    return VolumeRepository(db).story_connect(library_id, volume_id, story_id)

@router.delete("/{volume_id}/stories/{story_id}", response_model=Volume)
def disconnect_volume_story(
    library_id: int,
    volume_id: int,
    story_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    library_for_write(library_id, user, db, "disconnect_volume_story")
    return VolumeRepository(db).story_disconnect(library_id, volume_id, story_id)
