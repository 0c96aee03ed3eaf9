# catalog/sa/repositories/volume.py
import logging
from typing import List, Optional
from sqlalchemy.orm import joinedload, selectinload
from catalog.errors import BadRequest
from catalog.sa.models import Author, AuthorVolume, Story, Volume, VolumeStory
from catalog.validators import VolumeType, validate_volume_location, validate_volume_type
from .base import REQUIRED
from .named import NamedRepository
from .options import VolumeAllOptions

logger = logging.getLogger(__name__)

class VolumeRepository(NamedRepository):
    """Repository for managing Volume entities."""

    MODEL = Volume
    FIELDS = {
        'name': REQUIRED,
        'copyright': None,
        'isbn': None,
        'google_id': None,
        'location': None,
        'type': VolumeType.SINGLE.value,
        'read': False,
        'active': True,
        'notes': None,
    }
    LOADERS = {
        'with_authors': [selectinload(Volume.authors_volumes).joinedload(AuthorVolume.author)],
        'with_library': [joinedload(Volume.library)],
        'with_stories': [selectinload(Volume.volumes_stories).joinedload(VolumeStory.story)],
    }

    def validate(self, values: dict, context: str) -> None:
        """Reject locations and types outside the known enumerations.
        
        Args:
            values: Complete field values for the volume
            context: Operation name reported with any error
            
        Raises:
            BadRequest: If the location or type is not recognized
        """
        if not validate_volume_location(values['location']):
            raise BadRequest(f"location: Invalid Volume location '{values['location']}'", context)
        if not validate_volume_type(values['type']):
            raise BadRequest(f"type: Invalid Volume type '{values['type']}'", context)

    def by_author(self, library_id: int, author_id: int, options: Optional[VolumeAllOptions] = None) -> List[Volume]:
        """Get the volumes an author contributed to.
        
        Raises:
            NotFound: If the author is missing or belongs to another library
        """
        self._find_owned(Author, library_id, author_id, "VolumeRepository.by_author")
        query = (
            self._select(library_id, options)
            .join(AuthorVolume, AuthorVolume.volume_id == Volume.id)
            .filter(AuthorVolume.author_id == author_id)
        )
        return self._page(query, options, "VolumeRepository.by_author")

    def by_story(self, library_id: int, story_id: int, options: Optional[VolumeAllOptions] = None) -> List[Volume]:
        """Get the volumes a story is published in.
        
        Raises:
            NotFound: If the story is missing or belongs to another library
        """
        self._find_owned(Story, library_id, story_id, "VolumeRepository.by_story")
        query = (
            self._select(library_id, options)
            .join(VolumeStory, VolumeStory.volume_id == Volume.id)
            .filter(VolumeStory.story_id == story_id)
        )
        return self._page(query, options, "VolumeRepository.by_story")

    def author_connect(self, library_id: int, volume_id: int, author_id: int, principal: bool = False) -> Volume:
        volume = self.find(library_id, volume_id)
        self._other_endpoint(Author, library_id, author_id, "VolumeRepository.author_connect")
        self._connect(AuthorVolume, {'author_id': author_id, 'volume_id': volume_id},
                      "VolumeRepository.author_connect", principal=bool(principal))
        return volume

    def author_disconnect(self, library_id: int, volume_id: int, author_id: int) -> Volume:
        volume = self.find(library_id, volume_id)
        self._other_endpoint(Author, library_id, author_id, "VolumeRepository.author_disconnect")
        self._disconnect(AuthorVolume, {'author_id': author_id, 'volume_id': volume_id},
                         "VolumeRepository.author_disconnect")
        self._warn_without_principal(AuthorVolume, AuthorVolume.volume_id, volume_id, "Volume")
        return volume

    def story_connect(self, library_id: int, volume_id: int, story_id: int) -> Volume:
        volume = self.find(library_id, volume_id)
        self._other_endpoint(Story, library_id, story_id, "VolumeRepository.story_connect")
        self._connect(VolumeStory, {'volume_id': volume_id, 'story_id': story_id},
                      "VolumeRepository.story_connect")
        return volume

    def story_disconnect(self, library_id: int, volume_id: int, story_id: int) -> Volume:
        volume = self.find(library_id, volume_id)
        self._other_endpoint(Story, library_id, story_id, "VolumeRepository.story_disconnect")
        self._disconnect(VolumeStory, {'volume_id': volume_id, 'story_id': story_id},
                         "VolumeRepository.story_disconnect")
        return volume
