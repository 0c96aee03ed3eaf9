# catalog/sa/repositories/story.py
import logging
from typing import List, Optional
from sqlalchemy.orm import joinedload, selectinload
from catalog.sa.models import Author, AuthorStory, Series, SeriesStory, Story, Volume, VolumeStory
from .base import REQUIRED
from .named import NamedRepository
from .options import StoryAllOptions

logger = logging.getLogger(__name__)

class StoryRepository(NamedRepository):
    MODEL = Story
    FIELDS = {
        'name': REQUIRED,
        'copyright': None,
        'active': True,
        'notes': None,
    }
    LOADERS = {
        'with_authors': [selectinload(Story.authors_stories).joinedload(AuthorStory.author)],
        'with_library': [joinedload(Story.library)],
        'with_series': [selectinload(Story.series_stories).joinedload(SeriesStory.series)],
        'with_volumes': [selectinload(Story.volumes_stories).joinedload(VolumeStory.volume)],
    }

    def by_author(self, library_id: int, author_id: int, options: Optional[StoryAllOptions] = None) -> List[Story]:
        """Get the stories written by an author"""
        self._find_owned(Author, library_id, author_id, "StoryRepository.by_author")
        query = (
            self._select(library_id, options)
            .join(AuthorStory, AuthorStory.story_id == Story.id)
            .filter(AuthorStory.author_id == author_id)
        )
        return self._page(query, options, "StoryRepository.by_author")

    def by_series(self, library_id: int, series_id: int, options: Optional[StoryAllOptions] = None) -> List[Story]:
        """Get the stories of a series in reading order.

        Stories are ordered by ordinal (unnumbered ones last), then by name.
        """
        self._find_owned(Series, library_id, series_id, "StoryRepository.by_series")
        query = (
            self._select(library_id, options)
            .join(SeriesStory, SeriesStory.story_id == Story.id)
            .filter(SeriesStory.series_id == series_id)
        )
        return self._page(query, options, "StoryRepository.by_series", SeriesStory.ordinal.asc().nulls_last())

    def by_volume(self, library_id: int, volume_id: int, options: Optional[StoryAllOptions] = None) -> List[Story]:
        """Get the stories published in a volume"""
        self._find_owned(Volume, library_id, volume_id, "StoryRepository.by_volume")
        query = (
            self._select(library_id, options)
            .join(VolumeStory, VolumeStory.story_id == Story.id)
            .filter(VolumeStory.volume_id == volume_id)
        )
        return self._page(query, options, "StoryRepository.by_volume")

    def author_connect(self, library_id: int, story_id: int, author_id: int, principal: bool = False) -> Story:
        story = self.find(library_id, story_id)
        self._other_endpoint(Author, library_id, author_id, "StoryRepository.author_connect")
        self._connect(AuthorStory, {'author_id': author_id, 'story_id': story_id},
                      "StoryRepository.author_connect", principal=bool(principal))
        return story

    def author_disconnect(self, library_id: int, story_id: int, author_id: int) -> Story:
        story = self.find(library_id, story_id)
        self._other_endpoint(Author, library_id, author_id, "StoryRepository.author_disconnect")
        self._disconnect(AuthorStory, {'author_id': author_id, 'story_id': story_id},
                         "StoryRepository.author_disconnect")
        self._warn_without_principal(AuthorStory, AuthorStory.story_id, story_id, "Story")
        return story

    def series_connect(self, library_id: int, story_id: int, series_id: int, ordinal: Optional[int] = None) -> Story:
        story = self.find(library_id, story_id)
        self._other_endpoint(Series, library_id, series_id, "StoryRepository.series_connect")
        self._connect(SeriesStory, {'series_id': series_id, 'story_id': story_id},
                      "StoryRepository.series_connect", ordinal=ordinal)
        return story

    def series_disconnect(self, library_id: int, story_id: int, series_id: int) -> Story:
        story = self.find(library_id, story_id)
        self._other_endpoint(Series, library_id, series_id, "StoryRepository.series_disconnect")
        self._disconnect(SeriesStory, {'series_id': series_id, 'story_id': story_id},
                         "StoryRepository.series_disconnect")
        return story

    def volume_connect(self, library_id: int, story_id: int, volume_id: int) -> Story:
        story = self.find(library_id, story_id)
        self._other_endpoint(Volume, library_id, volume_id, "StoryRepository.volume_connect")
        self._connect(VolumeStory, {'volume_id': volume_id, 'story_id': story_id},
                      "StoryRepository.volume_connect")
        return story

    def volume_disconnect(self, library_id: int, story_id: int, volume_id: int) -> Story:
        story = self.find(library_id, story_id)
        self._other_endpoint(Volume, library_id, volume_id, "StoryRepository.volume_disconnect")
        self._disconnect(VolumeStory, {'volume_id': volume_id, 'story_id': story_id},
                         "StoryRepository.volume_disconnect")
        return story
