# catalog/sa/repositories/series.py
import logging
from typing import List, Optional
from sqlalchemy.orm import joinedload, selectinload
from catalog.sa.models import Author, AuthorSeries, Series, SeriesStory, Story
from .base import REQUIRED
from .named import NamedRepository
from .options import SeriesAllOptions

logger = logging.getLogger(__name__)

class SeriesRepository(NamedRepository):
    MODEL = Series
    FIELDS = {
        'name': REQUIRED,
        'copyright': None,
        'active': True,
        'notes': None,
    }
    LOADERS = {
        'with_authors': [selectinload(Series.authors_series).joinedload(AuthorSeries.author)],
        'with_library': [joinedload(Series.library)],
        'with_stories': [selectinload(Series.series_stories).joinedload(SeriesStory.story)],
    }

    def by_author(self, library_id: int, author_id: int, options: Optional[SeriesAllOptions] = None) -> List[Series]:
        """
        Get the series an author has written in.
        """
        self._find_owned(Author, library_id, author_id, "SeriesRepository.by_author")
        query = (
            self._select(library_id, options)
            .join(AuthorSeries, AuthorSeries.series_id == Series.id)
            .filter(AuthorSeries.author_id == author_id)
        )
        return self._page(query, options, "SeriesRepository.by_author")

    def by_story(self, library_id: int, story_id: int, options: Optional[SeriesAllOptions] = None) -> List[Series]:
        """
        Get the series that include a story.
        """
        self._find_owned(Story, library_id, story_id, "SeriesRepository.by_story")
        query = (
            self._select(library_id, options)
            .join(SeriesStory, SeriesStory.series_id == Series.id)
            .filter(SeriesStory.story_id == story_id)
        )
        return self._page(query, options, "SeriesRepository.by_story")

    def author_connect(self, library_id: int, series_id: int, author_id: int, principal: bool = False) -> Series:
        series = self.find(library_id, series_id)
        self._other_endpoint(Author, library_id, author_id, "SeriesRepository.author_connect")
        self._connect(AuthorSeries, {'author_id': author_id, 'series_id': series_id},
                      "SeriesRepository.author_connect", principal=bool(principal))
        return series

    def author_disconnect(self, library_id: int, series_id: int, author_id: int) -> Series:
        series = self.find(library_id, series_id)
        self._other_endpoint(Author, library_id, author_id, "SeriesRepository.author_disconnect")
        self._disconnect(AuthorSeries, {'author_id': author_id, 'series_id': series_id},
                         "SeriesRepository.author_disconnect")
        self._warn_without_principal(AuthorSeries, AuthorSeries.series_id, series_id, "Series")
        return series

    def story_connect(self, library_id: int, series_id: int, story_id: int, ordinal: Optional[int] = None) -> Series:
        """
        Add a story to a series at the caller supplied ordinal position.
        Ordinals are stored as given: gaps and duplicates are not corrected.
        """
        series = self.find(library_id, series_id)
        self._other_endpoint(Story, library_id, story_id, "SeriesRepository.story_connect")
        self._connect(SeriesStory, {'series_id': series_id, 'story_id': story_id},
                      "SeriesRepository.story_connect", ordinal=ordinal)
        return series

    def story_disconnect(self, library_id: int, series_id: int, story_id: int) -> Series:
        """
        Remove a story from a series. Remaining ordinals are left untouched.
        """
        series = self.find(library_id, series_id)
        self._other_endpoint(Story, library_id, story_id, "SeriesRepository.story_disconnect")
        self._disconnect(SeriesStory, {'series_id': series_id, 'story_id': story_id},
                         "SeriesRepository.story_disconnect")
        return series
