# catalog/sa/repositories/author.py
import logging
from typing import Any, List, Mapping, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Query, joinedload, selectinload
from catalog.errors import NotFound
from catalog.sa.models import Author, AuthorSeries, AuthorStory, AuthorVolume, Series, Story, Volume
from .base import BaseRepository, REQUIRED, record_values
from .options import AuthorAllOptions, AuthorFindOptions, filter_active, loader_options, paginate

logger = logging.getLogger(__name__)

AUTHOR_FIELDS = {
    'first_name': REQUIRED,
    'last_name': REQUIRED,
    'active': True,
    'notes': None,
}

class AuthorRepository(BaseRepository):
    LOADERS = {
        'with_library': [joinedload(Author.library)],
        'with_series': [selectinload(Author.authors_series).joinedload(AuthorSeries.series)],
        'with_stories': [selectinload(Author.authors_stories).joinedload(AuthorStory.story)],
        'with_volumes': [selectinload(Author.authors_volumes).joinedload(AuthorVolume.volume)],
    }

    def all(self, library_id: int, options: Optional[AuthorAllOptions] = None) -> List[Author]:
        """Get the authors of a library, ordered by last then first name"""
        return self._page(self._select(library_id, options), options, "AuthorRepository.all")

    def by_series(self, library_id: int, series_id: int, options: Optional[AuthorAllOptions] = None) -> List[Author]:
        """Get the authors of a series"""
        self._find_owned(Series, library_id, series_id, "AuthorRepository.by_series")
        query = (
            self._select(library_id, options)
            .join(AuthorSeries, AuthorSeries.author_id == Author.id)
            .filter(AuthorSeries.series_id == series_id)
        )
        return self._page(query, options, "AuthorRepository.by_series")

    def by_story(self, library_id: int, story_id: int, options: Optional[AuthorAllOptions] = None) -> List[Author]:
        """Get the authors of a story"""
        self._find_owned(Story, library_id, story_id, "AuthorRepository.by_story")
        query = (
            self._select(library_id, options)
            .join(AuthorStory, AuthorStory.author_id == Author.id)
            .filter(AuthorStory.story_id == story_id)
        )
        return self._page(query, options, "AuthorRepository.by_story")

    def by_volume(self, library_id: int, volume_id: int, options: Optional[AuthorAllOptions] = None) -> List[Author]:
        """Get the authors of a volume"""
        self._find_owned(Volume, library_id, volume_id, "AuthorRepository.by_volume")
        query = (
            self._select(library_id, options)
            .join(AuthorVolume, AuthorVolume.author_id == Author.id)
            .filter(AuthorVolume.volume_id == volume_id)
        )
        return self._page(query, options, "AuthorRepository.by_volume")

    def find(self, library_id: int, author_id: int, options: Optional[AuthorFindOptions] = None) -> Author:
        """Get an author by ID within a library.

        Raises:
            NotFound: If the author is missing or belongs to another library
        """
        return self._find_owned(
            Author, library_id, author_id, "AuthorRepository.find", loader_options(options, self.LOADERS)
        )

    def exact(self, library_id: int, first_name: str, last_name: str,
              options: Optional[AuthorFindOptions] = None) -> Author:
        """Get an author by exact first and last name.

        Author names are not unique, so the earliest created match wins.
        """
        query = (
            self.session.query(Author)
            .options(*loader_options(options, self.LOADERS))
            .filter(
                Author.library_id == library_id,
                Author.first_name == first_name,
                Author.last_name == last_name,
            )
            .order_by(Author.id)
        )
        result = self._fetch_first(query, "AuthorRepository.exact")
        if result is None:
            raise NotFound(
                f"name: Missing Author '{first_name} {last_name}'",
                "AuthorRepository.exact",
                f"{first_name} {last_name}",
            )
        return result

    def insert(self, library_id: int, data: Mapping[str, Any]) -> Author:
        """Create an author owned by this library"""
        self._require_library(library_id, "AuthorRepository.insert")
        values = record_values(data, AUTHOR_FIELDS, "AuthorRepository.insert")
        author = Author(library_id=library_id, **values)
        self.session.add(author)
        self._commit("AuthorRepository.insert")
        self.session.refresh(author)
        logger.info("Inserted Author %s '%s' in Library %s", author.id, author.full_name, library_id)
        return author

    def update(self, library_id: int, author_id: int, data: Mapping[str, Any]) -> Author:
        """Replace every mutable field of an author; ownership never changes"""
        author = self.find(library_id, author_id)
        values = record_values(data, AUTHOR_FIELDS, "AuthorRepository.update")
        for field, value in values.items():
            setattr(author, field, value)
        self._commit("AuthorRepository.update", identifier=author_id)
        self.session.refresh(author)
        logger.info("Updated Author %s '%s'", author.id, author.full_name)
        return author

    def remove(self, library_id: int, author_id: int) -> None:
        """Delete an author and its join rows; related entities are kept"""
        author = self.find(library_id, author_id)
        name = author.full_name
        self.session.delete(author)
        self._commit("AuthorRepository.remove", identifier=author_id)
        logger.info("Removed Author %s '%s'", author_id, name)

    def deactivate(self, library_id: int, author_id: int) -> Author:
        author = self.find(library_id, author_id)
        author.active = False
        self._commit("AuthorRepository.deactivate", identifier=author_id)
        self.session.refresh(author)
        return author

    # Associations

    def series_connect(self, library_id: int, author_id: int, series_id: int, principal: bool = False) -> Author:
        """Connect this author to a series, optionally as a principal author"""
        author = self.find(library_id, author_id)
        self._other_endpoint(Series, library_id, series_id, "AuthorRepository.series_connect")
        self._connect(AuthorSeries, {'author_id': author_id, 'series_id': series_id},
                      "AuthorRepository.series_connect", principal=bool(principal))
        return author

    def series_disconnect(self, library_id: int, author_id: int, series_id: int) -> Author:
        author = self.find(library_id, author_id)
        self._other_endpoint(Series, library_id, series_id, "AuthorRepository.series_disconnect")
        self._disconnect(AuthorSeries, {'author_id': author_id, 'series_id': series_id},
                         "AuthorRepository.series_disconnect")
        self._warn_without_principal(AuthorSeries, AuthorSeries.series_id, series_id, "Series")
        return author

    def story_connect(self, library_id: int, author_id: int, story_id: int, principal: bool = False) -> Author:
        """Connect this author to a story, optionally as a principal author"""
        author = self.find(library_id, author_id)
        self._other_endpoint(Story, library_id, story_id, "AuthorRepository.story_connect")
        self._connect(AuthorStory, {'author_id': author_id, 'story_id': story_id},
                      "AuthorRepository.story_connect", principal=bool(principal))
        return author

    def story_disconnect(self, library_id: int, author_id: int, story_id: int) -> Author:
        author = self.find(library_id, author_id)
        self._other_endpoint(Story, library_id, story_id, "AuthorRepository.story_disconnect")
        self._disconnect(AuthorStory, {'author_id': author_id, 'story_id': story_id},
                         "AuthorRepository.story_disconnect")
        self._warn_without_principal(AuthorStory, AuthorStory.story_id, story_id, "Story")
        return author

    def volume_connect(self, library_id: int, author_id: int, volume_id: int, principal: bool = False) -> Author:
        """Connect this author to a volume, optionally as a principal author"""
        author = self.find(library_id, author_id)
        self._other_endpoint(Volume, library_id, volume_id, "AuthorRepository.volume_connect")
        self._connect(AuthorVolume, {'author_id': author_id, 'volume_id': volume_id},
                      "AuthorRepository.volume_connect", principal=bool(principal))
        return author

    def volume_disconnect(self, library_id: int, author_id: int, volume_id: int) -> Author:
        author = self.find(library_id, author_id)
        self._other_endpoint(Volume, library_id, volume_id, "AuthorRepository.volume_disconnect")
        self._disconnect(AuthorVolume, {'author_id': author_id, 'volume_id': volume_id},
                         "AuthorRepository.volume_disconnect")
        self._warn_without_principal(AuthorVolume, AuthorVolume.volume_id, volume_id, "Volume")
        return author

    def principals(self, library_id: int, join_model: Any, child_column: Any, child_id: int) -> List[Author]:
        """Get the authors flagged as principal on a series, story or volume.

        Example: ``principals(library_id, AuthorStory, AuthorStory.story_id, story_id)``
        """
        query = (
            self.session.query(Author)
            .join(join_model, join_model.author_id == Author.id)
            .filter(
                Author.library_id == library_id,
                child_column == child_id,
                join_model.principal.is_(True),
            )
            .order_by(Author.last_name, Author.first_name, Author.id)
        )
        return self._fetch_all(query, "AuthorRepository.principals")

    # Support

    def _select(self, library_id: int, options: Optional[AuthorAllOptions]) -> Query:
        query = self.session.query(Author).filter(Author.library_id == library_id)
        if options is None:
            return query
        query = filter_active(query, Author.active, options)
        if options.name:
            names = options.name.split()
            if names:
                # First word against first names, last word against last names
                query = query.filter(or_(
                    Author.first_name.icontains(names[0], autoescape=True),
                    Author.last_name.icontains(names[-1], autoescape=True),
                ))
        return query.options(*loader_options(options, self.LOADERS))

    def _page(self, query: Query, options: Optional[AuthorAllOptions], context: str) -> List[Author]:
        query = query.order_by(Author.last_name, Author.first_name, Author.id)
        return self._fetch_all(paginate(query, options), context)

