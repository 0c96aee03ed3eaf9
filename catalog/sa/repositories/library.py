# catalog/sa/repositories/library.py
import logging
from typing import Any, List, Mapping, Optional
from sqlalchemy.orm import selectinload
from catalog.errors import BadRequest, NotFound, NotUnique
from catalog.sa.models import Library
from catalog.validators import validate_library_scope
from .base import BaseRepository, REQUIRED, record_values
from .options import (
    LibraryAllOptions, LibraryFindOptions,
    filter_active, filter_name, loader_options, paginate
)

logger = logging.getLogger(__name__)

LIBRARY_FIELDS = {
    'name': REQUIRED,
    'scope': REQUIRED,
    'active': True,
    'notes': None,
}

class LibraryRepository(BaseRepository):
    """Repository for managing Library entities."""

    LOADERS = {
        'with_authors': [selectinload(Library.authors)],
        'with_series': [selectinload(Library.series)],
        'with_stories': [selectinload(Library.stories)],
        'with_volumes': [selectinload(Library.volumes)],
    }

    def all(self, options: Optional[LibraryAllOptions] = None) -> List[Library]:
        """Return all libraries matching the specified options.
        
        Args:
            options: Optional match, include and pagination options
            
        Returns:
            List of Library objects ordered by name
        """
        query = self.session.query(Library)
        if options is not None:
            query = filter_active(query, Library.active, options)
            query = filter_name(query, Library.name, options.name)
            if options.scope:
                query = query.filter(Library.scope == options.scope)
            if options.scopes is not None:
                query = query.filter(Library.scope.in_(sorted(options.scopes)))
            query = query.options(*loader_options(options, self.LOADERS))
        query = query.order_by(Library.name, Library.id)
        return self._fetch_all(paginate(query, options), "LibraryRepository.all")

    def find(self, library_id: int, options: Optional[LibraryFindOptions] = None) -> Library:
        """Get a library by its ID.
        
        Args:
            library_id: The ID of the library to retrieve
            options: Optional include options
            
        Returns:
            The Library object
            
        Raises:
            NotFound: If no such library exists
        """
        query = (
            self.session.query(Library)
            .options(*loader_options(options, self.LOADERS))
            .filter(Library.id == library_id)
        )
        result = self._fetch_first(query, "LibraryRepository.find")
        if result is None:
            raise NotFound(f"id: Missing Library {library_id}", "LibraryRepository.find", library_id)
        return result

    def exact(self, name: str, options: Optional[LibraryFindOptions] = None) -> Library:
        """Get a library by its exact (unique) name.
        
        Raises:
            NotFound: If no such library exists
        """
        query = (
            self.session.query(Library)
            .options(*loader_options(options, self.LOADERS))
            .filter(Library.name == name)
        )
        result = self._fetch_first(query, "LibraryRepository.exact")
        if result is None:
            raise NotFound(f"name: Missing Library '{name}'", "LibraryRepository.exact", name)
        return result

    def insert(self, data: Mapping[str, Any]) -> Library:
        """Create a new library.
        
        Args:
            data: Field values; any supplied id is ignored
            
        Returns:
            The created Library object
            
        Raises:
            BadRequest: If validation fails
            NotUnique: If the name or scope is already in use
        """
        values = record_values(data, LIBRARY_FIELDS, "LibraryRepository.insert")
        self._validate(None, values, "LibraryRepository.insert")
        library = Library(**values)
        self.session.add(library)
        self._commit("LibraryRepository.insert", self._conflict_message(values))
        self.session.refresh(library)
        logger.info("Inserted Library %s '%s'", library.id, library.name)
        return library

    def update(self, library_id: int, data: Mapping[str, Any]) -> Library:
        """Replace every mutable field of an existing library.
        
        Raises:
            BadRequest: If validation fails
            NotFound: If no such library exists
            NotUnique: If the new name or scope is already in use
        """
        library = self.find(library_id)
        values = record_values(data, LIBRARY_FIELDS, "LibraryRepository.update")
        self._validate(library_id, values, "LibraryRepository.update")
        for field, value in values.items():
            setattr(library, field, value)
        self._commit("LibraryRepository.update", self._conflict_message(values), library_id)
        self.session.refresh(library)
        logger.info("Updated Library %s '%s'", library.id, library.name)
        return library

    def remove(self, library_id: int) -> None:
        """Delete a library along with every catalog entity it owns.
        
        Raises:
            NotFound: If no such library exists
        """
        library = self.find(library_id)
        name = library.name
        self.session.delete(library)
        self._commit("LibraryRepository.remove", identifier=library_id)
        logger.info("Removed Library %s '%s'", library_id, name)

    def deactivate(self, library_id: int) -> Library:
        """Soft removal: mark the library inactive"""
        library = self.find(library_id)
        library.active = False
        self._commit("LibraryRepository.deactivate", identifier=library_id)
        self.session.refresh(library)
        return library

    def unique_name(self, library_id: Optional[int], name: str) -> bool:
        """Return True if no other library uses this name"""
        existing = self._fetch_first(
            self.session.query(Library).filter(Library.name == name), "LibraryRepository.unique_name"
        )
        return existing is None or existing.id == library_id

    def unique_scope(self, library_id: Optional[int], scope: str) -> bool:
        """Return True if no other library uses this scope"""
        existing = self._fetch_first(
            self.session.query(Library).filter(Library.scope == scope), "LibraryRepository.unique_scope"
        )
        return existing is None or existing.id == library_id

    def _validate(self, library_id: Optional[int], values: dict, context: str) -> None:
        if not validate_library_scope(values['scope']):
            raise BadRequest(f"scope: Scope '{values['scope']}' must be alphanumeric with no spaces", context)
        if not self.unique_name(library_id, values['name']):
            raise NotUnique(f"name: Library name '{values['name']}' is already in use", context)
        if not self.unique_scope(library_id, values['scope']):
            raise NotUnique(f"scope: Library scope '{values['scope']}' is already in use", context)

    def _conflict_message(self, values: dict) -> str:
        # the unique constraint that fired is not reported, so name both
        return f"name: Library name '{values['name']}' or scope '{values['scope']}' is already in use"
