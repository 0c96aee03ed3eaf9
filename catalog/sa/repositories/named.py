# catalog/sa/repositories/named.py
import logging
from typing import Any, ClassVar, List, Mapping, Optional, Type
from sqlalchemy.orm import Query
from catalog.errors import NotFound, NotUnique
from .base import BaseRepository, record_values
from .options import filter_active, filter_name, loader_options, paginate

logger = logging.getLogger(__name__)

class NamedRepository(BaseRepository):
    """CRUD for catalog entities whose names are unique within a Library.

    Subclasses set ``MODEL``, ``FIELDS`` (see ``record_values``) and
    ``LOADERS`` (include flag -> loader options).
    """

    MODEL: ClassVar[Type[Any]]
    FIELDS: ClassVar[dict]
    LOADERS: ClassVar[dict] = {}

    @property
    def label(self) -> str:
        return self.MODEL.__name__

    def all(self, library_id: int, options: Optional[Any] = None) -> List[Any]:
        """Get the entities of a library matching the options, ordered by name"""
        return self._page(self._select(library_id, options), options, f"{self.label}Repository.all")

    def find(self, library_id: int, entity_id: int, options: Optional[Any] = None) -> Any:
        """Get an entity by ID within a library.

        Raises:
            NotFound: If the entity is missing or belongs to another library
        """
        return self._find_owned(
            self.MODEL, library_id, entity_id, f"{self.label}Repository.find",
            loader_options(options, self.LOADERS),
        )

    def exact(self, library_id: int, name: str, options: Optional[Any] = None) -> Any:
        """Get an entity by its exact name within a library.

        Raises:
            NotFound: If no entity of this library has that name
        """
        model = self.MODEL
        query = (
            self.session.query(model)
            .options(*loader_options(options, self.LOADERS))
            .filter(model.library_id == library_id, model.name == name)
        )
        result = self._fetch_first(query, f"{self.label}Repository.exact")
        if result is None:
            raise NotFound(f"name: Missing {self.label} '{name}'", f"{self.label}Repository.exact", name)
        return result

    def insert(self, library_id: int, data: Mapping[str, Any]) -> Any:
        """Create an entity owned by this library.

        Raises:
            BadRequest: If validation fails
            NotFound: If the library does not exist
            NotUnique: If the name is already in use in this library
        """
        context = f"{self.label}Repository.insert"
        self._require_library(library_id, context)
        values = record_values(data, self.FIELDS, context)
        self.validate(values, context)
        self._check_unique_name(library_id, None, values['name'], context)
        entity = self.MODEL(library_id=library_id, **values)
        self.session.add(entity)
        self._commit(context, self._not_unique_message(values['name']))
        self.session.refresh(entity)
        logger.info("Inserted %s %s '%s' in Library %s", self.label, entity.id, entity.name, library_id)
        return entity

    def update(self, library_id: int, entity_id: int, data: Mapping[str, Any]) -> Any:
        """Replace every mutable field of an entity; ownership never changes.

        Raises:
            BadRequest: If validation fails
            NotFound: If the entity is missing or belongs to another library
            NotUnique: If the new name is already in use in this library
        """
        context = f"{self.label}Repository.update"
        entity = self.find(library_id, entity_id)
        values = record_values(data, self.FIELDS, context)
        self.validate(values, context)
        self._check_unique_name(library_id, entity_id, values['name'], context)
        for field, value in values.items():
            setattr(entity, field, value)
        self._commit(context, self._not_unique_message(values['name']), entity_id)
        self.session.refresh(entity)
        logger.info("Updated %s %s '%s'", self.label, entity.id, entity.name)
        return entity

    def remove(self, library_id: int, entity_id: int) -> None:
        """Delete an entity and its join rows; related entities are kept"""
        entity = self.find(library_id, entity_id)
        name = entity.name
        self.session.delete(entity)
        self._commit(f"{self.label}Repository.remove", identifier=entity_id)
        logger.info("Removed %s %s '%s'", self.label, entity_id, name)

    def deactivate(self, library_id: int, entity_id: int) -> Any:
        """Soft removal: mark the entity inactive"""
        entity = self.find(library_id, entity_id)
        entity.active = False
        self._commit(f"{self.label}Repository.deactivate", identifier=entity_id)
        self.session.refresh(entity)
        return entity

    def unique_name(self, library_id: int, entity_id: Optional[int], name: str) -> bool:
        """Return True if no other entity in this library uses the name"""
        model = self.MODEL
        query = self.session.query(model).filter(model.library_id == library_id, model.name == name)
        if entity_id is not None:
            query = query.filter(model.id != entity_id)
        return self._fetch_first(query, f"{self.label}Repository.unique_name") is None

    def validate(self, values: dict, context: str) -> None:
        """Hook for field validation beyond presence"""

    # Support

    def _check_unique_name(self, library_id: int, entity_id: Optional[int], name: str, context: str) -> None:
        if not self.unique_name(library_id, entity_id, name):
            raise NotUnique(self._not_unique_message(name), context)

    def _not_unique_message(self, name: str) -> str:
        return f"name: {self.label} name '{name}' is already in use in this Library"

    def _select(self, library_id: int, options: Optional[Any]) -> Query:
        model = self.MODEL
        query = self.session.query(model).filter(model.library_id == library_id)
        if options is None:
            return query
        query = filter_active(query, model.active, options)
        query = filter_name(query, model.name, getattr(options, 'name', None))
        return query.options(*loader_options(options, self.LOADERS))

    def _page(self, query: Query, options: Optional[Any], context: str, *order_by: Any) -> List[Any]:
        model = self.MODEL
        query = query.order_by(*order_by, model.name, model.id)
        return self._fetch_all(paginate(query, options), context)
