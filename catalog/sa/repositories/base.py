# catalog/sa/repositories/base.py
import logging
from typing import Any, Mapping, Optional, Type

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from catalog.errors import BadRequest, NotFound, NotUnique, ServerError
from catalog.sa.models import Library

logger = logging.getLogger(__name__)

# Marker for fields that a full-record insert/update must supply
REQUIRED = object()

# Never taken from caller supplied data
PROTECTED_FIELDS = ("id", "library_id")


def record_values(data: Mapping[str, Any], field_defaults: Mapping[str, Any], context: str) -> dict:
    """Build the complete column values for an insert or full-record update.

    Missing optional fields fall back to their defaults, so an update replaces
    the whole record rather than patching it. Identifiers and ownership are
    never taken from the caller.
    """
    data = {key: value for key, value in dict(data).items() if key not in PROTECTED_FIELDS}
    unknown = set(data) - set(field_defaults)
    if unknown:
        raise BadRequest(f"Unknown fields: {', '.join(sorted(unknown))}", context)
    values = {}
    for field, default in field_defaults.items():
        value = data.get(field)
        if value is None or (default is REQUIRED and value == ""):
            if default is REQUIRED:
                raise BadRequest(f"{field}: Is required", context)
            value = default
        values[field] = value
    return values


class BaseRepository:
    """Session handling and error translation shared by all repositories."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _fetch_all(self, query: Query, context: str) -> list:
        try:
            return query.all()
        except SQLAlchemyError as e:
            raise ServerError(e, context) from e

    def _fetch_first(self, query: Query, context: str) -> Any:
        try:
            return query.first()
        except SQLAlchemyError as e:
            raise ServerError(e, context) from e

    def _commit(self, context: str, not_unique: Optional[str] = None, identifier: Any = None) -> None:
        """Commit the current unit of work.

        The database's own unique constraints are the final backstop for the
        read-before-write checks, so an IntegrityError surfaces as NotUnique.
        """
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise NotUnique(not_unique or str(e.orig), context, identifier) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise ServerError(e, context, identifier) from e

    def _find_owned(self, model: Type[Any], library_id: int, entity_id: int, context: str,
                    loaders: Optional[list] = None) -> Any:
        """Return the entity with this id, provided it belongs to this Library.

        An entity owned by a different Library is reported exactly like a
        missing one, so its existence is never confirmed.
        """
        query = self.session.query(model).filter(model.id == entity_id, model.library_id == library_id)
        if loaders:
            query = query.options(*loaders)
        result = self._fetch_first(query, context)
        if result is None:
            raise NotFound(f"id: Missing {model.__name__} {entity_id}", context, entity_id)
        return result

    def _other_endpoint(self, model: Type[Any], library_id: int, entity_id: int, context: str) -> Any:
        """Return the far end of an association, which must live in the same Library"""
        entity = self.session.get(model, entity_id)
        if entity is None:
            raise NotFound(f"id: Missing {model.__name__} {entity_id}", context, entity_id)
        if entity.library_id != library_id:
            raise BadRequest(
                f"library: {model.__name__} {entity_id} belongs to a different Library",
                context,
                entity_id,
            )
        return entity

    def _connect(self, join_model: Type[Any], keys: dict, context: str, **metadata: Any) -> Any:
        description = ", ".join(f"{key}={value}" for key, value in keys.items())
        if self.session.get(join_model, keys) is not None:
            raise NotUnique(f"connect: {description} are already connected", context)
        row = join_model(**keys, **metadata)
        self.session.add(row)
        self._commit(context, not_unique=f"connect: {description} are already connected")
        logger.debug("Connected %s %s %s", join_model.__tablename__, description, metadata)
        return row

    def _disconnect(self, join_model: Type[Any], keys: dict, context: str) -> None:
        description = ", ".join(f"{key}={value}" for key, value in keys.items())
        row = self.session.get(join_model, keys)
        if row is None:
            raise NotFound(f"disconnect: {description} are not connected", context)
        self.session.delete(row)
        self._commit(context)
        logger.debug("Disconnected %s %s", join_model.__tablename__, description)

    def _warn_without_principal(self, join_model: Type[Any], child_column: Any, child_id: int, label: str) -> None:
        """Zero principal authors is allowed, but worth a warning"""
        remaining = (
            self.session.query(join_model)
            .filter(child_column == child_id, join_model.principal.is_(True))
            .count()
        )
        if remaining == 0:
            logger.warning("%s %s has no principal Author", label, child_id)

    def _require_library(self, library_id: int, context: str) -> Library:
        library = self.session.get(Library, library_id)
        if library is None:
            raise NotFound(f"id: Missing Library {library_id}", context, library_id)
        return library
