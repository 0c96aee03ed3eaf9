# catalog/sa/repositories/options.py
"""Options accepted by the ``all``/``find`` operations of every repository.

Every listing honors the same contract:

* ``active`` - when true, only active rows are returned. False or None
  applies no filter at all.
* ``name`` - case insensitive substring match on the entity's name.
* ``limit``/``offset`` - zero-relative row window. None (or 0) means
  unbounded / start at the first row.
* ``with_*`` - eagerly attach the named related collections.

Results are always scoped to the requesting parent, whatever the filters
say. There is no total count: a page shorter than ``limit`` is the last one
(see ``is_last_page``).
"""
from dataclasses import dataclass, fields
from typing import Any, Collection, Iterable, Optional, Sequence

from sqlalchemy.orm import Query

from catalog.errors import BadRequest


@dataclass
class PaginationOptions:
    limit: Optional[int] = None
    offset: Optional[int] = None


# Libraries -----------------------------------------------------------------

@dataclass
class LibraryFindOptions:
    with_authors: bool = False
    with_series: bool = False
    with_stories: bool = False
    with_volumes: bool = False


@dataclass
class LibraryAllOptions(LibraryFindOptions, PaginationOptions):
    active: Optional[bool] = None
    name: Optional[str] = None
    scope: Optional[str] = None  # Exact match
    scopes: Optional[Collection[str]] = None  # Restrict to these scopes; None means all


# Authors -------------------------------------------------------------------

@dataclass
class AuthorFindOptions:
    with_library: bool = False
    with_series: bool = False
    with_stories: bool = False
    with_volumes: bool = False


@dataclass
class AuthorAllOptions(AuthorFindOptions, PaginationOptions):
    active: Optional[bool] = None
    name: Optional[str] = None  # Matched against first and last names


# Series --------------------------------------------------------------------

@dataclass
class SeriesFindOptions:
    with_authors: bool = False
    with_library: bool = False
    with_stories: bool = False


@dataclass
class SeriesAllOptions(SeriesFindOptions, PaginationOptions):
    active: Optional[bool] = None
    name: Optional[str] = None


# Stories -------------------------------------------------------------------

@dataclass
class StoryFindOptions:
    with_authors: bool = False
    with_library: bool = False
    with_series: bool = False
    with_volumes: bool = False


@dataclass
class StoryAllOptions(StoryFindOptions, PaginationOptions):
    active: Optional[bool] = None
    name: Optional[str] = None


# Volumes -------------------------------------------------------------------

@dataclass
class VolumeFindOptions:
    with_authors: bool = False
    with_library: bool = False
    with_stories: bool = False


@dataclass
class VolumeAllOptions(VolumeFindOptions, PaginationOptions):
    active: Optional[bool] = None
    name: Optional[str] = None


# Users ---------------------------------------------------------------------

@dataclass
class UserFindOptions:
    with_access_tokens: bool = False
    with_refresh_tokens: bool = False


@dataclass
class UserAllOptions(UserFindOptions, PaginationOptions):
    active: Optional[bool] = None
    username: Optional[str] = None


# Helpers -------------------------------------------------------------------

def include_flags(options: Any) -> list[str]:
    """Return the names of the ``with_*`` flags that are switched on"""
    if options is None:
        return []
    return [f.name for f in fields(options) if f.name.startswith("with_") and getattr(options, f.name)]


def loader_options(options: Any, loaders: dict[str, Iterable[Any]]) -> list[Any]:
    """Translate switched-on include flags into SQLAlchemy loader options"""
    result = []
    for flag in include_flags(options):
        result.extend(loaders.get(flag, ()))
    return result


def filter_active(query: Query, column: Any, options: Any) -> Query:
    if options is not None and getattr(options, "active", None):
        query = query.filter(column.is_(True))
    return query


def filter_name(query: Query, column: Any, name: Optional[str]) -> Query:
    if name:
        query = query.filter(column.icontains(name, autoescape=True))
    return query


def paginate(query: Query, options: Any) -> Query:
    """Apply the offset/limit window, rejecting negative values"""
    if options is None:
        return query
    offset = getattr(options, "offset", None)
    limit = getattr(options, "limit", None)
    if offset is not None and offset < 0:
        raise BadRequest(f"offset: Must not be negative, was {offset}", "paginate")
    if limit is not None and limit < 0:
        raise BadRequest(f"limit: Must not be negative, was {limit}", "paginate")
    if offset:
        query = query.offset(offset)
    if limit:
        query = query.limit(limit)
    return query


def is_last_page(rows: Sequence[Any], limit: Optional[int]) -> bool:
    """A page shorter than the limit is the last one.

    A full page may or may not be followed by more rows. An unlimited request
    is always the last page.
    """
    if not limit:
        return True
    return len(rows) < limit
