# api/routes/params.py
"""Query parameters shared by the listing and lookup routes.

Each dependency maps its parameters one to one onto an options dataclass.
"""
from typing import Optional
from fastapi import Query

from catalog.sa.repositories.options import (
    AuthorAllOptions, AuthorFindOptions, LibraryAllOptions, LibraryFindOptions,
    SeriesAllOptions, SeriesFindOptions, StoryAllOptions, StoryFindOptions,
    UserAllOptions, UserFindOptions, VolumeAllOptions, VolumeFindOptions
)


def library_find_options(
    with_authors: bool = False,
    with_series: bool = False,
    with_stories: bool = False,
    with_volumes: bool = False
) -> LibraryFindOptions:
    return LibraryFindOptions(
        with_authors=with_authors, with_series=with_series,
        with_stories=with_stories, with_volumes=with_volumes
    )

def library_all_options(
    active: Optional[bool] = Query(None, description="Only return active rows when true"),
    name: Optional[str] = Query(None, description="Case insensitive name match"),
    scope: Optional[str] = Query(None, description="Exact library scope"),
    limit: Optional[int] = Query(None, description="Maximum number of rows to return"),
    offset: Optional[int] = Query(None, description="Zero relative index of the first row to return"),
    with_authors: bool = False,
    with_series: bool = False,
    with_stories: bool = False,
    with_volumes: bool = False
) -> LibraryAllOptions:
    return LibraryAllOptions(
        active=active, name=name, scope=scope, limit=limit, offset=offset,
        with_authors=with_authors, with_series=with_series,
        with_stories=with_stories, with_volumes=with_volumes
    )

def author_find_options(
    with_library: bool = False,
    with_series: bool = False,
    with_stories: bool = False,
    with_volumes: bool = False
) -> AuthorFindOptions:
    return AuthorFindOptions(
        with_library=with_library, with_series=with_series,
        with_stories=with_stories, with_volumes=with_volumes
    )

def author_all_options(
    active: Optional[bool] = Query(None, description="Only return active rows when true"),
    name: Optional[str] = Query(None, description="Match first name on the first word, last name on the last word"),
    limit: Optional[int] = Query(None, description="Maximum number of rows to return"),
    offset: Optional[int] = Query(None, description="Zero relative index of the first row to return"),
    with_library: bool = False,
    with_series: bool = False,
    with_stories: bool = False,
    with_volumes: bool = False
) -> AuthorAllOptions:
    return AuthorAllOptions(
        active=active, name=name, limit=limit, offset=offset,
        with_library=with_library, with_series=with_series,
        with_stories=with_stories, with_volumes=with_volumes
    )

def series_find_options(
    with_authors: bool = False,
    with_library: bool = False,
    with_stories: bool = False
) -> SeriesFindOptions:
    return SeriesFindOptions(with_authors=with_authors, with_library=with_library, with_stories=with_stories)

def series_all_options(
    active: Optional[bool] = Query(None, description="Only return active rows when true"),
    name: Optional[str] = Query(None, description="Case insensitive name match"),
    limit: Optional[int] = Query(None, description="Maximum number of rows to return"),
    offset: Optional[int] = Query(None, description="Zero relative index of the first row to return"),
    with_authors: bool = False,
    with_library: bool = False,
    with_stories: bool = False
) -> SeriesAllOptions:
    return SeriesAllOptions(
        active=active, name=name, limit=limit, offset=offset,
        with_authors=with_authors, with_library=with_library, with_stories=with_stories
    )

def story_find_options(
    with_authors: bool = False,
    with_library: bool = False,
    with_series: bool = False,
    with_volumes: bool = False
) -> StoryFindOptions:
    return StoryFindOptions(
        with_authors=with_authors, with_library=with_library,
        with_series=with_series, with_volumes=with_volumes
    )

def story_all_options(
    active: Optional[bool] = Query(None, description="Only return active rows when true"),
    name: Optional[str] = Query(None, description="Case insensitive name match"),
    limit: Optional[int] = Query(None, description="Maximum number of rows to return"),
    offset: Optional[int] = Query(None, description="Zero relative index of the first row to return"),
    with_authors: bool = False,
    with_library: bool = False,
    with_series: bool = False,
    with_volumes: bool = False
) -> StoryAllOptions:
    return StoryAllOptions(
        active=active, name=name, limit=limit, offset=offset,
        with_authors=with_authors, with_library=with_library,
        with_series=with_series, with_volumes=with_volumes
    )

def volume_find_options(
    with_authors: bool = False,
    with_library: bool = False,
    with_stories: bool = False
) -> VolumeFindOptions:
    return VolumeFindOptions(with_authors=with_authors, with_library=with_library, with_stories=with_stories)

def volume_all_options(
    active: Optional[bool] = Query(None, description="Only return active rows when true"),
    name: Optional[str] = Query(None, description="Case insensitive name match"),
    limit: Optional[int] = Query(None, description="Maximum number of rows to return"),
    offset: Optional[int] = Query(None, description="Zero relative index of the first row to return"),
    with_authors: bool = False,
    with_library: bool = False,
    with_stories: bool = False
) -> VolumeAllOptions:
    return VolumeAllOptions(
        active=active, name=name, limit=limit, offset=offset,
        with_authors=with_authors, with_library=with_library, with_stories=with_stories
    )

def user_find_options(
    with_access_tokens: bool = False,
    with_refresh_tokens: bool = False
) -> UserFindOptions:
    return UserFindOptions(with_access_tokens=with_access_tokens, with_refresh_tokens=with_refresh_tokens)

def user_all_options(
    active: Optional[bool] = Query(None, description="Only return active rows when true"),
    username: Optional[str] = Query(None, description="Case insensitive username match"),
    limit: Optional[int] = Query(None, description="Maximum number of rows to return"),
    offset: Optional[int] = Query(None, description="Zero relative index of the first row to return"),
    with_access_tokens: bool = False,
    with_refresh_tokens: bool = False
) -> UserAllOptions:
    return UserAllOptions(
        active=active, username=username, limit=limit, offset=offset,
        with_access_tokens=with_access_tokens, with_refresh_tokens=with_refresh_tokens
    )
