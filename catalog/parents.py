# catalog/parents.py
"""The catalog nodes whose children can be listed.

A ``Parent`` names a node by kind, owning library and id. Code that behaves
differently per kind matches on ``ParentKind`` exhaustively.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, assert_never

from sqlalchemy.orm import Session

from catalog.sa.models import Author, Library, Series, Story, Volume
from catalog.sa.repositories.options import StoryAllOptions
from catalog.sa.repositories.story import StoryRepository


class ParentKind(str, Enum):
    AUTHOR = "authors"
    LIBRARY = "library"
    SERIES = "series"
    STORY = "stories"
    VOLUME = "volumes"


@dataclass(frozen=True)
class Parent:
    kind: ParentKind
    library_id: int
    id: int

    @classmethod
    def library(cls, library_id: int) -> "Parent":
        return cls(ParentKind.LIBRARY, library_id, library_id)

    @classmethod
    def of(cls, entity) -> "Parent":
        """Build the Parent for a loaded model instance"""
        kind = KIND_BY_MODEL.get(type(entity))
        if kind is None:
            raise TypeError(f"{type(entity).__name__} is not a catalog parent")
        if kind is ParentKind.LIBRARY:
            return cls.library(entity.id)
        return cls(kind, entity.library_id, entity.id)

    @property
    def href(self) -> str:
        match self.kind:
            case ParentKind.LIBRARY:
                return f"/base/{self.library_id}"
            case ParentKind.AUTHOR | ParentKind.SERIES | ParentKind.STORY | ParentKind.VOLUME:
                return f"/base/{self.library_id}/{self.kind.value}/{self.id}"
            case _:
                assert_never(self.kind)


KIND_BY_MODEL = {
    Author: ParentKind.AUTHOR,
    Library: ParentKind.LIBRARY,
    Series: ParentKind.SERIES,
    Story: ParentKind.STORY,
    Volume: ParentKind.VOLUME,
}


def stories_of(session: Session, parent: Parent, options: Optional[StoryAllOptions] = None) -> List[Story]:
    """List the stories under any kind of parent, honoring the usual options.

    A Story parent has no child stories, so it yields an empty list once the
    story itself has been found.
    """
    repository = StoryRepository(session)
    match parent.kind:
        case ParentKind.AUTHOR:
            return repository.by_author(parent.library_id, parent.id, options)
        case ParentKind.LIBRARY:
            return repository.all(parent.library_id, options)
        case ParentKind.SERIES:
            return repository.by_series(parent.library_id, parent.id, options)
        case ParentKind.STORY:
            repository.find(parent.library_id, parent.id)
            return []
        case ParentKind.VOLUME:
            return repository.by_volume(parent.library_id, parent.id, options)
        case _:
            assert_never(parent.kind)
