# catalog/breadcrumbs.py
"""The trail of catalog pages a user has navigated through.

The navigation layer owns a ``BreadcrumbStack`` per browsing session and
decides where it is persisted by handing it a ``BreadcrumbStore``. Every
operation reads the whole trail from the store, changes it, and writes the
whole trail back.
"""
import json
import logging
from dataclasses import asdict, dataclass
from typing import List, Optional, Protocol, Tuple

from catalog.parents import Parent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreadcrumbItem:
    href: str   # Site relative URL to return to
    label: str  # Text displayed for this step


class BreadcrumbStore(Protocol):
    def load(self) -> List[BreadcrumbItem]: ...

    def save(self, items: List[BreadcrumbItem]) -> None: ...


class MemoryBreadcrumbStore:
    def __init__(self, items: Optional[List[BreadcrumbItem]] = None):
        self._items = list(items or [])

    def load(self) -> List[BreadcrumbItem]:
        return list(self._items)

    def save(self, items: List[BreadcrumbItem]) -> None:
        self._items = list(items)


class BreadcrumbStack:
    def __init__(self, store: Optional[BreadcrumbStore] = None):
        self.store = store if store is not None else MemoryBreadcrumbStore()

    def add(self, item: BreadcrumbItem) -> Tuple[BreadcrumbItem, ...]:
        """Append unconditionally and return the new trail"""
        items = self.store.load()
        items.append(item)
        self.store.save(items)
        return tuple(items)

    def clear(self) -> Tuple[BreadcrumbItem, ...]:
        """Start a fresh trail, e.g. when switching to another Library"""
        self.store.save([])
        return ()

    def has(self, href: str) -> bool:
        return any(item.href == href for item in self.store.load())

    def trim(self, href: str) -> Tuple[BreadcrumbItem, ...]:
        """Drop trailing items until the one with this href is last.

        The matching item is kept. With no match the trail ends up empty.
        """
        items = self.store.load()
        before = len(items)
        while items and items[-1].href != href:
            items.pop()
        self.store.save(items)
        logger.debug("Trimmed breadcrumbs to %s: %s -> %s items", href, before, len(items))
        return tuple(items)

    def current(self) -> Tuple[BreadcrumbItem, ...]:
        return tuple(self.store.load())

    def to_json(self) -> str:
        return json.dumps([asdict(item) for item in self.store.load()])

    @classmethod
    def from_json(cls, value: Optional[str], store: Optional[BreadcrumbStore] = None) -> "BreadcrumbStack":
        """Rebuild a trail from ``to_json`` output; unreadable input starts empty"""
        stack = cls(store)
        items: List[BreadcrumbItem] = []
        if value:
            try:
                items = [BreadcrumbItem(href=raw['href'], label=raw['label']) for raw in json.loads(value)]
            except (ValueError, TypeError, KeyError) as e:
                logger.warning("Discarding unreadable breadcrumbs: %s", e)
                items = []
        stack.store.save(items)
        return stack


def breadcrumb_for(parent: Parent, label: str) -> BreadcrumbItem:
    return BreadcrumbItem(href=parent.href, label=label)
