"""
Registry - Ordered collection of every instance of an entity type.

Each entity class owns a default registry; constructors may be handed
another one so that independent catalogs don't share state.
"""

import logging
from typing import Any, Iterator, List

logger = logging.getLogger(__name__)


class Registry:
    """
    Append-only list of instances with explicit reset.

    Registration order is preserved and nothing is ever deduplicated:
    an instance registers itself once, at construction.
    """

    def __init__(self, name: str = "registry") -> None:
        """Initialize an empty registry."""
        self.name = name
        self._items: List[Any] = []

    def register(self, item: Any) -> None:
        """Append an instance to the registry."""
        self._items.append(item)
        logger.debug("Registered %r in %s (%d total)", item, self.name, len(self._items))

    def all(self) -> List[Any]:
        """
        Return the live list of registered instances.

        The list is shared with the registry. Callers should treat it as
        read-only.
        """
        return self._items

    def count(self) -> int:
        """Get number of registered instances."""
        return len(self._items)

    def reset(self) -> None:
        """
        Forget every registered instance.

        The list is cleared in place, so references previously returned
        by all() observe the reset. Registered instances themselves and
        their relationships are left untouched.
        """
        if self._items:
            logger.debug("Resetting %s (%d dropped)", self.name, len(self._items))
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, item: Any) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"Registry({self.name!r}, count={len(self._items)})"
