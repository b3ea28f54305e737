"""Named menu containers."""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from .models import MenuTree
from .tracing import log_event

_LOGGER = logging.getLogger(__name__)

DEFAULT_CONTAINER = ""


class MenuRegistry:
    """Hold one :class:`MenuTree` per container name.

    Containers are created on first reference and live as long as the
    registry. The empty string names the default container.
    """

    def __init__(self) -> None:
        self._containers: Dict[str, MenuTree] = {}
        self._lock = threading.Lock()

    def get_or_create(self, name: str = DEFAULT_CONTAINER) -> MenuTree:
        """Return the tree for ``name``, creating an empty one if needed."""

        tree = self._containers.get(name)
        if tree is not None:
            return tree
        with self._lock:
            tree = self._containers.get(name)
            if tree is None:
                tree = MenuTree.factory()
                self._containers[name] = tree
                log_event(_LOGGER, logging.DEBUG, "menu.container.created", container=name)
        return tree

    def get(self, name: str) -> Optional[MenuTree]:
        """Return the tree for ``name`` without creating it."""

        return self._containers.get(name)

    def names(self) -> List[str]:
        """Return container names in creation order."""

        return list(self._containers)

    def __contains__(self, name: object) -> bool:
        return name in self._containers

    def __len__(self) -> int:
        return len(self._containers)


__all__ = ["DEFAULT_CONTAINER", "MenuRegistry"]
