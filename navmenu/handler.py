"""Menu handlers: fan-out mutation and recursive rendering of containers."""

from __future__ import annotations

import enum
import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .config import MenuConfig
from .markup import MenuHTML, merge_attributes
from .models import LinkItem, MenuError, MenuItem, MenuTree
from .registry import DEFAULT_CONTAINER, MenuRegistry
from .tracing import log_event

_LOGGER = logging.getLogger(__name__)

CurrentPath = Callable[[], str]


class MenuDepthExceeded(MenuError):
    """Raised when a menu nests deeper than the configured ``max_depth``."""


class PrefixMode(str, enum.Enum):
    """How stored item URLs are turned into rendered URLs."""

    NONE = "none"
    LITERAL = "literal"
    CONTAINER = "container"


def _no_current_path() -> str:
    return ""


def _container_names(containers: Union[str, Iterable[str]]) -> List[str]:
    names = [containers] if isinstance(containers, str) else list(containers)
    unique: List[str] = []
    for name in names:
        if name not in unique:
            unique.append(name)
    return unique


class MenuHandler:
    """Act on one or more named containers of a :class:`MenuRegistry`.

    ``add``, ``raw`` and ``attach`` are applied to every bound container in
    the order the containers were given, which lets a single call populate
    several menus. ``render`` walks each bound container depth-first and
    marks the item matching ``current_path()`` as active and its ancestors as
    having active children.
    """

    def __init__(
        self,
        registry: MenuRegistry,
        containers: Union[str, Iterable[str]] = DEFAULT_CONTAINER,
        *,
        current_path: Optional[CurrentPath] = None,
        html: Optional[MenuHTML] = None,
        config: Optional[MenuConfig] = None,
    ) -> None:
        self._registry = registry
        self._containers = _container_names(containers)
        for name in self._containers:
            registry.get_or_create(name)
        self._current_path = current_path or _no_current_path
        self._html = html or MenuHTML()
        self._config = config or MenuConfig()
        self.prefix_mode = PrefixMode.NONE
        self.prefix_text = ""

    @property
    def containers(self) -> Tuple[str, ...]:
        """Return the bound container names in bound order."""

        return tuple(self._containers)

    def _trees(self) -> List[Tuple[str, MenuTree]]:
        return [(name, self._registry.get_or_create(name)) for name in self._containers]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add(
        self,
        url: str,
        title: str,
        children: Optional[MenuTree] = None,
        link_attributes: Optional[Dict[str, str]] = None,
        list_attributes: Optional[Dict[str, str]] = None,
        list_element: Optional[str] = None,
    ) -> "MenuHandler":
        """Add a link item to every bound container."""

        element = list_element or self._config.list_element
        trees = self._trees()
        if children is not None:
            for _, tree in trees:
                tree.ensure_acyclic(children)
        for _, tree in trees:
            tree.add(url, title, children, link_attributes, list_attributes, element)
        return self

    def raw(
        self,
        html: str,
        list_attributes: Optional[Dict[str, str]] = None,
        list_element: Optional[str] = None,
    ) -> "MenuHandler":
        """Add a raw markup item to every bound container."""

        element = list_element or self._config.list_element
        for _, tree in self._trees():
            tree.raw(html, list_attributes, element)
        return self

    def attach(self, other: MenuTree) -> "MenuHandler":
        """Append the items of ``other`` to every bound container.

        Every container is checked before any is changed, so a
        :class:`CycleDetected` leaves all of them as they were.
        """

        trees = self._trees()
        for _, tree in trees:
            tree.ensure_acyclic(other)
        for _, tree in trees:
            tree.attach(other)
        return self

    # ------------------------------------------------------------------
    # Prefixing
    # ------------------------------------------------------------------
    def prefix(self, prefix: str = "") -> "MenuHandler":
        """Prefix every rendered URL with ``prefix`` followed by a slash."""

        self.prefix_mode = PrefixMode.LITERAL
        self.prefix_text = f"{prefix}/"
        return self

    def prefix_container(self) -> "MenuHandler":
        """Prefix every rendered URL with the name of its container."""

        self.prefix_mode = PrefixMode.CONTAINER
        self.prefix_text = ""
        return self

    def prefix_for(self, container: str) -> str:
        """Return the string prepended to URLs rendered for ``container``."""

        if self.prefix_mode is PrefixMode.LITERAL:
            return self.prefix_text
        if self.prefix_mode is PrefixMode.CONTAINER and container:
            return f"{container}/"
        return ""

    # ------------------------------------------------------------------
    # Active state
    # ------------------------------------------------------------------
    def effective_url(self, item: LinkItem, container: str = DEFAULT_CONTAINER) -> str:
        return self.prefix_for(container) + item.url

    def is_active(self, item: MenuItem, container: str = DEFAULT_CONTAINER) -> bool:
        """Return whether ``item`` links to the current path."""

        if not isinstance(item, LinkItem):
            return False
        return self.effective_url(item, container) == self._current_path()

    def has_active_children(self, item: MenuItem, container: str = DEFAULT_CONTAINER) -> bool:
        """Return whether any item nested below ``item`` is active."""

        if not item.has_children:
            return False
        return any(self.is_active(child, container) for _, child in item.children.walk())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, attributes: Optional[Dict[str, str]] = None, element: Optional[str] = None) -> str:
        """Render every bound container and concatenate the results."""

        element = element or self._config.menu_element
        rendered = "".join(
            self.render_items(tree.items, attributes, element, container=name)
            for name, tree in self._trees()
        )
        log_event(
            _LOGGER,
            logging.DEBUG,
            "menu.render",
            containers=self._containers,
            prefix_mode=self.prefix_mode.value,
            length=len(rendered),
        )
        return rendered

    def render_items(
        self,
        items: Optional[Sequence[MenuItem]],
        attributes: Optional[Dict[str, str]] = None,
        element: Optional[str] = None,
        *,
        container: str = DEFAULT_CONTAINER,
        depth: int = 0,
    ) -> str:
        """Render one level of ``items`` and, recursively, their children.

        An empty level produces no markup at all. ``attributes`` and
        ``element`` apply to this level and to every nested level.
        """

        if not items:
            return ""
        if depth >= self._config.max_depth:
            raise MenuDepthExceeded(
                f"Menu nesting exceeds the maximum depth of {self._config.max_depth}"
            )
        element = element or self._config.menu_element

        rendered: List[str] = []
        for item in items:
            if isinstance(item, LinkItem):
                rendered.append(self._render_link(item, attributes, element, container, depth))
            else:
                rendered.append(
                    self._html.element(
                        item.list_element or self._config.list_element, item.html, item.list_attributes
                    )
                )
        return self._html.listing(element, rendered, attributes)

    def _render_link(
        self,
        item: LinkItem,
        attributes: Optional[Dict[str, str]],
        element: str,
        container: str,
        depth: int,
    ) -> str:
        url = self.effective_url(item, container)
        list_attributes: Dict[str, str] = dict(item.list_attributes)
        if self.is_active(item, container):
            list_attributes = merge_attributes(list_attributes, {"class": self._config.active_class})
        if self.has_active_children(item, container):
            list_attributes = merge_attributes(
                list_attributes, {"class": self._config.active_children_class}
            )

        children = ""
        if item.children is not None:
            children = self.render_items(
                item.children.items, attributes, element, container=container, depth=depth + 1
            )

        inner = self._html.link(url, item.title, item.link_attributes) + children
        return self._html.element(item.list_element or self._config.list_element, inner, list_attributes)

    def __str__(self) -> str:
        return self.render()


__all__ = ["CurrentPath", "MenuDepthExceeded", "MenuHandler", "PrefixMode"]
