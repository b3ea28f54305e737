"""Entry point tying a registry to the rendering capabilities."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Union

from .config import MenuConfig
from .handler import CurrentPath, MenuHandler
from .markup import MenuHTML
from .models import MenuTree
from .registry import DEFAULT_CONTAINER, MenuRegistry


class Menu:
    """Create handlers over a shared :class:`MenuRegistry`.

    Usage::

        menu = Menu(current_path=lambda: request.path)
        menu.handler("backend").add("users", "Users")
        menu.add("home", "Home", menu.items().add("home/sub", "Subitem"))
        markup = menu.handler(["backend", ""]).render()

    The ``add``, ``raw``, ``attach``, ``prefix``, ``prefix_container`` and
    ``render`` shortcuts act on a fresh handler for the default container.
    """

    def __init__(
        self,
        registry: Optional[MenuRegistry] = None,
        *,
        current_path: Optional[CurrentPath] = None,
        html: Optional[MenuHTML] = None,
        config: Optional[MenuConfig] = None,
    ) -> None:
        self.registry = registry or MenuRegistry()
        self.config = config or MenuConfig()
        self._current_path = current_path
        self._html = html or MenuHTML()

    @staticmethod
    def items() -> MenuTree:
        """Return a new, empty tree for use as children or with ``attach``."""

        return MenuTree.factory()

    def handler(self, containers: Union[str, Iterable[str]] = DEFAULT_CONTAINER) -> MenuHandler:
        """Return a handler bound to one container name or a list of names."""

        return MenuHandler(
            self.registry,
            containers,
            current_path=self._current_path,
            html=self._html,
            config=self.config,
        )

    def add(
        self,
        url: str,
        title: str,
        children: Optional[MenuTree] = None,
        link_attributes: Optional[Dict[str, str]] = None,
        list_attributes: Optional[Dict[str, str]] = None,
        list_element: Optional[str] = None,
    ) -> MenuHandler:
        return self.handler().add(url, title, children, link_attributes, list_attributes, list_element)

    def raw(
        self,
        html: str,
        list_attributes: Optional[Dict[str, str]] = None,
        list_element: Optional[str] = None,
    ) -> MenuHandler:
        return self.handler().raw(html, list_attributes, list_element)

    def attach(self, other: MenuTree) -> MenuHandler:
        return self.handler().attach(other)

    def prefix(self, prefix: str = "") -> MenuHandler:
        return self.handler().prefix(prefix)

    def prefix_container(self) -> MenuHandler:
        return self.handler().prefix_container()

    def render(self, attributes: Optional[Dict[str, str]] = None, element: Optional[str] = None) -> str:
        return self.handler().render(attributes, element)

    def __str__(self) -> str:
        return self.render()


__all__ = ["Menu"]
