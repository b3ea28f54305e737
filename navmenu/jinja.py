"""Expose menus to Jinja templates."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from jinja2 import Environment
from markupsafe import Markup

from .menu import Menu


def register_menu_globals(env: Environment, menu: Menu, *, name: str = "menu") -> Environment:
    """Install a ``menu(...)`` global on ``env`` that renders containers.

    In a template::

        {{ menu("main", class="nav") }}
        {{ menu(["main", "footer"], element="ol") }}
    """

    def _render(
        containers: Union[str, Iterable[str]] = "",
        element: Optional[str] = None,
        prefix: Optional[str] = None,
        **attributes: str,
    ) -> Markup:
        handler = menu.handler(containers)
        if prefix is not None:
            handler.prefix(prefix)
        return Markup(handler.render(attributes or None, element))

    env.globals[name] = _render
    return env


__all__ = ["register_menu_globals"]
