"""Build menus from JSON or YAML definitions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import yaml

from .menu import Menu
from .models import MenuError, MenuTree

_LINK_KEYS = {"url", "title", "children", "link_attributes", "list_attributes", "list_element"}
_RAW_KEYS = {"html", "list_attributes", "list_element"}


class MenuDefinitionError(MenuError):
    """Raised when a menu definition does not have the expected shape."""


def _text(entry: Mapping[str, Any], key: str) -> str:
    value = entry.get(key)
    return "" if value is None else str(value)


def _attributes(entry: Mapping[str, Any], key: str, where: str) -> Dict[str, str]:
    value = entry.get(key) or {}
    if not isinstance(value, Mapping):
        raise MenuDefinitionError(f"{where}: '{key}' must be a mapping")
    return {str(name): str(val) for name, val in value.items()}


def build_tree(entries: Sequence[Any], *, list_element: str = "li", _where: str = "items") -> MenuTree:
    """Return a :class:`MenuTree` for a list of entry mappings.

    An entry with an ``html`` key becomes a raw item, any other entry a link
    with optional nested ``children``.
    """

    if not isinstance(entries, list):
        raise MenuDefinitionError(f"{_where}: expected a list of menu entries")

    tree = MenuTree.factory()
    for index, entry in enumerate(entries):
        where = f"{_where}[{index}]"
        if not isinstance(entry, Mapping):
            raise MenuDefinitionError(f"{where}: expected a mapping, got {type(entry).__name__}")

        element = str(entry.get("list_element") or list_element)
        if "html" in entry:
            unknown = set(entry) - _RAW_KEYS
            if unknown:
                raise MenuDefinitionError(f"{where}: unsupported keys for raw item: {sorted(unknown)}")
            tree.raw(_text(entry, "html"), _attributes(entry, "list_attributes", where), element)
            continue

        unknown = set(entry) - _LINK_KEYS
        if unknown:
            raise MenuDefinitionError(f"{where}: unsupported keys for link item: {sorted(unknown)}")
        children = entry.get("children")
        tree.add(
            _text(entry, "url"),
            _text(entry, "title"),
            build_tree(children, list_element=list_element, _where=f"{where}.children")
            if children is not None
            else None,
            _attributes(entry, "link_attributes", where),
            _attributes(entry, "list_attributes", where),
            element,
        )
    return tree


def populate(menu: Menu, definitions: Mapping[str, Any]) -> List[str]:
    """Attach each container's entries to ``menu`` and return the container names."""

    if not isinstance(definitions, Mapping):
        raise MenuDefinitionError("Menu definitions must map container names to entry lists")

    names: List[str] = []
    for name, entries in definitions.items():
        tree = build_tree(entries, list_element=menu.config.list_element, _where=str(name) or "default")
        menu.handler(str(name)).attach(tree)
        names.append(str(name))
    return names


def load_definitions(path: Path) -> Dict[str, Any]:
    """Read menu definitions from a ``.json``, ``.yaml`` or ``.yml`` file."""

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            data = json.loads(text)
        elif suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            raise MenuDefinitionError(f"Unsupported menu definition format '{suffix}'")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise MenuDefinitionError(f"Unable to parse menu definitions at {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MenuDefinitionError("Menu definitions must map container names to entry lists")
    return data


__all__ = ["MenuDefinitionError", "build_tree", "load_definitions", "populate"]
