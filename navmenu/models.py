"""Data models for menu trees: link items, raw items and the tree itself."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union


class MenuError(RuntimeError):
    """Base class for errors raised by the menu package."""


class CycleDetected(MenuError):
    """Raised when a tree would become its own descendant."""


@dataclass(slots=True)
class Serializable:
    """Base dataclass providing dictionary serialisation helpers."""

    def to_dict(self) -> Dict:
        """Convert the dataclass to a serialisable dictionary."""

        def _convert(value):
            if dataclasses.is_dataclass(value):
                return {f.name: _convert(getattr(value, f.name)) for f in dataclasses.fields(value)}
            if isinstance(value, list):
                return [_convert(item) for item in value]
            if isinstance(value, dict):
                return {key: _convert(val) for key, val in value.items()}
            return value

        return _convert(self)


@dataclass(slots=True)
class LinkItem(Serializable):
    """A link entry, optionally owning a nested :class:`MenuTree`."""

    url: str
    title: str
    children: Optional["MenuTree"] = None
    link_attributes: Dict[str, str] = field(default_factory=dict)
    list_attributes: Dict[str, str] = field(default_factory=dict)
    list_element: str = "li"

    @property
    def has_children(self) -> bool:
        return self.children is not None and bool(self.children.items)


@dataclass(slots=True)
class RawItem(Serializable):
    """Pre-formatted markup placed verbatim inside a list element."""

    html: str
    list_attributes: Dict[str, str] = field(default_factory=dict)
    list_element: str = "li"

    @property
    def has_children(self) -> bool:
        return False


MenuItem = Union[LinkItem, RawItem]


@dataclass(slots=True)
class MenuTree(Serializable):
    """Ordered collection of menu items.

    Items are only ever appended, either one at a time through :meth:`add`
    and :meth:`raw` or in bulk through :meth:`attach`. Insertion order is the
    order in which items are rendered.
    """

    items: List[MenuItem] = field(default_factory=list)

    @classmethod
    def factory(cls) -> "MenuTree":
        """Return a new, empty tree."""

        return cls()

    def add(
        self,
        url: str,
        title: str,
        children: Optional["MenuTree"] = None,
        link_attributes: Optional[Dict[str, str]] = None,
        list_attributes: Optional[Dict[str, str]] = None,
        list_element: str = "li",
    ) -> "MenuTree":
        """Append a link item and return ``self`` for chaining.

        ``children`` becomes the nested menu of the new item. Passing this
        tree, or a tree that already contains it, raises :class:`CycleDetected`.
        """

        if children is not None:
            self.ensure_acyclic(children)
        self.items.append(
            LinkItem(
                url=url,
                title=title,
                children=children,
                link_attributes=dict(link_attributes or {}),
                list_attributes=dict(list_attributes or {}),
                list_element=list_element,
            )
        )
        return self

    def raw(
        self,
        html: str,
        list_attributes: Optional[Dict[str, str]] = None,
        list_element: str = "li",
    ) -> "MenuTree":
        """Append a raw markup item and return ``self`` for chaining."""

        self.items.append(
            RawItem(html=html, list_attributes=dict(list_attributes or {}), list_element=list_element)
        )
        return self

    def attach(self, other: "MenuTree") -> None:
        """Append the top-level items of ``other`` to this tree.

        The item list is copied, ``other`` itself is left untouched. Nested
        child trees are shared with ``other`` rather than duplicated.
        """

        self.ensure_acyclic(other)
        self.items.extend(list(other.items))

    def contains(self, tree: "MenuTree") -> bool:
        """Return whether ``tree`` is this tree or nested anywhere below it."""

        stack: List[MenuTree] = [self]
        seen: set[int] = set()
        while stack:
            current = stack.pop()
            if current is tree:
                return True
            if id(current) in seen:
                continue
            seen.add(id(current))
            for item in current.items:
                if isinstance(item, LinkItem) and item.children is not None:
                    stack.append(item.children)
        return False

    def walk(self) -> Iterator[Tuple[int, MenuItem]]:
        """Yield ``(depth, item)`` pairs in depth-first render order."""

        stack: List[Tuple[int, Iterator[MenuItem]]] = [(0, iter(self.items))]
        while stack:
            depth, iterator = stack[-1]
            item = next(iterator, None)
            if item is None:
                stack.pop()
                continue
            yield depth, item
            if isinstance(item, LinkItem) and item.children is not None:
                stack.append((depth + 1, iter(item.children.items)))

    def depth(self) -> int:
        """Return the number of nested levels, zero for an empty tree."""

        deepest = 0
        for level, _ in self.walk():
            deepest = max(deepest, level + 1)
        return deepest

    def ensure_acyclic(self, other: "MenuTree") -> None:
        """Raise :class:`CycleDetected` if nesting ``other`` here would form a cycle."""

        if other.contains(self):
            raise CycleDetected("A menu tree cannot be nested inside itself")

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


__all__ = [
    "CycleDetected",
    "LinkItem",
    "MenuError",
    "MenuItem",
    "MenuTree",
    "RawItem",
    "Serializable",
]
