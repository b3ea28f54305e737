"""Markup primitives used by the menu renderer."""

from __future__ import annotations

import html
from typing import Iterable, Mapping, Optional


def merge_attributes(
    base: Optional[Mapping[str, str]], extra: Optional[Mapping[str, str]]
) -> dict[str, str]:
    """Return a new mapping with ``extra`` merged on top of ``base``.

    ``class`` values are combined with a separating space, every other key in
    ``extra`` replaces the value from ``base``. Neither input is modified.
    """

    merged: dict[str, str] = dict(base or {})
    for key, value in (extra or {}).items():
        if key == "class" and merged.get("class"):
            merged["class"] = f"{merged['class']} {value}"
        else:
            merged[key] = value
    return merged


class MenuHTML:
    """Build HTML elements for menus.

    Attribute values, link targets and link titles are escaped. Inner content
    passed to :meth:`element` is expected to be markup already and is used as
    is.
    """

    def attributes(self, attributes: Optional[Mapping[str, object]]) -> str:
        """Render ``attributes`` as a string with a leading space, or ``""``."""

        parts = []
        for key, value in (attributes or {}).items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(html.escape(str(key)))
                continue
            parts.append(f'{html.escape(str(key))}="{html.escape(str(value), quote=True)}"')
        if not parts:
            return ""
        return " " + " ".join(parts)

    def element(self, tag: str, inner: str = "", attributes: Optional[Mapping[str, object]] = None) -> str:
        return f"<{tag}{self.attributes(attributes)}>{inner}</{tag}>"

    def link(self, url: str, title: str, attributes: Optional[Mapping[str, object]] = None) -> str:
        """Build an anchor; ``url`` always wins over an ``href`` in ``attributes``."""

        merged = {"href": url}
        merged.update({key: value for key, value in (attributes or {}).items() if key != "href"})
        return self.element("a", html.escape(title), merged)

    def listing(self, tag: str, items: Iterable[str], attributes: Optional[Mapping[str, object]] = None) -> str:
        """Wrap already rendered list entries in a ``ul``/``ol`` style element."""

        return self.element(tag, "".join(items), attributes)


__all__ = ["MenuHTML", "merge_attributes"]
