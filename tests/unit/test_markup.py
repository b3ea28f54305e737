"""Tests for :mod:`navmenu.markup`."""

from __future__ import annotations

from navmenu.markup import MenuHTML, merge_attributes


def test_merge_attributes_appends_class() -> None:
    """Given an existing class When merging another class Then both are kept separated by a space."""

    base = {"class": "nav-item", "id": "home"}

    merged = merge_attributes(base, {"class": "active"})

    assert merged == {"class": "nav-item active", "id": "home"}
    assert base == {"class": "nav-item", "id": "home"}


def test_merge_attributes_sets_missing_class_and_overrides_other_keys() -> None:
    """Given no class When merging Then the class is set and other keys are replaced."""

    merged = merge_attributes({"id": "old", "class": ""}, {"class": "active", "id": "new"})

    assert merged == {"id": "new", "class": "active"}


def test_element_escapes_attribute_values() -> None:
    """Given attribute values with quotes When an element is built Then values are escaped and inner markup kept."""

    markup = MenuHTML().element("li", "<b>x</b>", {"title": 'say "hi"', "hidden": True, "skip": None})

    assert markup == '<li title="say &quot;hi&quot;" hidden><b>x</b></li>'


def test_link_escapes_url_and_title() -> None:
    """Given special characters When building a link Then href and text are escaped."""

    markup = MenuHTML().link("a?b=1&c=2", "Tom & Jerry", {"class": "nav-link"})

    assert markup == '<a href="a?b=1&amp;c=2" class="nav-link">Tom &amp; Jerry</a>'


def test_listing_wraps_items_without_separators() -> None:
    """Given rendered entries When listing is called Then they are concatenated inside the element."""

    markup = MenuHTML().listing("ol", ["<li>1</li>", "<li>2</li>"], {"class": "menu"})

    assert markup == '<ol class="menu"><li>1</li><li>2</li></ol>'
    assert MenuHTML().attributes({}) == ""


def test_link_ignores_href_in_attributes() -> None:
    """Given an href among the attributes When building a link Then the url argument is kept as href."""

    markup = MenuHTML().link("admin/home", "Home", {"href": "elsewhere", "id": "home"})

    assert markup == '<a href="admin/home" id="home">Home</a>'
