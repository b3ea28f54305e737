"""Shared pytest fixtures for the navmenu test-suite."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable

import pytest
from bs4 import BeautifulSoup

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from navmenu.menu import Menu
from navmenu.models import MenuTree
from navmenu.registry import MenuRegistry


class CurrentPath:
    """Mutable stand-in for the request path lookup."""

    def __init__(self, path: str = "") -> None:
        self.path = path

    def __call__(self) -> str:
        return self.path


@pytest.fixture
def current_path() -> CurrentPath:
    """Return a current path provider starting at an empty path."""

    return CurrentPath()


@pytest.fixture
def registry() -> MenuRegistry:
    """Return a fresh registry so containers never leak between tests."""

    return MenuRegistry()


@pytest.fixture
def menu(registry: MenuRegistry, current_path: CurrentPath) -> Menu:
    """Return a menu facade wired to the ``registry`` and ``current_path`` fixtures."""

    return Menu(registry, current_path=current_path)


@pytest.fixture
def soup() -> Callable[[str], BeautifulSoup]:
    """Return a callable parsing rendered markup."""

    def _parse(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "html.parser")

    return _parse


@pytest.fixture
def nested_tree() -> MenuTree:
    """Return Home > (Sub > Deep, Other) used by several rendering tests."""

    return MenuTree.factory().add(
        "home",
        "Home",
        MenuTree.factory()
        .add("home/sub", "Sub", MenuTree.factory().add("home/sub/deep", "Deep"))
        .add("home/other", "Other"),
    )


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo ``configure_logging`` calls made by a test."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
