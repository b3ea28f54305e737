"""Hierarchical navigation menus with active-state rendering."""

from .config import MenuConfig, load_menu_config
from .handler import MenuDepthExceeded, MenuHandler, PrefixMode
from .markup import MenuHTML, merge_attributes
from .menu import Menu
from .models import CycleDetected, LinkItem, MenuError, MenuItem, MenuTree, RawItem
from .registry import DEFAULT_CONTAINER, MenuRegistry

__all__ = [
    "CycleDetected",
    "DEFAULT_CONTAINER",
    "LinkItem",
    "Menu",
    "MenuConfig",
    "MenuDepthExceeded",
    "MenuError",
    "MenuHTML",
    "MenuHandler",
    "MenuItem",
    "MenuRegistry",
    "MenuTree",
    "PrefixMode",
    "RawItem",
    "load_menu_config",
    "merge_attributes",
]
