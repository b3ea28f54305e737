"""Configuration for menu rendering."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

_LOGGER = logging.getLogger(__name__)
_ENV_PREFIX = "NAVMENU_"
_TAG_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")


class MenuConfig(BaseModel):
    """Rendering defaults shared by the facade, handlers and the CLI."""

    menu_element: str = Field(default="ul", description="Element wrapping each level of items")
    list_element: str = Field(default="li", description="Default element wrapping a single item")
    active_class: str = Field(default="active", description="Class added to the item matching the path")
    active_children_class: str = Field(
        default="active-children",
        description="Class added to items with an active descendant",
    )
    max_depth: int = Field(default=32, description="Deepest nesting level rendered before failing")
    log_level: str = Field(default="INFO", description="Logging verbosity for the CLI")

    @field_validator("menu_element", "list_element", mode="before")
    @classmethod
    def _normalise_tag(cls, value: str | None) -> str:
        candidate = str(value or "").strip().lower()
        if not _TAG_PATTERN.match(candidate):
            raise ValueError(f"Invalid element name '{value}'")
        return candidate

    @field_validator("active_class", "active_children_class", mode="before")
    @classmethod
    def _normalise_class(cls, value: str | None) -> str:
        candidate = str(value or "").strip()
        if not candidate or any(char.isspace() for char in candidate):
            raise ValueError(f"Invalid class name '{value}'")
        return candidate

    @field_validator("max_depth")
    @classmethod
    def _positive_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_depth must be at least 1")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: str | None) -> str:
        return (value or "INFO").strip().upper()

    @classmethod
    def load(cls, path: Path | None = None) -> "MenuConfig":
        """Load configuration from an optional JSON file and ``NAVMENU_*`` variables."""

        data: Dict[str, Any] = {}
        if path is not None and path.exists():
            try:
                loaded = json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning("Unable to decode menu config at %s: %s", path, exc)
            else:
                if isinstance(loaded, dict):
                    data = loaded
                else:
                    _LOGGER.warning("Ignoring menu config at %s: expected a JSON object", path)

        for name in cls.model_fields:
            env_value = os.environ.get(f"{_ENV_PREFIX}{name.upper()}")
            if env_value is not None:
                data[name] = env_value

        filtered = {key: value for key, value in data.items() if key in cls.model_fields}
        return cls(**filtered)


def load_menu_config(path: Path | None = None) -> MenuConfig:
    """Helper to load the menu configuration."""

    return MenuConfig.load(path)


__all__ = ["MenuConfig", "load_menu_config"]
