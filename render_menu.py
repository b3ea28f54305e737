"""Command line entrypoint for rendering menus from a definitions file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from navmenu.config import MenuConfig
from navmenu.loader import MenuDefinitionError, load_definitions, populate
from navmenu.logging_config import configure_logging
from navmenu.menu import Menu
from navmenu.models import MenuError
from navmenu.tracing import trace

_LOGGER = logging.getLogger("render_menu")


def _parse_attribute(value: str) -> tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError(
            f"Invalid attribute '{value}'. Expected format name=value."
        )
    name, raw = value.split("=", 1)
    return name.strip(), raw


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render navigation menus to HTML")
    parser.add_argument("definitions", type=Path, help="JSON or YAML file mapping containers to items.")
    parser.add_argument(
        "--container",
        dest="containers",
        action="append",
        default=[],
        metavar="NAME",
        help="Container to render; repeat for several. Defaults to every defined container.",
    )
    parser.add_argument("--current-path", default="", help="Path marked as active (default: none).")
    prefix_group = parser.add_mutually_exclusive_group()
    prefix_group.add_argument("--prefix", help="Literal prefix for every rendered URL.")
    prefix_group.add_argument(
        "--prefix-container",
        action="store_true",
        help="Prefix every rendered URL with its container name.",
    )
    parser.add_argument("--element", help="Element wrapping each level (default from config: ul).")
    parser.add_argument(
        "--attr",
        dest="attributes",
        action="append",
        type=_parse_attribute,
        default=[],
        metavar="NAME=VALUE",
        help="Attribute for the wrapping element, e.g. --attr class=nav.",
    )
    parser.add_argument("--config", type=Path, help="Optional JSON configuration file.")
    parser.add_argument("--log-level", help="Python logging level (default from config: INFO)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    try:
        config = MenuConfig.load(args.config)
    except ValidationError as exc:
        configure_logging(args.log_level or logging.INFO)
        _LOGGER.error("Invalid menu configuration: %s", exc)
        return 2
    configure_logging(args.log_level or config.log_level)

    menu = Menu(current_path=lambda: args.current_path, config=config)
    try:
        with trace("render_menu", logger=_LOGGER, definitions=str(args.definitions)) as span:
            defined: List[str] = populate(menu, load_definitions(args.definitions))
            containers = args.containers or defined
            handler = menu.handler(containers)
            if args.prefix is not None:
                handler.prefix(args.prefix)
            elif args.prefix_container:
                handler.prefix_container()
            markup = handler.render(dict(args.attributes) or None, args.element)
            span["containers"] = containers
    except MenuDefinitionError as exc:
        _LOGGER.error("Invalid menu definitions: %s", exc)
        return 2
    except (MenuError, OSError) as exc:
        _LOGGER.error("Unable to render menu: %s", exc)
        return 1

    sys.stdout.write(markup + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
