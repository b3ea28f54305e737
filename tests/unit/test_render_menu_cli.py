"""Tests for the ``render_menu`` command line entrypoint."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import render_menu


@pytest.fixture
def definitions(tmp_path: Path) -> Path:
    """Write a two-container definition file and return its path."""

    path = tmp_path / "menus.json"
    path.write_text(
        json.dumps(
            {
                "main": [
                    {"url": "home", "title": "Home", "children": [{"url": "home/sub", "title": "Sub"}]},
                ],
                "footer": [{"url": "contact", "title": "Contact"}],
            }
        ),
        encoding="utf-8",
    )
    return path


def test_cli_renders_all_containers_by_default(definitions: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a definitions file When run without containers Then every container is printed in file order."""

    exit_code = render_menu.main([str(definitions), "--current-path", "home/sub"])

    output = capsys.readouterr().out.strip()
    assert exit_code == 0
    assert output == (
        '<ul><li class="active-children"><a href="home">Home</a>'
        '<ul><li class="active"><a href="home/sub">Sub</a></li></ul></li></ul>'
        '<ul><li><a href="contact">Contact</a></li></ul>'
    )


def test_cli_selects_containers_and_applies_options(
    definitions: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given container, prefix, element and attribute options When run Then only that container is rendered that way."""

    exit_code = render_menu.main(
        [str(definitions), "--container", "footer", "--prefix", "site", "--element", "ol", "--attr", "class=nav"]
    )

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == '<ol class="nav"><li><a href="site/contact">Contact</a></li></ol>'


def test_cli_prefix_container(definitions: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given --prefix-container When run Then URLs carry their container name."""

    render_menu.main([str(definitions), "--container", "footer", "--prefix-container"])

    assert 'href="footer/contact"' in capsys.readouterr().out


def test_cli_reports_invalid_definitions(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a malformed definitions file When run Then exit status 2 is returned and nothing is printed."""

    path = tmp_path / "menus.json"
    path.write_text(json.dumps({"main": "not a list"}), encoding="utf-8")

    exit_code = render_menu.main([str(path)])

    assert exit_code == 2
    assert capsys.readouterr().out == ""


def test_cli_rejects_malformed_attribute(definitions: Path) -> None:
    """Given an attribute without '=' When parsing arguments Then argparse exits with an error."""

    with pytest.raises(SystemExit):
        render_menu.parse_args([str(definitions), "--attr", "broken"])


@pytest.mark.parametrize(
    "variable, value",
    [("NAVMENU_MAX_DEPTH", "0"), ("NAVMENU_MENU_ELEMENT", "1x")],
)
def test_cli_reports_invalid_configuration(
    definitions: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    variable: str,
    value: str,
) -> None:
    """Given an invalid NAVMENU_* override When run Then exit status 2 is returned and nothing is printed."""

    monkeypatch.setenv(variable, value)

    exit_code = render_menu.main([str(definitions)])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert captured.out == ""
    assert "Invalid menu configuration" in captured.err
