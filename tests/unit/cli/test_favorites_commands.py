from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from atlas.cli.main import app

from .conftest import FakeRestCountries

runner = CliRunner()


@pytest.fixture
def signed_in() -> None:
    result = runner.invoke(app, ["session", "login", "-u", "ada", "-e", "ada@example.com"])
    assert result.exit_code == 0


def _favorites_file(tmp_path: Path) -> Path:
    return tmp_path / "xdg-data" / "atlas" / "countries" / "data.json"


def _stored_favorites(tmp_path: Path) -> list[str]:
    data_file = _favorites_file(tmp_path)
    return [entry["code"] for entry in json.loads(data_file.read_text())["favorites"]]


@pytest.mark.parametrize("command", [["add", "JPN"], ["remove", "JPN"], ["clear"]])
def test_mutations_require_sign_in(api: FakeRestCountries, command: list[str]) -> None:
    result = runner.invoke(app, ["favorites", *command])

    assert result.exit_code == 1
    assert "error: sign in to manage favorites" in result.stderr
    assert api.paths == []


def test_list_asks_to_sign_in() -> None:
    result = runner.invoke(app, ["favorites", "list"])

    assert result.exit_code == 0
    assert "Please sign in to view your favorite countries." in result.stdout


@pytest.mark.usefixtures("signed_in")
def test_add_persists_country(api: FakeRestCountries, tmp_path: Path) -> None:
    result = runner.invoke(app, ["favorites", "add", "per"])

    assert result.exit_code == 0
    assert "✓ Added 'Peru' to favorites" in result.stdout
    assert api.paths == ["/v3.1/alpha/per"]
    assert _stored_favorites(tmp_path) == ["PER"]


@pytest.mark.usefixtures("signed_in")
def test_add_twice_keeps_one_entry(api: FakeRestCountries, tmp_path: Path) -> None:
    runner.invoke(app, ["favorites", "add", "PER"])

    result = runner.invoke(app, ["favorites", "add", "per"])

    assert result.exit_code == 0
    assert "'PER' is already in your favorites." in result.stdout
    assert _stored_favorites(tmp_path) == ["PER"]


@pytest.mark.usefixtures("signed_in")
def test_add_accepts_two_letter_code(api: FakeRestCountries, tmp_path: Path) -> None:
    result = runner.invoke(app, ["favorites", "add", "jp"])

    assert result.exit_code == 0
    assert "✓ Added 'Japan' to favorites" in result.stdout
    assert _stored_favorites(tmp_path) == ["JPN"]

    again = runner.invoke(app, ["favorites", "add", "JP"])

    assert again.exit_code == 0
    assert "'JPN' is already in your favorites." in again.stdout
    assert _stored_favorites(tmp_path) == ["JPN"]


@pytest.mark.usefixtures("signed_in")
def test_add_replaces_corrupt_favorites_file(api: FakeRestCountries, tmp_path: Path) -> None:
    _favorites_file(tmp_path).parent.mkdir(parents=True, exist_ok=True)
    _favorites_file(tmp_path).write_text("{not json")

    result = runner.invoke(app, ["favorites", "add", "JPN"])

    assert result.exit_code == 0
    assert _stored_favorites(tmp_path) == ["JPN"]


@pytest.mark.usefixtures("signed_in")
@pytest.mark.parametrize("command", [["add", "JPN"], ["clear"]])
def test_failed_write_is_reported(api: FakeRestCountries, tmp_path: Path, command: list[str]) -> None:
    _favorites_file(tmp_path).mkdir(parents=True)

    result = runner.invoke(app, ["favorites", *command])

    assert result.exit_code == 1
    assert "error: Failed to" in result.stderr
    assert "✓" not in result.stdout


@pytest.mark.usefixtures("signed_in")
def test_add_unknown_country(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["favorites", "add", "XXX"])

    assert result.exit_code == 1
    assert "error: Country not found" in result.stderr


@pytest.mark.usefixtures("signed_in")
def test_list_shows_favorites(api: FakeRestCountries) -> None:
    runner.invoke(app, ["favorites", "add", "JPN"])
    runner.invoke(app, ["favorites", "add", "FRA"])

    result = runner.invoke(app, ["favorites", "list"])

    assert result.exit_code == 0
    assert "♥ JPN" in result.stdout
    assert "♥ FRA" in result.stdout
    assert "2 countries in favorites" in result.stdout


@pytest.mark.usefixtures("signed_in")
def test_list_empty(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["favorites", "list"])

    assert result.exit_code == 0
    assert "You haven't added any favorites yet." in result.stdout


@pytest.mark.usefixtures("signed_in")
def test_remove(api: FakeRestCountries, tmp_path: Path) -> None:
    runner.invoke(app, ["favorites", "add", "JPN"])
    runner.invoke(app, ["favorites", "add", "FRA"])

    result = runner.invoke(app, ["favorites", "remove", "jpn"])

    assert result.exit_code == 0
    assert "✓ Removed 'JPN' from favorites" in result.stdout
    assert _stored_favorites(tmp_path) == ["FRA"]


@pytest.mark.usefixtures("signed_in")
def test_remove_missing(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["favorites", "remove", "JPN"])

    assert result.exit_code == 1
    assert "'JPN' is not in your favorites" in result.stderr


@pytest.mark.usefixtures("signed_in")
def test_clear(api: FakeRestCountries, tmp_path: Path) -> None:
    runner.invoke(app, ["favorites", "add", "JPN"])

    result = runner.invoke(app, ["favorites", "clear"])

    assert result.exit_code == 0
    assert "✓ Cleared favorites" in result.stdout
    assert "favorites" not in json.loads(_favorites_file(tmp_path).read_text())


@pytest.mark.usefixtures("signed_in")
def test_favorites_kept_across_sign_out(api: FakeRestCountries) -> None:
    runner.invoke(app, ["favorites", "add", "JPN"])
    runner.invoke(app, ["session", "logout"])
    runner.invoke(app, ["session", "login", "-u", "ada", "-e", "ada@example.com"])

    result = runner.invoke(app, ["favorites", "list"])

    assert "♥ JPN" in result.stdout
