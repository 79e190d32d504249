from __future__ import annotations

from typer.testing import CliRunner

from atlas.cli.main import app

from .conftest import FakeRestCountries

runner = CliRunner()


def _login() -> None:
    result = runner.invoke(app, ["session", "login", "--username", "ada", "--email", "ada@example.com"])
    assert result.exit_code == 0


def test_list_prints_every_country(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "list"])

    assert result.exit_code == 0
    for name in ("Japan", "France", "Belgium", "Peru"):
        assert name in result.stdout
    assert "4 countries" in result.stdout
    assert "share:" not in result.stdout
    assert api.paths == ["/v3.1/all"]


def test_list_applies_filters_and_offers_share_query(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "list", "--region", "Europe", "--language", "French", "-q", "bel"])

    assert result.exit_code == 0
    assert "Belgium" in result.stdout
    assert "France" not in result.stdout
    assert "1 country" in result.stdout
    assert "share: atlas countries query 'region=Europe&language=French'" in result.stdout


def test_list_without_matches(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "list", "--region", "Oceania"])

    assert result.exit_code == 0
    assert "No countries found matching your filters." in result.stdout


def test_list_reports_fetch_failure(api: FakeRestCountries) -> None:
    api.status = 500

    result = runner.invoke(app, ["countries", "list"])

    assert result.exit_code == 1
    assert "error: Failed to fetch countries" in result.stderr
    assert "hint: check your connection" in result.stderr


def test_query_applies_shared_filters(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "query", "?region=Americas&language=Quechua"])

    assert result.exit_code == 0
    assert "Peru" in result.stdout
    assert "Japan" not in result.stdout


def test_search_asks_the_api(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "search", "pan"])

    assert result.exit_code == 0
    assert "Japan" in result.stdout
    assert "1 country" in result.stdout
    assert api.paths == ["/v3.1/name/pan"]


def test_search_not_found(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "search", "atlantis"])

    assert result.exit_code == 1
    assert "error: Country not found" in result.stderr
    assert "hint: check the spelling or code" in result.stderr
    assert "connection" not in result.stderr


def test_region_lists_region_members(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "region", "Europe"])

    assert result.exit_code == 0
    assert "France" in result.stdout
    assert "Belgium" in result.stdout
    assert "Peru" not in result.stdout


def test_show_prints_details(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "show", "fra"])

    assert result.exit_code == 0
    assert "France" in result.stdout
    assert "Official France" in result.stdout
    assert "Paris" in result.stdout
    assert "Not available" in result.stdout
    assert api.paths == ["/v3.1/alpha/fra"]


def test_show_unknown_code(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "show", "XXX"])

    assert result.exit_code == 1
    assert "error: Country not found" in result.stderr
    assert "hint: check the spelling or code" in result.stderr
    assert "connection" not in result.stderr


def test_show_server_error_suggests_retry(api: FakeRestCountries) -> None:
    api.status = 503

    result = runner.invoke(app, ["countries", "show", "JPN"])

    assert result.exit_code == 1
    assert "error: Country not found" in result.stderr
    assert "hint: check your connection and retry with 'atlas countries show JPN'" in result.stderr


def test_languages_sorted(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "languages"])

    assert result.exit_code == 0
    assert result.stdout.split() == ["Dutch", "French", "Japanese", "Quechua", "Spanish"]


def test_regions_with_counts(api: FakeRestCountries) -> None:
    result = runner.invoke(app, ["countries", "regions"])

    assert result.exit_code == 0
    counts = dict(line.split() for line in result.stdout.splitlines())
    assert counts == {"Africa": "0", "Americas": "1", "Asia": "1", "Europe": "2", "Oceania": "0"}


def test_favorite_marker_only_when_signed_in(api: FakeRestCountries) -> None:
    _login()
    assert runner.invoke(app, ["favorites", "add", "JPN"]).exit_code == 0

    signed_in = runner.invoke(app, ["countries", "list", "--region", "Asia"])
    runner.invoke(app, ["session", "logout"])
    signed_out = runner.invoke(app, ["countries", "list", "--region", "Asia"])

    assert "♥ JPN" in signed_in.stdout
    assert "♥" not in signed_out.stdout


def test_countries_without_subcommand_shows_help() -> None:
    result = runner.invoke(app, ["countries"])

    assert result.exit_code == 0
    assert "Usage" in result.stdout
    assert "list" in result.stdout
