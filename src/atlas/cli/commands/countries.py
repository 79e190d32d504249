"""CLI commands for browsing countries."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Annotated, TypeAlias

import typer

from atlas.cli import deps
from atlas.cli.render import echo_country_details, echo_country_line
from atlas.countries import (
    KNOWN_REGIONS,
    CountriesSnapshot,
    Country,
    CountryFilters,
    CountryStore,
    FetchOutcome,
    FetchStatus,
    build_filter_query,
    distinct_languages,
    filter_countries,
    parse_filter_query,
)
from atlas.session import visible_favorites

Intent: TypeAlias = Callable[[CountryStore], Awaitable[FetchOutcome]]

SearchOption = Annotated[str, typer.Option("--search", "-q", help="Case-insensitive match on the country name")]
RegionOption = Annotated[str, typer.Option("--region", "-r", help=f"Exact region ({', '.join(KNOWN_REGIONS)})")]
LanguageOption = Annotated[str, typer.Option("--language", "-l", help="Language name, e.g. 'French'")]
WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        hidden=True,
        help="Override working directory used when resolving project config.",
    ),
]

app = typer.Typer(
    help="Browse, search and filter countries.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def _countries_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_countries(
    search: SearchOption = "",
    region: RegionOption = "",
    language: LanguageOption = "",
    working_dir: WorkingDirOption = None,
) -> None:
    """List all countries, optionally filtered.

    Examples:

        # Every country in Asia where Japanese is spoken
        atlas countries list --region Asia --language Japanese

        # Name search
        atlas countries list --search land
    """
    snapshot = _fetch(lambda store: store.fetch_all(), working_dir, retry="atlas countries list")
    _render_list(snapshot, CountryFilters(search=search, region=region, language=language))


@app.command("query")
def query(
    filter_query: Annotated[str, typer.Argument(help="Query string such as 'region=Asia&language=Japanese'")],
    search: SearchOption = "",
    working_dir: WorkingDirOption = None,
) -> None:
    """List countries using a shared region/language query string.

    Examples:

        atlas countries query 'region=Europe&language=French'
    """
    filters = parse_filter_query(filter_query, search=search)
    snapshot = _fetch(lambda store: store.fetch_all(), working_dir, retry="atlas countries query")
    _render_list(snapshot, filters)


@app.command("search")
def search_by_name(
    name: Annotated[str, typer.Argument(help="Full or partial country name")],
    working_dir: WorkingDirOption = None,
) -> None:
    """Ask the API for countries matching a name.

    Examples:

        atlas countries search guinea
    """
    snapshot = _fetch(lambda store: store.fetch_by_name(name), working_dir, retry=f"atlas countries search {name}")
    _render_list(snapshot, CountryFilters())


@app.command("region")
def by_region(
    region: Annotated[str, typer.Argument(help=f"Region name ({', '.join(KNOWN_REGIONS)})")],
    working_dir: WorkingDirOption = None,
) -> None:
    """Ask the API for every country in a region.

    Examples:

        atlas countries region Oceania
    """
    snapshot = _fetch(
        lambda store: store.fetch_by_region(region), working_dir, retry=f"atlas countries region {region}"
    )
    _render_list(snapshot, CountryFilters())


@app.command("show")
def show(
    code: Annotated[str, typer.Argument(help="Two or three letter country code")],
    working_dir: WorkingDirOption = None,
) -> None:
    """Show details for a single country.

    Examples:

        atlas countries show JPN
    """
    snapshot = _fetch(lambda store: store.fetch_one(code), working_dir, retry=f"atlas countries show {code}")
    if not snapshot.countries:
        typer.secho(f"error: country '{code}' not found", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    country = snapshot.countries[0]
    favorite = country.code in {fav.code for fav in _visible_favorites(snapshot)}
    echo_country_details(country, favorite=favorite)


@app.command("languages")
def languages(working_dir: WorkingDirOption = None) -> None:
    """List every language spoken in at least one country."""
    snapshot = _fetch(lambda store: store.fetch_all(), working_dir, retry="atlas countries languages")
    for language in distinct_languages(snapshot.countries):
        typer.echo(language)


@app.command("regions")
def regions(working_dir: WorkingDirOption = None) -> None:
    """List the browsable regions with their country counts."""
    snapshot = _fetch(lambda store: store.fetch_all(), working_dir, retry="atlas countries regions")
    for region in KNOWN_REGIONS:
        count = len(filter_countries(snapshot.countries, CountryFilters(region=region)))
        typer.echo(f"{region:<10} {count}")


def _fetch(intent: Intent, working_dir: Path | None, *, retry: str) -> CountriesSnapshot:
    config = deps.load_config(working_dir)

    async def run(store: CountryStore) -> CountriesSnapshot:
        await intent(store)
        return store.snapshot

    snapshot = deps.run_with_store(config, run)
    if snapshot.status is FetchStatus.FAILED:
        typer.secho(f"error: {snapshot.error}", err=True, fg=typer.colors.RED)
        if snapshot.not_found:
            typer.secho("hint: check the spelling or code and try again", err=True, fg=typer.colors.CYAN)
        else:
            typer.secho(f"hint: check your connection and retry with '{retry}'", err=True, fg=typer.colors.CYAN)
        raise typer.Exit(code=1)
    return snapshot


def _render_list(snapshot: CountriesSnapshot, filters: CountryFilters) -> None:
    countries = filter_countries(snapshot.countries, filters)
    if not countries:
        typer.echo("No countries found matching your filters.")
        if not filters.is_empty:
            typer.secho("hint: run 'atlas countries list' without filters to see every country", fg=typer.colors.CYAN)
        return

    favorites = {country.code for country in _visible_favorites(snapshot)}
    for country in countries:
        echo_country_line(country, favorite=country.code in favorites)

    noun = "country" if len(countries) == 1 else "countries"
    typer.echo(f"\n{len(countries)} {noun}")

    shared = build_filter_query(filters)
    if shared:
        typer.secho(f"share: atlas countries query '{shared}'", fg=typer.colors.CYAN)


def _visible_favorites(snapshot: CountriesSnapshot) -> tuple[Country, ...]:
    return visible_favorites(deps.build_session_store().state, snapshot.favorites)
