"""CLI commands for managing favorite countries."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NamedTuple

import typer

from atlas.cli import deps
from atlas.cli.render import echo_country_line
from atlas.countries import Country, CountryStore, FetchStatus
from atlas.session import visible_favorites

CodeArgument = Annotated[str, typer.Argument(help="Two or three letter country code, e.g. JPN")]
WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        hidden=True,
        help="Override working directory used when resolving project config.",
    ),
]

app = typer.Typer(
    help="Bookmark countries (requires sign-in).",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class _AddResult(NamedTuple):
    country: Country | None
    added: bool
    error: str | None = None
    write_error: str | None = None


@app.callback(invoke_without_command=True)
def _favorites_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_favorites(working_dir: WorkingDirOption = None) -> None:
    """List your favorite countries."""
    session = deps.build_session_store()
    if not session.state.is_signed_in:
        typer.echo("Please sign in to view your favorite countries.")
        typer.secho("hint: use 'atlas session login' to sign in", fg=typer.colors.CYAN)
        return

    config = deps.load_config(working_dir)
    favorites = visible_favorites(session.state, deps.run_with_store(config, _current_favorites))
    if not favorites:
        typer.echo("You haven't added any favorites yet.")
        typer.secho("hint: use 'atlas favorites add <CODE>' to add one", fg=typer.colors.CYAN)
        return

    for country in favorites:
        echo_country_line(country, favorite=True)

    noun = "country" if len(favorites) == 1 else "countries"
    typer.echo(f"\n{len(favorites)} {noun} in favorites")


@app.command("add")
def add(code: CodeArgument, working_dir: WorkingDirOption = None) -> None:
    """Add a country to your favorites.

    Examples:

        atlas favorites add JPN
        atlas favorites add jp
    """
    _require_sign_in()
    config = deps.load_config(working_dir)

    async def add_country(store: CountryStore) -> _AddResult:
        if store.is_favorite(code):
            return _AddResult(country=store.snapshot.find_favorite(code), added=False)

        await store.fetch_one(code)
        snapshot = store.snapshot
        if snapshot.status is FetchStatus.FAILED:
            return _AddResult(country=None, added=False, error=snapshot.error)
        if not snapshot.countries:
            return _AddResult(country=None, added=False, error=f"Country '{code}' not found")

        # the lookup also accepts two-letter codes, so key on the returned record
        country = snapshot.countries[0]
        if not store.add_favorite(country):
            return _AddResult(country=country, added=False)
        return _AddResult(country=country, added=True, write_error=store.snapshot.favorites_error)

    result = deps.run_with_store(config, add_country)
    if result.error:
        typer.secho(f"error: {result.error}", err=True, fg=typer.colors.RED)
        typer.secho("hint: use a two or three letter code such as JP or JPN", err=True, fg=typer.colors.CYAN)
        raise typer.Exit(code=1)

    if not result.added:
        typer.echo(f"'{result.country.code}' is already in your favorites.")
        return

    _exit_on_write_error(result.write_error)
    typer.secho(f"✓ Added '{result.country.name}' to favorites", fg=typer.colors.GREEN)


@app.command("remove")
def remove(code: CodeArgument, working_dir: WorkingDirOption = None) -> None:
    """Remove a country from your favorites."""
    _require_sign_in()
    config = deps.load_config(working_dir)

    async def remove_country(store: CountryStore) -> tuple[bool, str | None]:
        return store.remove_favorite(code), store.snapshot.favorites_error

    removed, write_error = deps.run_with_store(config, remove_country)
    if not removed:
        typer.secho(f"error: '{code.upper()}' is not in your favorites", err=True, fg=typer.colors.RED)
        typer.secho("hint: use 'atlas favorites list' to see your favorites", err=True, fg=typer.colors.CYAN)
        raise typer.Exit(code=1)

    _exit_on_write_error(write_error)
    typer.secho(f"✓ Removed '{code.upper()}' from favorites", fg=typer.colors.GREEN)


@app.command("clear")
def clear(working_dir: WorkingDirOption = None) -> None:
    """Remove every favorite."""
    _require_sign_in()
    config = deps.load_config(working_dir)

    async def clear_all(store: CountryStore) -> str | None:
        store.clear_favorites()
        return store.snapshot.favorites_error

    _exit_on_write_error(deps.run_with_store(config, clear_all))
    typer.secho("✓ Cleared favorites", fg=typer.colors.GREEN)


async def _current_favorites(store: CountryStore) -> tuple[Country, ...]:
    return store.snapshot.favorites


def _exit_on_write_error(write_error: str | None) -> None:
    if write_error is None:
        return
    typer.secho(f"error: {write_error}", err=True, fg=typer.colors.RED)
    typer.secho("hint: check that the atlas data directory is writable", err=True, fg=typer.colors.CYAN)
    raise typer.Exit(code=1)


def _require_sign_in() -> None:
    if deps.build_session_store().state.is_signed_in:
        return
    typer.secho("error: sign in to manage favorites", err=True, fg=typer.colors.RED)
    typer.secho("hint: use 'atlas session login --username NAME --email EMAIL'", err=True, fg=typer.colors.CYAN)
    raise typer.Exit(code=1)
