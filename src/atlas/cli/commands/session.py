"""CLI commands for the local sign-in."""

from __future__ import annotations

import uuid
from typing import Annotated

import typer
from pydantic import ValidationError
from result import Err, Ok

from atlas.cli import deps
from atlas.session import User

app = typer.Typer(
    help="Sign in to keep favorites.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def _session_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("login")
def login(
    username: Annotated[str, typer.Option("--username", "-u", help="Display name")],
    email: Annotated[str, typer.Option("--email", "-e", help="Email address")],
    picture: Annotated[str | None, typer.Option("--picture", help="Profile picture URL")] = None,
) -> None:
    """Sign in on this machine.

    Examples:

        atlas session login --username ada --email ada@example.com
    """
    session = deps.build_session_store()
    session.sign_in_start()

    try:
        user = User(id=uuid.uuid4().hex, username=username, email=email, profile_picture=picture)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        session.sign_in_failure(f"{field}: {first['msg']}")
        typer.secho(f"error: {session.state.error}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from None

    match session.sign_in_success(user):
        case Ok(user):
            typer.secho(f"✓ Signed in as {user.username}", fg=typer.colors.GREEN)
        case Err(error):
            typer.secho(f"error: {error.message}", err=True, fg=typer.colors.RED)
            raise typer.Exit(code=1)


@app.command("logout")
def logout() -> None:
    """Sign out. Stored favorites are kept but hidden until you sign in again."""
    session = deps.build_session_store()
    if not session.state.is_signed_in:
        typer.echo("Not signed in.")
        return

    match session.sign_out():
        case Ok():
            typer.secho("✓ Signed out", fg=typer.colors.GREEN)
        case Err(error):
            typer.secho(f"error: {error.message}", err=True, fg=typer.colors.RED)
            raise typer.Exit(code=1)


@app.command("whoami")
def whoami() -> None:
    """Show the signed-in user."""
    user = deps.build_session_store().state.current_user
    if user is None:
        typer.echo("Not signed in.")
        return

    typer.secho(user.username, fg=typer.colors.CYAN, bold=True)
    typer.echo(f"Email: {user.email}")
