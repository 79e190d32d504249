from __future__ import annotations

import os
from typing import Annotated

import typer

from atlas.common import LoggingConfig, create_logger, setup_cli_logging
from atlas.config import ConfigScope, FileConfigStore
from atlas.settings import settings

from .commands import config as config_commands
from .commands import countries as countries_commands
from .commands import favorites as favorites_commands
from .commands import session as session_commands

logger = create_logger("cli")

app = typer.Typer(help="Atlas command-line interface.")
app.add_typer(countries_commands.app, name="countries")
app.add_typer(favorites_commands.app, name="favorites")
app.add_typer(session_commands.app, name="session")
app.add_typer(config_commands.app, name="config")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    config_store = FileConfigStore(
        settings=settings.to_config_store_settings(),
    )
    global_config = config_store.load_scope(ConfigScope.GLOBAL).unwrap_or(None)
    logging_config = global_config.logging if global_config else LoggingConfig()

    if logging_config.enabled:
        setup_cli_logging(
            app_info=settings.app,
            config=logging_config,
            directories=settings.to_data_directories(),
        )
        logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the atlas CLI."""
    _setup_logging()
    app()
