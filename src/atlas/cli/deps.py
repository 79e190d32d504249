"""Wiring shared by CLI commands."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import typer
from result import Err, Ok

from atlas.config import ApiConfig, AtlasConfig, ConfigError, ConfigStore, FileConfigStore
from atlas.constants import COUNTRIES_NAMESPACE, SESSION_NAMESPACE
from atlas.countries import CountryStore, FavoritesRepository, RestCountriesClient
from atlas.datastore import FileDataStore
from atlas.session import SessionStore
from atlas.settings import settings

T = TypeVar("T")


def load_config(working_dir: Path | None = None) -> AtlasConfig:
    store: ConfigStore = FileConfigStore(
        working_dir=working_dir,
        settings=settings.to_config_store_settings(),
    )
    match store.load():
        case Ok(config):
            return config
        case Err(error):
            report_config_error(error)
            raise typer.Exit(code=1)


def build_client(api: ApiConfig) -> RestCountriesClient:
    return RestCountriesClient(api.base_url, timeout=api.timeout, list_fields=api.list_fields)


def build_favorites_repository() -> FavoritesRepository:
    directories = settings.to_data_directories()
    return FavoritesRepository(FileDataStore(namespace=COUNTRIES_NAMESPACE, directories=directories))


def build_session_store() -> SessionStore:
    directories = settings.to_data_directories()
    return SessionStore(FileDataStore(namespace=SESSION_NAMESPACE, directories=directories))


def run_with_store(config: AtlasConfig, operation: Callable[[CountryStore], Awaitable[T]]) -> T:
    """Run ``operation`` against a freshly constructed store on a new event loop."""

    async def _run() -> T:
        async with build_client(config.api) as client:
            store = CountryStore(client, build_favorites_repository())
            return await operation(store)

    return asyncio.run(_run())


def report_config_error(error: ConfigError) -> None:
    message = f"[{error.scope.value}] {error.message}"
    expected_path = getattr(error, "expected_path", None)
    error_path = getattr(error, "path", None)
    if expected_path is not None:
        message = f"{message} (expected at {expected_path})"
    elif error_path is not None:
        message = f"{message} ({error_path})"

    typer.secho(message, err=True, fg=typer.colors.RED)
