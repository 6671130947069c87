"""CLI principal (Typer).

Por qué aquí el cableado:
- Cache, cursor, motor de captura y pokedex se construyen una sola vez al
  arrancar y se pasan por referencia al `Explorer` (sin globals de módulo).
- El reaper de la cache se detiene siempre al salir, incluso con Ctrl-C.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.http_client import CachedFetcher, build_client
from adapters.pokeapi import location_areas_url
from cli import doctor
from cli.repl import Session, run_repl
from cli.ui_components import print_banner
from core.cache import TTLCache
from core.config import AppSettings
from core.domain.pagination import PaginationCursor
from core.domain.pokedex import Pokedex
from core.services.capture import CaptureEngine
from core.services.explorer import Explorer

app = typer.Typer(help="Interactive Pokedex backed by PokeAPI.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@dataclass
class Runtime:
    """Dependencias de una sesión, con su ciclo de vida."""

    explorer: Explorer
    cache: TTLCache
    fetcher: CachedFetcher

    def close(self) -> None:
        self.cache.close()
        self.fetcher.close()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_runtime(settings: AppSettings) -> Runtime:
    cache = TTLCache(settings.cache_ttl_seconds, settings.reap_interval)
    fetcher = CachedFetcher(cache, build_client(settings))
    explorer = Explorer(
        fetcher=fetcher,
        cursor=PaginationCursor(forward=location_areas_url(settings)),
        engine=CaptureEngine(settings.throw_strength),
        pokedex=Pokedex(),
        settings=settings,
    )
    return Runtime(explorer=explorer, cache=cache, fetcher=fetcher)


def _run_shell(settings: AppSettings, *, banner: bool) -> None:
    runtime = build_runtime(settings)
    runtime.cache.start()
    try:
        if banner:
            print_banner(_console)
        run_repl(Session(explorer=runtime.explorer, console=_console))
    finally:
        runtime.close()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Without a sub-command, starts the interactive shell."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        _run_shell(settings, banner=True)


@app.command()
def shell(
    ctx: typer.Context,
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
) -> None:
    """Start the interactive shell."""

    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()
    _run_shell(settings, banner=not no_banner)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
