"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import CachedFetcher, build_client
from adapters.pokeapi import decode_location_area_page, location_areas_url
from core.cache import TTLCache
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.errors import PokedexError
from core.services.capture import capture_probability

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Fetch the first listing page through the same cached path the shell uses."""

    cache = TTLCache(settings.cache_ttl_seconds, settings.reap_interval)
    fetcher = CachedFetcher(cache, build_client(settings))
    try:
        page = decode_location_area_page(fetcher.fetch(location_areas_url(settings)))
    except PokedexError as exc:
        return False, str(exc)
    finally:
        fetcher.close()
    return True, f"{page.count} location areas"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show the effective configuration."""

    settings = AppSettings()

    table = Table(title="Pokedex Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Page size", "OK", str(settings.page_size))
    table.add_row(
        "Cache",
        "OK",
        f"ttl={settings.cache_ttl_seconds}s, reap every {settings.reap_interval}s",
    )
    table.add_row(
        "Throw strength",
        "OK",
        f"{settings.throw_strength} (p={capture_probability(settings.throw_strength, settings.throw_strength):.2f} "
        "against an equal difficulty)",
    )
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    # Connectivity
    ok_api, detail_api = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print("\n[yellow]Note:[/yellow] `map`, `explore` and `catch` need network access to the API.")


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()

    ttl = typer.prompt("Cache TTL (seconds)", default=current.cache_ttl_seconds, type=float)
    strength = typer.prompt("Throw strength", default=current.throw_strength, type=float)
    base_url = typer.prompt("API base URL", default=current.api_base_url, show_default=True).strip()

    if ttl <= 0:
        raise typer.BadParameter("cache TTL must be positive")
    if strength < 0:
        raise typer.BadParameter("throw strength must not be negative")
    if not base_url:
        raise typer.BadParameter("base URL is required")

    env_path = write_user_env_vars(
        {
            "POKEDEX_CACHE_TTL_SECONDS": str(ttl),
            "POKEDEX_THROW_STRENGTH": str(strength),
            "POKEDEX_API_BASE_URL": base_url,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
