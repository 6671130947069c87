"""REPL interactivo y tabla de comandos.

Cada comando recibe la `Session` (dependencias ya construidas) y el primer
argumento de la línea. Los errores recuperables (`core.errors`) se
convierten aquí en un mensaje de una línea y la sesión continúa.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from rich.console import Console
from rich.markup import escape

from cli.ui_components import (
    build_commands_table,
    build_pokemon_panel,
    print_area_page,
    print_location_area,
    print_pokedex,
)
from core.domain.pagination import Direction
from core.errors import DecodeError, FetchError, NoSuchPageError, ProtocolError
from core.services.explorer import Explorer

logger = logging.getLogger(__name__)

PROMPT = "Pokedex > "


@dataclass
class Session:
    explorer: Explorer
    console: Console


@dataclass(frozen=True)
class CliCommand:
    name: str
    description: str
    callback: Callable[[Session, str], bool]


def _cmd_help(session: Session, _: str) -> bool:
    session.console.print("\nWelcome to the Pokedex!")
    session.console.print(build_commands_table({c.name: c.description for c in get_commands().values()}))
    session.console.print()
    return True


def _cmd_exit(session: Session, _: str) -> bool:
    session.console.print("Closing the Pokedex... Goodbye!")
    return False


def _cmd_map(session: Session, _: str) -> bool:
    print_area_page(session.console, session.explorer.page(Direction.FORWARD))
    return True


def _cmd_mapb(session: Session, _: str) -> bool:
    print_area_page(session.console, session.explorer.page(Direction.BACKWARD))
    return True


def _cmd_explore(session: Session, area: str) -> bool:
    if not area:
        session.console.print("Please provide the name of the area to explore.")
        return True
    print_location_area(session.console, session.explorer.explore(area))
    return True


def _cmd_catch(session: Session, name: str) -> bool:
    if not name:
        session.console.print("Please provide the name of the Pokemon to try to catch.")
        return True

    outcome = session.explorer.catch(name)
    label = escape(outcome.name)
    if outcome.already_caught:
        session.console.print(f"{label} is already on the Pokedex!")
        return True

    session.console.print(f"Throwing a Pokeball at {label}...")
    if outcome.caught:
        session.console.print(f"[green]{label} was caught![/green]")
        session.console.print("You may now inspect it with the 'inspect' command.")
    else:
        session.console.print(f"[yellow]{label} escaped![/yellow]")
    return True


def _cmd_inspect(session: Session, name: str) -> bool:
    if not name:
        session.console.print("Please provide the name of the Pokemon to inspect.")
        return True
    pokemon = session.explorer.inspect(name)
    if pokemon is None:
        session.console.print(f"{escape(name)} was not caught yet!")
        return True
    session.console.print(build_pokemon_panel(pokemon))
    return True


def _cmd_pokedex(session: Session, _: str) -> bool:
    print_pokedex(session.console, session.explorer.caught())
    return True


def get_commands() -> dict[str, CliCommand]:
    """Comandos disponibles, en el orden en que `help` los muestra."""

    commands = [
        CliCommand("help", "Displays this message", _cmd_help),
        CliCommand("map", "Lists the next page of areas available to 'explore'", _cmd_map),
        CliCommand("mapb", "Lists the previous page of areas available to 'explore'", _cmd_mapb),
        CliCommand("explore", "Lists all of the Pokemon of a given area", _cmd_explore),
        CliCommand("catch", "Tries to catch a Pokemon!", _cmd_catch),
        CliCommand("inspect", "Inspects a caught Pokemon", _cmd_inspect),
        CliCommand("pokedex", "Prints out the Pokemon you have caught so far", _cmd_pokedex),
        CliCommand("exit", "Exit the Pokedex", _cmd_exit),
    ]
    return {c.name: c for c in commands}


_BOUNDARY_MESSAGES = {
    Direction.FORWARD.value: "Error: cannot map further",
    Direction.BACKWARD.value: "Error: cannot map back",
}


def dispatch(session: Session, line: str) -> bool:
    """Ejecuta una línea. Devuelve False cuando la sesión debe terminar."""

    words = line.strip().lower().split()
    if not words:
        return True

    command = get_commands().get(words[0])
    if command is None:
        session.console.print(f"Unknown command: {escape(words[0])}. Type 'help' to see the available commands.")
        return True

    arg = words[1] if len(words) > 1 else ""
    console = session.console
    try:
        return command.callback(session, arg)
    except NoSuchPageError as exc:
        console.print(_BOUNDARY_MESSAGES.get(exc.direction, str(exc)))
    except ProtocolError as exc:
        if exc.not_found:
            console.print(f"[red]Error:[/red] '{escape(arg or exc.locator)}' was not found.")
        else:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
    except FetchError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
    except DecodeError as exc:
        logger.warning("decode failure for %r: %s", line, exc)
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return True


def run_repl(session: Session, read_line: Callable[[str], str] | None = None) -> None:
    """Bucle leer-ejecutar hasta `exit`, EOF o Ctrl-C."""

    read_line = read_line or session.console.input
    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            session.console.print()
            break
        if not dispatch(session, line):
            break
