"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Los handlers del REPL solo deciden *qué* mostrar; aquí se decide *cómo*.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import LocationArea, LocationAreaPage, Pokemon


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida del REPL."""

    title = Text("Pokedex", style="bold red")
    subtitle = Text("Explore areas • Catch Pokemon • Type 'help'", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="red", padding=(1, 4)))


def build_commands_table(commands: dict[str, str]) -> Table:
    """Tabla `comando -> descripción` para `help`."""

    table = Table(title="Usage", show_header=False, box=None, padding=(0, 2))
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    for name, description in commands.items():
        table.add_row(name, description)
    return table


def print_area_page(console: Console, page: LocationAreaPage) -> None:
    for area in page.results:
        console.print(escape(area.name))


def print_location_area(console: Console, area: LocationArea) -> None:
    console.print(f"Exploring {escape(area.name)}...")
    names = area.pokemon_names
    if not names:
        console.print("No Pokemon found here.")
        return
    console.print("Found Pokemon:")
    for name in names:
        console.print(f" - {escape(name)}")


def build_pokemon_panel(pokemon: Pokemon) -> Panel:
    """Bloque de `inspect`: datos básicos, stats y tipos."""

    body = Text()
    body.append(f"Name: {pokemon.name}\n")
    body.append(f"Height: {pokemon.height}\n")
    body.append(f"Weight: {pokemon.weight}\n")
    body.append("Stats:\n", style="bold")
    for stat in pokemon.stats:
        body.append(f"  - {stat.stat.name}: {stat.base_stat}\n")
    body.append("Types:\n", style="bold")
    for ptype in pokemon.types:
        body.append(f"  - {ptype.type.name}\n")
    body.rstrip()
    return Panel(body, title=Text(pokemon.name, style="bold yellow"), border_style="yellow")


def print_pokedex(console: Console, caught: list[Pokemon]) -> None:
    if not caught:
        console.print("You haven't caught any Pokemon yet!")
        return
    console.print("Your Pokedex:")
    for pokemon in caught:
        console.print(f"  - {escape(pokemon.name)}")
