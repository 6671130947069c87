"""CLI (Typer + Rich): REPL, doctor y componentes de UI."""
