"""Core: config, errores, cache, dominio y servicios."""
