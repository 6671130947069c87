"""Adaptadores de infraestructura (HTTP, PokeAPI)."""
