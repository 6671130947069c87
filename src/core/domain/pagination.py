"""Cursor de paginación del listado de áreas.

Mantiene los dos locators (siguiente/anterior) de la última página
obtenida con éxito. `map`/`mapb` no son transiciones internas: la CLI pide
el locator de una dirección y hace el fetch; si la dirección está agotada
recibe `NoSuchPageError` y no toca la red.
"""

from __future__ import annotations

from enum import Enum

from core.errors import NoSuchPageError


class Direction(str, Enum):
    """Dirección de paginación."""

    FORWARD = "forward"
    BACKWARD = "backward"


class PaginationCursor:
    def __init__(self, forward: str | None = None, backward: str | None = None) -> None:
        self._forward = forward or None
        self._backward = backward or None

    @property
    def forward(self) -> str | None:
        return self._forward

    @property
    def backward(self) -> str | None:
        return self._backward

    def update(self, forward: str | None, backward: str | None) -> None:
        """Guarda los locators de la página recién decodificada ("" == no hay)."""

        self._forward = forward or None
        self._backward = backward or None

    def locator(self, direction: Direction) -> str:
        value = self._forward if direction is Direction.FORWARD else self._backward
        if not value:
            raise NoSuchPageError(direction.value)
        return value

    def __repr__(self) -> str:
        return f"PaginationCursor(forward={self._forward!r}, backward={self._backward!r})"
