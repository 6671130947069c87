"""Tests for the pagination cursor."""

from __future__ import annotations

import pytest

from core.domain.pagination import Direction, PaginationCursor
from core.errors import FetchError, NoSuchPageError


class TestPaginationCursor:
    """Locator bookkeeping and the boundary signal."""

    def test_initial_state(self) -> None:
        """A fresh cursor only knows the first page."""
        cursor = PaginationCursor(forward="first")

        assert cursor.locator(Direction.FORWARD) == "first"
        assert cursor.backward is None

    def test_back_at_boundary_signals_no_page(self) -> None:
        """forward="X", backward="": going back is a boundary, not a fetch error."""
        cursor = PaginationCursor()
        cursor.update("X", "")

        with pytest.raises(NoSuchPageError) as excinfo:
            cursor.locator(Direction.BACKWARD)

        assert not isinstance(excinfo.value, FetchError)
        assert excinfo.value.direction == "backward"
        assert cursor.locator(Direction.FORWARD) == "X"

    def test_forward_exhausted(self) -> None:
        """The last page has no forward locator."""
        cursor = PaginationCursor(forward="first")
        cursor.update(None, "prev")

        with pytest.raises(NoSuchPageError):
            cursor.locator(Direction.FORWARD)
        assert cursor.locator(Direction.BACKWARD) == "prev"

    def test_update_replaces_both(self) -> None:
        """Last fetch wins for both directions."""
        cursor = PaginationCursor(forward="a", backward="b")
        cursor.update("c", None)

        assert cursor.forward == "c"
        assert cursor.backward is None
