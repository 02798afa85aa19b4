"""Grid layout — split an ordered item list into fixed-width rows."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# Total width of the responsive column grid used by the templates
GRID_UNITS = 12


class InvalidArgument(ValueError):
    """Raised when a grid is requested with a non-positive row width."""


@dataclass(frozen=True)
class GridCell(Generic[T]):
    """A grid slot. Padding cells have ``empty`` set and no item."""
    item: T | None = None
    href: str = ""
    empty: bool = False

    @property
    def is_empty(self) -> bool:
        return self.empty


EMPTY_CELL: GridCell[Any] = GridCell(empty=True)


@dataclass(frozen=True)
class GridRow(Generic[T]):
    cells: tuple[GridCell[T], ...] = field(default_factory=tuple)


def _default_href(item: Any) -> str:
    return getattr(item, "link", "") or ""


def column_width(items_per_row: int) -> int:
    """Width of one cell in grid units.

    Row widths only add up to exactly 12 when ``items_per_row`` divides 12.
    Above 12 cells per row the width is 0; the stylesheet renders ``col-0``
    cells as equal shares of the row.
    """
    _check_items_per_row(items_per_row)
    return GRID_UNITS // items_per_row


def build_grid(
    items: Sequence[T],
    items_per_row: int,
    href: Callable[[T], str] = _default_href,
) -> list[GridRow[T]]:
    """Lay ``items`` out left-to-right in rows of ``items_per_row`` cells.

    The last row is padded with empty cells so every row has the same
    width.  An empty input yields no rows at all.

    Args:
        items: Items in display order.
        items_per_row: Cells per row, must be >= 1.
        href: Maps an item to the link rendered for its cell.

    Raises:
        InvalidArgument: If ``items_per_row`` is not positive.
    """
    _check_items_per_row(items_per_row)

    rows: list[GridRow[T]] = []
    current: list[GridCell[T]] = []
    for item in items:
        current.append(GridCell(item=item, href=href(item)))
        if len(current) == items_per_row:
            rows.append(GridRow(cells=tuple(current)))
            current = []

    if current:
        padding = items_per_row - len(current)
        current.extend([EMPTY_CELL] * padding)
        rows.append(GridRow(cells=tuple(current)))

    return rows


def _check_items_per_row(items_per_row: int) -> None:
    if isinstance(items_per_row, bool) or not isinstance(items_per_row, int):
        raise InvalidArgument(f"items_per_row must be an integer, got {items_per_row!r}")
    if items_per_row <= 0:
        raise InvalidArgument(f"items_per_row must be >= 1, got {items_per_row}")
