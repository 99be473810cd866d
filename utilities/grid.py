from __future__ import annotations

from typing import Iterator, List, TYPE_CHECKING

from vectors import Vector

if TYPE_CHECKING:
    from drawing import Renderer


class Grid:
    """
    Rows and columns of square cells, each located by the Vector of its
    top-left corner.

    Cells are generated by vertical_grid() or horizontal_grid(); both append
    to `cells`, so call one of them once per grid.
    """

    def __init__(self, rows: int, cols: int, border: float, cell: float):
        self.rows = rows
        self.cols = cols
        self.border = border
        self.cell = cell
        self.cells: List[Vector] = []

    def vertical_grid(self) -> None:
        """
        Outer loop over rows: the row index drives x and the column index
        drives y, so cells fill column by column down the surface.
        """
        for i in range(self.rows):
            for j in range(self.cols):
                x = i * self.cell + self.border
                y = j * self.cell + self.border
                self.cells.append(Vector(x, y))

    def horizontal_grid(self) -> None:
        """
        Outer loop over columns: the column index drives y and the row index
        drives x, so cells fill row by row across the surface.
        """
        for i in range(self.cols):
            for j in range(self.rows):
                x = j * self.cell + self.border
                y = i * self.cell + self.border
                self.cells.append(Vector(x, y))

    def display_grid(self, renderer: "Renderer") -> None:
        for origin in self.cells:
            renderer.rect(origin, self.cell, self.cell)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self.cells)
