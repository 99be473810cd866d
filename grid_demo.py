from __future__ import annotations

import argparse
import math

from drawing import BACKENDS, CHORD, OPEN, PIE, Renderer, SketchConfig, run_sketch
from utilities import Grid, Helper, setup_default_logging
from vectors import Vector


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a grid of cells plus a few vector-driven shapes.")
    p.add_argument("--backend", type=str, default="pillow", choices=list(BACKENDS), help="drawing backend")
    p.add_argument("--out", type=str, default="plots/grid.png", help="output image path")
    p.add_argument("--rows", type=int, default=8, help="number of grid rows")
    p.add_argument("--cols", type=int, default=8, help="number of grid columns")
    p.add_argument("--cell", type=float, default=50.0, help="cell size in pixels")
    p.add_argument("--border", type=float, default=50.0, help="offset of the grid from the top-left corner")
    p.add_argument("--horizontal", action="store_true", help="fill cells row by row instead of column by column")
    p.add_argument("--log-level", type=str, default="INFO", help="logging level (DEBUG, INFO, ...)")
    return p.parse_args()


def build_grid(rows: int, cols: int, border: float, cell: float, horizontal: bool) -> Grid:
    grid = Grid(rows, cols, border, cell)
    if horizontal:
        grid.horizontal_grid()
    else:
        grid.vertical_grid()
    return grid


def make_draw(grid: Grid):
    n = len(grid)
    center = Vector(grid.border + grid.rows * grid.cell / 2, grid.border + grid.cols * grid.cell / 2)

    def draw(r: Renderer) -> None:
        r.background("white")
        r.stroke("#202020")
        # Cells shaded in generation order
        for i, origin in enumerate(grid):
            level = int(Helper.map(i, 0, max(1, n - 1), 40, 230, True))
            r.fill((level, level, 255 - level))
            r.rect(origin, grid.cell, grid.cell)

        # Spokes: one direction vector rotated around the centre
        r.stroke("orange")
        r.stroke_weight(2)
        spoke = Vector(grid.cell * 3, 0)
        for _ in range(12):
            r.line(center, center + spoke)
            spoke.rotate(math.pi / 6)

        # Triangle whose apex follows the normal of its base
        r.stroke("black")
        r.stroke_weight(1)
        r.fill("gold")
        a = center + Vector(-grid.cell, grid.cell)
        b = center + Vector(grid.cell, grid.cell)
        normal = (b - a).cross(Vector(0, 0, 1)).set_mag(grid.cell * 1.5)
        r.triangle(a, b, a + (b - a) * 0.5 + normal)

        # Arc modes side by side
        r.fill("tomato")
        for k, mode in enumerate((OPEN, CHORD, PIE)):
            pos = Vector(grid.border + grid.cell * (k * 2 + 1), grid.border / 2)
            r.arc(pos, grid.cell, grid.cell * 0.8, 0, math.pi * 1.25, mode)

        r.no_fill()
        r.ellipse(center, grid.cell * 4, grid.cell * 2)
        r.fill("seagreen")
        r.regular_polygon(6, grid.cell)
        r.irregular_polygon([center + Vector.from_angle(t * math.tau / 5, grid.cell * (1 + t % 2)) for t in range(5)])
        r.fill("black")
        r.point(center)

    return draw


def main() -> None:
    args = parse_args()
    setup_default_logging(args.log_level)
    grid = build_grid(args.rows, args.cols, args.border, args.cell, args.horizontal)
    width = int(2 * args.border + args.rows * args.cell)
    height = int(2 * args.border + args.cols * args.cell)
    out_path = None if args.backend == "recording" else args.out
    cfg = SketchConfig(width=width, height=height, backend=args.backend, out_path=out_path)
    renderer = run_sketch(make_draw(grid), cfg)
    if out_path:
        print(f"Saved: {out_path}")
    else:
        print(f"Recorded {len(renderer.surface.calls)} drawing calls")
    close = getattr(renderer.surface, "close", None)
    if close is not None:
        close()


if __name__ == "__main__":
    main()
