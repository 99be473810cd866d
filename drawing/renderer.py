from __future__ import annotations

from typing import Any, Optional, Sequence
import logging
import math

from vectors import Vector

from .colors import TRANSPARENT
from .surface import DrawingSurface, create_surface

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi

# Radius of the dot drawn by Renderer.point
POINT_RADIUS = 1.0

# Arc modes
OPEN = "OPEN"
CHORD = "CHORD"
PIE = "PIE"
ARC_MODES = (OPEN, CHORD, PIE)


class Renderer:
    """
    Draws shapes on a drawing surface.

    The renderer owns exactly one surface, created at construction (or
    injected) and never replaced. Style calls (fill, no_fill, stroke,
    no_stroke, stroke_weight) set registers on the surface that every later
    shape reads until they are changed again.
    """

    def __init__(
        self,
        width: int,
        height: int,
        surface: Optional[DrawingSurface] = None,
        backend: str = "pillow",
        **surface_kwargs: Any,
    ):
        if surface is None:
            surface = create_surface(backend, width, height, **surface_kwargs)
        elif (surface.width, surface.height) != (width, height):
            raise ValueError(
                f"surface is {surface.width}x{surface.height}, renderer asked for {width}x{height}"
            )
        self._surface = surface

    @property
    def surface(self) -> DrawingSurface:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.width

    @property
    def height(self) -> int:
        return self._surface.height

    # ---- Style ----
    def background(self, color: Any) -> None:
        """
        Paint the whole surface with `color`. This is an opaque full-surface
        fill, not a buffer clear, and it leaves the fill register at `color`.
        """
        self._surface.fill_style = color
        self._surface.fill_rect(0, 0, self.width, self.height)

    def fill(self, color: Any) -> None:
        self._surface.fill_style = color

    def no_fill(self) -> None:
        # Shapes are still filled, just with a fully transparent color.
        self._surface.fill_style = TRANSPARENT

    def stroke(self, color: Any) -> None:
        self._surface.stroke_style = color

    def no_stroke(self) -> None:
        self._surface.line_width = 0

    def stroke_weight(self, weight: float) -> None:
        self._surface.line_width = float(weight)

    # ---- Shapes ----
    def point(self, vector: Vector) -> None:
        s = self._surface
        s.begin_path()
        s.arc(vector.x, vector.y, POINT_RADIUS, 0, TWO_PI)
        s.fill()
        s.close_path()

    def line(self, start: Vector, end: Vector) -> None:
        s = self._surface
        s.begin_path()
        s.move_to(start.x, start.y)
        s.line_to(end.x, end.y)
        s.stroke()

    def triangle(self, v1: Vector, v2: Vector, v3: Vector) -> None:
        s = self._surface
        s.begin_path()
        s.move_to(v1.x, v1.y)
        s.line_to(v2.x, v2.y)
        s.line_to(v3.x, v3.y)
        s.close_path()
        s.fill()
        s.stroke()

    def rect(self, vector: Vector, width: float, height: float) -> None:
        """
        Rectangle with its top-left corner at `vector`.
        """
        if width <= 0 or height <= 0:
            logger.debug("rect skipped: non-positive size %sx%s", width, height)
            return
        self._surface.fill_rect(vector.x, vector.y, width, height)
        self._surface.stroke_rect(vector.x, vector.y, width, height)

    def ellipse(self, vector: Vector, width: float, height: float) -> None:
        """
        Ellipse centred at `vector`; width and height are the bounding box.
        """
        if width <= 0 or height <= 0:
            logger.debug("ellipse skipped: non-positive size %sx%s", width, height)
            return
        s = self._surface
        s.begin_path()
        s.ellipse(vector.x, vector.y, width / 2, height / 2, 0, 0, TWO_PI)
        s.fill()
        s.stroke()

    def arc(
        self,
        vector: Vector,
        width: float,
        height: float,
        start: float,
        stop: float,
        mode: str = OPEN,
    ) -> None:
        """
        Elliptical arc centred at `vector`, from `start` to `stop` radians
        (clockwise on screen).

        mode:
          - OPEN: the outline is not closed; the fill still spans the chord.
          - CHORD: the outline is closed by a straight chord.
          - PIE: the outline runs through the centre, like a pie slice.
        """
        mode = mode.upper()
        if mode not in ARC_MODES:
            raise ValueError(f"unknown arc mode {mode!r}, expected one of {ARC_MODES}")
        if width <= 0 or height <= 0:
            logger.debug("arc skipped: non-positive size %sx%s", width, height)
            return
        s = self._surface
        s.begin_path()
        if mode == PIE:
            s.move_to(vector.x, vector.y)
        s.ellipse(vector.x, vector.y, width / 2, height / 2, 0, start, stop)
        if mode != OPEN:
            s.close_path()
        s.fill()
        s.stroke()

    def regular_polygon(self, edges: int, scalar: float) -> None:
        """
        Regular polygon of `edges` sides on a circle of radius `scalar` around
        the surface origin.

        Note: the first vertex sits at the origin (0, 0) rather than on the
        circle at angle 0, so the shape is the circle's vertices 1..edges-1
        plus the centre.
        """
        if edges < 3:
            logger.debug("regular_polygon skipped: %s edges", edges)
            return
        s = self._surface
        s.begin_path()
        p = Vector(0, 0)
        s.move_to(p.x, p.y)
        step = TWO_PI / edges
        for i in range(1, edges):
            p = Vector(math.cos(step * i) * scalar, math.sin(step * i) * scalar)
            s.line_to(p.x, p.y)
        s.close_path()
        s.fill()
        s.stroke()

    def irregular_polygon(self, vertices: Sequence[Vector]) -> None:
        """
        Closed polygon through `vertices`, in order. An empty sequence draws
        nothing.
        """
        if not vertices:
            logger.debug("irregular_polygon skipped: no vertices")
            return
        s = self._surface
        s.begin_path()
        s.move_to(vertices[0].x, vertices[0].y)
        for v in vertices[1:]:
            s.line_to(v.x, v.y)
        s.close_path()
        s.fill()
        s.stroke()
