from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple
import logging
import math
import numpy as np


logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi

# Polyline segments used to flatten a full turn of an arc or ellipse.
ARC_SEGMENTS = 64


def _sweep(start: float, end: float, anticlockwise: bool) -> float:
    """
    Signed angular sweep from start to end, following canvas rules: a span of
    a full turn or more draws the whole ellipse, otherwise the span is wrapped
    into one turn in the drawing direction.
    """
    if not anticlockwise:
        if end - start >= TWO_PI:
            return TWO_PI
        return (end - start) % TWO_PI
    if start - end >= TWO_PI:
        return -TWO_PI
    return -((start - end) % TWO_PI)


def ellipse_points(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    rotation: float,
    start: float,
    end: float,
    anticlockwise: bool = False,
    segments: int = ARC_SEGMENTS,
) -> np.ndarray:
    """
    Flatten an elliptical arc into an (N, 2) array of points.
    """
    sweep = _sweep(start, end, anticlockwise)
    n = max(2, int(math.ceil(segments * abs(sweep) / TWO_PI))) + 1
    t = np.linspace(start, start + sweep, n)
    ex = rx * np.cos(t)
    ey = ry * np.sin(t)
    c = math.cos(rotation)
    s = math.sin(rotation)
    xs = cx + ex * c - ey * s
    ys = cy + ex * s + ey * c
    return np.stack([xs, ys], axis=1)


@dataclass
class _Subpath:
    points: List[Tuple[float, float]]
    closed: bool = False


class DrawingSurface:
    """
    Minimal immediate-mode 2D drawing surface.

    Holds the style registers (fill_style, stroke_style, line_width), builds
    paths from move/line/arc/ellipse calls and flattens them to polylines.
    Backends only implement the painting hooks: fill_rect, _stroke_rect,
    _fill_polygon and _stroke_polyline.

    Coordinates are pixels with the origin at the top-left corner and y
    pointing down.
    """

    def __init__(self, width: int, height: int):
        if int(width) != width or int(height) != height or width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive integers, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        # Canvas defaults
        self.fill_style: Any = "#000000"
        self.stroke_style: Any = "#000000"
        self.line_width: float = 1.0
        self._subpaths: List[_Subpath] = []

    # ---- Painting hooks ----
    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        raise NotImplementedError

    def _stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        raise NotImplementedError

    def _fill_polygon(self, points: np.ndarray) -> None:
        raise NotImplementedError

    def _stroke_polyline(self, points: np.ndarray, closed: bool) -> None:
        raise NotImplementedError

    # ---- Rectangles ----
    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        if self.line_width <= 0:
            return
        self._stroke_rect(x, y, w, h)

    # ---- Path building ----
    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(_Subpath(points=[(float(x), float(y))]))

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].points.append((float(x), float(y)))

    def close_path(self) -> None:
        if not self._subpaths:
            return
        current = self._subpaths[-1]
        current.closed = True
        # Drawing continues from the start of the closed subpath
        self._subpaths.append(_Subpath(points=[current.points[0]]))

    def ellipse(
        self,
        x: float,
        y: float,
        rx: float,
        ry: float,
        rotation: float,
        start: float,
        end: float,
        anticlockwise: bool = False,
    ) -> None:
        if rx < 0 or ry < 0:
            raise ValueError("ellipse radii must be non-negative")
        pts = ellipse_points(x, y, rx, ry, rotation, start, end, anticlockwise)
        # Connect from the current point, if any, to the start of the arc
        if not self._subpaths:
            self.move_to(*pts[0])
        else:
            self.line_to(*pts[0])
        for px, py in pts[1:]:
            self.line_to(px, py)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start: float,
        end: float,
        anticlockwise: bool = False,
    ) -> None:
        self.ellipse(x, y, radius, radius, 0.0, start, end, anticlockwise)

    def path_polylines(self) -> List[Tuple[np.ndarray, bool]]:
        """
        Current path as a list of (points (N, 2), closed) pairs.
        """
        out: List[Tuple[np.ndarray, bool]] = []
        for sp in self._subpaths:
            if len(sp.points) < 2 and not sp.closed:
                continue
            out.append((np.array(sp.points, dtype=float), sp.closed))
        return out

    # ---- Path painting ----
    def fill(self) -> None:
        # Filling closes every subpath implicitly
        for pts, _ in self.path_polylines():
            if len(pts) >= 3:
                self._fill_polygon(pts)

    def stroke(self) -> None:
        if self.line_width <= 0:
            return
        for pts, closed in self.path_polylines():
            if len(pts) >= 2:
                self._stroke_polyline(pts, closed)


@dataclass
class DrawCall:
    op: str
    points: np.ndarray
    style: Any
    line_width: float
    closed: bool = False


class RecordingSurface(DrawingSurface):
    """
    In-memory surface that records every painting operation instead of
    rasterizing it. Rectangles are recorded as their four corners.
    """

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.calls: List[DrawCall] = []

    @staticmethod
    def _corners(x: float, y: float, w: float, h: float) -> np.ndarray:
        return np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]], dtype=float)

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(DrawCall("fill_rect", self._corners(x, y, w, h), self.fill_style, self.line_width, True))

    def _stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(DrawCall("stroke_rect", self._corners(x, y, w, h), self.stroke_style, self.line_width, True))

    def _fill_polygon(self, points: np.ndarray) -> None:
        self.calls.append(DrawCall("fill", points, self.fill_style, self.line_width, True))

    def _stroke_polyline(self, points: np.ndarray, closed: bool) -> None:
        self.calls.append(DrawCall("stroke", points, self.stroke_style, self.line_width, closed))

    def ops(self) -> List[str]:
        return [c.op for c in self.calls]

    def clear_calls(self) -> None:
        self.calls.clear()


def create_surface(backend: str, width: int, height: int, **kwargs: Any) -> DrawingSurface:
    """
    Build a surface for one of the known backends: "recording", "pillow" or
    "matplotlib". Backend modules are imported lazily.
    """
    name = backend.lower()
    if name == "recording":
        surface: DrawingSurface = RecordingSurface(width, height, **kwargs)
    elif name == "pillow":
        from .pillow_surface import PillowSurface

        surface = PillowSurface(width, height, **kwargs)
    elif name == "matplotlib":
        from .mpl_surface import MatplotlibSurface

        surface = MatplotlibSurface(width, height, **kwargs)
    else:
        raise ValueError(f"unknown drawing backend: {backend!r}")
    logger.debug("created %s surface %dx%d", name, width, height)
    return surface


BACKENDS: Tuple[str, ...] = ("recording", "pillow", "matplotlib")
