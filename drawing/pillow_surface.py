from __future__ import annotations

from typing import Any, Optional
import os
import numpy as np
from PIL import Image, ImageDraw

from .colors import to_rgba255
from .surface import DrawingSurface


class PillowSurface(DrawingSurface):
    """
    Raster surface backed by a Pillow RGB image.

    Drawing goes through an RGBA ImageDraw so translucent colors blend into
    the image; a fully transparent fill leaves pixels untouched.
    """

    def __init__(self, width: int, height: int, base_color: Any = "white"):
        super().__init__(width, height)
        self.image = Image.new("RGB", (self.width, self.height), to_rgba255(base_color)[:3])
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def _stroke_width(self) -> int:
        return max(1, int(round(self.line_width)))

    @staticmethod
    def _box(x: float, y: float, w: float, h: float) -> list[float]:
        # Pillow boxes are inclusive of both corners; canvas rects are half-open.
        x0, x1 = sorted((x, x + w))
        y0, y1 = sorted((y, y + h))
        return [x0, y0, max(x0, x1 - 1), max(y0, y1 - 1)]

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        if w == 0 or h == 0:
            return
        self._draw.rectangle(self._box(x, y, w, h), fill=to_rgba255(self.fill_style))

    def _stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        # ImageDraw.rectangle grows its outline inward; stroke the corners so
        # the line is centred on the edge like every other outline.
        corners = np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]], dtype=float)
        self._stroke_polyline(corners, closed=True)

    def _fill_polygon(self, points: np.ndarray) -> None:
        xy = [(float(px), float(py)) for px, py in points]
        self._draw.polygon(xy, fill=to_rgba255(self.fill_style))

    def _stroke_polyline(self, points: np.ndarray, closed: bool) -> None:
        xy = [(float(px), float(py)) for px, py in points]
        if closed and xy[0] != xy[-1]:
            xy.append(xy[0])
        self._draw.line(xy, fill=to_rgba255(self.stroke_style), width=self._stroke_width(), joint="curve")

    # ---- Output ----
    def to_image(self) -> Image.Image:
        return self.image.copy()

    def save(self, path: str, format: Optional[str] = None) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.image.save(path, format=format)
