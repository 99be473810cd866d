from __future__ import annotations

from typing import Any, Optional
import io
import os
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon, Rectangle
from PIL import Image

from .colors import to_rgba
from .surface import DrawingSurface


class MatplotlibSurface(DrawingSurface):
    """
    Surface backed by a Matplotlib figure whose single axes spans the whole
    figure in pixel coordinates (origin top-left, y down). One surface pixel
    maps to one output pixel at the figure's dpi.
    """

    def __init__(self, width: int, height: int, dpi: int = 100, base_color: Any = "white"):
        super().__init__(width, height)
        self.dpi = int(dpi)
        self.fig = plt.figure(figsize=(self.width / self.dpi, self.height / self.dpi), dpi=self.dpi)
        self.fig.patch.set_facecolor(to_rgba(base_color))
        self.ax = self.fig.add_axes((0.0, 0.0, 1.0, 1.0))
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_aspect("equal", adjustable="box")
        self.ax.axis("off")
        self._zorder = 0

    def _next_z(self) -> int:
        # Later calls paint over earlier ones
        self._zorder += 1
        return self._zorder

    def _linewidth_points(self) -> float:
        return self.line_width * 72.0 / self.dpi

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.ax.add_patch(
            Rectangle((x, y), w, h, facecolor=to_rgba(self.fill_style), edgecolor="none", linewidth=0, zorder=self._next_z())
        )

    def _stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.ax.add_patch(
            Rectangle(
                (x, y), w, h,
                fill=False,
                edgecolor=to_rgba(self.stroke_style),
                linewidth=self._linewidth_points(),
                zorder=self._next_z(),
            )
        )

    def _fill_polygon(self, points: np.ndarray) -> None:
        self.ax.add_patch(
            Polygon(points, closed=True, facecolor=to_rgba(self.fill_style), edgecolor="none", linewidth=0, zorder=self._next_z())
        )

    def _stroke_polyline(self, points: np.ndarray, closed: bool) -> None:
        self.ax.add_patch(
            Polygon(
                points,
                closed=closed,
                fill=False,
                edgecolor=to_rgba(self.stroke_style),
                linewidth=self._linewidth_points(),
                joinstyle="round",
                zorder=self._next_z(),
            )
        )

    # ---- Output ----
    def to_image(self) -> Image.Image:
        buffer = io.BytesIO()
        self.fig.savefig(buffer, format="png", dpi=self.dpi, facecolor=self.fig.get_facecolor())
        buffer.seek(0)
        image = Image.open(buffer)
        image.load()
        return image

    def save(self, path: str, format: Optional[str] = None) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.fig.savefig(path, dpi=self.dpi, format=format, facecolor=self.fig.get_facecolor())

    def show(self) -> None:
        plt.show()

    def close(self) -> None:
        plt.close(self.fig)
