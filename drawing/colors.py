from __future__ import annotations

from typing import Any, Tuple
import matplotlib.colors as mcolors


# Fully transparent RGBA token, understood by every backend.
TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)

RGBA = Tuple[float, float, float, float]


def _clamp01(v: float) -> float:
    return 0.0 if v < 0.0 else 1.0 if v > 1.0 else float(v)


def to_rgba(color: Any) -> RGBA:
    """
    Normalize a color token to RGBA floats in [0,1].

    Accepts anything matplotlib understands as a string (named colors,
    "#rrggbb", "#rrggbbaa") and (r, g, b[, a]) sequences.

    The r, g, b channels are read as [0,1] when all three are at most 1,
    otherwise as [0,255]. Alpha is scaled on its own: a value up to 1 is
    an opacity, as in CSS rgba(255, 0, 0, 0.5); a larger one is [0,255].
    """
    if isinstance(color, str):
        try:
            return mcolors.to_rgba(color)
        except ValueError as e:
            raise ValueError(f"unsupported color string: {color!r}") from e
    if not isinstance(color, (tuple, list)):
        raise ValueError(f"unsupported color type: {type(color)!r}")
    if len(color) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    vals = [float(c) for c in color]
    rgb = vals[:3]
    if any(v > 1.0 for v in rgb):
        rgb = [v / 255.0 for v in rgb]
    a = vals[3] if len(vals) == 4 else 1.0
    if a > 1.0:
        a /= 255.0
    r, g, b = (_clamp01(v) for v in rgb)
    return (r, g, b, _clamp01(a))


def to_rgba255(color: Any) -> Tuple[int, int, int, int]:
    r, g, b, a = to_rgba(color)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))
