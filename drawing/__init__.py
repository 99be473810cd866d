# Re-export the drawing API for convenience
from .colors import TRANSPARENT, to_rgba, to_rgba255
from .surface import (
    ARC_SEGMENTS,
    BACKENDS,
    DrawCall,
    DrawingSurface,
    RecordingSurface,
    create_surface,
    ellipse_points,
)
from .renderer import (
    ARC_MODES,
    CHORD,
    OPEN,
    PIE,
    POINT_RADIUS,
    Renderer,
)
from .sketch import SketchConfig, run_sketch
