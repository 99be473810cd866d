from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional
import logging

from .renderer import Renderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SketchConfig:
    width: int = 500
    height: int = 500
    backend: str = "pillow"
    out_path: Optional[str] = None


def run_sketch(
    draw: Callable[[Renderer], None],
    config: SketchConfig = SketchConfig(),
    setup: Optional[Callable[[Renderer], None]] = None,
) -> Renderer:
    """
    Build a renderer from `config`, run `setup` once (if given) and then the
    single frame callback `draw`. The frame is saved to `config.out_path`
    when it is set. Returns the renderer so callers can inspect the surface.
    """
    renderer = Renderer(config.width, config.height, backend=config.backend)
    if setup is not None:
        setup(renderer)
    draw(renderer)
    if config.out_path:
        save = getattr(renderer.surface, "save", None)
        if save is None:
            raise ValueError(f"backend {config.backend!r} cannot save frames")
        save(config.out_path)
        logger.info("saved frame %dx%d -> %s", renderer.width, renderer.height, config.out_path)
    return renderer
