from __future__ import annotations

import argparse

from drawing import BACKENDS, Renderer, SketchConfig, run_sketch
from utilities import setup_default_logging
from vectors import Vector


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render the basic sketch: a red square on a blue background.")
    p.add_argument("--backend", type=str, default="pillow", choices=list(BACKENDS), help="drawing backend")
    p.add_argument("--out", type=str, default="plots/sketch.png", help="output image path")
    p.add_argument("--width", type=int, default=500, help="canvas width in pixels")
    p.add_argument("--height", type=int, default=500, help="canvas height in pixels")
    p.add_argument("--log-level", type=str, default="INFO", help="logging level (DEBUG, INFO, ...)")
    return p.parse_args()


def draw(r: Renderer) -> None:
    r.background("blue")
    r.fill("red")
    r.rect(Vector(100, 100), 300, 300)


def main() -> None:
    args = parse_args()
    setup_default_logging(args.log_level)
    out_path = None if args.backend == "recording" else args.out
    cfg = SketchConfig(width=args.width, height=args.height, backend=args.backend, out_path=out_path)
    renderer = run_sketch(draw, cfg)
    if out_path:
        print(f"Saved: {out_path}")
    else:
        print(f"Recorded {len(renderer.surface.calls)} drawing calls")
    close = getattr(renderer.surface, "close", None)
    if close is not None:
        close()


if __name__ == "__main__":
    main()
