from __future__ import annotations

import sys

import pytest

import grid_demo
import sketch_demo
from drawing import RecordingSurface, SketchConfig, run_sketch
from vectors import Vector


def test_run_sketch_calls_setup_then_draw_once():
    order = []

    def setup(r):
        order.append("setup")

    def draw(r):
        order.append("draw")
        r.rect(Vector(0, 0), 5, 5)

    r = run_sketch(draw, SketchConfig(width=20, height=10, backend="recording"), setup=setup)
    assert order == ["setup", "draw"]
    assert isinstance(r.surface, RecordingSurface)
    assert r.surface.ops() == ["fill_rect", "stroke_rect"]


def test_run_sketch_saves_frame(tmp_path):
    out = tmp_path / "frames" / "one.png"
    run_sketch(sketch_demo.draw, SketchConfig(width=50, height=50, out_path=str(out)))
    assert out.exists()


def test_run_sketch_recording_backend_cannot_save(tmp_path):
    cfg = SketchConfig(width=10, height=10, backend="recording", out_path=str(tmp_path / "x.png"))
    with pytest.raises(ValueError):
        run_sketch(lambda r: None, cfg)


def test_sketch_demo_frame():
    r = run_sketch(sketch_demo.draw, SketchConfig(backend="pillow"))
    img = r.surface.to_image()
    assert img.getpixel((10, 10)) == (0, 0, 255)
    assert img.getpixel((250, 250)) == (255, 0, 0)


def test_sketch_demo_main(tmp_path, monkeypatch, capsys):
    out = tmp_path / "sketch.png"
    monkeypatch.setattr(sys, "argv", ["sketch_demo.py", "--out", str(out), "--width", "120", "--height", "120"])
    sketch_demo.main()
    assert out.exists()
    assert "Saved" in capsys.readouterr().out


@pytest.mark.parametrize("demo", [sketch_demo, grid_demo])
def test_demo_main_closes_matplotlib_figure(demo, tmp_path, monkeypatch):
    import matplotlib.pyplot as plt

    out = tmp_path / "frame.png"
    monkeypatch.setattr(sys, "argv", ["demo", "--backend", "matplotlib", "--out", str(out)])
    open_before = len(plt.get_fignums())
    demo.main()
    assert out.exists()
    assert len(plt.get_fignums()) == open_before


def test_grid_demo_main_recording(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["grid_demo.py", "--backend", "recording", "--rows", "3", "--cols", "4"])
    grid_demo.main()
    assert "Recorded" in capsys.readouterr().out


@pytest.mark.parametrize("horizontal", [False, True])
def test_grid_demo_draws_every_cell(horizontal):
    grid = grid_demo.build_grid(3, 2, 10, 20, horizontal)
    r = run_sketch(grid_demo.make_draw(grid), SketchConfig(width=100, height=100, backend="recording"))
    fill_rects = [c for c in r.surface.calls if c.op == "fill_rect"]
    # background + one per cell
    assert len(fill_rects) == 1 + 6
