"""Shared fixtures: headless matplotlib, recording and Pillow renderers."""

from __future__ import annotations

from typing import Iterator

import matplotlib

matplotlib.use("Agg")

import pytest

from drawing import RecordingSurface, Renderer
from drawing.pillow_surface import PillowSurface


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface(200, 100)


@pytest.fixture()
def renderer(surface: RecordingSurface) -> Renderer:
    return Renderer(200, 100, surface=surface)


@pytest.fixture()
def pillow_renderer() -> Renderer:
    return Renderer(64, 64, surface=PillowSurface(64, 64))


@pytest.fixture()
def mpl_surface() -> Iterator["object"]:
    from drawing.mpl_surface import MatplotlibSurface

    s = MatplotlibSurface(80, 60)
    yield s
    s.close()
