"""Tests for the link between parameter changes and the scene."""

import pytest

from pnorm_ball.config import DisplayParams, SurfaceParams
from pnorm_ball.controller import SceneController
from pnorm_ball.state import ViewerState
from pnorm_ball.surface import generate


class FakeScene:
    def __init__(self):
        self.meshes = []
        self.displays = []

    def set_mesh(self, mesh):
        self.meshes.append(mesh)

    def set_display(self, display):
        self.displays.append(display)


class CountingGenerator:
    def __init__(self):
        self.calls = []

    def __call__(self, radius, p, segments):
        self.calls.append((radius, p, segments))
        return generate(radius, p, segments)


@pytest.fixture
def setup():
    state = ViewerState(SurfaceParams(p=2.0, radius=1.0, segments=8), DisplayParams(False, 1.0))
    scene = FakeScene()
    gen = CountingGenerator()
    controller = SceneController(state, scene, generator=gen)
    return controller, scene, gen


class TestSceneController:
    def test_initial_mesh_and_material(self, setup):
        controller, scene, gen = setup
        assert gen.calls == [(1.0, 2.0, 8)]
        assert len(scene.meshes) == 1
        assert scene.displays == [DisplayParams(False, 1.0)]
        assert controller.stats() == (45, 64)

    def test_opacity_change_does_not_regenerate(self, setup):
        controller, scene, gen = setup
        controller.apply(opacity=0.4)
        assert len(gen.calls) == 1
        assert len(scene.meshes) == 1
        assert scene.displays[-1].opacity == pytest.approx(0.4)

    def test_wireframe_change_does_not_regenerate(self, setup):
        controller, scene, gen = setup
        controller.apply(wireframe=True)
        assert len(gen.calls) == 1
        assert scene.displays[-1].wireframe is True

    def test_geometry_change_regenerates_without_restyle(self, setup):
        controller, scene, gen = setup
        controller.apply(segments=16)
        assert gen.calls[-1] == (1.0, 2.0, 16)
        assert len(scene.meshes) == 2
        assert scene.meshes[-1] is controller.mesh
        assert len(scene.displays) == 1
        assert controller.stats() == (9 * 17, 2 * 8 * 16)

    def test_unchanged_value_does_nothing(self, setup):
        controller, scene, gen = setup
        controller.apply(p=2.0, opacity=1.0)
        assert len(gen.calls) == 1
        assert len(scene.displays) == 1
