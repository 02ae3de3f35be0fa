"""Tests for the UI-side state: regeneration versus material-only updates."""

import pytest

from pnorm_ball.config import DisplayParams, SurfaceParams, config_parser
from pnorm_ball.state import ViewerState


@pytest.fixture
def state():
    return ViewerState(SurfaceParams(p=2.0, radius=1.0, segments=64), DisplayParams(False, 1.0))


class TestUpdate:
    @pytest.mark.parametrize("changes", [{"p": 3.0}, {"radius": 2.0}, {"segments": 32}])
    def test_geometry_change_regenerates(self, state, changes):
        assert state.update(**changes) == (True, False)

    @pytest.mark.parametrize("changes", [{"wireframe": True}, {"opacity": 0.5}])
    def test_display_change_only_restyles(self, state, changes):
        assert state.update(**changes) == (False, True)

    def test_both(self, state):
        assert state.update(segments=16, opacity=0.3) == (True, True)
        assert state.surface.segments == 16
        assert state.display.opacity == pytest.approx(0.3)

    def test_same_value_is_a_no_op(self, state):
        assert state.update(p=2.0, wireframe=False) == (False, False)

    def test_values_are_clamped(self, state):
        state.update(p=42.0, opacity=3.0)
        assert state.surface.p == 10.0
        assert state.display.opacity == 1.0

    def test_clamped_value_equal_to_current_is_a_no_op(self, state):
        state.update(p=10.0)
        assert state.update(p=11.0) == (False, False)

    def test_unknown_parameter(self, state):
        with pytest.raises(TypeError, match="colour"):
            state.update(colour="red")
        assert state.surface == SurfaceParams(p=2.0, radius=1.0, segments=64)


class TestFromArgs:
    def test_from_args(self):
        args = config_parser().parse_args(["--p", "20", "--segments", "4", "--opacity", "0.5"])
        state = ViewerState.from_args(args)
        assert state.surface.p == 10.0
        assert state.surface.segments == 8
        assert state.display == DisplayParams(False, 0.5)

    def test_invalid_args(self):
        args = config_parser().parse_args(["--radius", "-1"])
        with pytest.raises(ValueError, match="radius"):
            ViewerState.from_args(args)
