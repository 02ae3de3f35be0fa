"""Tests for parameter structs, validation and the command-line parser."""

import pytest

from pnorm_ball.config import (
    DEFAULT_P,
    DEFAULT_SEGMENTS,
    DisplayParams,
    SurfaceParams,
    clamp,
    config_parser,
)


class TestClamp:
    def test_inside(self):
        assert clamp(0.5, 0.0, 1.0) == 0.5

    def test_below_and_above(self):
        assert clamp(-3, 0, 10) == 0
        assert clamp(42, 0, 10) == 10


class TestSurfaceParams:
    def test_defaults_are_valid(self):
        params = SurfaceParams()
        assert params.validate() is params

    @pytest.mark.parametrize("kwargs, field", [
        ({"p": 0.0}, "p"),
        ({"p": -1.0}, "p"),
        ({"radius": 0.0}, "radius"),
        ({"segments": 1}, "segments"),
        ({"segments": 8.5}, "segments"),
        ({"segments": True}, "segments"),
    ])
    def test_precondition_violations(self, kwargs, field):
        with pytest.raises(ValueError, match=field):
            SurfaceParams(**kwargs).validate()

    def test_generator_domain_is_wider_than_sliders(self):
        # segments = 2 is valid for the generator even if the slider starts at 8
        SurfaceParams(p=50.0, radius=10.0, segments=2).validate()

    def test_clamped_to_slider_ranges(self):
        params = SurfaceParams(p=50.0, radius=0.01, segments=500).clamped()
        assert params == SurfaceParams(p=10.0, radius=0.5, segments=128)
        assert isinstance(params.segments, int)


class TestDisplayParams:
    def test_opacity_out_of_range(self):
        with pytest.raises(ValueError, match="opacity"):
            DisplayParams(opacity=1.5).validate()

    def test_clamped(self):
        assert DisplayParams(wireframe=1, opacity=-0.2).clamped() == DisplayParams(True, 0.0)


class TestConfigParser:
    def test_defaults(self):
        args = config_parser().parse_args([])
        assert args.p == DEFAULT_P
        assert args.segments == DEFAULT_SEGMENTS
        assert args.wireframe is False

    def test_overrides(self):
        args = config_parser().parse_args(
            ["--p", "0.5", "--radius", "2", "--segments", "32", "--wireframe", "--opacity", "0.4"]
        )
        assert (args.p, args.radius, args.segments) == (0.5, 2.0, 32)
        assert args.wireframe is True
        assert args.opacity == pytest.approx(0.4)

    def test_config_file(self, tmp_path):
        cfg = tmp_path / "ball.conf"
        cfg.write_text("p = 4\nsegments = 16\n", encoding="utf-8")
        args = config_parser().parse_args(["--config", str(cfg)])
        assert args.p == 4.0
        assert args.segments == 16
