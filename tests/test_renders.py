"""Tests for the render pass configuration of the surface and wireframe pipelines."""

import wgpu

from pnorm_ball.renders.surface_renderer import surface_passes
from pnorm_ball.renders.wire_renderer import WireRenderer


class TestSurfacePasses:
    def test_opaque_single_pass_writes_depth(self):
        assert surface_passes(1.0) == [(wgpu.CullMode.none, True)]

    def test_translucent_draws_back_then_front_without_depth_writes(self):
        passes = surface_passes(0.5)
        assert [cull for cull, _ in passes] == [wgpu.CullMode.front, wgpu.CullMode.back]
        assert not any(depth_write for _, depth_write in passes)

    def test_fully_transparent_is_translucent(self):
        assert surface_passes(0.0) == surface_passes(0.99)


def test_wireframe_does_not_write_depth():
    assert WireRenderer.DEPTH_WRITE is False
