# pnorm_ball/scene.py
"""
Gestion de la scène visible :
- buffers GPU du maillage courant (remplacés à chaque régénération)
- rendu surface éclairée OU wireframe
- caméra orbitale + MVP
"""

import wgpu

from pnorm_ball.camera import OrbitCamera
from pnorm_ball.config import CLEAR_COLOR, SURFACE_COLOR, WIRE_COLOR, DisplayParams
from pnorm_ball.data_init import make_quad_line_indices, make_triangle_indices, to_vec4
from pnorm_ball.gpu_utils import create_index_buffer, create_vertex_buffer
from pnorm_ball.renders.surface_renderer import SurfaceRendererLit
from pnorm_ball.renders.wire_renderer import WireRenderer


class Scene:
    def __init__(self, canvas, device, aspect: float = 900 / 700):
        self.device = device
        self.canvas = canvas

        self.camera = OrbitCamera(aspect)
        self.display = DisplayParams()

        self.surface_renderer = SurfaceRendererLit(canvas, device, clear_color=CLEAR_COLOR)
        self.wire_renderer = WireRenderer(canvas, device, clear_color=CLEAR_COLOR)

        self.pos_buf = None
        self.normal_buf = None
        self.tri_idx_buf = None
        self.line_idx_buf = None
        self.tri_index_count = 0
        self.line_index_count = 0

        self.set_display(self.display)
        self.update_mvp()

    # ------------------------------------------------------------
    # CAMERA
    # ------------------------------------------------------------
    def set_aspect(self, aspect: float):
        self.camera.aspect = aspect
        self.update_mvp()

    def update_mvp(self):
        mvp_bytes = self.camera.mvp_bytes()
        self.surface_renderer.set_mvp(mvp_bytes)
        self.wire_renderer.set_mvp(mvp_bytes)

    # ------------------------------------------------------------
    # GEOMETRIE
    # ------------------------------------------------------------
    def set_mesh(self, mesh):
        """Envoie un nouveau maillage au GPU puis libère les anciens buffers."""
        old = (self.pos_buf, self.normal_buf, self.tri_idx_buf, self.line_idx_buf)

        tri_idx = make_triangle_indices(mesh.faces)
        line_idx = make_quad_line_indices(mesh.faces)

        self.pos_buf = create_vertex_buffer(self.device, to_vec4(mesh.positions, 1.0))
        self.normal_buf = create_vertex_buffer(self.device, to_vec4(mesh.normals, 0.0))
        self.tri_idx_buf = create_index_buffer(self.device, tri_idx)
        self.line_idx_buf = create_index_buffer(self.device, line_idx)
        self.tri_index_count = int(tri_idx.size)
        self.line_index_count = int(line_idx.size)

        for buf in old:
            if buf is not None:
                buf.destroy()

    # ------------------------------------------------------------
    # MATERIAU
    # ------------------------------------------------------------
    def set_display(self, display: DisplayParams):
        """Mise à jour matériau seule (wireframe / opacité), pas de régénération."""
        self.display = display
        self.surface_renderer.set_material(SURFACE_COLOR, display.opacity)
        self.wire_renderer.set_material(WIRE_COLOR, display.opacity)

    # ------------------------------------------------------------
    # DRAW
    # ------------------------------------------------------------
    def draw(self, view_tex, depth_view):
        enc = self.device.create_command_encoder()

        if self.pos_buf is None:
            # rien à dessiner : on efface juste l'écran
            rp = enc.begin_render_pass(color_attachments=[{
                "view": view_tex,
                "load_op": wgpu.LoadOp.clear,
                "store_op": wgpu.StoreOp.store,
                "clear_value": CLEAR_COLOR,
            }])
            rp.end()
        elif self.display.wireframe:
            self.wire_renderer.encode(
                enc, view_tex, self.pos_buf, self.line_idx_buf, self.line_index_count,
                depth_view, clear=True,
            )
        else:
            self.surface_renderer.encode(
                enc, view_tex, self.pos_buf, self.normal_buf, self.tri_idx_buf, self.tri_index_count,
                depth_view, clear=True,
            )

        self.device.queue.submit([enc.finish()])
