import numpy as np
import wgpu

from ..gpu_utils import alpha_blend, create_uniform_buffer, read_text


def surface_passes(opacity: float):
    """
    Passes de rendu (cull_mode, depth_write) pour une opacité donnée.

    - opaque : une passe, sans culling, depth écrit
    - transparent : faces arrière d'abord puis faces avant, depth lu mais
      pas écrit, sinon l'ordre des triangles masque le côté opposé
    """
    if opacity >= 1.0:
        return [(wgpu.CullMode.none, True)]
    return [(wgpu.CullMode.front, False), (wgpu.CullMode.back, False)]


class SurfaceRendererLit:
    """
    Surface de la boule (triangles, éclairée).
    - set_mvp(mvp_bytes)
    - set_material(color_rgb, opacity)
    - encode(enc, color_view, position_buffer, normal_buffer, tri_index_buffer, index_count, depth_view, clear=True)
    """

    # mat4 mvp (64) + vec4 light_dir (16) + vec4 color (16)
    UNIFORM_SIZE = 96

    def __init__(self, canvas, device, clear_color=(0.1, 0.1, 0.1, 1.0)):
        self.canvas = canvas
        self.device = device
        self.queue = device.queue
        self.clear_color = clear_color

        self.context = canvas.get_context("wgpu")
        self.texture_format = self.context.get_preferred_format(device.adapter)

        self.shader = device.create_shader_module(code=read_text("surface_lit.wgsl"))

        self.uniform_buf = create_uniform_buffer(device, self.UNIFORM_SIZE)

        self.bgl = device.create_bind_group_layout(entries=[
            {
                "binding": 0,
                "visibility": wgpu.ShaderStage.VERTEX | wgpu.ShaderStage.FRAGMENT,
                "buffer": {"type": wgpu.BufferBindingType.uniform},
            }
        ])

        self.bg = device.create_bind_group(
            layout=self.bgl,
            entries=[{
                "binding": 0,
                "resource": {"buffer": self.uniform_buf, "offset": 0, "size": self.UNIFORM_SIZE},
            }],
        )

        self.pipeline_layout = device.create_pipeline_layout(bind_group_layouts=[self.bgl])

        # un pipeline par (cull_mode, depth_write) : opaque + 2 passes transparentes
        self.pipelines = {
            key: self._create_pipeline(*key)
            for key in surface_passes(1.0) + surface_passes(0.0)
        }

        self.mvp_bytes = np.eye(4, dtype=np.float32).tobytes()
        self.light_dir = np.array([-0.4, 0.8, 0.6, 0.0], dtype=np.float32)
        self.color = np.array([1.0, 1.0, 1.0, 1.0], dtype=np.float32)
        self._write()

    def _create_pipeline(self, cull_mode, depth_write: bool):
        return self.device.create_render_pipeline(
            layout=self.pipeline_layout,
            vertex={
                "module": self.shader,
                "entry_point": "vs_main",
                "buffers": [
                    # positions (location 0)
                    {
                        "array_stride": 16,
                        "step_mode": wgpu.VertexStepMode.vertex,
                        "attributes": [{
                            "shader_location": 0,
                            "offset": 0,
                            "format": wgpu.VertexFormat.float32x4,
                        }],
                    },
                    # normales (location 1)
                    {
                        "array_stride": 16,
                        "step_mode": wgpu.VertexStepMode.vertex,
                        "attributes": [{
                            "shader_location": 1,
                            "offset": 0,
                            "format": wgpu.VertexFormat.float32x4,
                        }],
                    },
                ],
            },
            fragment={
                "module": self.shader,
                "entry_point": "fs_main",
                "targets": [{"format": self.texture_format, "blend": alpha_blend()}],
            },
            primitive={
                "topology": wgpu.PrimitiveTopology.triangle_list,
                "front_face": wgpu.FrontFace.ccw,
                "cull_mode": cull_mode,
            },
            depth_stencil={
                "format": wgpu.TextureFormat.depth24plus,
                "depth_write_enabled": depth_write,
                "depth_compare": wgpu.CompareFunction.less,
            },
        )

    def _write(self):
        data = self.mvp_bytes + self.light_dir.tobytes() + self.color.tobytes()
        self.queue.write_buffer(self.uniform_buf, 0, data)

    def set_mvp(self, mvp_bytes: bytes):
        self.mvp_bytes = mvp_bytes
        self._write()

    def set_material(self, color_rgb, opacity: float):
        self.color = np.array([*color_rgb, opacity], dtype=np.float32)
        self._write()

    def encode(self, enc, color_view, position_buffer, normal_buffer, tri_index_buffer, index_count: int,
               depth_view, clear: bool = True):
        rp = enc.begin_render_pass(
            color_attachments=[{
                "view": color_view,
                "load_op": wgpu.LoadOp.clear if clear else wgpu.LoadOp.load,
                "store_op": wgpu.StoreOp.store,
                "clear_value": self.clear_color,
            }],
            depth_stencil_attachment={
                "view": depth_view,
                "depth_load_op": wgpu.LoadOp.clear if clear else wgpu.LoadOp.load,
                "depth_store_op": wgpu.StoreOp.store,
                "depth_clear_value": 1.0,
            },
        )

        rp.set_bind_group(0, self.bg, [], 0, 999999)
        rp.set_vertex_buffer(0, position_buffer, 0)
        rp.set_vertex_buffer(1, normal_buffer, 0)
        rp.set_index_buffer(tri_index_buffer, wgpu.IndexFormat.uint32, 0)
        for key in surface_passes(float(self.color[3])):
            rp.set_pipeline(self.pipelines[key])
            rp.draw_indexed(int(index_count), 1, 0, 0, 0)
        rp.end()
