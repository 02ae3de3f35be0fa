import numpy as np
import wgpu

from ..gpu_utils import alpha_blend, create_uniform_buffer, read_text


class WireRenderer:
    """
    Wireframe de la boule (lignes).
    - set_mvp(mvp_bytes)
    - set_material(color_rgb, opacity)
    - encode(enc, color_view, position_buffer, line_index_buffer, index_count, depth_view, clear=False)
    """

    # mat4 mvp (64) + vec4 color (16)
    UNIFORM_SIZE = 80

    # lignes translucides : pas d'écriture depth (comme le wireframe de la sphère)
    DEPTH_WRITE = False

    def __init__(self, canvas, device, clear_color=(0.1, 0.1, 0.1, 1.0)):
        self.canvas = canvas
        self.device = device
        self.queue = device.queue
        self.clear_color = clear_color

        self.context = canvas.get_context("wgpu")
        self.texture_format = self.context.get_preferred_format(device.adapter)

        shader = device.create_shader_module(code=read_text("wire.wgsl"))

        self.uniform_buf = create_uniform_buffer(device, self.UNIFORM_SIZE)
        self.bgl = device.create_bind_group_layout(entries=[{
            "binding": 0,
            "visibility": wgpu.ShaderStage.VERTEX | wgpu.ShaderStage.FRAGMENT,
            "buffer": {"type": wgpu.BufferBindingType.uniform},
        }])
        self.bg = device.create_bind_group(layout=self.bgl, entries=[{
            "binding": 0,
            "resource": {"buffer": self.uniform_buf, "offset": 0, "size": self.UNIFORM_SIZE}
        }])

        pl = device.create_pipeline_layout(bind_group_layouts=[self.bgl])

        self.pipeline = device.create_render_pipeline(
            layout=pl,
            vertex={
                "module": shader,
                "entry_point": "vs_main",
                "buffers": [{
                    "array_stride": 16,  # vec4<f32>
                    "step_mode": wgpu.VertexStepMode.vertex,
                    "attributes": [{
                        "shader_location": 0,
                        "offset": 0,
                        "format": wgpu.VertexFormat.float32x4
                    }],
                }],
            },
            fragment={
                "module": shader,
                "entry_point": "fs_main",
                "targets": [{"format": self.texture_format, "blend": alpha_blend()}],
            },
            primitive={
                "topology": wgpu.PrimitiveTopology.line_list,
                "cull_mode": wgpu.CullMode.none
            },
            depth_stencil={
                "format": wgpu.TextureFormat.depth24plus,
                "depth_write_enabled": self.DEPTH_WRITE,
                "depth_compare": wgpu.CompareFunction.less,
            },
        )

        self.mvp_bytes = np.eye(4, dtype=np.float32).tobytes()
        self.color = np.array([1.0, 1.0, 1.0, 1.0], dtype=np.float32)
        self._write()

    def _write(self):
        self.queue.write_buffer(self.uniform_buf, 0, self.mvp_bytes + self.color.tobytes())

    def set_mvp(self, mvp_bytes: bytes):
        self.mvp_bytes = mvp_bytes
        self._write()

    def set_material(self, color_rgb, opacity: float):
        self.color = np.array([*color_rgb, opacity], dtype=np.float32)
        self._write()

    def encode(self, enc, color_view, position_buffer, line_index_buffer, index_count: int,
               depth_view, clear: bool = False):
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
        rp.set_pipeline(self.pipeline)
        rp.set_bind_group(0, self.bg, [], 0, 999999)
        rp.set_vertex_buffer(0, position_buffer, 0)
        rp.set_index_buffer(line_index_buffer, wgpu.IndexFormat.uint32, 0)
        rp.draw_indexed(int(index_count), 1, 0, 0, 0)
        rp.end()
