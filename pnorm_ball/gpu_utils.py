from pathlib import Path

import numpy as np
import wgpu

SHADER_DIR = Path(__file__).parent / "shaders"


def read_text(path: str) -> str:
    """Lit un fichier texte (shader WGSL), relatif au dossier shaders/ du paquet."""
    with open(SHADER_DIR / path, "r", encoding="utf-8") as f:
        return f.read()


def create_vertex_buffer(device: wgpu.GPUDevice, data: np.ndarray):
    """Buffer VERTEX (vec4<f32> par sommet)."""
    usage = wgpu.BufferUsage.VERTEX | wgpu.BufferUsage.COPY_DST
    return device.create_buffer_with_data(data=np.ascontiguousarray(data, np.float32).tobytes(), usage=usage)


def create_index_buffer(device: wgpu.GPUDevice, indices: np.ndarray):
    """
    Buffer INDEX (uint32).
    Un buffer de taille 0 est refusé par wgpu => au moins 4 bytes.
    """
    data = np.ascontiguousarray(indices, np.uint32)
    if data.size == 0:
        data = np.zeros(1, dtype=np.uint32)
    usage = wgpu.BufferUsage.INDEX | wgpu.BufferUsage.COPY_DST
    return device.create_buffer_with_data(data=data.tobytes(), usage=usage)


def create_uniform_buffer(device: wgpu.GPUDevice, size: int):
    """Buffer UNIFORM pour paramètres (écrit ensuite avec queue.write_buffer)."""
    usage = wgpu.BufferUsage.UNIFORM | wgpu.BufferUsage.COPY_DST
    return device.create_buffer(size=size, usage=usage)


def alpha_blend():
    """État de blend classique (src_alpha, 1 - src_alpha) pour l'opacité."""
    component = {
        "src_factor": wgpu.BlendFactor.src_alpha,
        "dst_factor": wgpu.BlendFactor.one_minus_src_alpha,
        "operation": wgpu.BlendOperation.add,
    }
    return {"color": component, "alpha": component}
