import numpy as np


# ============================================================
# Mesh -> formats GPU
# ============================================================

def to_vec4(points: np.ndarray, w: float = 1.0) -> np.ndarray:
    """
    (N,3) -> (N,4) float32, aligné GPU (vec4<f32> en WGSL).
    w = 1 pour des positions, 0 pour des normales.
    """
    points = np.asarray(points, dtype=np.float32).reshape(-1, 3)
    out = np.empty((points.shape[0], 4), dtype=np.float32)
    out[:, :3] = points
    out[:, 3] = w
    return out


def make_triangle_indices(faces: np.ndarray) -> np.ndarray:
    """Index buffer (uint32) pour PrimitiveTopology.triangle_list."""
    return np.ascontiguousarray(faces, dtype=np.uint32).reshape(-1)


def make_line_indices(faces: np.ndarray) -> np.ndarray:
    """
    Index buffer pour affichage wireframe (line_list).
    Chaque arête des triangles une seule fois, quel que soit le sens.
    """
    faces = np.asarray(faces, dtype=np.uint32).reshape(-1, 3)
    if faces.size == 0:
        return np.zeros(0, dtype=np.uint32)

    edges = faces[:, [0, 1, 1, 2, 2, 0]].reshape(-1, 2)
    edges = np.sort(edges, axis=1)
    edges = np.unique(edges, axis=0)
    return np.ascontiguousarray(edges, dtype=np.uint32).reshape(-1)


def make_quad_line_indices(faces: np.ndarray) -> np.ndarray:
    """
    Index buffer wireframe "quads" : les triangles vont par paires (un quad
    coupé en deux), on retire la diagonale partagée par chaque paire.
    - grille lat/lon => anneaux + méridiens
    - cube => les 12 arêtes, sans diagonales de faces
    Nombre impair de triangles => toutes les arêtes (make_line_indices).
    """
    faces = np.asarray(faces, dtype=np.uint32).reshape(-1, 3)
    if faces.size == 0:
        return np.zeros(0, dtype=np.uint32)
    if faces.shape[0] % 2:
        return make_line_indices(faces)

    pairs = faces.reshape(-1, 2, 3)
    t0 = pairs[:, 0]
    t1 = pairs[:, 1]

    # sommets de t0 présents dans t1 (et inversement)
    shared0 = (t0[:, :, None] == t1[:, None, :]).any(axis=2)
    shared1 = (t1[:, :, None] == t0[:, None, :]).any(axis=2)

    order = [0, 1, 1, 2, 2, 0]
    edges = []
    for tri, shared in ((t0, shared0), (t1, shared1)):
        e = tri[:, order].reshape(-1, 3, 2)
        s = shared[:, order].reshape(-1, 3, 2)
        # diagonale = arête dont les 2 extrémités sont partagées
        edges.append(e[~s.all(axis=2)])

    edges = np.sort(np.concatenate(edges, axis=0), axis=1)
    edges = np.unique(edges, axis=0)
    return np.ascontiguousarray(edges, dtype=np.uint32).reshape(-1)
