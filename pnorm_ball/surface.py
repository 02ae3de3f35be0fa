# pnorm_ball/surface.py
"""
Génération du maillage de la boule p-norme |x|^p + |y|^p + |z|^p = R^p.

- grille latitude / longitude (comme une UV sphère)
- chaque direction unitaire est remise à l'échelle pour tomber sur la surface
- p >= 10 : on renvoie directement un cube (limite p -> inf)

Module pur : pas de GPU, pas d'état global.
"""

import math
from dataclasses import dataclass

import numpy as np


EPS = 1e-9
CUBE_P = 10.0


@dataclass
class Mesh:
    """Maillage triangulaire : positions (N,3), faces (M,3) uint32, normales (N,3)."""

    positions: np.ndarray
    faces: np.ndarray
    normals: np.ndarray

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.faces.shape[0])


def pnorm(point, p: float) -> float:
    """Norme p d'un point 3D. p infini => norme de Chebyshev (max des |c|)."""
    x, y, z = point
    if math.isinf(p):
        return max(abs(x), abs(y), abs(z))
    return (abs(x) ** p + abs(y) ** p + abs(z) ** p) ** (1.0 / p)


def grid_shape(segments: int):
    """(theta_segments, phi_segments) pour une densité donnée."""
    return max(2, segments // 2), segments


def _snap(c: float) -> float:
    # bruit sub-epsilon -> 0 exact avant l'exponentiation
    return 0.0 if abs(c) < EPS else c


def make_grid_faces(theta_segments: int, phi_segments: int) -> np.ndarray:
    """
    Triangulation de la grille (theta_segments+1) x (phi_segments+1).
    2 triangles par quad, diagonale b-c partagée, ordre CCW vu de l'extérieur.
    """
    stride = phi_segments + 1
    idx = []
    for i in range(theta_segments):
        for j in range(phi_segments):
            a = i * stride + j
            b = a + stride
            c = a + 1
            d = b + 1

            idx += [a, b, c]
            idx += [b, d, c]

    return np.array(idx, dtype=np.uint32).reshape(-1, 3)


def make_cube(radius: float) -> Mesh:
    """
    Cube aligné sur les axes, arête 2*radius.
    24 sommets (4 par face) pour garder des normales plates, 12 triangles.
    """
    positions = []
    normals = []
    faces = []

    # (axe normal, axe u, axe v) avec u x v = +normal
    frames = [(0, 1, 2), (1, 2, 0), (2, 0, 1)]

    for k, u_axis, v_axis in frames:
        for sign in (1.0, -1.0):
            if sign < 0:
                u_axis, v_axis = v_axis, u_axis

            base = len(positions)
            for a, b in ((-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)):
                corner = [0.0, 0.0, 0.0]
                corner[k] = sign * radius
                corner[u_axis] = a * radius
                corner[v_axis] = b * radius
                positions.append(corner)

                n = [0.0, 0.0, 0.0]
                n[k] = sign
                normals.append(n)

            faces.append([base, base + 1, base + 2])
            faces.append([base, base + 2, base + 3])

    return Mesh(
        positions=np.array(positions, dtype=np.float64),
        faces=np.array(faces, dtype=np.uint32),
        normals=np.array(normals, dtype=np.float64),
    )


def vertex_normals(positions: np.ndarray, faces: np.ndarray) -> np.ndarray:
    """
    Normales lissées par sommet (somme des normales de faces pondérées par l'aire).

    Les sommets confondus (pôles, couture phi = 0 / 2pi) sont soudés pour
    l'accumulation, sinon la couture et les pôles seraient cassés.
    Normale nulle => direction radiale.
    """
    tri = positions[faces.astype(np.intp)]
    face_n = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])

    # + 0.0 : -0.0 et 0.0 doivent donner la même clé
    keys = np.round(positions, 9) + 0.0
    _, inverse = np.unique(keys, axis=0, return_inverse=True)
    inverse = np.asarray(inverse).reshape(-1)

    acc = np.zeros((int(inverse.max()) + 1, 3), dtype=np.float64)
    for corner in range(3):
        np.add.at(acc, inverse[faces[:, corner].astype(np.intp)], face_n)

    normals = acc[inverse]
    lengths = np.linalg.norm(normals, axis=1)

    degenerate = lengths < EPS
    if np.any(degenerate):
        radial = positions[degenerate]
        r = np.linalg.norm(radial, axis=1)
        r[r < EPS] = 1.0
        normals[degenerate] = radial / r[:, None]
        lengths[degenerate] = np.linalg.norm(normals[degenerate], axis=1)
        lengths[lengths < EPS] = 1.0

    return normals / lengths[:, None]


def generate(radius: float, p: float, segments: int) -> Mesh:
    """
    Maillage de la surface ||v||_p = radius.

    - p >= CUBE_P : cube d'arête 2*radius
    - sinon : grille (theta_segments+1) x (phi_segments+1),
      2*theta_segments*phi_segments triangles
    """
    if p >= CUBE_P:
        return make_cube(radius)

    theta_segments, phi_segments = grid_shape(segments)

    verts = []
    for i in range(theta_segments + 1):
        v = i / theta_segments
        theta = v * math.pi
        sin_theta = math.sin(theta)
        cos_theta = math.cos(theta)

        for j in range(phi_segments + 1):
            u = j / phi_segments
            phi = u * 2.0 * math.pi

            x = _snap(sin_theta * math.cos(phi))
            y = _snap(sin_theta * math.sin(phi))
            z = _snap(cos_theta)

            magnitude = pnorm((x, y, z), p)
            scale = radius if abs(magnitude) < EPS else radius / magnitude

            verts.append([scale * x, scale * y, scale * z])

    positions = np.array(verts, dtype=np.float64)
    faces = make_grid_faces(theta_segments, phi_segments)

    return Mesh(positions=positions, faces=faces, normals=vertex_normals(positions, faces))
