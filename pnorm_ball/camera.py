import numpy as np

from pnorm_ball.config import clamp


def normalize(v: np.ndarray) -> np.ndarray:
    n = np.linalg.norm(v)
    return v / n if n > 0 else v


def look_at(eye, target, up) -> np.ndarray:
    eye = np.array(eye, dtype=np.float32)
    target = np.array(target, dtype=np.float32)
    up = np.array(up, dtype=np.float32)

    f = normalize(target - eye)      # forward
    s = normalize(np.cross(f, up))   # right
    u = np.cross(s, f)               # corrected up

    M = np.eye(4, dtype=np.float32)
    M[0, :3] = s
    M[1, :3] = u
    M[2, :3] = -f

    T = np.eye(4, dtype=np.float32)
    T[:3, 3] = -eye

    return M @ T


def perspective(fovy_deg: float, aspect: float, near: float, far: float) -> np.ndarray:
    f = 1.0 / np.tan(np.deg2rad(fovy_deg) / 2.0)

    P = np.zeros((4, 4), dtype=np.float32)
    P[0, 0] = f / aspect
    P[1, 1] = f
    P[2, 2] = (far + near) / (near - far)
    P[2, 3] = (2.0 * far * near) / (near - far)
    P[3, 2] = -1.0
    return P


class OrbitCamera:
    """
    Caméra orbitale autour de l'origine (centre de la boule).
    yaw autour de Y, pitch vers le haut, distance à la cible.
    """

    PITCH_MIN = -1.2
    PITCH_MAX = 1.2
    DIST_MIN = 1.5
    DIST_MAX = 20.0

    ROT_SPEED = 0.006      # sensibilité souris
    ZOOM_SPEED = 0.15      # sensibilité molette

    FOV = 60.0
    NEAR = 0.05
    FAR = 100.0

    YAW0 = 0.6
    PITCH0 = 0.45
    DIST0 = 4.5

    def __init__(self, aspect: float = 900 / 700):
        self.aspect = aspect
        self.target = np.zeros(3, dtype=np.float32)
        self.model = np.eye(4, dtype=np.float32)
        self.reset()

    def reset(self):
        self.yaw = self.YAW0
        self.pitch = self.PITCH0
        self.dist = self.DIST0

    def rotate(self, dx: float, dy: float):
        self.yaw += dx * self.ROT_SPEED
        self.pitch += (-dy) * self.ROT_SPEED
        self.pitch = clamp(self.pitch, self.PITCH_MIN, self.PITCH_MAX)

    def zoom(self, dy: float):
        # dy > 0 = molette vers le bas => on s'éloigne
        self.dist *= (1.0 + float(dy) * self.ZOOM_SPEED * 0.01)
        self.dist = clamp(self.dist, self.DIST_MIN, self.DIST_MAX)

    def eye(self) -> np.ndarray:
        cy = np.cos(self.yaw)
        sy = np.sin(self.yaw)
        cp = np.cos(self.pitch)
        sp = np.sin(self.pitch)

        direction = np.array([sy * cp, sp, cy * cp], dtype=np.float32)
        return self.target + self.dist * direction

    def mvp(self) -> np.ndarray:
        view = look_at(self.eye(), self.target, (0.0, 1.0, 0.0))
        proj = perspective(self.FOV, self.aspect, self.NEAR, self.FAR)
        return proj @ view @ self.model

    def mvp_bytes(self) -> bytes:
        # GPU => column major
        return self.mvp().T.astype(np.float32).tobytes()
