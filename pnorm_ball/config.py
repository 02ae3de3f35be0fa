# pnorm_ball/config.py
"""
Paramètres de la scène :
- SurfaceParams : ce qui déclenche une régénération du maillage
- DisplayParams : ce qui ne change que le matériau
- bornes des sliders + valeurs par défaut
"""

from dataclasses import dataclass

import configargparse


# ===============================
# BORNES DES CONTRÔLES
# ===============================
P_RANGE = (0.25, 10.0)
RADIUS_RANGE = (0.5, 3.0)
SEGMENTS_RANGE = (8, 128)
OPACITY_RANGE = (0.0, 1.0)

# ===============================
# VALEURS PAR DÉFAUT
# ===============================
DEFAULT_P = 2.0
DEFAULT_RADIUS = 1.0
DEFAULT_SEGMENTS = 64
DEFAULT_WIREFRAME = False
DEFAULT_OPACITY = 1.0

SURFACE_COLOR = (0.27, 0.53, 1.0)
WIRE_COLOR = (0.85, 0.9, 1.0)
CLEAR_COLOR = (0.1, 0.1, 0.1, 1.0)


def clamp(v, a, b):
    return a if v < a else b if v > b else v


@dataclass
class SurfaceParams:
    p: float = DEFAULT_P
    radius: float = DEFAULT_RADIUS
    segments: int = DEFAULT_SEGMENTS

    def validate(self) -> "SurfaceParams":
        """Préconditions du générateur (p > 0, radius > 0, segments >= 2)."""
        if not self.p > 0:
            raise ValueError(f"p must be > 0, got {self.p!r}")
        if not self.radius > 0:
            raise ValueError(f"radius must be > 0, got {self.radius!r}")
        if isinstance(self.segments, bool) or not isinstance(self.segments, int):
            raise ValueError(f"segments must be an integer, got {self.segments!r}")
        if self.segments < 2:
            raise ValueError(f"segments must be >= 2, got {self.segments!r}")
        return self

    def clamped(self) -> "SurfaceParams":
        """Copie ramenée dans les bornes des sliders."""
        return SurfaceParams(
            p=float(clamp(self.p, *P_RANGE)),
            radius=float(clamp(self.radius, *RADIUS_RANGE)),
            segments=int(clamp(int(self.segments), *SEGMENTS_RANGE)),
        )


@dataclass
class DisplayParams:
    wireframe: bool = DEFAULT_WIREFRAME
    opacity: float = DEFAULT_OPACITY

    def validate(self) -> "DisplayParams":
        if not OPACITY_RANGE[0] <= self.opacity <= OPACITY_RANGE[1]:
            raise ValueError(f"opacity must be in [0, 1], got {self.opacity!r}")
        return self

    def clamped(self) -> "DisplayParams":
        return DisplayParams(
            wireframe=bool(self.wireframe),
            opacity=float(clamp(self.opacity, *OPACITY_RANGE)),
        )


def config_parser():
    parser = configargparse.ArgumentParser(description="Interactive p-norm ball viewer")
    parser.add_argument("--config", is_config_file=True, help="config file path")
    parser.add_argument("--p", type=float, default=DEFAULT_P,
                        help="norm exponent (>= 10 renders the limit cube)")
    parser.add_argument("--radius", type=float, default=DEFAULT_RADIUS,
                        help="ball radius R")
    parser.add_argument("--segments", type=int, default=DEFAULT_SEGMENTS,
                        help="tessellation density (longitude bands)")
    parser.add_argument("--wireframe", action="store_true",
                        help="start in wireframe mode")
    parser.add_argument("--opacity", type=float, default=DEFAULT_OPACITY,
                        help="surface opacity in [0, 1]")
    parser.add_argument("--width", type=int, default=900, help="window width")
    parser.add_argument("--height", type=int, default=700, help="window height")
    return parser
