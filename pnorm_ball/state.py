# pnorm_ball/state.py
"""
État côté UI : paramètres courants + décision "régénérer" ou "juste le matériau".
"""

from dataclasses import dataclass, field, replace
from typing import Tuple

from pnorm_ball.config import DisplayParams, SurfaceParams


SURFACE_FIELDS = ("p", "radius", "segments")
DISPLAY_FIELDS = ("wireframe", "opacity")


@dataclass
class ViewerState:
    surface: SurfaceParams = field(default_factory=SurfaceParams)
    display: DisplayParams = field(default_factory=DisplayParams)

    def update(self, **changes) -> Tuple[bool, bool]:
        """
        Applique des changements venant des contrôles.

        Retourne (regenerate, restyle) :
        - regenerate : p / radius / segments a réellement changé
        - restyle    : wireframe / opacity a réellement changé
        Les valeurs sont ramenées dans les bornes des sliders.
        """
        unknown = set(changes) - set(SURFACE_FIELDS) - set(DISPLAY_FIELDS)
        if unknown:
            raise TypeError(f"unknown parameter(s): {', '.join(sorted(unknown))}")

        surface = replace(
            self.surface, **{k: v for k, v in changes.items() if k in SURFACE_FIELDS}
        ).clamped()
        display = replace(
            self.display, **{k: v for k, v in changes.items() if k in DISPLAY_FIELDS}
        ).clamped()

        regenerate = surface != self.surface
        restyle = display != self.display

        self.surface = surface
        self.display = display
        return regenerate, restyle

    @classmethod
    def from_args(cls, args) -> "ViewerState":
        """État initial depuis la ligne de commande : validé puis ramené dans les bornes des sliders."""
        surface = SurfaceParams(p=args.p, radius=args.radius, segments=args.segments).validate()
        display = DisplayParams(wireframe=args.wireframe, opacity=args.opacity).validate()
        return cls(surface=surface.clamped(), display=display.clamped())
