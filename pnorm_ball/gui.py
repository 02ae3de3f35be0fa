from imgui_bundle import imgui  # Before rendercanvas

from pnorm_ball.config import OPACITY_RANGE, P_RANGE, RADIUS_RANGE, SEGMENTS_RANGE
from pnorm_ball.surface import CUBE_P


class ControlPanel:
    """
    Panneau imgui : p, rayon, segments, wireframe, opacité.
    Chaque modification est passée à on_change(**changes).
    """

    def __init__(self, state, on_change, stats=None):
        self.state = state
        self.on_change = on_change
        # stats() -> (nb sommets, nb triangles) du maillage affiché
        self.stats = stats

    def update_gui(self):
        surface = self.state.surface
        display = self.state.display
        changes = {}

        imgui.set_next_window_pos((10, 10), imgui.Cond_.first_use_ever)
        imgui.begin("P-norm ball", None)

        changed, value = imgui.slider_float("p", surface.p, *P_RANGE, "%.2f")
        if changed:
            changes["p"] = value

        changed, value = imgui.slider_float("Radius", surface.radius, *RADIUS_RANGE, "%.2f")
        if changed:
            changes["radius"] = value

        changed, value = imgui.slider_int("Segments", surface.segments, *SEGMENTS_RANGE)
        if changed:
            changes["segments"] = value

        imgui.separator()

        changed, value = imgui.checkbox("Wireframe", display.wireframe)
        if changed:
            changes["wireframe"] = value

        changed, value = imgui.slider_float("Opacity", display.opacity, *OPACITY_RANGE, "%.2f")
        if changed:
            changes["opacity"] = value

        if self.stats is not None:
            vertices, triangles = self.stats()
            imgui.separator()
            imgui.text(f"{vertices} vertices, {triangles} triangles")
            if surface.p >= CUBE_P:
                imgui.text("p >= 10: cube")

        imgui.end()

        if changes:
            self.on_change(**changes)
