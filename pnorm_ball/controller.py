# pnorm_ball/controller.py
"""
Relie les contrôles à la scène :
- p / rayon / segments => nouveau maillage (generate + set_mesh)
- wireframe / opacité  => matériau seulement (set_display)
"""

from pnorm_ball.surface import generate


class SceneController:
    def __init__(self, state, scene, generator=generate):
        """
        scene : tout objet avec set_mesh(mesh) et set_display(display).
        generator(radius, p, segments) -> Mesh
        """
        self.state = state
        self.scene = scene
        self.generator = generator
        self.mesh = None

        self.scene.set_display(state.display)
        self.regenerate()

    def apply(self, **changes):
        regenerate, restyle = self.state.update(**changes)
        if regenerate:
            self.regenerate()
        if restyle:
            self.scene.set_display(self.state.display)

    def regenerate(self):
        s = self.state.surface
        # l'ancien maillage est remplacé, ses buffers GPU libérés par la scène
        self.mesh = self.generator(s.radius, s.p, s.segments)
        self.scene.set_mesh(self.mesh)
        print(f"✅ Mesh: {self.mesh.vertex_count} sommets, {self.mesh.triangle_count} triangles "
              f"(p={s.p:.2f}, R={s.radius:.2f}, segments={s.segments})")

    def stats(self):
        return self.mesh.vertex_count, self.mesh.triangle_count
