# pnorm_ball/input_controller.py
"""
Gestion des entrées utilisateur :
- souris : orbit caméra + zoom (ignoré si imgui a la souris)
- clavier : wireframe, opacité, reset caméra, aide
"""

from imgui_bundle import imgui


OPACITY_STEP = 0.1


class InputController:
    def __init__(self, canvas, scene, on_change):
        """
        on_change(**changes) : même signature que ViewerState.update,
        appelé pour les raccourcis clavier qui modifient l'affichage.
        """
        self.canvas = canvas
        self.scene = scene
        self.on_change = on_change

        self.dragging = False
        self.last_x = None
        self.last_y = None

        self._hook_mouse()
        self._hook_keyboard()

        self._print_help()

    @staticmethod
    def _gui_wants_mouse() -> bool:
        return imgui.get_current_context() is not None and imgui.get_io().want_capture_mouse

    # ------------------------------------------------------------
    # SOURIS
    # ------------------------------------------------------------
    def _hook_mouse(self):
        self.canvas.add_event_handler(self.on_pointer_down, "pointer_down")
        self.canvas.add_event_handler(self.on_pointer_up, "pointer_up")
        self.canvas.add_event_handler(self.on_pointer_move, "pointer_move")
        self.canvas.add_event_handler(self.on_wheel, "wheel")

    def on_pointer_down(self, evt):
        if self._gui_wants_mouse():
            return
        self.dragging = True
        self.last_x = evt.get("x")
        self.last_y = evt.get("y")

    def on_pointer_up(self, evt):
        self.dragging = False
        self.last_x = None
        self.last_y = None

    def on_pointer_move(self, evt):
        if not self.dragging:
            return

        x, y = evt.get("x"), evt.get("y")
        if x is None or y is None or self.last_x is None or self.last_y is None:
            self.last_x, self.last_y = x, y
            return

        dx = x - self.last_x
        dy = y - self.last_y
        self.last_x, self.last_y = x, y

        self.scene.camera.rotate(dx, dy)
        self.scene.update_mvp()

    def on_wheel(self, evt):
        if self._gui_wants_mouse():
            return
        # selon versions: "dy" ou "delta_y"
        dy = evt.get("dy", evt.get("delta_y", 0.0)) or 0.0
        self.scene.camera.zoom(dy)
        self.scene.update_mvp()

    # ------------------------------------------------------------
    # CLAVIER
    # ------------------------------------------------------------
    def _hook_keyboard(self):
        self.canvas.add_event_handler(self.on_key_down, "key_down")

    def on_key_down(self, evt):
        key = (evt.get("key") or evt.get("text") or "").lower()
        if not key:
            return

        display = self.scene.display

        if key == "w":
            self.on_change(wireframe=not display.wireframe)
            print("Wireframe:", not display.wireframe)

        elif key in ("+", "="):
            self.on_change(opacity=display.opacity + OPACITY_STEP)

        elif key in ("-", "_"):
            self.on_change(opacity=display.opacity - OPACITY_STEP)

        elif key == "r":
            self.scene.camera.reset()
            self.scene.update_mvp()
            print("🔁 Camera reset")

        elif key == "h":
            self._print_help()

    # ------------------------------------------------------------
    # AIDE
    # ------------------------------------------------------------
    def _print_help(self):
        print("\n🎛️  Contrôles :")
        print("  W : wireframe on / off")
        print("  + / - : opacité")
        print("  R : reset caméra")
        print("  H : réaffiche l'aide")
        print("  souris : orbit caméra")
        print("  molette : zoom\n")
